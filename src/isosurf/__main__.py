#!/usr/bin/env python3
"""
Command line driver for isosurf.

Reads a legacy VTK rectilinear grid, extracts the isosurface at the
requested isovalue and writes the triangles to STL or legacy VTK.

Usage:
    python -m isosurf [GRID] [--iso VALUE] [--output FILE]
                      [--format stl|stl-ascii|vtk] [--config FILE.yaml]
                      [--check] [-v]

Examples:
    # Extract at the default isovalue and report the triangle count
    python -m isosurf Isosurface.vtk

    # Write a binary STL
    python -m isosurf Isosurface.vtk --iso 3.2 --output surface.stl

    # Dump the triangles as legacy VTK polydata for inspection
    python -m isosurf Isosurface.vtk --output paths.vtk --format vtk

    # Take defaults from a YAML file; flags still win
    python -m isosurf --config extract.yaml --iso 2.5
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from isosurf.checks import mesh_finite, mesh_within_grid
from isosurf.config import OUTPUT_FORMATS, ConfigError, ExtractionConfig, load_config
from isosurf.grid import GridError
from isosurf.io.stl import write_stl
from isosurf.io.vtk import VTKFormatError, read_rectilinear_grid, write_polydata
from isosurf.march import ExtractionError, IsosurfaceExtractor

logger = logging.getLogger("isosurf")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m isosurf",
        description="Extract an isosurface from a rectilinear grid by marching cubes.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("grid", nargs="?", default=None,
                        help="legacy VTK RECTILINEAR_GRID file (default from config)")
    parser.add_argument("--iso", type=float, default=None, dest="isovalue",
                        help="isovalue (default from config, else 3.2)")
    parser.add_argument("--output", "-o", default=None,
                        help="output file; omit to only report statistics")
    parser.add_argument("--format", choices=OUTPUT_FORMATS, default=None,
                        help="output format (default from config, else stl)")
    parser.add_argument("--name", default=None, dest="solid_name",
                        help="solid name written into STL headers")
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML file with extraction settings")
    parser.add_argument("--check", action="store_true",
                        help="validate the extracted mesh against the grid bounds")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="increase logging verbosity (repeat for debug output)")
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def resolve_config(args: argparse.Namespace) -> ExtractionConfig:
    base = load_config(args.config) if args.config else ExtractionConfig()
    return base.merged(
        input=args.grid,
        isovalue=args.isovalue,
        output=args.output,
        format=args.format,
        solid_name=args.solid_name,
    )


def write_mesh(mesh, config: ExtractionConfig) -> None:
    if config.format == "vtk":
        write_polydata(mesh, config.output)
    else:
        write_stl(mesh, config.output, binary=config.format == "stl",
                  name=config.solid_name)
    logger.info("wrote %d triangles to %s", len(mesh), config.output)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = resolve_config(args)
        grid = read_rectilinear_grid(config.input)
        extractor = IsosurfaceExtractor(grid, config.isovalue)
        mesh = extractor.run()
    except (OSError, ConfigError, VTKFormatError, GridError, ExtractionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"{config.input}: dims {grid.dims}, isovalue {config.isovalue:g}, "
          f"{len(mesh)} triangles from {extractor.active_cells} of "
          f"{extractor.cells_visited} cells")

    status = 0
    if args.check:
        for result in (mesh_finite(mesh), mesh_within_grid(mesh, grid)):
            for warning in result.warnings:
                print(f"Warning: {warning}", file=sys.stderr)
            if not result:
                status = 1

    if config.output:
        try:
            write_mesh(mesh, config)
        except OSError as exc:
            print(f"Error: cannot write {config.output}: {exc}", file=sys.stderr)
            return 1

    return status


if __name__ == "__main__":
    sys.exit(main())
