# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

from isosurf.grid import GridError, RectilinearGrid
from isosurf.march import (
    DEFAULT_ISOVALUE,
    ExtractionError,
    IsosurfaceExtractor,
    extract_isosurface,
)
from isosurf.mesh import MeshFrozenError, TriangleMesh

try:
    __version__ = version("isosurf")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    'DEFAULT_ISOVALUE',
    'ExtractionError',
    'GridError',
    'IsosurfaceExtractor',
    'MeshFrozenError',
    'RectilinearGrid',
    'TriangleMesh',
    'extract_isosurface',
]
