"""Legacy VTK readers and writers, built on pyvista.

* ``read_rectilinear_grid`` loads a ``DATASET RECTILINEAR_GRID`` file in
  ``ASCII`` or ``BINARY`` encoding and returns a ``RectilinearGrid``
  holding one point scalar array.
* ``write_polydata`` saves a triangle mesh as ASCII ``POLYDATA``.

Parsing is left to VTK's legacy reader, so every section it understands
(``FIELD``, ``CELL_DATA``, ``COLOR_SCALARS``, lookup tables and the
rest) is accepted.  Reader errors come back as ``VTKFormatError``.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from typing import Optional, Tuple

import numpy as np
import pyvista as pv

from isosurf.grid import RectilinearGrid
from isosurf.mesh import TriangleMesh

logger = logging.getLogger(__name__)


class VTKFormatError(ValueError):
    """Raised for files that are not readable legacy VTK rectilinear grids."""


def _check_header(lines) -> Tuple[str, str]:
    """Return ``(title, encoding)`` from the first three lines of a file."""
    lines = [line.decode('ascii', errors='replace').strip() for line in lines]
    if len(lines) < 3 or not lines[0].startswith('# vtk DataFile'):
        raise VTKFormatError('missing "# vtk DataFile" header')
    encoding = lines[2].upper()
    if encoding not in ('ASCII', 'BINARY'):
        raise VTKFormatError(f'unknown encoding {lines[2]!r}')
    return lines[1], encoding


def _load(path: str) -> pv.DataSet:
    try:
        with pv.VtkErrorCatcher(raise_errors=True):
            return pv.read(path, force_ext='.vtk')
    except (RuntimeError, ValueError) as exc:
        raise VTKFormatError(f'cannot read {path}: {exc}') from exc


def read_rectilinear_grid(path_or_file, *, scalars: Optional[str] = None) -> RectilinearGrid:
    """Read a legacy VTK rectilinear grid.

    ``scalars`` selects a point array by name; by default the active
    point scalars are used, which is the first ``SCALARS`` block of the
    file.  Multi-component arrays keep their first component.
    """

    if hasattr(path_or_file, 'read'):
        data = path_or_file.read()
        if isinstance(data, str):
            data = data.encode('ascii')
        title, encoding = _check_header(data.split(b'\n', 3)[:3])
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'grid.vtk')
            with open(path, 'wb') as f:
                f.write(data)
            dataset = _load(path)
    else:
        path = os.fspath(path_or_file)
        with open(path, 'rb') as f:
            title, encoding = _check_header([f.readline() for _ in range(3)])
        dataset = _load(path)

    if not isinstance(dataset, pv.RectilinearGrid):
        raise VTKFormatError(f'expected RECTILINEAR_GRID, found {type(dataset).__name__}')

    coords = (dataset.x, dataset.y, dataset.z)
    missing = [axis + '_COORDINATES' for axis, values in zip('XYZ', coords)
               if values is None or len(values) == 0]
    if missing:
        raise VTKFormatError(f'missing {", ".join(missing)}')

    dims = tuple(int(n) for n in dataset.dimensions)
    name = scalars if scalars is not None else dataset.point_data.active_scalars_name
    if name is None or name not in dataset.point_data:
        what = f'point scalars {scalars!r}' if scalars else 'point scalars'
        raise VTKFormatError(f'no {what} found')
    field = np.asarray(dataset.point_data[name], dtype=np.float64)
    if field.ndim > 1:
        field = field[:, 0]
    logger.debug('using point scalars %r', name)

    logger.info('read %s grid %s (%s)', encoding.lower(), dims, title)
    return RectilinearGrid(dims, *coords, field)


def to_polydata(mesh: TriangleMesh) -> pv.PolyData:
    """Convert ``mesh`` to ``pv.PolyData`` with three unshared points per
    triangle."""

    n = len(mesh)
    if n == 0:
        return pv.PolyData()
    points = mesh.as_array().reshape(-1, 3)
    faces = np.column_stack((np.full(n, 3), np.arange(3 * n).reshape(n, 3))).ravel()
    return pv.PolyData(points, faces)


def write_polydata(mesh: TriangleMesh, path) -> None:
    """Write ``mesh`` to ``path`` as legacy ASCII ``POLYDATA``."""

    path = os.fspath(path)
    poly = to_polydata(mesh)
    if path.lower().endswith('.vtk'):
        poly.save(path, binary=False)
        return
    # pyvista picks the writer from the file extension
    with tempfile.TemporaryDirectory() as tmp:
        staged = os.path.join(tmp, 'mesh.vtk')
        poly.save(staged, binary=False)
        shutil.copyfile(staged, path)


__all__ = ['VTKFormatError', 'read_rectilinear_grid', 'to_polydata', 'write_polydata']
