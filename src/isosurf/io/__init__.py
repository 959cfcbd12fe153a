"""I/O utilities for isosurf."""

from .stl import read_stl, write_stl
from .vtk import VTKFormatError, read_rectilinear_grid, to_polydata, write_polydata

__all__ = [
    'read_stl',
    'write_stl',
    'VTKFormatError',
    'read_rectilinear_grid',
    'to_polydata',
    'write_polydata',
]
