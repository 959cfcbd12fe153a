## rectilinear grid representation for isosurf
## Copyright (c) 2026 isosurf contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Rectilinear scalar grids.

A ``RectilinearGrid`` holds the point counts along each axis, one
coordinate array per axis and a flat scalar array.  Point ``(i, j, k)``
lives at linear offset ``k*nx*ny + j*nx + i``, so ``i`` varies fastest.
Cells are the hexahedra bounded by 8 adjacent points; a grid with
``(nx, ny, nz)`` points has ``(nx-1)*(ny-1)*(nz-1)`` cells.

Grids are immutable: the arrays are copied on construction and marked
read-only, and the dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, Tuple, Union

import numpy as np

Axis = Union[int, str]
Index3 = Tuple[int, int, int]

_AXES = {'x': 0, 'y': 1, 'z': 2, 0: 0, 1: 1, 2: 2}


class GridError(ValueError):
    """Raised when grid arrays are inconsistent with the declared dims."""


def _axis(axis: Axis) -> int:
    key = axis.lower() if isinstance(axis, str) else axis
    try:
        return _AXES[key]
    except KeyError:
        raise ValueError(f"bad axis {axis!r}, expected 0, 1, 2 or 'x', 'y', 'z'") from None


def _frozen_array(values, name: str) -> np.ndarray:
    arr = np.array(values, dtype=np.float64)
    if arr.ndim != 1:
        raise GridError(f"{name} must be one-dimensional, got shape {arr.shape}")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, init=False, repr=False, eq=False)
class RectilinearGrid:
    """Immutable rectilinear grid with one scalar value per point."""

    dims: Index3
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    scalars: np.ndarray

    def __init__(self, dims: Sequence[int], x, y, z, scalars) -> None:
        if len(dims) != 3:
            raise GridError(f"dims must have three entries, got {len(dims)}")
        nx, ny, nz = (int(d) for d in dims)
        if nx <= 0 or ny <= 0 or nz <= 0:
            raise GridError(f"dimensions must be positive, got {(nx, ny, nz)}")

        xs = _frozen_array(x, 'x coordinates')
        ys = _frozen_array(y, 'y coordinates')
        zs = _frozen_array(z, 'z coordinates')
        for name, arr, n in (('x', xs, nx), ('y', ys, ny), ('z', zs, nz)):
            if len(arr) != n:
                raise GridError(f"{name} coordinates have {len(arr)} entries, dims say {n}")

        field = _frozen_array(scalars, 'scalars')
        if len(field) != nx * ny * nz:
            raise GridError(
                f"scalar array has {len(field)} entries, expected {nx * ny * nz}"
            )

        object.__setattr__(self, 'dims', (nx, ny, nz))
        object.__setattr__(self, 'x', xs)
        object.__setattr__(self, 'y', ys)
        object.__setattr__(self, 'z', zs)
        object.__setattr__(self, 'scalars', field)

    @classmethod
    def sample(cls, x, y, z,
               func: Callable[[float, float, float], float]) -> "RectilinearGrid":
        """Build a grid by evaluating ``func(x, y, z)`` at every point."""

        xs = [float(v) for v in x]
        ys = [float(v) for v in y]
        zs = [float(v) for v in z]
        values = [func(xv, yv, zv) for zv in zs for yv in ys for xv in xs]
        return cls((len(xs), len(ys), len(zs)), xs, ys, zs, values)

    # sizes

    @property
    def number_of_points(self) -> int:
        nx, ny, nz = self.dims
        return nx * ny * nz

    @property
    def number_of_cells(self) -> int:
        nx, ny, nz = self.dims
        return max(nx - 1, 0) * max(ny - 1, 0) * max(nz - 1, 0)

    @property
    def cell_dims(self) -> Index3:
        nx, ny, nz = self.dims
        return (max(nx - 1, 0), max(ny - 1, 0), max(nz - 1, 0))

    # indexing

    def point_index(self, i: int, j: int, k: int) -> int:
        """Linear offset of point ``(i, j, k)``.  No bounds checking."""
        nx, ny, _ = self.dims
        return k * nx * ny + j * nx + i

    def cell_index(self, i: int, j: int, k: int) -> int:
        """Linear offset of the cell whose base point is ``(i, j, k)``."""
        cx, cy, _ = self.cell_dims
        return k * cx * cy + j * cx + i

    def logical_point_index(self, point_id: int) -> Index3:
        nx, ny, _ = self.dims
        return (point_id % nx, (point_id // nx) % ny, point_id // (nx * ny))

    def logical_cell_index(self, cell_id: int) -> Index3:
        cx, cy, _ = self.cell_dims
        return (cell_id % cx, (cell_id // cx) % cy, cell_id // (cx * cy))

    def cells(self) -> Iterator[Index3]:
        """Yield every cell base index exactly once, ``x`` fastest."""
        cx, cy, cz = self.cell_dims
        for k in range(cz):
            for j in range(cy):
                for i in range(cx):
                    yield (i, j, k)

    # lookups

    def scalar_at(self, i: int, j: int, k: int) -> float:
        return float(self.scalars[self.point_index(i, j, k)])

    def coord(self, axis: Axis, index: int) -> float:
        """Physical coordinate ``index`` along ``axis``."""
        return float((self.x, self.y, self.z)[_axis(axis)][index])

    def position(self, i: int, j: int, k: int) -> Tuple[float, float, float]:
        return (float(self.x[i]), float(self.y[j]), float(self.z[k]))

    def bounds(self) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
        """Return ``(min, max)`` corners of the grid's bounding box."""
        lo = (float(self.x.min()), float(self.y.min()), float(self.z.min()))
        hi = (float(self.x.max()), float(self.y.max()), float(self.z.max()))
        return lo, hi

    def scalar_range(self) -> Tuple[float, float]:
        return float(np.nanmin(self.scalars)), float(np.nanmax(self.scalars))

    def __repr__(self) -> str:
        return f"RectilinearGrid(dims={self.dims})"


__all__ = ['Axis', 'GridError', 'Index3', 'RectilinearGrid']
