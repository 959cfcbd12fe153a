## per-cell classification and edge interpolation for isosurf
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

"""Cell classification and edge interpolation.

The caller owns bounds: every function here expects a cell base index
with ``0 <= x < nx-1``, ``0 <= y < ny-1`` and ``0 <= z < nz-1``.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from isosurf.grid import RectilinearGrid
from isosurf.tables import CORNER_OFFSETS, EDGE_ENDPOINTS

Vec3 = Tuple[float, float, float]


def corner_indices(grid: RectilinearGrid, x: int, y: int, z: int) -> List[int]:
    """Return the point indices of the 8 corners of cell ``(x, y, z)``."""

    return [grid.point_index(x + dx, y + dy, z + dz) for dx, dy, dz in CORNER_OFFSETS]


def corner_values(grid: RectilinearGrid, x: int, y: int, z: int) -> List[float]:
    field = grid.scalars
    return [float(field[idx]) for idx in corner_indices(grid, x, y, z)]


def case_code(values: Sequence[float], iso: float) -> int:
    """Pack 8 corner values into a case code; bit ``b`` is set when
    ``values[b] <= iso``."""

    code = 0
    for bit, value in enumerate(values):
        if value <= iso:
            code |= 1 << bit
    return code


def classify_cell(grid: RectilinearGrid, x: int, y: int, z: int, iso: float) -> int:
    """Return the 8-bit case code of cell ``(x, y, z)`` for ``iso``."""

    return case_code(corner_values(grid, x, y, z), iso)


def interpolate_edge(p0: float, p1: float, f0: float, f1: float, iso: float) -> float:
    """Locate ``iso`` between ``p0`` (value ``f0``) and ``p1`` (value ``f1``).

    If ``f0 == f1`` the fraction is taken as 0 and ``p0`` is returned.
    Values equal to ``iso`` return the matching endpoint exactly.  NaN
    and infinite inputs are not masked.
    """

    if f1 == f0 or iso == f0:
        return p0
    if iso == f1:
        return p1
    return p0 + ((iso - f0) / (f1 - f0)) * (p1 - p0)


def edge_point(grid: RectilinearGrid, x: int, y: int, z: int, edge: int, iso: float,
               values: Optional[Sequence[float]] = None) -> Vec3:
    """Return the isovalue crossing on ``edge`` of cell ``(x, y, z)``.

    ``values`` may carry the 8 corner values already fetched by the
    classifier, otherwise they are looked up again.
    """

    if values is None:
        values = corner_values(grid, x, y, z)
    a, b, axis = EDGE_ENDPOINTS[edge]
    ax, ay, az = CORNER_OFFSETS[a]
    bx, by, bz = CORNER_OFFSETS[b]

    pos = list(grid.position(x + ax, y + ay, z + az))
    far = grid.position(x + bx, y + by, z + bz)[axis]
    pos[axis] = interpolate_edge(pos[axis], far, values[a], values[b], iso)
    return (pos[0], pos[1], pos[2])


__all__ = [
    'Vec3',
    'case_code',
    'classify_cell',
    'corner_indices',
    'corner_values',
    'edge_point',
    'interpolate_edge',
]
