## marching cubes sweep for isosurf
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

"""Isosurface extraction by marching cubes.

====================
OVERVIEW
====================

``extract_isosurface(grid, isovalue)`` visits every cell of a
``RectilinearGrid`` exactly once.  For each cell it

1. computes the 8-bit case code from the corner values (see
   ``isosurf.cells.classify_cell``),
2. walks the case table row for that code three edges at a time, and
3. interpolates the crossing point on each referenced edge and appends the
   resulting triangle to a ``TriangleMesh``.

Crossing points are computed only for edges the active row references and
are not shared between cells, so the output is a triangle soup.  The mesh
is frozen when the sweep finishes.

The sweep is driven by ``IsosurfaceExtractor``, which moves through
``IDLE -> SWEEPING -> DONE``.  Preconditions are checked before any cell
is visited; nothing inside the sweep raises.
"""

from __future__ import annotations

import logging
import math
import numbers
from enum import Enum
from typing import Callable, Dict, Optional

from isosurf.cells import Vec3, case_code, corner_values, edge_point
from isosurf.grid import RectilinearGrid
from isosurf.mesh import TriangleMesh
from isosurf.tables import CASE_TABLE, SENTINEL

logger = logging.getLogger(__name__)

DEFAULT_ISOVALUE = 3.2


class ExtractionError(ValueError):
    """Raised when the sweep's inputs are unusable."""


class ExtractorState(Enum):
    IDLE = "idle"
    SWEEPING = "sweeping"
    DONE = "done"


def emit_triangles(code: int, point_for_edge: Callable[[int], Vec3],
                   mesh: TriangleMesh) -> int:
    """Append the triangles of case ``code`` to ``mesh``.

    ``point_for_edge(edge)`` is asked for each edge id the row references,
    in row order; an edge that appears in several triangles of the same
    row is asked for once.  Returns the number of triangles appended.
    """

    row = CASE_TABLE[code]
    cache: Dict[int, Vec3] = {}

    def lookup(edge: int) -> Vec3:
        pt = cache.get(edge)
        if pt is None:
            pt = point_for_edge(edge)
            cache[edge] = pt
        return pt

    count = 0
    for n in range(0, len(row) - 2, 3):
        e0 = row[n]
        if e0 == SENTINEL:
            break
        mesh.add_triangle(lookup(e0), lookup(row[n + 1]), lookup(row[n + 2]))
        count += 1
    return count


def march_cell(grid: RectilinearGrid, x: int, y: int, z: int, iso: float,
               mesh: TriangleMesh) -> int:
    """Classify cell ``(x, y, z)`` and emit its triangles into ``mesh``."""

    values = corner_values(grid, x, y, z)
    code = case_code(values, iso)
    if CASE_TABLE[code][0] == SENTINEL:
        return 0
    return emit_triangles(code,
                          lambda edge: edge_point(grid, x, y, z, edge, iso, values),
                          mesh)


class IsosurfaceExtractor:
    """One isosurface extraction over a fixed grid and isovalue."""

    def __init__(self, grid: RectilinearGrid, isovalue: float = DEFAULT_ISOVALUE) -> None:
        if not isinstance(grid, RectilinearGrid):
            raise ExtractionError(f"expected a RectilinearGrid, got {type(grid).__name__}")
        if isinstance(isovalue, bool) or not isinstance(isovalue, numbers.Real):
            raise ExtractionError(f"isovalue must be a real number, got {isovalue!r}")
        if not math.isfinite(isovalue):
            raise ExtractionError(f"isovalue must be finite, got {isovalue!r}")
        self.grid = grid
        self.isovalue = float(isovalue)
        self.state = ExtractorState.IDLE
        self.cells_visited = 0
        self.active_cells = 0
        self._mesh: Optional[TriangleMesh] = None

    @property
    def mesh(self) -> Optional[TriangleMesh]:
        """The finished mesh, or ``None`` until :meth:`run` completes."""
        return self._mesh if self.state is ExtractorState.DONE else None

    def run(self) -> TriangleMesh:
        """Sweep every cell and return the frozen mesh.

        A second call returns the same mesh without sweeping again.
        """
        if self.state is ExtractorState.DONE:
            return self._mesh

        grid = self.grid
        iso = self.isovalue
        mesh = TriangleMesh()
        self.state = ExtractorState.SWEEPING
        self.cells_visited = 0
        self.active_cells = 0
        logger.debug("sweeping %d cells of %r at isovalue %g",
                     grid.number_of_cells, grid, iso)

        for x, y, z in grid.cells():
            self.cells_visited += 1
            if march_cell(grid, x, y, z, iso, mesh):
                self.active_cells += 1

        self._mesh = mesh.freeze()
        self.state = ExtractorState.DONE
        logger.info("isovalue %g: %d triangles from %d of %d cells",
                    iso, len(mesh), self.active_cells, self.cells_visited)
        return self._mesh


def extract_isosurface(grid: RectilinearGrid,
                       isovalue: float = DEFAULT_ISOVALUE) -> TriangleMesh:
    """Return the frozen triangle mesh of ``grid`` at ``isovalue``."""

    return IsosurfaceExtractor(grid, isovalue).run()


__all__ = [
    'DEFAULT_ISOVALUE',
    'ExtractionError',
    'ExtractorState',
    'IsosurfaceExtractor',
    'emit_triangles',
    'extract_isosurface',
    'march_cell',
]
