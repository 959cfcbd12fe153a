"""Validation helpers for case tables and extracted meshes."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, List, Sequence, Tuple

from isosurf.grid import RectilinearGrid
from isosurf.mesh import TriangleMesh
from isosurf.tables import (
    CASE_TABLE,
    CORNER_OFFSETS,
    EDGE_ENDPOINTS,
    MAX_TRIANGLES,
    NUM_CASES,
    ROW_LENGTH,
    SENTINEL,
)


def check_case_table(table: Sequence[Sequence[int]] = CASE_TABLE) -> "CheckResult":
    """Check the structural invariants of a marching cubes case table.

    Every row must hold a multiple of three edge ids (at most
    ``MAX_TRIANGLES`` triangles) followed only by sentinels, and every id
    must name an edge whose corners differ in sign for that row's code.
    Rows that leave a crossing edge unused are reported as well, and so
    are rows whose triangles do not close up into patches bounded by the
    cube faces.
    """

    warnings: List[str] = []
    if len(table) != NUM_CASES:
        return CheckResult(False, [f'expected {NUM_CASES} rows, found {len(table)}'])

    for code, row in enumerate(table):
        if len(row) != ROW_LENGTH:
            warnings.append(f'case {code}: row length {len(row)}')
            continue
        used = list(row)
        if SENTINEL in used:
            end = used.index(SENTINEL)
            if any(e != SENTINEL for e in used[end:]):
                warnings.append(f'case {code}: edge ids after sentinel')
            used = used[:end]
        if len(used) % 3 or len(used) > 3 * MAX_TRIANGLES:
            warnings.append(f'case {code}: {len(used)} edge ids')

        crossing = set()
        for edge, (a, b, _) in enumerate(EDGE_ENDPOINTS):
            if ((code >> a) & 1) != ((code >> b) & 1):
                crossing.add(edge)
        stray = sorted({e for e in used if e not in crossing})
        if stray:
            warnings.append(f'case {code}: edges {stray} do not cross the surface')
        unused = sorted(crossing - set(used))
        if unused:
            warnings.append(f'case {code}: crossing edges {unused} unused')
        if not stray and not len(used) % 3:
            warnings.extend(_patch_warnings(code, used, crossing))

    return CheckResult(not warnings, warnings)


Face = Tuple[int, int]


def _edge_faces(edge: int) -> FrozenSet[Face]:
    """The two cube faces, as ``(axis, side)``, that contain ``edge``."""
    a, _, axis = EDGE_ENDPOINTS[edge]
    offset = CORNER_OFFSETS[a]
    return frozenset((n, offset[n]) for n in range(3) if n != axis)


def _patch_warnings(code: int, used: Sequence[int], crossing: set) -> List[str]:
    """Check that the triangles of one row form closed patches.

    A segment between two crossing points is either shared by exactly two
    triangles or lies on a cube face.  Every crossing point must have one
    boundary segment on each of its two faces, and on a face with four
    crossings no boundary segment may join the two parallel edges.
    """

    segments: Counter = Counter()
    for n in range(0, len(used) - 2, 3):
        tri = used[n:n + 3]
        for p in range(3):
            segments[tuple(sorted((tri[p], tri[(p + 1) % 3])))] += 1

    per_face = Counter(face for e in crossing for face in _edge_faces(e))
    ends: Counter = Counter()
    warnings = []
    for (a, b), count in sorted(segments.items()):
        if count > 2:
            warnings.append(f'case {code}: segment {a}-{b} shared by {count} triangles')
        elif count == 1:
            shared = _edge_faces(a) & _edge_faces(b)
            if not shared:
                warnings.append(f'case {code}: boundary segment {a}-{b} is off the cube faces')
                continue
            face = min(shared)
            if per_face[face] == 4 and EDGE_ENDPOINTS[a][2] == EDGE_ENDPOINTS[b][2]:
                warnings.append(f'case {code}: segment {a}-{b} cuts across face {face}')
            ends[a, face] += 1
            ends[b, face] += 1

    for edge in sorted(crossing):
        if any(ends[edge, face] != 1 for face in _edge_faces(edge)):
            warnings.append(f'case {code}: patch is open at edge {edge}')
    return warnings


def mesh_finite(mesh: TriangleMesh) -> "CheckResult":
    """Report triangles with NaN or infinite coordinates."""

    bad = [idx for idx, tri in enumerate(mesh)
           if not all(math.isfinite(c) for pt in tri for c in pt)]
    if bad:
        return CheckResult(False, [f'{len(bad)} triangles with non-finite coordinates'])
    return CheckResult(True, [])


def mesh_within_grid(mesh: TriangleMesh, grid: RectilinearGrid,
                     tol: float = 1e-9) -> "CheckResult":
    """Check that every vertex lies inside the grid's bounding box."""

    lo, hi = grid.bounds()
    outside = 0
    for tri in mesh:
        for pt in tri:
            if any(pt[a] < lo[a] - tol or pt[a] > hi[a] + tol for a in range(3)):
                outside += 1
    if outside:
        return CheckResult(False, [f'{outside} vertices outside grid bounds'])
    return CheckResult(True, [])


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CheckResult',
    'check_case_table',
    'mesh_finite',
    'mesh_within_grid',
]
