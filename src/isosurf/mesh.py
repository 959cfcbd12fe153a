"""Triangle soup accumulated by the isosurface sweep.

Triangles are stored as independent point triples.  Neighbouring
triangles that share a crossing point each carry their own copy of it;
nothing is welded.  Once :meth:`TriangleMesh.freeze` has been called the
mesh no longer accepts triangles and can be handed to a renderer or an
exporter.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from isosurf.geometry_utils import Vec3, to_vec3, triangle_normal

TriPoints = Tuple[Vec3, Vec3, Vec3]
TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]


class MeshFrozenError(RuntimeError):
    """Raised when a finalised mesh is modified."""


class TriangleMesh:
    """Ordered collection of independent triangles."""

    def __init__(self, triangles: Iterable[Sequence[Sequence[float]]] = ()) -> None:
        self._triangles: List[TriPoints] = []
        self._frozen = False
        for tri in triangles:
            if len(tri) != 3:
                raise ValueError("each triangle needs exactly three points")
            self.add_triangle(*tri)

    def add_triangle(self, v0: Sequence[float], v1: Sequence[float],
                     v2: Sequence[float]) -> None:
        if self._frozen:
            raise MeshFrozenError("cannot add triangles to a frozen mesh")
        self._triangles.append((to_vec3(v0), to_vec3(v1), to_vec3(v2)))

    def extend(self, other: "TriangleMesh") -> None:
        """Append all triangles of ``other``, preserving their order."""
        if self._frozen:
            raise MeshFrozenError("cannot add triangles to a frozen mesh")
        self._triangles.extend(other._triangles)

    def freeze(self) -> "TriangleMesh":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def triangles(self) -> Tuple[TriPoints, ...]:
        return tuple(self._triangles)

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[TriPoints]:
        return iter(self._triangles)

    def __getitem__(self, index: int) -> TriPoints:
        return self._triangles[index]

    def __repr__(self) -> str:
        state = 'frozen' if self._frozen else 'open'
        return f"TriangleMesh({len(self._triangles)} triangles, {state})"

    def points(self) -> List[Vec3]:
        """Flat point list; every three consecutive points form a triangle."""
        return [pt for tri in self._triangles for pt in tri]

    def as_array(self) -> np.ndarray:
        """Return an ``(n, 3, 3)`` float array of triangle vertices."""
        if not self._triangles:
            return np.zeros((0, 3, 3), dtype=np.float64)
        return np.asarray(self._triangles, dtype=np.float64)

    def bounds(self) -> Tuple[Vec3, Vec3] | None:
        """Return the ``(min, max)`` corners of the mesh, or ``None`` if empty."""
        if not self._triangles:
            return None
        arr = self.as_array().reshape(-1, 3)
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return (tuple(float(v) for v in lo), tuple(float(v) for v in hi))

    def triangle_set(self, ndigits: int = 9) -> set:
        """Order-independent view of the mesh, for comparing sweeps.

        Each triangle becomes a sorted tuple of rounded points, so two
        meshes with the same triangles in any order and any vertex
        rotation compare equal.
        """
        return {
            tuple(sorted(tuple(round(c, ndigits) for c in pt) for pt in tri))
            for tri in self._triangles
        }

    def mesh_view(self) -> Iterator[TriTuple]:
        """Yield triangles as ``(normal, v0, v1, v2)``.

        Normals follow the stored winding and are unit vectors.  Triangles
        with zero area have no normal and are skipped silently.
        """
        for v0, v1, v2 in self._triangles:
            normal = triangle_normal(v0, v1, v2)
            if normal is None:
                continue
            yield normal, v0, v1, v2

    def to_surface(self) -> list:
        """Return an indexed surface ``['surface', verts, normals, faces, [], []]``.

        Every triangle contributes its own three vertices.  Vertices are
        homogeneous ``[x, y, z, 1]`` points and normals ``[nx, ny, nz, 0]``
        vectors; degenerate triangles get a zero normal.
        """
        vertices = []
        normals = []
        faces = []
        for n, (v0, v1, v2) in enumerate(self._triangles):
            normal = triangle_normal(v0, v1, v2) or (0.0, 0.0, 0.0)
            for v in (v0, v1, v2):
                vertices.append([v[0], v[1], v[2], 1.0])
                normals.append([normal[0], normal[1], normal[2], 0.0])
            base = 3 * n
            faces.append([base, base + 1, base + 2])
        return ['surface', vertices, normals, faces, [], []]


__all__ = ['MeshFrozenError', 'TriPoints', 'TriTuple', 'TriangleMesh']
