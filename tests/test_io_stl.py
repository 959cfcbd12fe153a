import io
import struct

import pytest

from isosurf.grid import RectilinearGrid
from isosurf.io.stl import read_stl, write_stl
from isosurf.march import extract_isosurface
from isosurf.mesh import TriangleMesh


def _make_mesh():
    return TriangleMesh([
        ((0, 0, 0), (1, 0, 0), (0, 1, 0)),
        ((0, 0, 1), (0, 1, 1), (1, 0, 1)),
    ])


def _sphere_mesh():
    coords = [-1.0, -0.5, 0.0, 0.5, 1.0]
    grid = RectilinearGrid.sample(coords, coords, coords,
                                  lambda x, y, z: x * x + y * y + z * z)
    return extract_isosurface(grid, 0.6)


def test_write_stl_binary(tmp_path):
    path = tmp_path / 'tri.stl'
    assert write_stl(_make_mesh(), path, binary=True, name='test') == 2

    data = path.read_bytes()
    assert len(data) == 80 + 4 + 2 * 50  # header + count + two triangles
    assert data[0:4] == b'test'
    count = struct.unpack('<I', data[80:84])[0]
    assert count == 2
    values = struct.unpack('<12fH', data[84:134])
    assert values[0:3] == (0.0, 0.0, 1.0)
    assert values[3:12] == (0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0)


def test_write_stl_ascii():
    buf = io.StringIO()
    write_stl(_make_mesh(), buf, binary=False, name='ascii_test')

    text = buf.getvalue()
    assert text.startswith('solid ascii_test')
    assert text.count('facet normal') == 2
    assert text.count('vertex') == 6
    assert text.strip().endswith('endsolid ascii_test')


def test_degenerate_triangles_are_skipped():
    mesh = TriangleMesh([
        ((0, 0, 0), (1, 0, 0), (0, 1, 0)),
        ((0, 0, 0), (0, 0, 0), (0, 0, 0)),
    ])
    buf = io.BytesIO()
    assert write_stl(mesh, buf) == 1
    assert len(buf.getvalue()) == 84 + 50


def test_empty_mesh(tmp_path):
    path = tmp_path / 'empty.stl'
    assert write_stl(TriangleMesh(), path) == 0
    assert path.stat().st_size == 84
    assert len(read_stl(path)) == 0


def test_read_stl_binary_roundtrip(tmp_path):
    mesh = _sphere_mesh()
    path = tmp_path / 'sphere.stl'
    written = write_stl(mesh, path, binary=True)

    imported = read_stl(path)
    assert imported.frozen
    assert len(imported) == written
    assert imported.as_array() == pytest.approx(
        TriangleMesh(tri[1:] for tri in mesh.mesh_view()).as_array(), abs=1e-6)


def test_read_stl_ascii_roundtrip(tmp_path):
    mesh = _make_mesh()
    path = tmp_path / 'tri_ascii.stl'
    write_stl(mesh, path, binary=False, name='isosurf')

    imported = read_stl(path)
    assert len(imported) == 2
    assert imported.as_array() == pytest.approx(mesh.as_array())


def test_read_stl_from_stream():
    buf = io.BytesIO()
    write_stl(_make_mesh(), buf, binary=True, name='stream')
    buf.seek(0)
    assert len(read_stl(buf)) == 2


def test_read_ascii_stl_with_exponents():
    text = """solid demo
  facet normal 0 0 1
    outer loop
      vertex 0 0 0
      vertex 1.5e+00 0 0
      vertex 0 2E-1 0
    endloop
  endfacet
endsolid demo
"""
    mesh = read_stl(io.StringIO(text))
    assert len(mesh) == 1
    assert mesh[0] == ((0.0, 0.0, 0.0), (1.5, 0.0, 0.0), (0.0, 0.2, 0.0))
