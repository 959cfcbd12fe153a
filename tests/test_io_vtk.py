import io
import struct

import pytest
import pyvista as pv

from isosurf.grid import GridError
from isosurf.io.vtk import VTKFormatError, read_rectilinear_grid, to_polydata, write_polydata
from isosurf.march import extract_isosurface
from isosurf.mesh import TriangleMesh

HEADER = """# vtk DataFile Version 3.0
demo grid
ASCII
DATASET RECTILINEAR_GRID
"""

GEOMETRY = """DIMENSIONS 3 2 2
X_COORDINATES 3 float
0 1 2
Y_COORDINATES 2 float
0 1
Z_COORDINATES 2 double
0 0.5
"""

POINT_SCALARS = """POINT_DATA 12
SCALARS density float 1
LOOKUP_TABLE default
0 1 2 3 4 5
6 7 8 9 10 11
"""


def _write(tmp_path, text, name='grid.vtk'):
    path = tmp_path / name
    path.write_text(text)
    return path


def _binary_grid(values):
    def block(fmt, data):
        return struct.pack('>%d%s' % (len(data), fmt), *data) + b'\n'

    parts = [
        b'# vtk DataFile Version 3.0\n',
        b'binary grid\n',
        b'BINARY\n',
        b'DATASET RECTILINEAR_GRID\n',
        b'DIMENSIONS 2 2 2\n',
        b'X_COORDINATES 2 float\n', block('f', [0.0, 1.0]),
        b'Y_COORDINATES 2 double\n', block('d', [0.0, 2.0]),
        b'Z_COORDINATES 2 float\n', block('f', [-1.0, 1.0]),
        b'POINT_DATA 8\n',
        b'SCALARS value float\n',
        b'LOOKUP_TABLE default\n', block('f', values),
    ]
    return b''.join(parts)


def test_read_ascii_grid(tmp_path):
    grid = read_rectilinear_grid(_write(tmp_path, HEADER + GEOMETRY + POINT_SCALARS))
    assert grid.dims == (3, 2, 2)
    assert list(grid.x) == [0.0, 1.0, 2.0]
    assert list(grid.z) == [0.0, 0.5]
    assert grid.scalar_at(2, 1, 1) == 11.0
    assert grid.scalar_at(1, 0, 1) == 7.0


def test_read_from_stream():
    grid = read_rectilinear_grid(io.BytesIO((HEADER + GEOMETRY + POINT_SCALARS).encode()))
    assert grid.number_of_points == 12


def test_named_scalars_and_skipped_sections(tmp_path):
    text = HEADER + """FIELD FieldData 1
TIME 1 1 double
3.5
""" + GEOMETRY + """CELL_DATA 2
SCALARS cell_id int 1
LOOKUP_TABLE default
0 1
POINT_DATA 12
VECTORS velocity float
""" + ' '.join(['0'] * 36) + """
SCALARS density float 1
LOOKUP_TABLE default
0 0 0 0 0 0 0 0 0 0 0 0
SCALARS temperature double 1
LOOKUP_TABLE default
100 101 102 103 104 105 106 107 108 109 110 111
"""
    path = _write(tmp_path, text)
    assert read_rectilinear_grid(path).scalar_at(2, 1, 1) == 0.0
    assert read_rectilinear_grid(path, scalars='temperature').scalar_at(2, 1, 1) == 111.0


def test_multi_component_scalars_keep_first_component(tmp_path):
    values = ' '.join(f'{n} -1' for n in range(12))
    text = HEADER + GEOMETRY + f"""POINT_DATA 12
SCALARS pair float 2
LOOKUP_TABLE default
{values}
"""
    grid = read_rectilinear_grid(_write(tmp_path, text))
    assert list(grid.scalars) == [float(n) for n in range(12)]


def test_read_binary_grid(tmp_path):
    path = tmp_path / 'binary.vtk'
    path.write_bytes(_binary_grid([0, 0, 0, 0, 10, 10, 10, 10]))

    grid = read_rectilinear_grid(path)
    assert grid.dims == (2, 2, 2)
    assert list(grid.y) == [0.0, 2.0]
    assert grid.scalar_at(1, 1, 1) == 10.0

    mesh = extract_isosurface(grid, 5.0)
    assert len(mesh) == 2
    for tri in mesh:
        for pt in tri:
            assert pt[2] == pytest.approx(0.0)


def test_color_scalars_and_lookup_tables_accepted(tmp_path):
    colors = ' '.join(['0.5 0.25 1'] * 12)
    text = HEADER + GEOMETRY + POINT_SCALARS + f"""COLOR_SCALARS rgb 3
{colors}
LOOKUP_TABLE mine 2
0 0 0 1
1 1 1 1
"""
    grid = read_rectilinear_grid(_write(tmp_path, text))
    assert grid.scalar_at(2, 1, 1) == 11.0


class TestReadErrors:
    """Malformed files raise VTKFormatError or GridError."""

    def test_missing_header(self, tmp_path):
        with pytest.raises(VTKFormatError, match='header'):
            read_rectilinear_grid(_write(tmp_path, 'not a vtk file\n'))

    def test_unknown_encoding(self, tmp_path):
        text = HEADER.replace('ASCII', 'XML') + GEOMETRY + POINT_SCALARS
        with pytest.raises(VTKFormatError, match='encoding'):
            read_rectilinear_grid(_write(tmp_path, text))

    def test_wrong_dataset(self, tmp_path):
        text = HEADER.replace('RECTILINEAR_GRID', 'STRUCTURED_POINTS') + """DIMENSIONS 3 2 2
SPACING 1 1 1
ORIGIN 0 0 0
""" + POINT_SCALARS
        with pytest.raises(VTKFormatError, match='RECTILINEAR_GRID'):
            read_rectilinear_grid(_write(tmp_path, text))

    def test_missing_scalars(self, tmp_path):
        with pytest.raises(VTKFormatError, match='point scalars'):
            read_rectilinear_grid(_write(tmp_path, HEADER + GEOMETRY))

    def test_missing_named_scalars(self, tmp_path):
        path = _write(tmp_path, HEADER + GEOMETRY + POINT_SCALARS)
        with pytest.raises(VTKFormatError, match="'pressure'"):
            read_rectilinear_grid(path, scalars='pressure')

    def test_missing_coordinates(self, tmp_path):
        text = HEADER + GEOMETRY.split('Z_COORDINATES')[0] + POINT_SCALARS
        with pytest.raises(VTKFormatError):
            read_rectilinear_grid(_write(tmp_path, text))

    def test_truncated_data(self, tmp_path):
        text = HEADER + GEOMETRY + POINT_SCALARS.replace('6 7 8 9 10 11\n', '')
        with pytest.raises(VTKFormatError):
            read_rectilinear_grid(_write(tmp_path, text))

    def test_bad_number(self, tmp_path):
        text = HEADER + GEOMETRY + POINT_SCALARS.replace('7', 'seven')
        with pytest.raises(VTKFormatError):
            read_rectilinear_grid(_write(tmp_path, text))

    def test_unknown_keyword(self, tmp_path):
        text = HEADER + GEOMETRY + 'BOGUS_SECTION 3\n' + POINT_SCALARS
        with pytest.raises(VTKFormatError):
            read_rectilinear_grid(_write(tmp_path, text))

    @pytest.mark.parametrize('line', ['VECTORS\n', 'VECTORS v\n', 'NORMALS\n', 'TENSORS t\n'])
    def test_attribute_line_without_type(self, tmp_path, line):
        text = HEADER + GEOMETRY + POINT_SCALARS + line
        with pytest.raises(VTKFormatError):
            read_rectilinear_grid(_write(tmp_path, text))

    def test_inconsistent_dimensions(self, tmp_path):
        text = HEADER + GEOMETRY.replace('DIMENSIONS 3 2 2', 'DIMENSIONS 4 2 2') + POINT_SCALARS
        with pytest.raises((VTKFormatError, GridError)):
            read_rectilinear_grid(_write(tmp_path, text))


def _two_triangles():
    return TriangleMesh([
        ((0, 0, 0), (1, 0, 0), (0, 1, 0)),
        ((0, 0, 1), (0, 1, 1), (1, 0, 1)),
    ])


def test_to_polydata():
    poly = to_polydata(_two_triangles())
    assert poly.n_points == 6
    assert poly.n_cells == 2
    assert poly.faces.tolist() == [3, 0, 1, 2, 3, 3, 4, 5]
    assert poly.points[4].tolist() == [0.0, 1.0, 1.0]


def test_to_polydata_empty_mesh():
    poly = to_polydata(TriangleMesh())
    assert poly.n_points == 0
    assert poly.n_cells == 0


def test_write_polydata(tmp_path):
    path = tmp_path / 'tris.vtk'
    write_polydata(_two_triangles(), path)

    text = path.read_text()
    assert text.startswith('# vtk DataFile')
    assert 'ASCII' in text
    assert 'DATASET POLYDATA' in text

    poly = pv.read(path)
    assert poly.n_cells == 2
    assert poly.faces.tolist() == [3, 0, 1, 2, 3, 3, 4, 5]
    assert poly.points[1].tolist() == pytest.approx([1.0, 0.0, 0.0])


def test_write_polydata_other_suffix(tmp_path):
    path = tmp_path / 'tris.txt'
    write_polydata(_two_triangles(), path)
    assert 'DATASET POLYDATA' in path.read_text()
    assert list(tmp_path.iterdir()) == [path]


def test_isosurface_round_trip_through_polydata(tmp_path):
    grid = read_rectilinear_grid(_write(tmp_path, HEADER + GEOMETRY + POINT_SCALARS))
    mesh = extract_isosurface(grid, 5.5)
    path = tmp_path / 'surface.vtk'
    write_polydata(mesh, path)
    assert pv.read(path).n_cells == len(mesh) > 0
