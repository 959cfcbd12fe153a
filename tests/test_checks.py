import math

from isosurf.checks import CheckResult, check_case_table, mesh_finite, mesh_within_grid
from isosurf.grid import RectilinearGrid
from isosurf.mesh import TriangleMesh
from isosurf.tables import CASE_TABLE


def _replace_row(code, entries):
    table = list(CASE_TABLE)
    table[code] = tuple(entries) + (-1,) * (16 - len(entries))
    return table


def _unit_grid():
    return RectilinearGrid.sample([0, 1], [0, 1], [0, 1], lambda x, y, z: 0.0)


def test_wrong_row_count():
    result = check_case_table(CASE_TABLE[:-1])
    assert not result
    assert 'expected 256 rows' in result.warnings[0]


def test_stray_edge_detected():
    # edge 5 does not touch corner 0
    result = check_case_table(_replace_row(1, (0, 3, 5)))
    assert not result
    assert any('edges [5] do not cross' in w for w in result.warnings)
    assert any('crossing edges [8] unused' in w for w in result.warnings)


def test_partial_triangle_detected():
    result = check_case_table(_replace_row(1, (0, 3)))
    assert not result
    assert any('case 1: 2 edge ids' in w for w in result.warnings)


def test_entries_after_sentinel_detected():
    table = list(CASE_TABLE)
    table[2] = (0, 1, 9, -1, 4) + (-1,) * 11
    result = check_case_table(table)
    assert any('case 2: edge ids after sentinel' in w for w in result.warnings)


def test_short_row_detected():
    table = list(CASE_TABLE)
    table[3] = (1, 3, 8, 1, 8, 9, -1)
    result = check_case_table(table)
    assert result.warnings == ['case 3: row length 7']


def test_mesh_finite():
    assert mesh_finite(TriangleMesh([((0, 0, 0), (1, 0, 0), (0, 1, 0))]))
    bad = TriangleMesh([((0, 0, 0), (math.inf, 0, 0), (0, 1, 0))])
    result = mesh_finite(bad)
    assert not result
    assert result.warnings == ['1 triangles with non-finite coordinates']


def test_mesh_within_grid():
    grid = _unit_grid()
    inside = TriangleMesh([((0, 0, 0), (1, 0, 0), (0, 1, 1))])
    assert mesh_within_grid(inside, grid)

    outside = TriangleMesh([((0, 0, 0), (1.5, 0, 0), (0, -1, 0))])
    result = mesh_within_grid(outside, grid)
    assert not result
    assert result.warnings == ['2 vertices outside grid bounds']


def test_mesh_within_grid_tolerance():
    grid = _unit_grid()
    mesh = TriangleMesh([((0, 0, 0), (1 + 1e-12, 0, 0), (0, 1, 0))])
    assert mesh_within_grid(mesh, grid)
    assert not mesh_within_grid(mesh, grid, tol=0.0)


def test_check_result_truthiness():
    assert CheckResult(True, [])
    assert not CheckResult(False, ['x'])


def test_row_with_misordered_quad_detected():
    # the quad 0-3-7-4 split along 3-4 instead of 0-7
    result = check_case_table(_replace_row(25, (0, 3, 4, 0, 4, 7, 1, 2, 11)))
    assert not result
    assert 'case 25: boundary segment 0-7 is off the cube faces' in result.warnings
    assert 'case 25: patch is open at edge 3' in result.warnings


def test_row_joining_separate_patches_detected():
    result = check_case_table(_replace_row(101, (0, 2, 9, 4, 7, 8, 4, 5, 6)))
    assert not result
    assert 'case 101: boundary segment 2-9 is off the cube faces' in result.warnings


def test_non_manifold_row_detected():
    result = check_case_table(_replace_row(116, (2, 8, 9, 2, 3, 9, 2, 5, 9, 2, 5, 6)))
    assert not result
    assert 'case 116: segment 2-9 shared by 3 triangles' in result.warnings


def test_segment_across_ambiguous_face_detected():
    # corners 1 and 2 are diagonal on face y=0; the hexagon closes up but
    # pairs the parallel edges of that face
    result = check_case_table(_replace_row(6, (0, 9, 1, 0, 1, 3, 0, 3, 10, 0, 10, 2)))
    assert result.warnings == [
        "case 6: segment 0-2 cuts across face (1, 0)",
        "case 6: segment 1-3 cuts across face (1, 0)",
    ]
