import pytest

from isosurf.checks import check_case_table
from isosurf.tables import (
    CASE_TABLE,
    CORNER_OFFSETS,
    EDGE_ENDPOINTS,
    NUM_CASES,
    ROW_LENGTH,
    SENTINEL,
    case_row,
    case_triangles,
    complement,
    crossing_edges,
)


def test_table_shape():
    assert len(CASE_TABLE) == NUM_CASES == 256
    for row in CASE_TABLE:
        assert len(row) == ROW_LENGTH == 16


@pytest.mark.parametrize('code', range(256))
def test_row_entry_count(code):
    row = case_row(code)
    assert len(row) in (0, 3, 6, 9, 12, 15)
    assert all(0 <= edge <= 11 for edge in row)
    # only sentinels after the first sentinel
    assert all(e == SENTINEL for e in CASE_TABLE[code][len(row):])


def test_empty_rows_for_uniform_cells():
    assert case_row(0) == ()
    assert case_row(255) == ()
    assert case_triangles(0) == []
    assert case_triangles(255) == []


@pytest.mark.parametrize('code', range(256))
def test_rows_reference_only_crossing_edges(code):
    crossing = set(crossing_edges(code))
    used = set(case_row(code))
    assert used <= crossing
    assert used == crossing


@pytest.mark.parametrize('code', range(256))
def test_triangles_have_distinct_edges(code):
    for tri in case_triangles(code):
        assert len(set(tri)) == 3


def test_known_rows():
    assert case_triangles(1) == [(0, 3, 8)]
    assert case_triangles(15) == [(8, 9, 11), (8, 10, 11)]
    assert case_triangles(51) == [(1, 3, 5), (3, 5, 7)]
    assert len(case_triangles(110)) == 5
    # corners 0, 2 and 6 form one pentagon, corner 5 its own triangle
    assert case_triangles(101) == [(0, 2, 6), (0, 6, 7), (0, 7, 8), (4, 5, 9)]


def test_single_corner_rows_cut_that_corner():
    for corner in range(8):
        edges = {e for e, (a, b, _) in enumerate(EDGE_ENDPOINTS) if corner in (a, b)}
        assert set(case_row(1 << corner)) == edges
        assert set(case_row(complement(1 << corner))) == edges


def test_corner_offsets_are_the_unit_cube():
    assert len(set(CORNER_OFFSETS)) == 8
    assert CORNER_OFFSETS[0] == (0, 0, 0)
    assert CORNER_OFFSETS[1] == (1, 0, 0)
    assert CORNER_OFFSETS[2] == (0, 0, 1)
    assert CORNER_OFFSETS[4] == (0, 1, 0)
    assert CORNER_OFFSETS[7] == (1, 1, 1)


def test_edge_endpoints_differ_along_their_axis_only():
    assert len(EDGE_ENDPOINTS) == 12
    assert len({frozenset((a, b)) for a, b, _ in EDGE_ENDPOINTS}) == 12
    for a, b, axis in EDGE_ENDPOINTS:
        pa, pb = CORNER_OFFSETS[a], CORNER_OFFSETS[b]
        for n in range(3):
            if n == axis:
                assert (pa[n], pb[n]) == (0, 1)
            else:
                assert pa[n] == pb[n]


def test_crossing_edges_of_complement_match():
    for code in range(256):
        assert crossing_edges(code) == crossing_edges(complement(code))


def test_case_table_check_passes():
    result = check_case_table()
    assert result, result.warnings
    assert result.warnings == []
