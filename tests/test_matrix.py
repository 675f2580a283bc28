import pytest

from samegame.components.matrix import OptionalMatrix
from samegame.errors import IndexOutOfBoundsError, InvalidDimensionError
from tests.helpers import matrix_from_columns, colors_of


def test_create_fills_every_cell_from_init():
    m = OptionalMatrix.create(3, 2, lambda x, y: (x, y))
    assert m.num_cols == 3 and m.num_rows == 2
    assert m.get(2, 1) == (2, 1)
    assert m.occupied_count() == 6


@pytest.mark.parametrize("cols,rows", [(0, 3), (3, 0), (-1, 2), (0, 0)])
def test_create_rejects_non_positive_dimensions(cols, rows):
    with pytest.raises(InvalidDimensionError):
        OptionalMatrix.create(cols, rows, lambda x, y: 1)


def test_invalid_dimension_is_a_value_error():
    with pytest.raises(ValueError):
        OptionalMatrix(0, 1, lambda x, y: 1)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_get_and_set_out_of_bounds(x, y):
    m = OptionalMatrix.create(2, 3, lambda x, y: 1)
    with pytest.raises(IndexOutOfBoundsError):
        m.get(x, y)
    with pytest.raises(IndexOutOfBoundsError):
        m.set(x, y, None)


def test_set_clears_a_cell():
    m = OptionalMatrix.create(2, 2, lambda x, y: x * 10 + y)
    m.set(1, 0, None)
    assert m.get(1, 0) is None
    assert m[1, 1] == 11
    m[0, 0] = 99
    assert m.get(0, 0) == 99


def test_for_each_cell_skips_empty_cells_in_column_major_order():
    m = OptionalMatrix.create(2, 2, lambda x, y: (x, y))
    m.set(0, 1, None)
    visited = []
    m.for_each_cell(visited.append)
    assert visited == [(0, 0), (1, 0), (1, 1)]


def test_for_each_xy_visits_empty_cells_too():
    m = OptionalMatrix.create(2, 2, lambda x, y: None)
    seen = []
    m.for_each_xy(lambda x, y: seen.append((x, y)))
    assert seen == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_all_satisfy_sees_empty_cells_as_none():
    m = OptionalMatrix.create(2, 1, lambda x, y: 5)
    assert m.all_satisfy(lambda cell: cell == 5)
    m.set(0, 0, None)
    assert not m.all_satisfy(lambda cell: cell == 5)
    assert m.all_satisfy(lambda cell: cell is None or cell == 5)


def test_compaction_drops_cells_and_keeps_vertical_order():
    m = matrix_from_columns(["a.b.", "....", ".c.."])
    m.compact_down_and_left()
    assert colors_of(m) == ["ab", "c."]
    assert m.num_cols == 2 and m.num_rows == 2


def test_compaction_pads_columns_to_common_height():
    m = matrix_from_columns(["abc", "d..", "..e"])
    m.compact_down_and_left()
    assert colors_of(m) == ["abc", "d..", "e.."]


def test_compaction_of_empty_board_leaves_no_columns():
    m = matrix_from_columns(["..", ".."])
    m.compact_down_and_left()
    assert m.num_cols == 0
    assert m.num_rows == 0
    assert m.is_empty
    assert m.all_satisfy(lambda cell: False)
    with pytest.raises(IndexOutOfBoundsError):
        m.get(0, 0)


def test_compaction_never_grows_the_matrix():
    m = matrix_from_columns(["ab", "cd"])
    m.compact_down_and_left()
    assert (m.num_cols, m.num_rows) == (2, 2)
    assert colors_of(m) == ["ab", "cd"]
