import pytest

from grid_core.grid import grid_dimensions, grid_shape_for


@pytest.mark.parametrize(
    "n,expected_cols,expected_rows",
    [
        (1, 1, 1),
        (2, 2, 1),
        (3, 2, 2),
        (4, 2, 2),
        (5, 3, 2),
        (6, 3, 2),
        (7, 3, 3),
        (9, 3, 3),
        (10, 4, 3),
        (12, 4, 3),
        (13, 4, 4),
        (16, 4, 4),
        (17, 5, 4),
        (26, 6, 5),
        (100, 10, 10),
    ],
)
def test_grid_dimensions_expected_shapes(n, expected_cols, expected_rows):
    shape = grid_dimensions(n)
    assert (shape.cols, shape.rows) == (expected_cols, expected_rows)


@pytest.mark.parametrize("n", range(1, 101))
def test_grid_dimensions_has_capacity(n):
    cols, rows = grid_dimensions(n)
    assert cols * rows >= n
    # Never a spare row: the last row always holds at least one cell.
    assert (rows - 1) * cols < n
    assert rows <= cols


def test_grid_dimensions_zero():
    assert grid_dimensions(0) == (0, 0)
    assert grid_shape_for(0) is None


def test_grid_shape_for_matches_dimensions():
    assert grid_shape_for(7) == grid_dimensions(7)
