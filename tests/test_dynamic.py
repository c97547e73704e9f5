import pytest

from algokit.dynamic import (
    matrix_chain_order,
    max_nesting_depth,
    min_coins,
    min_cost_path,
)


def test_min_coins_classic():
    assert min_coins([25, 10, 5], 30) == 2


@pytest.mark.parametrize("value", [0, 1, 7, 42])
def test_min_coins_unit_coins(value):
    assert min_coins([1], value) == value


def test_min_coins_single_coin_value():
    assert min_coins([9, 6, 5, 1], 9) == 1


def test_min_coins_not_worse_than_greedy_with_ones():
    for value in range(60):
        assert min_coins([1, 3, 4], value) <= value


def test_min_coins_impossible():
    with pytest.raises(ValueError):
        min_coins([2], 3)


def test_min_coins_negative():
    with pytest.raises(ValueError):
        min_coins([1, 2], -1)


GRID = [[1, 2, 3], [4, 8, 2], [1, 5, 3]]


def test_min_cost_path_worked_example():
    assert min_cost_path(GRID, 2, 2) == 8


def test_min_cost_path_start():
    assert min_cost_path(GRID, 0, 0) == GRID[0][0]


def test_min_cost_path_first_row_and_column():
    assert min_cost_path(GRID, 0, 2) == sum(GRID[0])
    assert min_cost_path(GRID, 2, 0) == sum(row[0] for row in GRID)


def test_min_cost_path_monotone_along_diagonal():
    grid = [[1] * 5 for _ in range(5)]
    assert [min_cost_path(grid, i, i) for i in range(5)] == [i + 1 for i in range(5)]


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0)])
def test_min_cost_path_invalid_position(row, col):
    with pytest.raises(IndexError):
        min_cost_path(GRID, row, col)


def test_min_cost_path_empty_grid():
    with pytest.raises(ValueError):
        min_cost_path([], 0, 0)


def test_matrix_chain_two_matrices():
    assert matrix_chain_order([10, 20, 30]) == (10 * 20 * 30, "(A1 A2)")


def test_matrix_chain_three_matrices():
    assert matrix_chain_order([1, 2, 3, 4]) == (18, "((A1 A2) A3)")


def test_matrix_chain_single_matrix():
    assert matrix_chain_order([5, 7]) == (0, "A1")


def test_matrix_chain_bracketing_names_every_matrix():
    _, order = matrix_chain_order([40, 20, 30, 10, 30])
    assert [f"A{i}" in order for i in range(1, 5)] == [True] * 4
    assert order.count("(") == order.count(")") == 3


def test_matrix_chain_too_short():
    with pytest.raises(ValueError):
        matrix_chain_order([3])


@pytest.mark.parametrize("k", [0, 1, 2, 5, 20])
def test_nesting_depth_fully_nested(k):
    assert max_nesting_depth("(" * k + ")" * k) == k


@pytest.mark.parametrize("k", [1, 3, 8])
def test_nesting_depth_sequential(k):
    assert max_nesting_depth("()" * k) == 1


def test_nesting_depth_mixed():
    assert max_nesting_depth("(()(()))()") == 3


def test_nesting_depth_leading_close():
    assert max_nesting_depth(")(") == 0