import pytest

from blockdrop.core.pieces import SHAPES
from blockdrop.models.board import Board, Position, create_empty, is_occupied, merge


def test_create_empty_dimensions():
    board = create_empty()
    assert (board.rows, board.cols) == (20, 10)
    assert len(board.grid) == 20
    assert all(len(row) == 10 for row in board.grid)
    assert list(board.occupied_cells()) == []


def test_merge_marks_shape_cells_with_kind():
    board = create_empty(6, 6)
    merged = merge(board, SHAPES["T"], Position(2, 1))
    assert sorted(merged.occupied_cells()) == [(2, 2), (3, 1), (3, 2), (3, 3)]
    assert merged.get_cell(2, 2) == "T"
    assert not is_occupied(merged, 2, 1)


def test_merge_leaves_original_intact():
    board = create_empty(4, 4)
    merged = merge(board, SHAPES["O"], Position(0, 0))
    assert list(board.occupied_cells()) == []
    assert merged is not board
    assert merged.rows == board.rows and merged.cols == board.cols


def test_merge_out_of_bounds_is_a_contract_violation():
    with pytest.raises(AssertionError):
        merge(create_empty(4, 4), SHAPES["I"], Position(0, 1))


def test_merge_onto_occupied_cell_is_a_contract_violation():
    board = create_empty(4, 4).with_cells([(0, 0)], "X")
    with pytest.raises(AssertionError):
        merge(board, SHAPES["O"], Position(0, 0))


def test_is_occupied():
    board = Board.from_rows([[0, "X"], [0, 0]])
    assert is_occupied(board, 0, 1)
    assert not is_occupied(board, 1, 1)


def test_from_rows_rejects_ragged_grid():
    with pytest.raises(ValueError):
        Board.from_rows([[0, 0], [0]])


def test_contains():
    board = create_empty(3, 2)
    assert board.contains(2, 1)
    assert not board.contains(3, 0)
    assert not board.contains(0, -1)


@pytest.mark.parametrize("blank", ["", None, 0, False])
def test_from_rows_treats_falsy_cells_as_empty(blank):
    board = Board.from_rows([[blank, "X"], [blank, blank]])
    assert board.get_cell(0, 0) == 0
    assert not is_occupied(board, 1, 1)
    assert list(board.occupied_cells()) == [(0, 1)]
