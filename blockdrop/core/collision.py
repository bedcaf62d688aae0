# blockdrop/core/collision.py
from __future__ import annotations

from blockdrop.models.board import Board, Position, is_occupied
from .pieces import Shape


def is_valid_move(board: Board, shape: Shape, position: Position) -> bool:
    """True se todas as células da peça cabem no tabuleiro sem sobrepor nada."""
    for r, c in shape.filled():
        row = position.row + r
        col = position.col + c
        if not board.contains(row, col):
            return False
        if is_occupied(board, row, col):
            return False
    return True
