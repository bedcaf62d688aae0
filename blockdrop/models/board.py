# blockdrop/models/board.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from blockdrop.core.constants import COLS, EMPTY, ROWS
from blockdrop.core.pieces import Shape

Cell = Union[int, str]
Grid = Tuple[Tuple[Cell, ...], ...]


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def shifted(self, drow: int = 0, dcol: int = 0) -> "Position":
        return Position(self.row + drow, self.col + dcol)


@dataclass(frozen=True)
class Board:
    """Grade fixa rows x cols; linha 0 no topo, coluna 0 à esquerda."""

    rows: int
    cols: int
    grid: Grid

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Cell]]) -> "Board":
        # qualquer valor falso (None, "", 0) vira EMPTY
        grid = tuple(tuple(v if v else EMPTY for v in row) for row in rows)
        if not grid or len({len(row) for row in grid}) != 1:
            raise ValueError("a grade do tabuleiro precisa ser retangular e não vazia")
        return cls(len(grid), len(grid[0]), grid)

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def occupied_cells(self) -> Iterator[tuple[int, int]]:
        for r, row in enumerate(self.grid):
            for c, v in enumerate(row):
                if v != EMPTY:
                    yield r, c

    def with_cells(self, cells: Iterable[tuple[int, int]], marker: Cell) -> "Board":
        grid = [list(row) for row in self.grid]
        for r, c in cells:
            grid[r][c] = marker
        return Board(self.rows, self.cols, tuple(tuple(row) for row in grid))

    def to_lists(self) -> list[list[Cell]]:
        return [list(row) for row in self.grid]


def create_empty(rows: int = ROWS, cols: int = COLS) -> Board:
    return Board(rows, cols, tuple(tuple(EMPTY for _ in range(cols)) for _ in range(rows)))


def is_occupied(board: Board, row: int, col: int) -> bool:
    return board.grid[row][col] != EMPTY


def merge(board: Board, shape: Shape, position: Position) -> Board:
    """
    Devolve um tabuleiro novo com as células da peça marcadas com o tipo dela.
    Só pode ser chamado depois de is_valid_move; o tabuleiro original não muda.
    """
    targets = [(position.row + r, position.col + c) for r, c in shape.filled()]
    for row, col in targets:
        assert board.contains(row, col), f"merge fora do tabuleiro em {(row, col)}"
        assert not is_occupied(board, row, col), f"merge sobre célula ocupada em {(row, col)}"
    return board.with_cells(targets, shape.kind)
