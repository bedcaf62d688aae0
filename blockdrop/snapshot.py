# blockdrop/snapshot.py
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from blockdrop.models.board import Cell, Grid

if TYPE_CHECKING:
    from blockdrop.models.game import GameEngine, GameState


@dataclass(frozen=True)
class Snapshot:
    """Visão somente leitura do jogo: tabuleiro com a peça ativa e o flag de game over."""

    grid: Grid
    game_over: bool

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def to_dict(self) -> dict:
        return {
            "board": [list(row) for row in self.grid],
            "rows": self.rows,
            "cols": self.cols,
            "game_over": self.game_over,
        }


def take_snapshot(engine: "GameEngine", state: "GameState") -> Snapshot:
    return Snapshot(grid=engine.display_board(state).grid, game_over=state.game_over)
