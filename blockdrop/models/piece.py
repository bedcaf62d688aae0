# blockdrop/models/piece.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

from blockdrop.core.pieces import Shape
from blockdrop.core.transform import rotate
from .board import Position


@dataclass(frozen=True)
class ActivePiece:
    shape: Shape
    position: Position

    def moved(self, drow: int, dcol: int) -> "ActivePiece":
        return replace(self, position=self.position.shifted(drow, dcol))

    def peek_rotate(self) -> "ActivePiece":
        return replace(self, shape=rotate(self.shape))

    def cells(self) -> Iterator[tuple[int, int]]:
        for r, c in self.shape.filled():
            yield self.position.row + r, self.position.col + c
