# blockdrop/core/pieces.py
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Tuple

Matrix = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class Shape:
    """Matriz de ocupação imutável de uma peça numa orientação."""

    kind: str
    cells: Matrix

    def __post_init__(self):
        cells = tuple(tuple(1 if v else 0 for v in row) for row in self.cells)
        widths = {len(row) for row in cells}
        if len(widths) > 1:
            raise ValueError(f"matriz da peça {self.kind!r} não é retangular: {self.cells!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def of(cls, kind: str, rows) -> "Shape":
        return cls(kind, tuple(tuple(r) for r in rows))

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def filled(self) -> Iterator[tuple[int, int]]:
        for r, row in enumerate(self.cells):
            for c, v in enumerate(row):
                if v:
                    yield r, c


CYAN    = ( 86, 180, 233)
YELLOW  = (240, 228,  66)
MAGENTA = (204, 121, 167)
GREEN   = (  0, 158, 115)
RED     = (213,  94,   0)
BLUE    = (  0, 114, 178)
ORANGE  = (230, 159,   0)

I_SHAPE = Shape.of("I", [[1,1,1,1]])
J_SHAPE = Shape.of("J", [[1,0,0],[1,1,1]])
L_SHAPE = Shape.of("L", [[0,0,1],[1,1,1]])
O_SHAPE = Shape.of("O", [[1,1],[1,1]])
S_SHAPE = Shape.of("S", [[0,1,1],[1,1,0]])
T_SHAPE = Shape.of("T", [[0,1,0],[1,1,1]])
Z_SHAPE = Shape.of("Z", [[1,1,0],[0,1,1]])

# somente leitura: compartilhado pelo processo inteiro
SHAPES = MappingProxyType({
    s.kind: s for s in (I_SHAPE, J_SHAPE, L_SHAPE, O_SHAPE, S_SHAPE, T_SHAPE, Z_SHAPE)
})
PIECE_KINDS = tuple(SHAPES)

PIECE_COLORS = MappingProxyType({
    "I": CYAN,
    "J": BLUE,
    "L": ORANGE,
    "O": YELLOW,
    "S": GREEN,
    "T": MAGENTA,
    "Z": RED,
})
