# blockdrop/core/transform.py
from __future__ import annotations

from .pieces import Shape


def rotate(shape: Shape) -> Shape:
    """Rotação de 90° no sentido horário; a forma de origem não é alterada."""
    rows = shape.height
    cols = shape.width
    rotated = [[0 for _ in range(rows)] for _ in range(cols)]
    for r in range(rows):
        for c in range(cols):
            rotated[c][rows - 1 - r] = shape.cells[r][c]
    return Shape.of(shape.kind, rotated)


def rotate_times(shape: Shape, times: int) -> Shape:
    for _ in range(times % 4):
        shape = rotate(shape)
    return shape
