# blockdrop/core/factory.py
from __future__ import annotations

import itertools
import random
from typing import Callable, Iterable

from .pieces import SHAPES, PIECE_KINDS, Shape

ShapeSource = Callable[[], Shape]


def random_shape(rng: random.Random | None = None) -> Shape:
    """
    Sorteia uma peça de forma uniforme usando o RNG passado.
    Se rng for None, usa o random global.
    """
    r = rng or random
    return SHAPES[r.choice(PIECE_KINDS)]


class RandomShapeSource:
    """Fonte de peças aleatórias; com seed a sequência é reproduzível."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def __call__(self) -> Shape:
        return random_shape(self._rng)


class SequenceShapeSource:
    """Repete uma sequência fixa de peças (ou tipos "I", "O", ...) em ciclo."""

    def __init__(self, shapes: Iterable[Shape | str]):
        items = [SHAPES[s] if isinstance(s, str) else s for s in shapes]
        if not items:
            raise ValueError("a sequência de peças não pode ser vazia")
        self._cycle = itertools.cycle(items)

    def __call__(self) -> Shape:
        return next(self._cycle)
