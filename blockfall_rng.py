
"""Uniform piece randomizer with one-piece lookahead"""
import random
from typing import Optional

from blockfall_shapes import CATALOG, SHAPES, Shape


class PieceRandom:
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)
        self.upcoming = self._roll()

    def _roll(self) -> Shape:
        return SHAPES[self._rng.randrange(len(SHAPES))]

    def next_shape(self) -> Shape:
        """Return the queued shape and queue a fresh one."""
        shape, self.upcoming = self.upcoming, self._roll()
        return shape

    def spawn_column(self, shape: Shape, cols: int) -> int:
        """Random anchor column keeping every cell of `shape` inside [0, cols)."""
        spec = CATALOG[shape]
        return self._rng.randint(spec.min_left, cols - 1 - spec.max_right)
