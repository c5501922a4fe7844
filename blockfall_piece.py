
"""Active piece model and its pure translate/rotate transforms"""
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from blockfall_config import Color
from blockfall_shapes import CATALOG, Offset, Shape


def rotate_cw(offsets: Tuple[Offset, ...]) -> Tuple[Offset, ...]:
    return tuple((dy, -dx) for dx, dy in offsets)


def rotate_ccw(offsets: Tuple[Offset, ...]) -> Tuple[Offset, ...]:
    return tuple((-dy, dx) for dx, dy in offsets)


@dataclass(frozen=True)
class Piece:
    shape: Shape
    offsets: Tuple[Offset, ...]
    x: int
    y: int
    color: Color
    fall: float = 0.0  # progress toward the next one-row drop

    @staticmethod
    def spawn(shape: Shape, x: int, color: Color, y: int = 0) -> "Piece":
        return Piece(shape, CATALOG[shape].offsets, x, y, color)

    def cells(self) -> List[Tuple[int, int]]:
        return [(self.x + dx, self.y + dy) for dx, dy in self.offsets]

    def translated(self, dx: int, dy: int, cols: int) -> Optional["Piece"]:
        """Return the piece shifted by (dx, dy), or None if it leaves [0, cols).

        Only the horizontal extent is checked here; the floor and settled
        cells are the controller's concern.
        """
        moved = replace(self, x=self.x + dx, y=self.y + dy)
        if any(not 0 <= c < cols for c, _ in moved.cells()):
            return None
        return moved

    def rotated(self, clockwise: bool = True) -> "Piece":
        if not CATALOG[self.shape].rotates:
            return self
        fn = rotate_cw if clockwise else rotate_ccw
        return replace(self, offsets=fn(self.offsets))

    def with_fall(self, fall: float) -> "Piece":
        return replace(self, fall=fall)
