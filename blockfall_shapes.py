
"""Shape catalog: the seven tetrominoes as offsets from an anchor cell"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

Offset = Tuple[int, int]  # (dx, dy); dy grows downward


class Shape(Enum):
    I = "I"
    O = "O"
    T = "T"
    L = "L"
    J = "J"
    S = "S"
    Z = "Z"


@dataclass(frozen=True)
class ShapeSpec:
    offsets: Tuple[Offset, Offset, Offset, Offset]
    rotates: bool = True

    @property
    def min_left(self) -> int:
        """Columns needed left of the anchor so no cell spawns off-board."""
        return -min(dx for dx, _ in self.offsets)

    @property
    def max_right(self) -> int:
        return max(dx for dx, _ in self.offsets)

    @property
    def width(self) -> int:
        return self.min_left + self.max_right + 1


# Anchor (@) sits on the top row of every shape, so row 0 spawns are in-bounds.
#
#   I  #@##    O  @#    T  #@#    L  #@#    J  #@#    S   @#    Z  #@
#                 ##        #        #          #       ##          ##
CATALOG: Dict[Shape, ShapeSpec] = {
    Shape.I: ShapeSpec(((-1, 0), (0, 0), (1, 0), (2, 0))),
    Shape.O: ShapeSpec(((0, 0), (1, 0), (0, 1), (1, 1)), rotates=False),
    Shape.T: ShapeSpec(((-1, 0), (0, 0), (1, 0), (0, 1))),
    Shape.L: ShapeSpec(((-1, 0), (0, 0), (1, 0), (-1, 1))),
    Shape.J: ShapeSpec(((-1, 0), (0, 0), (1, 0), (1, 1))),
    Shape.S: ShapeSpec(((0, 0), (1, 0), (-1, 1), (0, 1))),
    Shape.Z: ShapeSpec(((-1, 0), (0, 0), (0, 1), (1, 1))),
}

# Fixed order for index-based random selection
SHAPES: Tuple[Shape, ...] = tuple(Shape)
