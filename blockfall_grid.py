
"""Grid of settled cells: occupancy, placement, row clearing"""
from typing import Iterator, List, Optional, Tuple

from blockfall_config import Color

Pos = Tuple[int, int]  # (col, row)


class BoardInvariantError(AssertionError):
    """A settled cell was about to be overwritten. Never recoverable."""


class Grid:
    """Flat ``row * cols + col`` store; each slot holds a color or None."""

    def __init__(self, cols: int, rows: int):
        self.cols = cols
        self.rows = rows
        self._cells: List[Optional[Color]] = [None] * (cols * rows)

    def in_bounds(self, pos: Pos) -> bool:
        col, row = pos
        return 0 <= col < self.cols and 0 <= row < self.rows

    def _index(self, pos: Pos) -> int:
        if not self.in_bounds(pos):
            raise IndexError(f"cell {pos} outside {self.cols}x{self.rows} board")
        col, row = pos
        return row * self.cols + col

    def occupied(self, pos: Pos) -> bool:
        return self._cells[self._index(pos)] is not None

    def color_at(self, pos: Pos) -> Optional[Color]:
        return self._cells[self._index(pos)]

    def place(self, pos: Pos, color: Color) -> None:
        i = self._index(pos)
        if self._cells[i] is not None:
            raise BoardInvariantError(f"cell {pos} already occupied")
        self._cells[i] = color

    def clear(self) -> None:
        self._cells = [None] * (self.cols * self.rows)

    def row_full(self, row: int) -> bool:
        start = row * self.cols
        return all(c is not None for c in self._cells[start:start + self.cols])

    def _collapse(self, row: int) -> None:
        # every row above `row` moves down one; row 0 becomes empty
        w = self.cols
        self._cells[w:(row + 1) * w] = self._cells[:row * w]
        self._cells[:w] = [None] * w

    def clear_full_rows(self) -> int:
        """Clear full rows bottom to top and return how many were cleared.

        After a collapse the same row index is examined again, since it now
        holds what was directly above it. Two stacked full rows therefore both
        clear in one call.
        """
        cleared = 0
        row = self.rows - 1
        while row >= 0:
            if self.row_full(row):
                self._collapse(row)
                cleared += 1
            else:
                row -= 1
        return cleared

    def cells(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield (col, row, color) for every settled cell, top row first."""
        for i, color in enumerate(self._cells):
            if color is not None:
                yield i % self.cols, i // self.cols, color

    def __len__(self) -> int:
        return sum(1 for c in self._cells if c is not None)
