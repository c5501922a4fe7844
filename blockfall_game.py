
"""Game controller: gravity, commands, landing, row clears, restart.

The driver calls :meth:`Game.tick` once per frame with the elapsed seconds,
forwards input through :meth:`Game.submit_command`, and draws from
:meth:`Game.snapshot`. The controller is the only owner of the grid and the
active piece.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Optional, Tuple

from blockfall_config import Color, GameConfig
from blockfall_grid import Grid
from blockfall_piece import Piece
from blockfall_rng import PieceRandom
from blockfall_shapes import CATALOG, Shape

log = logging.getLogger(__name__)


class Command(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    ROTATE_CW = auto()
    ROTATE_CCW = auto()
    SOFT_DROP_ON = auto()
    SOFT_DROP_OFF = auto()
    TOGGLE_PAUSE = auto()


class Phase(Enum):
    FALLING = auto()
    PAUSED = auto()
    GAME_OVER = auto()  # transient: restart follows immediately


Transform = Callable[[Piece, int], Optional[Piece]]

TRANSFORMS: Dict[Command, Transform] = {
    Command.MOVE_LEFT: lambda p, cols: p.translated(-1, 0, cols),
    Command.MOVE_RIGHT: lambda p, cols: p.translated(1, 0, cols),
    Command.ROTATE_CW: lambda p, cols: p.rotated(clockwise=True),
    Command.ROTATE_CCW: lambda p, cols: p.rotated(clockwise=False),
}

ROTATIONS = (Command.ROTATE_CW, Command.ROTATE_CCW)

Cell = Tuple[int, int, Color]


@dataclass(frozen=True)
class Snapshot:
    cols: int
    rows: int
    board: Tuple[Cell, ...]
    piece: Tuple[Cell, ...]
    ghost: Tuple[Tuple[int, int], ...]
    next_shape: Shape
    paused: bool
    score: int
    lines: int
    games: int


class Game:
    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[PieceRandom] = None):
        self.config = config or GameConfig()
        self.rng = rng or PieceRandom(self.config.seed)
        self.grid = Grid(self.config.cols, self.config.rows)
        self.speed = self.config.base_speed
        self.pending: Optional[Command] = None
        self.phase = Phase.FALLING
        self.piece: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.games = 0
        self.last_cleared = 0
        self.restart()

    @property
    def paused(self) -> bool:
        return self.phase is Phase.PAUSED

    # ----- Input -----
    def submit_command(self, cmd: Command) -> None:
        if not isinstance(cmd, Command):
            raise TypeError(f"expected Command, got {cmd!r}")
        if cmd is Command.TOGGLE_PAUSE:
            self.phase = Phase.FALLING if self.paused else Phase.PAUSED
            self.pending = None
            log.debug("paused=%s", self.paused)
        elif cmd is Command.SOFT_DROP_OFF:
            # honored while paused so speed can't stay stuck at fast
            self.speed = self.config.base_speed
        elif self.paused:
            return
        elif cmd is Command.SOFT_DROP_ON:
            self.speed = self.config.fast_speed
        else:
            self.pending = cmd

    # ----- Simulation -----
    def tick(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if self.paused:
            return
        cmd, self.pending = self.pending, None
        if cmd is not None:
            self._apply(cmd)
        if self._landed():
            self._land()
        self._fall(dt)

    def _apply(self, cmd: Command) -> bool:
        if cmd in ROTATIONS and not CATALOG[self.piece.shape].rotates:
            return False
        return self._attempt(TRANSFORMS[cmd])

    def _attempt(self, transform: Transform) -> bool:
        """Commit `transform` if the result fits, else leave the piece untouched."""
        candidate = transform(self.piece, self.grid.cols)
        if candidate is None or not self._fits(candidate):
            return False
        self.piece = candidate
        return True

    def _fits(self, piece: Piece) -> bool:
        return all(self.grid.in_bounds(pos) and not self.grid.occupied(pos)
                   for pos in piece.cells())

    def _landed(self) -> bool:
        for col, row in self.piece.cells():
            below = (col, row + 1)
            if row + 1 >= self.grid.rows or self.grid.occupied(below):
                return True
        return False

    def _fall(self, dt: float) -> None:
        fall = self.piece.fall + self.speed * dt
        if fall > self.config.fall_threshold:
            self.piece = self.piece.with_fall(0.0)
            # a blocked step is picked up by the landing check next tick
            self._attempt(lambda p, cols: p.translated(0, 1, cols))
        else:
            self.piece = self.piece.with_fall(fall)

    def _land(self) -> None:
        for pos in self.piece.cells():
            self.grid.place(pos, self.piece.color)
        log.debug("merged %s at %s", self.piece.shape.value, self.piece.cells())
        self.last_cleared = self.grid.clear_full_rows()
        if self.last_cleared:
            self._score(self.last_cleared)
        if not self._spawn():
            self._game_over()

    def _score(self, cleared: int) -> None:
        table = self.config.score_table
        self.score += table.get(cleared, table[max(table)])
        self.lines += cleared
        log.info("cleared %d row(s); score=%d lines=%d", cleared, self.score, self.lines)

    def _spawn(self) -> bool:
        shape = self.rng.next_shape()
        x = self.rng.spawn_column(shape, self.grid.cols)
        piece = Piece.spawn(shape, x, self.config.palette[shape.value])
        if not self._fits(piece):
            log.debug("spawn of %s at column %d blocked", shape.value, x)
            return False
        self.piece = piece
        return True

    def _game_over(self) -> None:
        log.info("game over: score=%d lines=%d", self.score, self.lines)
        self.phase = Phase.GAME_OVER
        self.restart()

    def restart(self) -> None:
        self.grid.clear()
        self.score = 0
        self.lines = 0
        self.last_cleared = 0
        self.pending = None
        self.games += 1
        self.phase = Phase.FALLING
        if not self._spawn():
            raise RuntimeError("spawn blocked on an empty board")
        log.debug("game %d started", self.games)

    # ----- Queries for rendering -----
    def ghost_cells(self):
        p = self.piece
        while True:
            nxt = p.translated(0, 1, self.grid.cols)
            if nxt is None or not self._fits(nxt):
                return p.cells()
            p = nxt

    def snapshot(self) -> Snapshot:
        color = self.piece.color
        return Snapshot(
            cols=self.grid.cols,
            rows=self.grid.rows,
            board=tuple(self.grid.cells()),
            piece=tuple((c, r, color) for c, r in self.piece.cells()),
            ghost=tuple(self.ghost_cells()),
            next_shape=self.rng.upcoming,
            paused=self.paused,
            score=self.score,
            lines=self.lines,
            games=self.games,
        )
