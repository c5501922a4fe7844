
"""
Pygame drawing of a game Snapshot.

- Static background (grid + panel frame) is pre-rendered once per Dims.
- Cell sprites are cached per color, solid and ghost-outline variants.
- HUD text surfaces are re-rendered only when their values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional

from blockfall_config import Color, GameConfig
from blockfall_game import Snapshot
from blockfall_layout import Dims
from blockfall_shapes import CATALOG, Shape

BG = (10, 13, 34)
GRID = (40, 50, 90)
TEXT = (200, 210, 240)


@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    games: int = -1
    next_shape: Optional[Shape] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    games_s: Optional[pygame.Surface] = None
    next_s: Optional[pygame.Surface] = None


class Renderer:
    def __init__(self, dims: Dims, config: GameConfig, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.config = config
        self.font = font
        self.big_font = big_font
        self.hud = HudCache()
        self._cells: Dict[Color, pygame.Surface] = {}
        self._ghosts: Dict[Color, pygame.Surface] = {}
        self._make_static()
        self.paused_s = big_font.render("PAUSED  (P to Resume)", True, (220, 240, 255))

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)
        for x in range(self.config.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.config.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel)
        pygame.draw.rect(self.bg, (50, 60, 100), panel, 1)
        self.bg.blit(self.font.render("Blockfall", True, (197, 202, 233)), (d.panel_x + 12, d.panel_y + 12))
        y = d.panel_y + 260
        for line in ("Controls:", "←/→ Move", "↓ Soft drop", "↑ Rot CW", "Z Rot CCW", "P Pause • R Restart"):
            self.bg.blit(self.font.render(line, True, (165, 175, 215)), (d.panel_x + 12, y))
            y += 20

    # ---------- Cell sprites ----------
    def _cell(self, color: Color) -> pygame.Surface:
        s = self._cells.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c - 2, c - 2))
            s.fill(color)
            self._cells[color] = s
        return s

    def _ghost(self, color: Color) -> pygame.Surface:
        g = self._ghosts.get(color)
        if g is None:
            c = self.dims.cell
            g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, color, (0, 0, c - 8, c - 8), 2)
            self._ghosts[color] = g
        return g

    def _blit_at(self, screen: pygame.Surface, surf: pygame.Surface, col: int, row: int, inset: int):
        d = self.dims
        screen.blit(surf, (d.board_x + col * d.cell + inset, d.board_y + row * d.cell + inset))

    # ---------- HUD ----------
    def _next_preview(self, shape: Shape) -> pygame.Surface:
        pv = max(14, int(self.dims.cell * 0.75))
        spec = CATALOG[shape]
        s = pygame.Surface((pv * 4, pv * 2), pygame.SRCALPHA)
        block = pygame.Surface((pv - 2, pv - 2))
        block.fill(self.config.palette[shape.value])
        for dx, dy in spec.offsets:
            s.blit(block, ((dx + spec.min_left) * pv + 1, dy * pv + 1))
        return s

    def _draw_hud(self, screen: pygame.Surface, snap: Snapshot):
        d, f, h = self.dims, self.font, self.hud
        if snap.score != h.score:
            h.score, h.score_s = snap.score, f.render(f"Score: {snap.score}", True, TEXT)
        if snap.lines != h.lines:
            h.lines, h.lines_s = snap.lines, f.render(f"Lines: {snap.lines}", True, TEXT)
        if snap.games != h.games:
            h.games, h.games_s = snap.games, f.render(f"Game: {snap.games}", True, TEXT)
        if snap.next_shape != h.next_shape:
            h.next_shape, h.next_s = snap.next_shape, self._next_preview(snap.next_shape)
        screen.blit(h.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(h.lines_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(h.games_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 126))
        screen.blit(h.next_s, (d.panel_x + 18, d.panel_y + 156))

    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0, 0))
        for col, row, color in snap.board:
            self._blit_at(screen, self._cell(color), col, row, 1)
        color = snap.piece[0][2]
        for col, row in snap.ghost:
            self._blit_at(screen, self._ghost(color), col, row, 4)
        for col, row, color in snap.piece:
            self._blit_at(screen, self._cell(color), col, row, 1)
        self._draw_hud(screen, snap)
        if snap.paused:
            d = self.dims
            rect = self.paused_s.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
            screen.blit(self.paused_s, rect)
