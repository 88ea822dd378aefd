
"""
pygame drawing for a game session.

The board is painted incrementally straight onto the target surface, the
way a canvas is: the session tells us which piece cells to paint or erase,
and the two animations repaint only what they touch.

- Cell sprites (empty + one per piece type) are pre-rendered once per size.
- A clearing row is wiped from the edges towards the centre, then the block
  above it is scrolled down one row and the top row repainted empty.
- A hard drop repaints the piece one frame at a time on its way down.
"""
from __future__ import annotations
import math
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from tetris_anim import Animation
from tetris_layout import CONTROLS, LINE_H, PAD, Dims
from tetris_piece import ActivePiece, PieceType

# Colors per tetromino type
COLORS: Dict[PieceType, Tuple[int,int,int]] = {
    PieceType.I: (102,224,255),
    PieceType.O: (255,224,102),
    PieceType.T: (200,119,255),
    PieceType.S: (94,224,142),
    PieceType.Z: (255,102,119),
    PieceType.J: (106,119,255),
    PieceType.L: (255,158,94),
}
BORDER = (0,0,0)
EMPTY = (255,255,255)
BACKDROP = (10,13,34)
TEXT = (200,210,240)


@dataclass
class HudCache:
    score: int = -1
    status: str = ""
    score_s: Optional[pygame.Surface] = None
    status_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class PygameRenderer:
    """Implements the session's drawing contract on a pygame Surface."""
    def __init__(self, screen: pygame.Surface, dims: Dims, font: Optional[pygame.font.Font] = None,
                 clear_row_ms: float = 200):
        self.screen = screen
        self.dims = dims
        self.font = font
        self.clear_row_ms = clear_row_ms
        self._make_cells()
        self.hud = HudCache()

    # ---------- Cell sprites (1px border, flat fill) ----------
    def _make_cells(self):
        c = self.dims.cell
        def sprite(fill):
            s = pygame.Surface((c, c))
            s.fill(BORDER)
            s.fill(fill, pygame.Rect(1, 1, c-2, c-2))
            return s
        self.empty_surf = sprite(EMPTY)
        self.cell_surf: Dict[PieceType, pygame.Surface] = {t: sprite(col) for t, col in COLORS.items()}

    def cell_pos(self, bx: int, by: int) -> Tuple[int, int]:
        return self.dims.board_x + bx*self.dims.cell, self.dims.board_y + by*self.dims.cell

    def _paint(self, bx: int, by: int, surf: pygame.Surface):
        if 0 <= bx < self.dims.cols and 0 <= by < self.dims.rows:
            self.screen.blit(surf, self.cell_pos(bx, by))

    # ---------- Contract ----------
    def draw_background(self):
        self.screen.fill(BACKDROP)
        for y in range(self.dims.rows):
            for x in range(self.dims.cols):
                self.screen.blit(self.empty_surf, self.cell_pos(x, y))
        self.hud = HudCache()

    def draw_piece(self, piece: ActivePiece, erase: bool = False):
        surf = self.empty_surf if erase else self.cell_surf[piece.t]
        for bx, by in piece.cells():
            self._paint(bx, by, surf)

    def play_clear_row(self, row: int) -> Animation:
        cols = self.dims.cols
        def frame(progress: float):
            # edges first; offset shrinks to 0 as the wipe reaches the centre
            offset = int(math.floor((1.0 - progress) * cols / 2))
            for x in range(offset, cols - offset):
                self._paint(x, row, self.empty_surf)
            if progress >= 1.0:
                self._scroll_down(row)
        return Animation(self.clear_row_ms, frame)

    def play_hard_drop(self, piece: ActivePiece, target_row: int, duration: float) -> Animation:
        ghost = piece.copy()
        origin = piece.y
        def frame(progress: float):
            self.draw_piece(ghost, erase=True)
            ghost.y = int(math.floor(progress * (target_row - origin) + origin))
            self.draw_piece(ghost)
        return Animation(duration, frame)

    def _scroll_down(self, row: int):
        d = self.dims
        if row > 0:
            above = self.screen.subsurface(pygame.Rect(d.board_x, d.board_y, d.board_w, row*d.cell)).copy()
            self.screen.blit(above, (d.board_x, d.board_y + d.cell))
        for x in range(d.cols):
            self._paint(x, 0, self.empty_surf)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, score: int, status: str = ""):
        if self.font is None:
            return
        d = self.dims
        f = self.font
        panel = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.panel_h)
        pygame.draw.rect(self.screen, (21,25,53), panel)
        pygame.draw.rect(self.screen, (50,60,100), panel, 1)
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if status != self.hud.status:
            self.hud.status = status
            self.hud.status_s = f.render(status, True, (255,220,220)) if status else None
        if not self.hud.controls:
            self.hud.controls = [f.render("Controls:", True, TEXT)]
            self.hud.controls += [f.render(s, True, (165,175,215)) for s in CONTROLS]
        self.screen.blit(self.hud.score_s, (d.panel_x + PAD, d.panel_y + PAD))
        if self.hud.status_s:
            self.screen.blit(self.hud.status_s, (d.panel_x + PAD, d.panel_y + 40))
        y = d.panel_y + 80
        for surf in self.hud.controls:
            self.screen.blit(surf, (d.panel_x + PAD, y)); y += LINE_H
