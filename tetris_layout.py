# tetris_layout.py
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from tetris_config import CONFIG

# HUD legend, widest line sizes the side panel
CONTROLS: Tuple[str, ...] = (
    "←/→ Move",
    "↓ Soft drop",
    "↑/X Rot CW  Z Rot CCW",
    "Space Hard drop",
    "P Pause  C Continue",
    "Enter Restart",
)
STATUS_LINES: Tuple[str, ...] = ("PAUSED (C to continue)", "GAME OVER (Enter)", "Score: 000000")
GLYPH_W = 8     # rough advance of the 22px HUD font
LINE_H = 20
PAD = 12


@dataclass
class Dims:
    rows: int
    cols: int
    cell: int
    margin: int
    panel_w: int
    panel_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int


def panel_width(lines=CONTROLS + STATUS_LINES) -> int:
    return max(len(s) for s in lines) * GLYPH_W + 2 * PAD


def compute_dims(cfg: Optional[Dict[str, Any]] = None) -> Dims:
    cfg = cfg or CONFIG
    rows, cols, cell = int(cfg["ROWS"]), int(cfg["COLS"]), int(cfg["CELL_SIZE"])
    margin = 16
    panel_w = panel_width()
    board_w, board_h = cols * cell, rows * cell
    # tall enough for the legend, never shorter than the board
    panel_h = max(board_h, 80 + (len(CONTROLS) + 1) * LINE_H + PAD)

    board_x = board_y = panel_y = margin
    panel_x = board_x + board_w + margin
    return Dims(
        rows=rows, cols=cols, cell=cell, margin=margin, panel_w=panel_w, panel_h=panel_h,
        board_w=board_w, board_h=board_h,
        total_w=panel_x + panel_w + margin,
        total_h=margin + panel_h + margin,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
