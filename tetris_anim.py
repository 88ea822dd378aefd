
"""Animation cursor and the drawing contract the game session talks to"""
from typing import Callable, List, Optional, Protocol, Tuple

from tetris_piece import ActivePiece


class Animation:
    """A timed effect advanced one frame at a time by its owner.

    The first advance() pins the start time; each call draws the frame for
    the given timestamp through `on_frame(progress)` with progress in [0, 1]
    and returns True once `duration` ms have elapsed.
    """
    def __init__(self, duration: float, on_frame: Optional[Callable[[float], None]] = None):
        self.duration = duration
        self.on_frame = on_frame
        self.start: Optional[float] = None
        self.done = False

    def advance(self, now: float) -> bool:
        if self.done:
            return True
        if self.start is None:
            self.start = now
        elapsed = now - self.start
        progress = 1.0 if self.duration <= 0 else min(elapsed / self.duration, 1.0)
        if self.on_frame:
            self.on_frame(progress)
        self.done = elapsed >= self.duration
        return self.done


class Renderer(Protocol):
    def draw_background(self) -> None: ...

    def draw_piece(self, piece: ActivePiece, erase: bool = False) -> None: ...

    def play_clear_row(self, row: int) -> Animation: ...

    def play_hard_drop(self, piece: ActivePiece, target_row: int, duration: float) -> Animation: ...


class HeadlessRenderer:
    """Draws nothing; keeps a log of what it was asked to draw."""

    def __init__(self, clear_row_ms: float = 200):
        self.clear_row_ms = clear_row_ms
        self.calls: List[Tuple] = []

    def draw_background(self):
        self.calls.append(("background",))

    def draw_piece(self, piece, erase=False):
        self.calls.append(("piece", piece.t, piece.x, piece.y, erase))

    def play_clear_row(self, row):
        self.calls.append(("clear_row", row))
        return Animation(self.clear_row_ms)

    def play_hard_drop(self, piece, target_row, duration):
        self.calls.append(("hard_drop", piece.t, piece.y, target_row, duration))
        return Animation(duration)
