
"""Held-key repeat controller"""
from typing import Optional

PIECE_ACTIONS = ("L", "R", "SD", "HD", "SL", "SR")
CONTROL_ACTIONS = ("Pause", "Continue", "Start")
ACTIONS = PIECE_ACTIONS + CONTROL_ACTIONS


class KeyRepeat:
    """Tracks one held action and when it is next due.

    press() starts the clock, due() reports (and consumes) each elapsed
    repeat interval, release() hands back the action one final time.
    """
    def __init__(self, interval_ms: float):
        self.interval = interval_ms
        self.reset()

    def reset(self):
        self.action: Optional[str] = None; self.held = False; self.last = 0.0

    def press(self, action: str, now: float):
        self.action = action; self.held = True; self.last = now

    def due(self, now: float) -> bool:
        if not self.held or now - self.last < self.interval:
            return False
        self.last += self.interval
        return True

    def release(self) -> Optional[str]:
        action = self.action if self.held else None
        self.held = False
        return action
