
"""
Game session: one live game driven by tick(now).

The host owns a Session, forwards key presses to key_down()/key_up() and
calls tick() once per rendered frame with a millisecond timestamp. Nothing
in here schedules itself; hard-drop descents and row wipes are Animation
cursors that the session advances from tick() while gravity and input wait.

Phases:

  SPAWNING   no active piece, the next tick spawns one
  FALLING    gravity, key repeat and lock delay run
  HARD_DROP  descent animation playing, the piece snaps to its target after
  LINE_CLEAR rows are being wiped one at a time, top to bottom
  PAUSED     entered from FALLING only, Continue goes back
  GAME_OVER  a fresh piece had no room for its first step; only Start leaves
"""
import logging
import random
from enum import Enum
from typing import Any, Callable, Dict, Optional

from tetris_anim import Animation, HeadlessRenderer, Renderer
from tetris_board import Board, drop_row, try_move, try_rotate
from tetris_config import load_config, validate_config
from tetris_input import ACTIONS, CONTROL_ACTIONS, KeyRepeat
from tetris_piece import ActivePiece, spawn

logger = logging.getLogger(__name__)

MOVES = {"L": (-1, 0), "R": (1, 0), "SD": (0, 1)}


class Phase(Enum):
    SPAWNING = "spawning"
    FALLING = "falling"
    HARD_DROP = "hard_drop"
    LINE_CLEAR = "line_clear"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Session:
    def __init__(self, renderer: Optional[Renderer] = None, config: Optional[Dict[str, Any]] = None,
                 rng: Optional[random.Random] = None,
                 on_clear: Optional[Callable[[int], None]] = None):
        self.config = dict(config) if config is not None else load_config()
        self.renderer = renderer or HeadlessRenderer(self.config["CLEAR_ROW_MS"])
        self.rng = rng or random.Random(self.config["SEED"])
        self.on_clear = on_clear

        self.board: Optional[Board] = None
        self.piece: Optional[ActivePiece] = None
        self.phase = Phase.SPAWNING
        self.running = False
        self.score = 0
        self.keys = KeyRepeat(self.config["KEY_REPEAT_MS"])

        self.now = 0.0
        self.last_fall = 0.0
        self.sticky_since: Optional[float] = None
        self.anim: Optional[Animation] = None
        self.drop_target: Optional[int] = None
        self.clear_cursor = 0
        self.cleared = 0

    # ---------- lifecycle ----------
    def start(self, now: float = 0) -> None:
        """(Re)initialize board, timers and flags and begin accepting ticks."""
        cfg = self.config
        validate_config(cfg)
        self.close()
        self.board = Board(cfg["ROWS"], cfg["COLS"])
        self.phase = Phase.SPAWNING
        self.score = 0
        self.keys.reset()
        self.now = self.last_fall = now
        self.sticky_since = None
        self.drop_target = None
        self.renderer.draw_background()
        self.running = True
        logger.info("session started on a %dx%d board", cfg["COLS"], cfg["ROWS"])

    def close(self) -> None:
        if self.running:
            logger.info("session closed with score %d", self.score)
        self.running = False
        self.piece = None
        # an unfinished animation belongs to the old game; drop it
        self.anim = None

    # ---------- frame entry point ----------
    def tick(self, now: float) -> None:
        if not self.running:
            return
        self.now = now
        if self.phase in (Phase.HARD_DROP, Phase.LINE_CLEAR):
            self.last_fall = now
            self._advance_animation(now)
            return
        if self.phase in (Phase.PAUSED, Phase.GAME_OVER):
            self.last_fall = now
            return
        if self.piece is None:
            self._spawn(now)
            return

        if self.keys.due(now):
            self._apply(self.keys.action)
            if self.phase is not Phase.FALLING:
                return
        self._gravity(now)

    # ---------- input ----------
    def key_down(self, action: str, now: Optional[float] = None) -> None:
        if action not in ACTIONS:
            raise ValueError(f"unknown action {action!r}, expected one of {', '.join(ACTIONS)}")
        if now is None:
            now = self.now
        if action in CONTROL_ACTIONS:
            self._control(action, now)
            return
        self.keys.press(action, now)
        self._apply(action)

    def key_up(self) -> None:
        # a tap shorter than the repeat interval still lands once more on release
        action = self.keys.release()
        if action:
            self._apply(action)

    def _control(self, action: str, now: float) -> None:
        if action == "Start":
            self.start(now)
        elif action == "Pause" and self.running and self.phase is Phase.FALLING:
            self.phase = Phase.PAUSED
            logger.info("paused")
        elif action == "Continue" and self.phase is Phase.PAUSED:
            self.phase = Phase.FALLING
            self.last_fall = self.keys.last = now
            logger.info("resumed")

    def _apply(self, action: str) -> None:
        if not self.running or self.phase is not Phase.FALLING or self.piece is None:
            return
        piece = self.piece
        if action == "HD":
            self._hard_drop()
            return
        before = piece.copy()
        if action in MOVES:
            moved = try_move(self.board, piece, *MOVES[action])
        else:
            moved = try_rotate(self.board, piece, clockwise=action == "SR",
                               wall_kick=self.config["ALLOW_WALL_KICK"],
                               floor_kick=self.config["ALLOW_FLOOR_KICK"])
        if moved:
            self._redraw(before)
            if piece.y > before.y:
                self.sticky_since = None

    def _hard_drop(self) -> None:
        piece = self.piece
        target = drop_row(self.board, piece)
        if target <= piece.y:
            return
        duration = (target - piece.y) * self.config["HARD_DROP_MS_PER_ROW"]
        logger.debug("hard drop %s from row %d to %d", piece.t.value, piece.y, target)
        self.drop_target = target
        self.phase = Phase.HARD_DROP
        self.anim = self.renderer.play_hard_drop(piece.copy(), target, duration)

    # ---------- falling ----------
    def _spawn(self, now: float) -> None:
        piece = spawn(self.rng, self.board.cols)
        self.keys.reset()
        self.sticky_since = None
        self.last_fall = now
        self.piece = piece
        if try_move(self.board, piece, 0, 1):
            logger.debug("spawned %s at column %d", piece.t.value, piece.x)
            self.phase = Phase.FALLING
            self.renderer.draw_piece(piece)
            return
        # no room for the first step: leave it drawn where it appeared
        self.renderer.draw_piece(piece)
        self.piece = None
        self.phase = Phase.GAME_OVER
        logger.info("game over with score %d", self.score)

    def _gravity(self, now: float) -> None:
        if now - self.last_fall < self.config["GRAVITY_MS"]:
            return
        piece = self.piece
        before = piece.copy()
        if try_move(self.board, piece, 0, 1):
            self._redraw(before)
            self.last_fall = now
            self.sticky_since = None
            return
        if self.sticky_since is None:
            self.sticky_since = now
        if now - self.sticky_since >= self.config["LOCK_DELAY_MS"]:
            self._lock()

    def _lock(self) -> None:
        piece = self.piece
        self.board.lock(piece.cells())
        logger.debug("locked %s at (%d, %d)", piece.t.value, piece.x, piece.y)
        self.piece = None
        self.sticky_since = None
        self.clear_cursor = 0
        self.cleared = 0
        self._next_clear()

    def _redraw(self, before: ActivePiece) -> None:
        self.renderer.draw_piece(before, erase=True)
        self.renderer.draw_piece(self.piece)

    # ---------- animations ----------
    def _next_clear(self) -> None:
        """Continue the top-to-bottom scan; start a wipe at the next full row."""
        board = self.board
        while self.clear_cursor < board.rows:
            y = self.clear_cursor
            self.clear_cursor += 1
            if not board.is_full(y):
                continue
            board.clear_row(y)
            self.cleared += 1
            self.score += 1
            logger.debug("cleared row %d", y)
            if self.piece:
                self.renderer.draw_piece(self.piece, erase=True)
            self.phase = Phase.LINE_CLEAR
            self.anim = self.renderer.play_clear_row(y)
            return
        self.anim = None
        self.phase = Phase.FALLING if self.piece else Phase.SPAWNING
        if self.cleared and self.on_clear:
            self.on_clear(self.cleared)
        self.cleared = 0

    def _advance_animation(self, now: float) -> None:
        if self.anim is None or not self.anim.advance(now):
            return
        self.anim = None
        if self.phase is Phase.HARD_DROP:
            self.piece.y = self.drop_target
            self.drop_target = None
            self.sticky_since = None
            self.phase = Phase.FALLING
            return
        if self.piece:
            self.renderer.draw_piece(self.piece)
        self._next_clear()
