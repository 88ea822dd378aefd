from __future__ import annotations

import os

import pytest

# pygame must never try to open a real window under test
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from tetris_board import Board
from tetris_config import load_config
from tetris_game import Phase, Session
from tetris_piece import BASE_OFFSETS, ActivePiece, PieceType


@pytest.fixture()
def board() -> Board:
    return Board(20, 10)


@pytest.fixture()
def session() -> Session:
    s = Session(config=load_config(SEED=7))
    s.start(0)
    return s


@pytest.fixture()
def place():
    """Put a piece of the given type straight into a running session as the falling piece."""

    def _place(s: Session, t: PieceType, x: int, y: int, now: float = 0) -> ActivePiece:
        s.piece = ActivePiece(t, x, y, list(BASE_OFFSETS[t]))
        s.phase = Phase.FALLING
        s.now = s.last_fall = now
        return s.piece

    return _place


def fill_row(board: Board, y: int, skip: tuple = ()) -> None:
    for x in range(board.cols):
        if x not in skip:
            board.cells[y][x] = True
