
"""Board grid plus collision, kicks and drop probing"""
import logging
from typing import Iterable, List, Tuple

from tetris_piece import ActivePiece, rotate_offsets

logger = logging.getLogger(__name__)


class Board:
    """rows x cols occupancy grid, row 0 at the top."""

    def __init__(self, rows: int, cols: int):
        self.rows, self.cols = rows, cols
        self.cells: List[List[bool]] = [[False] * cols for _ in range(rows)]

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def is_occupied(self, x: int, y: int) -> bool:
        return self.cells[y][x]

    def lock(self, cells: Iterable[Tuple[int, int]]) -> None:
        for x, y in cells:
            self.cells[y][x] = True

    def is_full(self, y: int) -> bool:
        return all(self.cells[y])

    def full_rows(self) -> List[int]:
        return [y for y in range(self.rows) if self.is_full(y)]

    def clear_row(self, y: int) -> None:
        """Drop row y; everything above it moves down one row."""
        del self.cells[y]
        self.cells.insert(0, [False] * self.cols)


def is_legal(board: Board, piece: ActivePiece) -> bool:
    for x, y in piece.cells():
        if not board.is_inside(x, y) or board.is_occupied(x, y):
            return False
    return True


def try_move(board: Board, piece: ActivePiece, dx: int, dy: int) -> bool:
    """Shift the piece in place if the target is legal; leave it untouched otherwise."""
    piece.x += dx; piece.y += dy
    if is_legal(board, piece):
        return True
    piece.x -= dx; piece.y -= dy
    return False


def try_rotate(board: Board, piece: ActivePiece, clockwise: bool = True,
               wall_kick: bool = True, floor_kick: bool = True) -> bool:
    """Rotate in place, kicking right, then left, then up when blocked.

    The first legal position wins. When none is legal the piece keeps its
    original offsets and anchor.
    """
    saved = list(piece.offsets)
    piece.offsets = rotate_offsets(piece.t, piece.offsets, clockwise)
    if is_legal(board, piece):
        return True
    if wall_kick:
        for dx in (1, -1):
            piece.x += dx
            if is_legal(board, piece):
                logger.debug("wall kick %+d for %s", dx, piece.t.value)
                return True
            piece.x -= dx
    if floor_kick:
        piece.y -= 1
        if is_legal(board, piece):
            logger.debug("floor kick for %s", piece.t.value)
            return True
        piece.y += 1
    piece.offsets = saved
    return False


def drop_row(board: Board, piece: ActivePiece) -> int:
    """Return the deepest row the piece can fall to from where it is."""
    test = piece.copy()
    while is_legal(board, test):
        test.y += 1
    return test.y - 1
