
"""Piece catalog, active piece, spawning and rotation"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

Offset = Tuple[int, int]


class PieceType(Enum):
    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Spawn orientation, (dx, dy) with dy growing downwards
BASE_OFFSETS: Dict[PieceType, Tuple[Offset, ...]] = {
    PieceType.I: ((0, 0), (1, 0), (2, 0), (3, 0)),
    PieceType.O: ((0, 0), (0, 1), (1, 0), (1, 1)),
    PieceType.T: ((1, 0), (0, 1), (1, 1), (2, 1)),
    PieceType.S: ((0, 1), (1, 1), (1, 0), (2, 0)),
    PieceType.Z: ((0, 0), (1, 0), (1, 1), (2, 1)),
    PieceType.J: ((0, 1), (1, 1), (2, 1), (2, 0)),
    PieceType.L: ((0, 0), (0, 1), (1, 1), (2, 1)),
}

PIVOTS: Dict[PieceType, Tuple[float, float]] = {
    PieceType.I: (2, 1),
    PieceType.O: (1, 1),
    PieceType.T: (1.5, 1.5),
    PieceType.S: (1.5, 1.5),
    PieceType.Z: (1.5, 1.5),
    PieceType.J: (1.5, 1.5),
    PieceType.L: (1.5, 1.5),
}


@dataclass
class ActivePiece:
    t: PieceType
    x: int
    y: int
    offsets: List[Offset] = field(default_factory=list)

    def cells(self) -> List[Offset]:
        return [(self.x + dx, self.y + dy) for dx, dy in self.offsets]

    def copy(self) -> "ActivePiece":
        return ActivePiece(self.t, self.x, self.y, list(self.offsets))


def spawn(rng: random.Random, cols: int) -> ActivePiece:
    """New piece of a random type at row 0, in a random column of [0, cols-3)."""
    t = rng.choice(list(PieceType))
    x = rng.randrange(cols - 3)
    return ActivePiece(t, x, 0, list(BASE_OFFSETS[t]))


def rotate_offsets(t: PieceType, offsets: List[Offset], clockwise: bool = True) -> List[Offset]:
    """Rotate offsets a quarter turn about the pivot of `t`.

    Each cell is first biased half a turn's worth towards the rotation
    direction ((x, y+1) clockwise, (x+1, y) counter-clockwise) and then
    rotated about the pivot. The bias keeps every shape centred in its box
    and makes the result integral for the half-integer pivots.
    """
    cx, cy = PIVOTS[t]
    out = []
    for x, y in offsets:
        if clockwise:
            x, y = x - cx, y + 1 - cy
            x, y = -y, x
        else:
            x, y = x + 1 - cx, y - cy
            x, y = y, -x
        out.append((int(x + cx), int(y + cy)))
    return out
