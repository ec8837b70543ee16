from typing import NamedTuple

from tetris_sim.game.errors import InvalidPlacement, NullOrMissingInput
from tetris_sim.game.piece import Piece


class Drop(NamedTuple):
    """One drop command: a piece released at a 0-indexed column."""

    piece: Piece
    x: int

    @classmethod
    def of(cls, piece, x):
        if piece is None:
            raise NullOrMissingInput("Piece cannot be None")
        if x is None:
            raise NullOrMissingInput(f"Column missing for piece {piece}")
        if x < 0:
            raise InvalidPlacement(f"Column position cannot be negative: {x}")
        return cls(piece, x)

    def __str__(self):
        return f"Drop[{self.piece} at x={self.x}]"
