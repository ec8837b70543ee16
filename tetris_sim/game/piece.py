from enum import Enum

from tetris_sim.game.config import BOARD_WIDTH
from tetris_sim.game.errors import InvalidPiece, OutOfBounds


VALID_LETTERS = frozenset({"I", "J", "L", "O", "Q", "S", "T", "Z"})


class Piece(Enum):
    """The seven tetrominoes as (dx, dy) blocks, origin at the bottom-left."""

    I = ((0, 0), (1, 0), (2, 0), (3, 0))
    Q = ((0, 0), (1, 0), (0, 1), (1, 1))
    T = ((0, 1), (1, 1), (2, 1), (1, 0))
    Z = ((1, 0), (2, 0), (0, 1), (1, 1))
    S = ((0, 0), (1, 0), (1, 1), (2, 1))
    L = ((0, 0), (0, 1), (0, 2), (1, 0))
    J = ((1, 0), (1, 1), (1, 2), (0, 0))

    # Aynı değer -> Enum bunu Q için takma ad yapar
    O = ((0, 0), (1, 0), (0, 1), (1, 1))

    def __init__(self, *blocks):
        if len(blocks) != 4:
            raise ValueError("Tetromino must have exactly 4 blocks")
        for block in blocks:
            if len(block) != 2 or block[0] < 0 or block[1] < 0:
                raise ValueError(f"Invalid block coordinate: {block}")
        self.blocks = blocks
        self.width = max(dx for dx, _ in blocks) + 1
        self.height = max(dy for _, dy in blocks) + 1

    @property
    def shape(self):
        return [list(block) for block in self.blocks]

    def build_row_masks(self, x, board_width=BOARD_WIDTH):
        """Project the piece at column x into {dy: row bitmask}."""
        if x < 0:
            raise OutOfBounds(f"X position cannot be negative: {x}")
        if x + self.width > board_width:
            raise OutOfBounds(
                f"Piece {self.name} at x={x} would exceed grid width "
                f"(piece width: {self.width})")

        rows = {}
        for dx, dy in self.blocks:
            rows[dy] = rows.get(dy, 0) | (1 << (x + dx))
        return rows

    @classmethod
    def from_letter(cls, letter):
        if letter is None:
            raise InvalidPiece("Piece letter cannot be None")
        if not isinstance(letter, str):
            raise InvalidPiece(f"Piece letter must be a string: {letter!r}")
        trimmed = letter.strip().upper()
        if not trimmed:
            raise InvalidPiece("Piece letter cannot be empty")
        if len(trimmed) != 1:
            raise InvalidPiece(f"Piece letter must be exactly one character: {letter!r}")
        if trimmed not in VALID_LETTERS:
            raise InvalidPiece(
                f"Invalid piece letter: {letter!r}. Valid pieces are: I, J, L, O/Q, S, T, Z")
        return cls[trimmed]

    def __str__(self):
        return self.name


def valid_letters():
    return VALID_LETTERS
