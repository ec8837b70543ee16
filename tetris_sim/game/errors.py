class TetrisError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidPiece(TetrisError, ValueError):
    """Unknown or malformed piece letter."""


class InvalidToken(InvalidPiece):
    """A drop token that does not match <letter><column>."""


class InvalidPlacement(TetrisError, ValueError):
    """Column cannot hold the piece."""


class OutOfBounds(InvalidPlacement):
    pass


class HeightLimitExceeded(TetrisError):
    """The stack grew past the configured max height. Fatal for the session."""


class NullOrMissingInput(TetrisError, ValueError):
    pass
