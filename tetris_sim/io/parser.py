import logging
import re

from tetris_sim.game.config import BOARD_WIDTH
from tetris_sim.game.drop import Drop
from tetris_sim.game.errors import InvalidToken, OutOfBounds, TetrisError
from tetris_sim.game.piece import Piece

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(r"([A-Za-z]+)(-?\d+)")


def parse_token(token, board_width=BOARD_WIDTH):
    """'Q4' -> Drop(Piece.Q, 4)"""
    t = token.strip()
    match = TOKEN_RE.fullmatch(t)
    if match is None:
        raise InvalidToken(f"Malformed drop token: {token!r}")
    piece = Piece.from_letter(match.group(1))
    x = int(match.group(2))
    if x < 0 or x > board_width - piece.width:
        raise OutOfBounds(
            f"Piece {piece} at x={x} out of bounds: would exceed grid width "
            f"(piece width: {piece.width})")
    return Drop.of(piece, x)


def parse_line(line, board_width=BOARD_WIDTH):
    if line is None:
        return []
    drops = []
    for token in line.split(","):
        if not token.strip():
            continue
        drops.append(parse_token(token, board_width))
    return drops


def parse_lines(lines, board_width=BOARD_WIDTH):
    if lines is None:
        return []
    result = []
    for number, line in enumerate(lines, start=1):
        try:
            result.append(parse_line(line, board_width))
        except TetrisError as e:
            raise type(e)(f"line {number}: {e}") from e
    logger.debug("Parsed %d line(s)", len(result))
    return result


def is_valid_token_format(token):
    if token is None:
        return False
    try:
        parse_token(token)
    except TetrisError:
        return False
    return True
