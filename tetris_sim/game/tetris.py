import logging

from tetris_sim.game.board import Board
from tetris_sim.game.errors import TetrisError

logger = logging.getLogger(__name__)


class Tetris:
    """One game: a board, plus whether floating islands resettle after a clear."""

    def __init__(self, resettle=False, config=None):
        self.board = Board(config)
        self._resettle = bool(resettle)
        self.lines_cleared = 0
        self.drops = 0

    @property
    def resettle_enabled(self):
        return self._resettle

    def drop(self, piece, x):
        """Drop, clear and resettle as one step. On any error the board is rolled back."""
        before = self.board.copy()
        try:
            self.board.drop(piece, x)
            cleared = self.board.clear_lines()
            total = cleared
            if self._resettle:
                # Yerleşen adalar yeni satırları doldurabilir, temizlenecek satır kalmayana kadar tekrarla
                while cleared:
                    self.board.resettle()
                    cleared = self.board.clear_lines()
                    total += cleared
        except TetrisError:
            self.board.grid = before.grid
            raise

        self.drops += 1
        self.lines_cleared += total

    def play(self, drops):
        for drop in drops:
            self.drop(drop.piece, drop.x)
        logger.debug("Played %d drop(s), %d line(s) cleared, height %d",
                     self.drops, self.lines_cleared, self.height())
        return self.height()

    def height(self):
        return self.board.height()

    def get_grid_state(self):
        return self.board.get_grid_state()

    def __str__(self):
        return str(self.board)
