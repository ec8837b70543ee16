import logging

from tetris_sim.game.config import BoardConfig
from tetris_sim.game.errors import HeightLimitExceeded, NullOrMissingInput

logger = logging.getLogger(__name__)


class Board:
    """Stack of row bitmasks, row 0 at the bottom. Bit c of a row is column c."""

    def __init__(self, config=None):
        self.config = config or BoardConfig()
        self.width = self.config.width
        self.grid = []

    def height(self):
        # Saklanan uzunluk değil, içerik belirler
        for i in range(len(self.grid) - 1, -1, -1):
            if self.grid[i]:
                return i + 1
        return 0

    def is_empty(self):
        return self.height() == 0

    def collides(self, rows, y):
        if y < 0:
            return True
        for dy, mask in rows.items():
            row_idx = y + dy
            if row_idx < len(self.grid) and self.grid[row_idx] & mask:
                return True
        return False

    def resting_row(self, rows):
        """Lowest row the masks can rest on, searching down from the top of the stack."""
        y = self.height()
        while y > 0 and not self.collides(rows, y - 1):
            y -= 1
        return y

    def place(self, rows, y):
        top = y + max(rows)
        while len(self.grid) <= top:
            self.grid.append(0)
        for dy, mask in rows.items():
            self.grid[y + dy] |= mask

    def drop_rows(self, rows):
        """Drop a {dy: mask} shape as a rigid unit and return the row it landed on."""
        if not rows:
            raise NullOrMissingInput("Nothing to drop")
        y = self.resting_row(rows)
        top = y + max(rows)
        if top >= self.config.max_height:
            raise HeightLimitExceeded(
                f"Block at row {top} reaches the height limit of {self.config.max_height}")
        self.place(rows, y)
        return y

    def drop(self, piece, x):
        if piece is None:
            raise NullOrMissingInput("Piece cannot be None")
        if x is None:
            raise NullOrMissingInput(f"Column missing for piece {piece}")
        rows = piece.build_row_masks(x, self.width)
        y = self.drop_rows(rows)
        logger.debug("%s at x=%d landed on row %d", piece, x, y)
        return y

    def clear_lines(self):
        full = self.config.full_row_mask
        kept = [row for row in self.grid if row != full]
        lines_cleared = len(self.grid) - len(kept)
        while kept and not kept[-1]:
            kept.pop()
        self.grid = kept
        if lines_cleared:
            logger.debug("Cleared %d line(s), height now %d", lines_cleared, self.height())
        return lines_cleared

    def islands(self):
        """4-connected groups of occupied cells, discovered top row first, left to right."""
        snapshot = self.grid[:self.height()]
        visited = set()
        found = []
        for r in range(len(snapshot) - 1, -1, -1):
            for c in range(self.width):
                if not snapshot[r] >> c & 1 or (r, c) in visited:
                    continue
                island = []
                stack = [(r, c)]
                visited.add((r, c))
                while stack:
                    cr, cc = stack.pop()
                    island.append((cr, cc))
                    for nr, nc in ((cr + 1, cc), (cr - 1, cc), (cr, cc + 1), (cr, cc - 1)):
                        if (0 <= nr < len(snapshot) and 0 <= nc < self.width
                                and snapshot[nr] >> nc & 1 and (nr, nc) not in visited):
                            visited.add((nr, nc))
                            stack.append((nr, nc))
                found.append(island)
        return found

    def resettle(self):
        """Re-drop every island as a rigid unit so nothing floats. Returns the island count."""
        islands = self.islands()
        # Tüm adalar yerleşene kadar canlı tahtaya dokunma
        settled = Board(self.config)
        for island in islands:
            min_row = min(r for r, _ in island)
            rows = {}
            for r, c in island:
                rows[r - min_row] = rows.get(r - min_row, 0) | (1 << c)
            settled.drop_rows(rows)
        self.grid = settled.grid
        logger.debug("Resettled %d island(s), height now %d", len(islands), self.height())
        return len(islands)

    def get_grid_state(self):
        return tuple(self.grid[:self.height()])

    def copy(self):
        board = Board(self.config)
        board.grid = self.grid[:]
        return board

    def __str__(self):
        height = self.height()
        if height == 0:
            return "(empty)"
        label = len(str(height - 1))
        lines = []
        for r in range(height - 1, -1, -1):
            cells = "".join("#" if self.grid[r] >> c & 1 else "." for c in range(self.width))
            lines.append(f"{r:>{label}}: {cells}")
        return "\n".join(lines)
