from dataclasses import dataclass


BOARD_WIDTH = 10
MAX_HEIGHT = 1000


@dataclass(frozen=True)
class BoardConfig:
    width: int = BOARD_WIDTH
    max_height: int = MAX_HEIGHT  # satır indeksi bu değere ulaşırsa hata

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"Board width must be positive: {self.width}")
        if self.max_height <= 0:
            raise ValueError(f"Max height must be positive: {self.max_height}")

    @property
    def full_row_mask(self):
        return (1 << self.width) - 1
