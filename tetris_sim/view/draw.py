import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

logger = logging.getLogger(__name__)

BLOCK_SIZE = 30
MARGIN = 5
BACKGROUND = (0, 0, 0)
FRAME = (50, 50, 50)
BLOCK = (128, 128, 128)


def board_surface_size(board, block_size=BLOCK_SIZE):
    rows = max(board.height(), 1)
    return (board.width * block_size + 2 * MARGIN,
            rows * block_size + 2 * MARGIN)


def draw_board(surface, board, block_size=BLOCK_SIZE, color=BLOCK):
    """Draw the settled blocks, top row at the top of the surface."""
    surface.fill(BACKGROUND)
    width, height = board_surface_size(board, block_size)
    pygame.draw.rect(surface, FRAME, (0, 0, width, height))

    rows = board.get_grid_state()
    for y, mask in enumerate(reversed(rows)):
        for x in range(board.width):
            if mask >> x & 1:
                pygame.draw.rect(
                    surface,
                    color,
                    (MARGIN + x * block_size,
                     MARGIN + y * block_size,
                     block_size - 1,
                     block_size - 1)
                )


def render_board(board, block_size=BLOCK_SIZE):
    surface = pygame.Surface(board_surface_size(board, block_size))
    draw_board(surface, board, block_size)
    return surface


def save_board_image(board, path, block_size=BLOCK_SIZE):
    surface = render_board(board, block_size)
    pygame.image.save(surface, str(path))
    logger.info("Board image saved to %s", path)
    return path
