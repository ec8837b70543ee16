import numpy as np


def to_array(board):
    """Board as a (height, width) 0/1 array, top row first like a screen."""
    rows = board.get_grid_state()
    grid = np.zeros((len(rows), board.width), dtype=np.uint8)
    for i, mask in enumerate(reversed(rows)):
        for col in range(board.width):
            if mask >> col & 1:
                grid[i][col] = 1
    return grid


def column_heights(board):
    """Her sütunun yüksekliği"""
    grid = to_array(board)
    heights = []
    for col in range(board.width):
        filled = np.flatnonzero(grid[:, col])
        heights.append(len(grid) - int(filled[0]) if filled.size else 0)
    return heights


def count_holes(board):
    """Empty cells with a filled cell somewhere above them in the same column."""
    grid = to_array(board)
    holes = 0
    for col in range(board.width):
        block_found = False
        for row in range(len(grid)):
            if grid[row][col]:
                block_found = True
            elif block_found:
                holes += 1
    return holes


def bumpiness(board):
    heights = np.array(column_heights(board))
    return int(np.abs(np.diff(heights)).sum())


def board_features(board):
    heights = column_heights(board)
    return {
        'height': board.height(),
        'column_heights': heights,
        'holes': count_holes(board),
        'bumpiness': bumpiness(board),
    }
