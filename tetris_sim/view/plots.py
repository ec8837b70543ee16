import logging

import matplotlib

matplotlib.use('Agg')
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

logger = logging.getLogger(__name__)


def save_height_plot(heights, path, title='Final Height per Line'):
    """Bar chart of the final stack height of every input line."""
    heights = np.asarray(heights, dtype=int)
    lines = np.arange(1, len(heights) + 1)

    plt.style.use('dark_background')
    plt.figure(figsize=(12, 6))
    plt.bar(lines, heights, color='cyan', alpha=0.6, label='Each Line')
    if len(heights):
        plt.axhline(float(np.mean(heights)), color='magenta', linewidth=2,
                    label=f'Average ({np.mean(heights):.1f})')
    plt.title(title, pad=20)
    plt.xlabel('Input Line')
    plt.ylabel('Height')
    plt.legend()
    plt.grid(True, alpha=0.2)
    plt.savefig(str(path), bbox_inches='tight', dpi=100)
    plt.close()
    logger.info("Height plot saved to %s", path)
    return path
