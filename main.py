import argparse
import logging
import sys

from tetris_sim.game.errors import TetrisError
from tetris_sim.game.features import board_features
from tetris_sim.game.tetris import Tetris
from tetris_sim.io.parser import parse_line
from tetris_sim.view.draw import save_board_image
from tetris_sim.view.plots import save_height_plot

logger = logging.getLogger("tetris_sim")


class Simulation:
    """Runs every input line as an independent game and collects the heights."""

    def __init__(self, resettle=False, stats=False):
        self.resettle = resettle
        self.stats = stats
        self.heights = []
        self.last_board = None

    def run_line(self, line):
        line = line.strip()
        if not line:
            return 0
        game = Tetris(resettle=self.resettle)
        height = game.play(parse_line(line))
        if not game.board.is_empty():
            self.last_board = game.board
        if self.stats:
            logger.info("Stats: %s", board_features(game.board))
        return height

    def run(self, lines, out):
        for number, line in enumerate(lines, start=1):
            logger.debug("Input line %d: %s", number, line.rstrip("\n"))
            try:
                height = self.run_line(line)
            except TetrisError as e:
                raise TetrisError(f"line {number}: {e}") from e
            self.heights.append(height)
            out.write(f"{height}\n")
        logger.info("Processed %d line(s)", len(self.heights))
        return self.heights

    def save_board(self, path):
        if self.last_board is None:
            logger.warning("No non-empty board to render")
            return None
        return save_board_image(self.last_board, path)

    def save_graphs(self, path):
        return save_height_plot(self.heights, path)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Rotation-free Tetris height simulator")
    p.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin,
                   help="file with one comma-separated drop sequence per line (default: stdin)")
    p.add_argument("-o", "--output", type=argparse.FileType("w"), default=sys.stdout,
                   help="where to write one height per line (default: stdout)")
    p.add_argument("--resettle", action="store_true",
                   help="re-drop floating islands after every line clear")
    p.add_argument("--stats", action="store_true",
                   help="log column heights, holes and bumpiness of every board")
    p.add_argument("--render", metavar="PNG", help="save an image of the last non-empty board")
    p.add_argument("--plot", metavar="PNG", help="save a chart of the height of every line")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    sim = Simulation(resettle=args.resettle, stats=args.stats)
    try:
        sim.run(args.input, args.output)
    except TetrisError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        args.output.flush()
        if args.output is not sys.stdout:
            args.output.close()
        if args.input is not sys.stdin:
            args.input.close()

    if args.render:
        sim.save_board(args.render)
    if args.plot:
        sim.save_graphs(args.plot)
    return 0


if __name__ == "__main__":
    sys.exit(main())
