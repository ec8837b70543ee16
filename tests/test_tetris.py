import unittest

from tetris_sim.game.config import BoardConfig
from tetris_sim.game.errors import (HeightLimitExceeded, InvalidPiece,
                                    NullOrMissingInput, OutOfBounds)
from tetris_sim.game.piece import Piece
from tetris_sim.game.tetris import Tetris
from tetris_sim.io.parser import parse_line

BASIC_RESETTLE = "Q0,I2,I6,I0,I6,I6,Q2,Q4"


def run(line, resettle=False):
    return Tetris(resettle=resettle).play(parse_line(line))


class SequenceTests(unittest.TestCase):
    def test_sequences(self):
        cases = [
            ("I0", 1),
            ("I6", 1),
            ("Q0", 2),
            ("O4", 2),
            ("T0", 2),
            ("T7", 2),
            ("Z0", 2),
            ("S0", 2),
            ("L0", 3),
            ("J0", 3),
            ("Q8", 2),
            ("I0,I4,Q8", 1),
            ("Q0,Q2,Q4,Q6,Q8", 0),
            ("I0,I6,Q4", 1),
            (BASIC_RESETTLE, 3),
            ("T0,J3,L5,Z1,Q8,I0,I6,S4,T2", 7),
            ("Q0,Q0", 4),
            ("I0,I0", 2),
            ("T0,T0", 4),
        ]
        for line, expected in cases:
            with self.subTest(line=line):
                self.assertEqual(run(line), expected)

    def test_single_line_clear_leaves_q_top(self):
        game = Tetris()
        game.drop(Piece.I, 0)
        game.drop(Piece.I, 6)
        game.drop(Piece.Q, 4)
        self.assertEqual(game.height(), 1)
        self.assertEqual(game.get_grid_state(), (0b0000110000,))
        self.assertEqual(game.lines_cleared, 1)

    def test_partial_line_does_not_clear(self):
        game = Tetris()
        game.drop(Piece.I, 0)
        game.drop(Piece.I, 5)
        self.assertEqual(game.height(), 1)
        self.assertEqual(game.lines_cleared, 0)

    def test_i_pieces(self):
        game = Tetris()
        game.drop(Piece.I, 0)
        game.drop(Piece.I, 4)
        self.assertEqual(game.height(), 1)
        game.drop(Piece.I, 6)
        self.assertEqual(game.height(), 2)

    def test_counts(self):
        game = Tetris()
        game.play(parse_line(BASIC_RESETTLE))
        self.assertEqual(game.drops, 8)
        self.assertEqual(game.lines_cleared, 2)

    def test_standard_leaves_floating_blocks(self):
        game = Tetris()
        game.play(parse_line(BASIC_RESETTLE))
        self.assertEqual(game.get_grid_state(), (0b1111110011, 0b1100, 0b1100))


class ResettleModeTests(unittest.TestCase):
    def test_flag(self):
        self.assertFalse(Tetris().resettle_enabled)
        self.assertTrue(Tetris(resettle=True).resettle_enabled)

    def test_basic_resettle(self):
        self.assertEqual(run(BASIC_RESETTLE), 3)
        self.assertEqual(run(BASIC_RESETTLE, resettle=True), 1)

    def test_resettle_chains_clears(self):
        game = Tetris(resettle=True)
        game.play(parse_line(BASIC_RESETTLE))
        self.assertEqual(game.get_grid_state(), (0b1100,))
        # Q4 ile bir satır, yerleşme sonrası bir satır daha
        self.assertEqual(game.lines_cleared, 3)

    def test_no_clear_no_resettle(self):
        game = Tetris(resettle=True)
        game.drop(Piece.Q, 0)
        game.drop(Piece.Q, 8)
        game.drop(Piece.I, 2)
        game.drop(Piece.Q, 3)
        game.drop(Piece.Q, 5)
        self.assertEqual(game.height(), 3)
        self.assertEqual(game.lines_cleared, 0)

    def test_same_as_standard_when_nothing_floats(self):
        line = "T0,J3,L5,Z1,Q8,I0,I6,S4,T2"
        self.assertEqual(run(line, resettle=True), run(line))


class SessionTests(unittest.TestCase):
    def test_fresh_session_is_empty(self):
        game = Tetris()
        self.assertEqual(game.height(), 0)
        self.assertEqual(str(game), "(empty)")
        self.assertEqual(game.get_grid_state(), ())

    def test_independent_sessions(self):
        self.assertEqual(run("Q0,Q2"), 2)
        self.assertEqual(run("I0"), 1)

    def test_deterministic(self):
        first, second = Tetris(), Tetris()
        first.play(parse_line("T0,J3,L5,Z1,Q8,I0,I6,S4,T2"))
        second.play(parse_line("T0,J3,L5,Z1,Q8,I0,I6,S4,T2"))
        self.assertEqual(first.get_grid_state(), second.get_grid_state())
        self.assertEqual(first.height(), second.height())

    def test_text_rendering(self):
        game = Tetris()
        game.drop(Piece.I, 0)
        text = str(game)
        self.assertIn("#", text)
        self.assertIn(".", text)
        self.assertIn("0:", text)

    def test_grid_state_is_immutable(self):
        game = Tetris()
        game.drop(Piece.Q, 0)
        state = game.get_grid_state()
        with self.assertRaises(AttributeError):
            state.append(0)

    def test_large_sequence(self):
        line = ",".join(f"Q{i % 9}" for i in range(300))
        for resettle in (False, True):
            with self.subTest(resettle=resettle):
                height = run(line, resettle=resettle)
                self.assertGreaterEqual(height, 0)
                self.assertLessEqual(height, 600)


class ErrorTests(unittest.TestCase):
    def test_invalid_pieces(self):
        for line in ("X0", "A5", "B2"):
            with self.subTest(line=line):
                with self.assertRaises(InvalidPiece):
                    run(line)

    def test_out_of_bounds(self):
        for piece, x in ((Piece.J, 9), (Piece.I, 7), (Piece.Q, 9), (Piece.T, 8),
                         (Piece.Z, 8), (Piece.S, 8), (Piece.L, 9), (Piece.I, -1)):
            with self.subTest(piece=piece, x=x):
                with self.assertRaises(OutOfBounds):
                    Tetris().drop(piece, x)

    def test_missing_piece(self):
        with self.assertRaises(NullOrMissingInput):
            Tetris().drop(None, 0)

    def test_failed_drop_is_not_counted(self):
        game = Tetris()
        with self.assertRaises(OutOfBounds):
            game.drop(Piece.I, 7)
        self.assertEqual(game.drops, 0)

    def test_height_limit(self):
        game = Tetris(config=BoardConfig(max_height=10))
        for _ in range(5):
            game.drop(Piece.Q, 0)
        self.assertEqual(game.height(), 10)
        with self.assertRaises(HeightLimitExceeded):
            game.drop(Piece.Q, 0)
        self.assertEqual(game.height(), 10)

    def test_failed_resettle_rolls_back_drop(self):
        game = Tetris(resettle=True, config=BoardConfig(max_height=3))
        game.board.grid = [0b1111111100, 0b10101000, 0b10001000, 0b11111000]
        before = game.get_grid_state()
        with self.assertRaises(HeightLimitExceeded):
            game.drop(Piece.Q, 0)
        self.assertEqual(game.get_grid_state(), before)
        self.assertEqual(game.drops, 0)
        self.assertEqual(game.lines_cleared, 0)

    def test_session_continues_after_rollback(self):
        game = Tetris(resettle=True, config=BoardConfig(max_height=3))
        game.board.grid = [0b1111111100, 0b10101000, 0b10001000, 0b11111000]
        with self.assertRaises(HeightLimitExceeded):
            game.drop(Piece.Q, 0)
        with self.assertRaises(OutOfBounds):
            game.drop(Piece.I, 7)
        self.assertEqual(game.get_grid_state(),
                         (0b1111111100, 0b10101000, 0b10001000, 0b11111000))


if __name__ == "__main__":
    unittest.main()
