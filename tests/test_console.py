import io
import unittest
from unittest import mock

from tictactoe_nxn import console
from tictactoe_nxn.errors import MALFORMED, InvalidMove
from tictactoe_nxn.game_logic import DRAW, WIN, new_game

TOP_ROW_WIN = ["0 0", "1 1", "0 1", "2 2", "0 2"]
DRAW_MOVES = ["0 0", "0 1", "0 2", "1 0", "1 2", "1 1", "2 0", "2 2", "2 1"]


def run_with(inputs, func=console.run):
    """feed inputs to func, return (result, stdout text, prompts shown)"""
    with mock.patch("builtins.input", side_effect=inputs) as fake_input, \
            mock.patch("sys.stdout", new_callable=io.StringIO) as out:
        result = func()
    prompts = [call.args[0] for call in fake_input.call_args_list]
    return result, out.getvalue(), prompts


class TestParsing(unittest.TestCase):
    def test_board_size(self) -> None:
        self.assertEqual(console.parse_board_size(" 15 "), 15)
        for bad in ["2", "16", "abc", ""]:
            with self.assertRaises(ValueError):
                console.parse_board_size(bad)

    def test_move(self) -> None:
        self.assertEqual(console.parse_move("1 2"), (1, 2))
        self.assertEqual(console.parse_move("  0\t1 "), (0, 1))
        self.assertEqual(console.parse_move("2,0"), (2, 0))
        self.assertEqual(console.parse_move("-1 4"), (-1, 4))

    def test_bad_move_text(self) -> None:
        for bad in ["", "1", "1 2 3", "a b", "1 x"]:
            with self.assertRaises(InvalidMove) as ctx:
                console.parse_move(bad)
            self.assertEqual(ctx.exception.reason, MALFORMED)


class TestPlayRound(unittest.TestCase):
    def test_invalid_inputs_reprompt_same_player(self) -> None:
        game = new_game(3, ["Alice", "Bob"])
        inputs = ["5 5", "hello", "0 0", "0 0"] + TOP_ROW_WIN[1:]
        result, out, prompts = run_with(inputs, lambda: console.play_round(game))
        self.assertEqual(result, WIN)
        self.assertIn("Invalid move! Try again. (out of bounds)", out)
        self.assertIn(f"Invalid move! Try again. ({MALFORMED})", out)
        self.assertIn("Invalid move! Try again. (occupied)", out)
        self.assertEqual(prompts[:4], ["Alice's turn (X). Enter row and column: "] * 3
                         + ["Bob's turn (O). Enter row and column: "])
        self.assertTrue(out.rstrip().endswith("Alice wins!"))

    def test_huge_row_is_out_of_bounds(self) -> None:
        game = new_game(3, ["Alice", "Bob"])
        inputs = ["99999999999 0"] + TOP_ROW_WIN
        result, out, prompts = run_with(inputs, lambda: console.play_round(game))
        self.assertEqual(result, WIN)
        self.assertIn("Invalid move! Try again. (out of bounds)", out)
        self.assertEqual(prompts[:2], ["Alice's turn (X). Enter row and column: "] * 2)

    def test_draw(self) -> None:
        game = new_game(3)
        result, out, _ = run_with(DRAW_MOVES, lambda: console.play_round(game))
        self.assertEqual(result, DRAW)
        self.assertIn("It's a draw!", out)
        # initial board plus one per accepted move
        self.assertEqual(out.count("  ---+---+---\n"), 2 * 10)


class TestRun(unittest.TestCase):
    def test_single_game(self) -> None:
        inputs = ["3", "Alice", ""] + TOP_ROW_WIN + ["n"]
        code, out, prompts = run_with(inputs)
        self.assertEqual(code, console.EXIT_OK)
        self.assertEqual(prompts[:3], [
            "Enter board size (3-15): ",
            "Enter name for player X [Player 1]: ",
            "Enter name for player O [Player 2]: ",
        ])
        self.assertIn("Notification: 3x3 game started, Alice vs Player 2", out)
        self.assertIn("Alice wins!", out)
        self.assertIn("Score: Alice (X) 1, Player 2 (O) 0", out)
        self.assertIn("Thanks for playing!", out)

    def test_rematch_keeps_score(self) -> None:
        inputs = ["3", "", ""] + TOP_ROW_WIN + ["y"] + DRAW_MOVES + ["no"]
        code, out, prompts = run_with(inputs)
        self.assertEqual(code, console.EXIT_OK)
        self.assertIn("Notification: new round started", out)
        self.assertIn("It's a draw!", out)
        self.assertTrue(out.rstrip().endswith(
            "Score: Player 1 (X) 1, Player 2 (O) 0\nThanks for playing!"))
        # X opens the second round too
        self.assertEqual(prompts[9], "Player 1's turn (X). Enter row and column: ")

    def test_bad_board_size(self) -> None:
        for size in ["2", "16", "big"]:
            code, out, prompts = run_with([size])
            self.assertEqual(code, console.EXIT_BAD_SETUP)
            self.assertIn("Board size must be between 3 and 15.", out)
            self.assertEqual(len(prompts), 1)

    def test_large_board(self) -> None:
        moves = ["0 0", "1 0", "0 1", "1 1", "0 2", "1 2", "0 3"]
        code, out, _ = run_with(["4", "A", "B"] + moves + [""])
        self.assertEqual(code, console.EXIT_OK)
        self.assertIn("A wins!", out)


class TestMain(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("logging.basicConfig")
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_ctrl_c(self) -> None:
        code, out, _ = run_with(["3", "", "", KeyboardInterrupt()], console.main)
        self.assertEqual(code, console.EXIT_INTERRUPTED)
        self.assertIn("Game interrupted.", out)

    def test_end_of_input(self) -> None:
        code, out, _ = run_with(["3", EOFError()], console.main)
        self.assertEqual(code, console.EXIT_NO_INPUT)
        self.assertIn("Game interrupted.", out)


if __name__ == "__main__":
    unittest.main()
