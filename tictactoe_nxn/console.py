import logging

from .board import render_board
from .config import (
    DEFAULT_MARKS, DEFAULT_NAMES, LOG_FORMAT, MAX_BOARD_SIZE, MIN_BOARD_SIZE, log_level
)
from .errors import InvalidMove, MALFORMED
from .events import ConsoleNotifier
from .game_logic import DRAW, INVALID, WIN, new_game

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_SETUP = 1
EXIT_NO_INPUT = 1          # stdin closed mid-session, same code as a bad setup
EXIT_INTERRUPTED = 130


def parse_board_size(text):
    """
    board size from user text, ValueError if not an int in range
    """
    try:
        size = int(text.strip())
    except ValueError:
        raise ValueError(f"not a number: {text.strip()!r}") from None
    if not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
        raise ValueError(f"{size} is outside {MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}")
    return size


def parse_move(text):
    """
    'row col' (or 'row,col') -> (row, col)
    raises InvalidMove for anything else
    """
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise InvalidMove(MALFORMED)
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise InvalidMove(MALFORMED) from None


def ask_names():
    # blank answer keeps the default
    names = []
    for mark, default in zip(DEFAULT_MARKS, DEFAULT_NAMES):
        name = input(f"Enter name for player {mark} [{default}]: ").strip()
        names.append(name or default)
    return names


def play_round(game):
    """
    run turns until win or draw, returns 'win' or 'draw'
    """
    print(render_board(game.board))
    while True:
        player = game.current_player
        line = input(f"{player.name}'s turn ({player.mark}). Enter row and column: ")
        try:
            row, col = parse_move(line)
        except InvalidMove as e:
            print(f"Invalid move! Try again. ({e.reason})")
            continue

        res = game.make_move(row, col)
        if res == INVALID:
            print(f"Invalid move! Try again. ({game.last_error})")
            continue

        print(render_board(game.board))
        if res == WIN:
            print(f"{player.name} wins!")
            return res
        if res == DRAW:
            print("It's a draw!")
            return res


def print_scores(game):
    print("Score: " + ", ".join(f"{p.name} ({p.mark}) {p.score}" for p in game.players))


def ask_play_again():
    return input("Play again? [y/N]: ").strip().lower() in ('y', 'yes')


def run():
    """
    full session: setup prompts, rounds until the players stop
    returns the process exit code
    """
    try:
        size = parse_board_size(input(f"Enter board size ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE}): "))
    except ValueError as e:
        logger.debug("bad board size: %s", e)
        print(f"Board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}.")
        return EXIT_BAD_SETUP

    game = new_game(size, ask_names())
    notifier = ConsoleNotifier(game.events)  # lives as long as the session
    game.events.notify(f"{size}x{size} game started, "
                       f"{game.players[0].name} vs {game.players[1].name}")

    while True:
        play_round(game)
        print_scores(game)
        if not ask_play_again():
            print("Thanks for playing!")
            notifier.detach(game.events)
            return EXIT_OK
        game.reset_game()


def main():
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
    try:
        return run()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        return EXIT_INTERRUPTED
    except EOFError:
        print("\nGame interrupted.")
        return EXIT_NO_INPUT
