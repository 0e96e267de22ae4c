import logging

from .board import Board
from .config import DEFAULT_BOARD_SIZE
from .errors import GAME_OVER
from .events import GameEvents
from .players import make_players
from .rules import CounterRule, make_rule, validate_move

logger = logging.getLogger(__name__)

# make_move results
WIN = "win"
DRAW = "draw"
CONTINUE = "continue"
INVALID = "invalid"

# turn manager states
AWAITING = "awaiting"
WON = "won"
DRAWN = "drawn"


class GameLogic:
    """
    tic-tac-toe rules and state for one n x n game
    owns the board, the win rule, the players and the event signals
    """
    def __init__(self, size=DEFAULT_BOARD_SIZE, players=None, rule=CounterRule.name):
        """
        init board, rule and turn state
        """
        self.board_size = size
        self.players = list(players) if players is not None else make_players()
        if len(self.players) < 2:
            raise ValueError("need at least two players")
        self.rule_name = rule
        self.events = GameEvents()
        self._new_round()

    def _new_round(self):
        # fresh grid + counters, X (first player) to move
        self.board = Board(self.board_size)
        self.rule = make_rule(self.rule_name, self.board_size, self.players)
        self.current_index = 0
        self.game_over = False            # flag when win/draw
        self.winner = None                # Player or None
        self.last_error = None            # reason of the last rejected move

    @property
    def current_player(self):
        return self.players[self.current_index]

    @property
    def move_count(self):
        return self.board.move_count

    @property
    def status(self):
        """
        'awaiting', 'won' or 'drawn'
        """
        if not self.game_over:
            return AWAITING
        return WON if self.winner is not None else DRAWN

    def validate(self, row, col):
        """
        None if the current player may play (row, col), else the reason
        """
        if self.game_over:
            return GAME_OVER
        return validate_move(self.board, row, col)

    def make_move(self, row, col):
        """
        place current player's mark, check result
        returns: 'win', 'draw', 'continue', or 'invalid'
        """
        reason = self.validate(row, col)
        if reason is not None:
            self.last_error = reason
            logger.debug("rejected (%d, %d) for %s: %s",
                         row, col, self.current_player.name, reason)
            self.events.move_rejected.emit(row, col, reason)
            return INVALID

        player = self.current_player
        self.last_error = None
        self.board.mark_cell(row, col, player.mark)
        self.rule.record(row, col, player)
        self.events.move_made.emit(row, col, player.mark)

        # win before draw: the last free cell can complete a line
        if self.rule.check_win(self.board, row, col, player):
            self.game_over = True
            self.winner = player
            player.score += 1
            logger.debug("%s wins after %d moves", player.name, self.move_count)
            self.events.game_finished.emit(player.name)
            return WIN
        if self.board.is_full():
            self.game_over = True
            logger.debug("draw after %d moves", self.move_count)
            self.events.game_finished.emit("")
            return DRAW

        self.current_index = (self.current_index + 1) % len(self.players)
        self.events.turn_changed.emit(self.current_player.name)
        return CONTINUE

    def reset_game(self):
        """
        clear board and reset flags, keep players and scores
        """
        self._new_round()
        self.events.notify("new round started")
        self.events.turn_changed.emit(self.current_player.name)


def new_game(size=DEFAULT_BOARD_SIZE, names=None, rule=CounterRule.name, player_count=2):
    """
    build a game with default marks, X first
    """
    return GameLogic(size, make_players(names, player_count), rule)
