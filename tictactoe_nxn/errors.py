OUT_OF_BOUNDS = "out of bounds"
OCCUPIED = "occupied"
GAME_OVER = "game over"
MALFORMED = "expected two numbers, row and column"


class GameError(Exception):
    """Raised for moves the game cannot take."""


class InvalidMove(GameError):
    """
    rejected move, reason is one of the module constants
    """
    def __init__(self, reason, row=None, col=None):
        super().__init__(reason)
        self.reason = reason
        self.row = row
        self.col = col
