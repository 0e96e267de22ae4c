import logging
import os

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

MIN_BOARD_SIZE = 3
MAX_BOARD_SIZE = 15
DEFAULT_BOARD_SIZE = 3

# -----------------------------------------------------------------------------
# PLAYERS
# -----------------------------------------------------------------------------

DEFAULT_MARKS = ('X', 'O')                    # X always moves first
DEFAULT_NAMES = ('Player 1', 'Player 2')
EXTRA_MARKS = ('A', 'B', 'C', 'D', 'E', 'F')  # only for scan-rule games

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level():
    """
    level name from the environment, falls back to WARNING on junk
    """
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level
