import logging

from .board import EMPTY
from .errors import OCCUPIED, OUT_OF_BOUNDS

logger = logging.getLogger(__name__)


def validate_move(board, row, col):
    """
    None if the move is playable, otherwise the rejection reason
    """
    if not board.in_bounds(row, col):
        return OUT_OF_BOUNDS
    if board.grid[row][col] != EMPTY:
        return OCCUPIED
    return None


class ScanRule:
    """
    full scan of rows, cols, diags for the mover's mark
    """
    name = "scan"

    def __init__(self, size, players):
        pass  # same signature as CounterRule, make_rule builds both

    def record(self, row, col, player):
        pass  # nothing cached, the board is the state

    def check_win(self, board, row, col, player):
        mark = player.mark
        # rows and cols
        for line in board.rows() + board.columns():
            if all(cell == mark for cell in line):
                return True
        # main diag, then anti-diag
        if all(cell == mark for cell in board.diagonal()):
            return True
        if all(cell == mark for cell in board.anti_diagonal()):
            return True
        return False


class CounterRule:
    """
    O(1) win check from per-line signed sums
    """
    name = "counter"

    def __init__(self, size, players):
        contributions = sorted(p.contribution for p in players)
        if contributions != [-1, 1]:
            raise ValueError(
                "counter rule needs exactly two players contributing +1 and -1, "
                f"got {[p.mark for p in players]}")
        self.size = size
        self.row_sums = [0] * size
        self.col_sums = [0] * size
        self.diag_sum = 0
        self.anti_diag_sum = 0

    def record(self, row, col, player):
        """
        add the mover's contribution to every line through (row, col)
        """
        c = player.contribution
        self.row_sums[row] += c
        self.col_sums[col] += c
        if row == col:
            self.diag_sum += c
        if row + col == self.size - 1:
            self.anti_diag_sum += c

    def check_win(self, board, row, col, player):
        n = self.size
        if abs(self.row_sums[row]) == n or abs(self.col_sums[col]) == n:
            return True
        # diagonals only count when this move touched them
        if row == col and abs(self.diag_sum) == n:
            return True
        if row + col == n - 1 and abs(self.anti_diag_sum) == n:
            return True
        return False


RULES = {
    ScanRule.name: ScanRule,
    CounterRule.name: CounterRule,
}


def make_rule(name, size, players):
    try:
        rule_cls = RULES[name]
    except KeyError:
        raise ValueError(f"unknown rule {name!r}, pick one of {sorted(RULES)}") from None
    logger.debug("using %s rule on %dx%d board", name, size, size)
    return rule_cls(size, players)
