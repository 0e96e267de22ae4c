import logging

from .errors import InvalidMove, OCCUPIED, OUT_OF_BOUNDS

logger = logging.getLogger(__name__)

EMPTY = ' '


class Board:
    """
    n x n grid of marks, EMPTY where nobody played
    """
    def __init__(self, size):
        """
        init grid and move counter
        """
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self.grid = [[EMPTY for _ in range(size)] for _ in range(size)]
        self.move_count = 0              # non-empty cells

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_cell_empty(self, row, col):
        """
        true if coords valid and cell blank
        """
        if self.in_bounds(row, col):
            return self.grid[row][col] == EMPTY
        return False

    def get_cell(self, row, col):
        # None outside the grid
        if not self.in_bounds(row, col):
            return None
        return self.grid[row][col]

    def mark_cell(self, row, col, mark):
        """
        place mark on a validated cell
        raises InvalidMove if the cell was not free
        """
        if not self.in_bounds(row, col):
            raise InvalidMove(OUT_OF_BOUNDS, row, col)
        if self.grid[row][col] != EMPTY:
            raise InvalidMove(OCCUPIED, row, col)
        self.grid[row][col] = mark
        self.move_count += 1
        logger.debug("marked (%d, %d) with %r, %d/%d cells filled",
                     row, col, mark, self.move_count, self.size * self.size)

    def is_full(self):
        return self.move_count == self.size * self.size

    def rows(self):
        return [list(row) for row in self.grid]

    def columns(self):
        n = self.size
        return [[self.grid[r][c] for r in range(n)] for c in range(n)]

    def diagonal(self):
        return [self.grid[i][i] for i in range(self.size)]

    def anti_diagonal(self):
        n = self.size
        return [self.grid[i][n - 1 - i] for i in range(n)]


def render_board(board):
    """
    text layout of the board: col headers, row index prefix,
    cells split by | and ---+--- lines between rows
    """
    n = board.size
    lines = [""]
    header = "   " + "".join(f"{c}{'   ' if c < 10 else '  '}" for c in range(n))
    lines.append(header)
    separator = "  " + "+".join("---" for _ in range(n))
    for r in range(n):
        prefix = f"{r}{'  ' if r < 10 else ' '}"
        lines.append(prefix + " | ".join(board.grid[r]))
        if r + 1 < n:
            lines.append(separator)
    lines.append("")
    return "\n".join(lines)
