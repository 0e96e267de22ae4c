from .config import DEFAULT_MARKS, DEFAULT_NAMES, EXTRA_MARKS


class Player:
    """
    name, mark and signed unit contribution (+1 / -1) of one player
    contribution only matters to the counter rule
    """
    def __init__(self, name, mark, contribution=0):
        self.name = name
        self.mark = mark
        self.contribution = contribution
        self.score = 0                   # rounds won this session

    def __repr__(self):
        return f"Player({self.name!r}, {self.mark!r})"


def make_players(names=None, count=2):
    """
    build players in turn order, X first
    missing or blank names fall back to 'Player N'
    """
    marks = DEFAULT_MARKS + EXTRA_MARKS
    if not 2 <= count <= len(marks):
        raise ValueError(f"need 2 to {len(marks)} players, got {count}")
    names = list(names or [])
    players = []
    for i in range(count):
        name = names[i].strip() if i < len(names) and names[i] else ""
        if not name:
            name = DEFAULT_NAMES[i] if i < len(DEFAULT_NAMES) else f"Player {i + 1}"
        # +1 for X, -1 for O, extras never touch the counters
        contribution = (1, -1)[i] if i < 2 else 0
        players.append(Player(name, marks[i], contribution))
    return players
