"""Checks that a map grid is playable."""

from solong import errors
from solong.errors import SoLongError

BASE_CHARS = "01CEP"
BONUS_CHARS = "01CEPV"
BASE_BLOCKERS = "1"
BONUS_BLOCKERS = "1V"
_MUST_REACH = "PCE"


def has_empty_line(text):
    """Return True if the text contains two consecutive newlines."""
    return "\n\n" in text


def check_map_chars(row, allowed=BASE_CHARS):
    """Return True if every character of the row is allowed."""
    return all(ch in allowed for ch in row)


def check_shape(rows):
    """Return True if every row is as wide as the first."""
    if not rows:
        return True
    width = len(rows[0])
    return all(len(row) == width for row in rows)


def check_border(rows):
    """Return True if the map is surrounded by walls."""
    if not rows or not rows[0]:
        return False
    if any(ch != "1" for ch in rows[0]) or any(ch != "1" for ch in rows[-1]):
        return False
    return all(row and row[0] == "1" and row[-1] == "1" for row in rows)


def count_items(rows, item):
    """Count how many times item appears in the grid."""
    return sum(row.count(item) for row in rows)


def flood_fill(rows, start, blockers=BASE_BLOCKERS):
    """Return a copy of the grid with every cell reachable from start set to '1'."""
    grid = [list(row) for row in rows]
    stack = [tuple(start)]
    while stack:
        r, c = stack.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        cell = grid[r][c]
        if cell == "1" or cell in blockers:
            continue
        grid[r][c] = "1"
        stack.extend(((r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)))
    return ["".join(row) for row in grid]


def path_is_clear(rows, start, blockers=BASE_BLOCKERS):
    """Return True if the player, every collectable and the exit are all reachable."""
    filled = flood_fill(rows, start, blockers)
    return not any(ch in _MUST_REACH for row in filled for ch in row)


def _find(rows, item):
    found = None
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == item:
                found = (r, c)
    return found


def validate_map(rows, bonus=False):
    """Raise SoLongError with the first problem found in the map."""
    rows = list(rows)
    allowed = BONUS_CHARS if bonus else BASE_CHARS
    if not all(check_map_chars(row, allowed) for row in rows):
        raise SoLongError(errors.W_CHAR if bonus else errors.BAD_CHAR)
    if not check_shape(rows):
        raise SoLongError(errors.NOT_SQUARE)
    if not check_border(rows):
        raise SoLongError(errors.BORDER_WRONG)
    if count_items(rows, "C") == 0:
        raise SoLongError(errors.COLLECTABLE)
    players = count_items(rows, "P")
    if players < 1:
        raise SoLongError(errors.PERSONAGE)
    if players > 1:
        raise SoLongError(errors.EXTRA_PERS)
    exits = count_items(rows, "E")
    if exits < 1:
        raise SoLongError(errors.EXIT)
    if exits > 1:
        raise SoLongError(errors.EXTRA_EXIT)
    blockers = BONUS_BLOCKERS if bonus else BASE_BLOCKERS
    if not path_is_clear(rows, _find(rows, "P"), blockers):
        raise SoLongError(errors.PATH_ERROR)