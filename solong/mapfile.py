"""Reading map files and describing the map they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from solong import errors
from solong.errors import SoLongError
from solong.validation import count_items, has_empty_line, validate_map

BUFFER_SIZE = 10000
MAP_EXTENSION = ".ber"

NO_ARGUMENT = "ERROR! you need to pass the map file as a argument."
TOO_MANY_ARGUMENTS = "ERROR! you had surpassed the number of arguments."
WRONG_EXTENSION = "ERROR! the map must be a archive .ber"


@dataclass(frozen=True)
class Position:
    """A cell of the grid: x is the row, y the column."""

    x: int
    y: int


@dataclass
class GameMap:
    """A map grid together with the facts the game needs about it."""

    grid: list[list[str]]
    width: int
    height: int
    box_to_collect: int
    personage: Position | None
    exit: Position | None
    enemy: Position | None = None
    count_enemies: int = 0
    _source: tuple[str, ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def from_rows(cls, rows):
        """Build a map from its rows of text."""
        rows = list(rows)
        if not rows:
            raise SoLongError(errors.EMPTY_MAP)
        return cls(
            grid=[list(row) for row in rows],
            width=len(rows[0]),
            height=len(rows),
            box_to_collect=count_items(rows, "C"),
            personage=find_item(rows, "P"),
            exit=find_item(rows, "E"),
            enemy=find_item(rows, "V"),
            count_enemies=count_items(rows, "V"),
            _source=tuple(rows),
        )

    @property
    def rows(self):
        """The current grid as a list of strings."""
        return ["".join(row) for row in self.grid]

    @property
    def original_rows(self):
        """The rows the map was built from."""
        return list(self._source)


def find_item(rows, item):
    """Return the position of the last occurrence of item, or None."""
    found = None
    for x, row in enumerate(rows):
        for y, ch in enumerate(row):
            if ch == item:
                found = Position(x, y)
    return found


def check_arguments(args):
    """Check the command-line arguments and return the map path."""
    args = list(args)
    if not args:
        raise SoLongError(NO_ARGUMENT)
    if len(args) > 1:
        raise SoLongError(TOO_MANY_ARGUMENTS)
    path = str(args[0])
    if not path.endswith(MAP_EXTENSION):
        raise SoLongError(WRONG_EXTENSION)
    return path


def parse_map(text):
    """Split map text into rows, rejecting empty maps and blank lines."""
    if not text:
        raise SoLongError(errors.EMPTY_MAP)
    if has_empty_line(text):
        raise SoLongError(errors.EMPTY_LINE)
    rows = [row for row in text.split("\n") if row]
    if not rows:
        raise SoLongError(errors.EMPTY_MAP)
    return rows


def read_map(path):
    """Read a map file and return its rows."""
    try:
        with open(path, "rb") as handle:
            data = handle.read(BUFFER_SIZE)
    except OSError as exc:
        raise SoLongError(errors.OPEN_FILE) from exc
    return parse_map(data.decode("latin-1"))


def load_map(path, bonus=False):
    """Read, describe and validate a map file."""
    rows = read_map(path)
    game_map = GameMap.from_rows(rows)
    validate_map(rows, bonus)
    return game_map