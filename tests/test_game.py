import pytest

from solong.game import Direction, Game
from solong.mapfile import GameMap, Position


def make(rows, bonus=False):
    return Game(GameMap.from_rows(rows), bonus)


OPEN_ROOM = [
    "1111111",
    "1000001",
    "100P001",
    "1000001",
    "1CE0001",
    "1111111",
]


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, Position(1, 3)),
        (Direction.DOWN, Position(3, 3)),
        (Direction.LEFT, Position(2, 2)),
        (Direction.RIGHT, Position(2, 4)),
    ],
)
def test_direction_moves_personage(direction, expected):
    game = make(OPEN_ROOM)
    assert game.move(direction)
    assert game.map.personage == expected
    assert game.grid[expected.x][expected.y] == "P"
    assert game.grid[2][3] == "0"
    assert game.count_mov == 1


def test_collect_then_win(capsys):
    game = make(["11111", "1PCE1", "11111"])
    assert game.move(Direction.RIGHT)
    assert game.map.box_to_collect == 0
    assert game.exit_status
    assert game.player_collectables == 1
    assert game.move(Direction.RIGHT)
    assert game.won
    assert not game.running
    assert game.map.personage == Position(1, 3)
    out = capsys.readouterr().out
    assert "Box Coletadas:1" in out
    assert "You Win!!!." in out


def test_blocked_move_does_not_count(capsys):
    game = make(["11111", "1PCE1", "11111"])
    assert not game.move(Direction.UP)
    assert game.count_mov == 0
    assert game.map.personage == Position(1, 1)
    assert "Movimentos: 0" in capsys.readouterr().out


def test_leaving_exit_restores_it():
    game = make(["111111", "1PEC01", "111111"])
    game.move(Direction.RIGHT)
    assert not game.won
    assert game.grid[1][2] == "P"
    game.move(Direction.RIGHT)
    assert game.grid[1][2] == "E"
    assert game.grid[1][1] == "0"
    game.move(Direction.LEFT)
    assert game.won
    assert game.count_mov == 3


def test_collect_only_once():
    game = make(["11111", "1PCE1", "11111"])
    assert game.collect(1, 2)
    assert not game.collect(1, 2)
    assert game.player_collectables == 1


def test_exit_stays_closed_while_boxes_remain():
    game = make(["111111", "1PCC01", "1E0001", "111111"])
    game.collect(1, 2)
    assert not game.exit_status
    assert not game.exit_visible
    game.collect(1, 3)
    assert game.exit_status


def test_no_moves_after_win():
    game = make(["11111", "1PCE1", "11111"])
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    moves = game.count_mov
    assert not game.move(Direction.LEFT)
    assert game.count_mov == moves


def test_bonus_enemy_kills_and_stops_play():
    game = make(["111111", "1PVCE1", "111111"], bonus=True)
    assert game.move(Direction.RIGHT)
    assert game.dead
    assert not game.game_status
    assert game.running
    count = game.count_mov
    assert not game.move(Direction.RIGHT)
    assert game.count_mov == count


def test_bonus_facing_changes_even_when_blocked():
    game = make(["11111", "1PCE1", "11111"], bonus=True)
    assert not game.move(Direction.LEFT)
    assert game.facing == Direction.LEFT
    assert game.count_mov == 0
    game.move(Direction.DOWN)
    assert game.facing == Direction.LEFT


def test_bonus_win_keeps_window_open(capsys):
    game = make(["11111", "1PCE1", "11111"], bonus=True)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.won
    assert not game.game_status
    assert game.running
    assert "You win!" in capsys.readouterr().out


def test_bonus_leaves_floor_behind():
    game = make(["111111", "1P0CE1", "111111"], bonus=True)
    game.move(Direction.RIGHT)
    assert game.grid[1][1] == "0"
    assert game.map.personage == Position(1, 2)
    assert game.count_mov == 1