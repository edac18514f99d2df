"""Game state and the rules for moving, collecting and finishing."""

from __future__ import annotations

from enum import Enum

from solong.mapfile import GameMap, Position

WALL = "1"
FLOOR = "0"
COLLECTABLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "V"


class Direction(Enum):
    """A step on the grid as (row offset, column offset)."""

    RIGHT = (0, 1)
    LEFT = (0, -1)
    UP = (-1, 0)
    DOWN = (1, 0)

    @property
    def row(self):
        return self.value[0]

    @property
    def col(self):
        return self.value[1]

    @property
    def horizontal(self):
        return self.value[0] == 0


class Game:
    """A running game on a map, in the base or the bonus rules."""

    def __init__(self, game_map: GameMap, bonus=False):
        self.map = game_map
        self.bonus = bonus
        self.count_mov = 0
        self.player_collectables = 0
        self.exit_status = False
        self.exit_visible = False
        self.game_status = True
        self.running = True
        self.won = False
        self.dead = False
        self.facing = Direction.RIGHT
        self.collectables = {
            Position(x, y)
            for x, row in enumerate(game_map.grid)
            for y, ch in enumerate(row)
            if ch == COLLECTABLE
        }

    @property
    def grid(self):
        return self.map.grid

    def _cell(self, x, y):
        if 0 <= x < len(self.grid) and 0 <= y < len(self.grid[x]):
            return self.grid[x][y]
        return WALL

    def move(self, direction: Direction):
        """Try to move the player one cell; return True if the player moved."""
        if not self.game_status:
            return False
        if self.bonus and direction.horizontal:
            self.facing = direction
        old = self.map.personage
        target = Position(old.x + direction.row, old.y + direction.col)
        moved = False
        if self._cell(target.x, target.y) != WALL:
            moved = True
            if self.grid[target.x][target.y] == COLLECTABLE:
                self.collect(target.x, target.y)
            if self.bonus:
                self._enemy_shock(old)
            else:
                self.count_mov += 1
            self.map.personage = target
            if not self.bonus:
                self.grid[target.x][target.y] = PLAYER
            if old == self.map.exit:
                self.grid[old.x][old.y] = EXIT
            else:
                self.grid[old.x][old.y] = FLOOR
        if not self.bonus:
            print(f"Movimentos: {self.count_mov}")
        self.check_finish()
        return moved

    def _enemy_shock(self, old):
        pos = self.map.personage
        if self.grid[pos.x][pos.y] == ENEMY:
            self.grid[old.x][old.y] = ENEMY
            self.check_finish()
        else:
            self.grid[old.x][pos.y] = PLAYER
        self.count_mov += 1

    def collect(self, row, col):
        """Pick up the collectable at a cell; return True if one was taken."""
        pos = Position(row, col)
        if pos not in self.collectables:
            return False
        self.collectables.discard(pos)
        self.player_collectables += 1
        self.map.box_to_collect -= 1
        print(f"Box Coletadas:{self.player_collectables}")
        self.enable_exit()
        return True

    def enable_exit(self):
        """Open the exit once every collectable has been picked up."""
        if self.map.box_to_collect == 0:
            self.exit_visible = True
            print("Você coletou todas boxes!")
            print("A saída foi habilitada.")
            self.exit_status = True
        return self.exit_status

    def check_finish(self):
        """End the game on reaching the open exit or, in bonus rules, an enemy."""
        pos = self.map.personage
        if pos == self.map.exit and self.exit_status:
            self.game_status = False
            self.won = True
            if self.bonus:
                print("You win!")
            else:
                self.running = False
                print("You Win!!!.")
            return True
        if self.bonus and self._cell(pos.x, pos.y) == ENEMY:
            self.game_status = False
            self.dead = True
            return True
        return False