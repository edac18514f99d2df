"""Drawing the game with pygame and running its window loop."""

from __future__ import annotations

from pathlib import Path

import pygame

from solong import errors
from solong.animation import EnemyAnimator, player_frame
from solong.errors import SoLongError
from solong.game import Direction

TILE = 64
WINDOW_TITLE = "so_long"
DEFAULT_SPRITE_DIR = "sprites"
ICON = "icon.png"
FPS = 60

BASE_SPRITES = {
    "floor": "grass_tile.png",
    "wall": "block_tile.png",
    "player": "reborn/reborn_1.png",
    "exit": "BrickHouse.png",
    "collectable": "collectable.png",
}

BONUS_SPRITES = {
    "floor": "grass_tile.png",
    "wall": "block_tile.png",
    "player_r1": "reborn/reborn_R1.png",
    "player_r2": "reborn/reborn_R2.png",
    "player_r3": "reborn/reborn_R3.png",
    "player_l1": "reborn/reborn_L1.png",
    "player_l2": "reborn/reborn_L2.png",
    "player_l3": "reborn/reborn_L3.png",
    "exit": "BrickHouse.png",
    "collectable": "collectable.png",
    "enemy1": "ghost1.png",
    "enemy2": "ghost2.png",
    "enemy3": "ghost3.png",
    "enemy4": "ghost4.png",
    "death_msg": "death_msg.png",
    "win_msg": "win_msg.png",
    "scroll": "scroll.png",
}

SCROLL_POS = (TILE, 0)
SCROLL_SIZE = (int(TILE * 1.5), TILE // 2 + 20)
TEXT_POS = (2 * 64 - 12, 14)
TEXT_COLOR = (255, 255, 255)

_KEYS = {
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
}


def _load(path):
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError) as exc:
        raise SoLongError(errors.TEXTURE_ERROR) from exc


def _tile(row, col):
    return col * TILE, row * TILE


class Renderer:
    """Holds the sprites of a game and paints its current state onto a surface."""

    def __init__(self, game, sprite_dir=DEFAULT_SPRITE_DIR):
        self.game = game
        self.sprite_dir = Path(sprite_dir)
        self.icon = _load(self.sprite_dir / ICON)
        names = BONUS_SPRITES if game.bonus else BASE_SPRITES
        self.sprites = {key: _load(self.sprite_dir / name) for key, name in names.items()}
        self._font = None
        if game.bonus:
            self.sprites["enemy1"] = pygame.transform.scale(self.sprites["enemy1"], (TILE, TILE))
            self.sprites["scroll"] = pygame.transform.scale(self.sprites["scroll"], SCROLL_SIZE)
            pygame.font.init()
            self._font = pygame.font.Font(None, 24)
        self.size = (TILE * game.map.width, TILE * game.map.height)
        self.surface = pygame.Surface(self.size)
        self.enemy_animator = EnemyAnimator()
        self.player_index = 0
        rows = game.map.original_rows or game.map.rows
        self._cells = [
            (x, y, ch == "1") for x, row in enumerate(rows) for y, ch in enumerate(row)
        ]
        self._enemies = [
            (x, y) for x, row in enumerate(rows) for y, ch in enumerate(row) if ch == "V"
        ]

    def draw(self, ticks=0):
        """Paint the game as it stands after `ticks` milliseconds and return the surface."""
        surface = self.surface
        for x, y, is_wall in self._cells:
            surface.blit(self.sprites["wall" if is_wall else "floor"], _tile(x, y))
        if self.game.bonus:
            self._draw_counter()
        game_map = self.game.map
        if self.game.exit_visible and game_map.exit is not None:
            surface.blit(self.sprites["exit"], _tile(game_map.exit.x, game_map.exit.y))
        for pos in self.game.collectables:
            surface.blit(self.sprites["collectable"], _tile(pos.x, pos.y))
        if self.game.bonus:
            self._draw_bonus_actors(ticks)
        elif game_map.personage is not None:
            surface.blit(
                self.sprites["player"], _tile(game_map.personage.x, game_map.personage.y)
            )
        return surface

    def _draw_counter(self):
        self.surface.blit(self.sprites["scroll"], SCROLL_POS)
        text = self._font.render(str(self.game.count_mov), True, TEXT_COLOR)
        self.surface.blit(text, TEXT_POS)

    def _draw_bonus_actors(self, ticks):
        game = self.game
        game_map = game.map
        if game.game_status and game_map.personage is not None:
            frame = player_frame(ticks // 100)
            if frame is not None:
                self.player_index = frame
            side = "l" if game.facing == Direction.LEFT else "r"
            sprite = self.sprites[f"player_{side}{self.player_index + 1}"]
            self.surface.blit(sprite, _tile(game_map.personage.x, game_map.personage.y))
        enemy = self.sprites[f"enemy{self.enemy_animator.tick() + 1}"]
        for x, y in self._enemies:
            self.surface.blit(enemy, _tile(x, y))
        width = TILE * game_map.width
        height = TILE * game_map.height
        if game.won:
            self.surface.blit(self.sprites["win_msg"], (int(width / 2.5), int(height / 5)))
        elif game.dead:
            self.surface.blit(self.sprites["death_msg"], (int(width / 2.5), int(height / 3)))


def key_direction(key):
    """Return the direction a pygame key moves the player, or None."""
    return _KEYS.get(key)


def run(game, sprite_dir=DEFAULT_SPRITE_DIR):
    """Open the game window and play until it is closed or the game is won."""
    renderer = Renderer(game, sprite_dir)
    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.display.set_icon(renderer.icon)
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        game.running = False
                    else:
                        direction = key_direction(event.key)
                        if direction is not None:
                            game.move(direction)
            if not game.running:
                break
            frame = renderer.draw(pygame.time.get_ticks())
            screen.blit(pygame.transform.scale(frame, screen.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()