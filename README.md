# solong

A small tile-based puzzle game. The player walks around a map read from a
`.ber` file and picks up every box. The exit then opens, and walking onto it
wins the game. Bonus mode adds ghosts: walking into one ends the game.

## Installing

```
pip install .
```

The game window is drawn with `pygame`. For the tests, install the `test`
extra: `pip install .[test]`.

## Running

```
solong path/to/level.ber
solong --bonus path/to/level.ber
```

Move with `W`/`A`/`S`/`D` or the arrow keys. `Esc` or closing the window
ends the game.

- **Base mode.** The number of moves so far is printed after each key press.
  Reaching the open exit prints `You Win!!!.` and closes the window.
- **Bonus mode (`--bonus`).** Maps may hold ghosts (`V`). The move count is
  drawn on a scroll at the top of the window. The player sprite faces the last
  horizontal direction and is animated, and so are the ghosts. Reaching the
  open exit prints `You win!` and shows a win picture. Stepping onto a ghost
  shows a death picture. In both cases further moves are ignored and the
  window stays open until it is closed.

Picking up a box prints how many have been collected. Picking up the last one
prints a notice that the exit is open.

If the arguments or the map are wrong, the command prints the reason, with no
trailing newline, and exits with status 1. Exactly one map path ending in
`.ber` is expected, besides the optional `--bonus`.

### Sprites

Images are loaded from a `sprites` directory in the current working directory:

- `icon.png`, `grass_tile.png`, `block_tile.png`, `BrickHouse.png`,
  `collectable.png`
- base mode: `reborn/reborn_1.png`
- bonus mode: `reborn/reborn_R1.png` … `reborn/reborn_R3.png`,
  `reborn/reborn_L1.png` … `reborn/reborn_L3.png`, `ghost1.png` …
  `ghost4.png`, `death_msg.png`, `win_msg.png`, `scroll.png`

If an image cannot be loaded, the game stops with
`ERROR! Problem with the texture image.`

## Map format

A map is a plain text file with the `.ber` extension. Only its first 10000
bytes are read. Each line is one row of tiles:

| Char | Meaning                  |
|------|--------------------------|
| `1`  | wall                     |
| `0`  | floor                    |
| `C`  | box to collect           |
| `P`  | player start             |
| `E`  | exit                     |
| `V`  | ghost (bonus maps only)  |

Example:

```
1111111
1P0C0E1
1111111
```

A map is refused, with a message saying why, when:

- the file cannot be opened, is empty, or holds an empty line;
- it has a character that is not listed above (`V` counts only in bonus mode);
- its rows are not all the same length;
- its border is not made only of walls;
- it has no box, or not exactly one player and one exit;
- the player cannot reach every box and the exit. In bonus mode ghosts block
  the way.

## Using it as a library

The map and game logic can be used without opening a window:

```python
from solong.mapfile import load_map
from solong.game import Game, Direction

game_map = load_map("level.ber", bonus=False)
game = Game(game_map, bonus=False)
moved = game.move(Direction.RIGHT)   # True if the player changed cell
print(game.count_mov, game.map.box_to_collect, game.won)
```

- `solong.mapfile`: `check_arguments`, `parse_map`, `read_map`, `load_map`,
  `find_item`, and the `GameMap` and `Position` dataclasses.
  `GameMap.from_rows(rows)` builds a map from a list of strings.
- `solong.validation`: `validate_map(rows, bonus)` raises on the first problem.
  It also offers the individual checks (`check_map_chars`, `check_shape`,
  `check_border`, `count_items`, `has_empty_line`, `flood_fill`,
  `path_is_clear`).
- `solong.game`: `Game` with `move`, `collect`, `enable_exit` and
  `check_finish`, and the `Direction` enum.
- `solong.animation`: `EnemyAnimator` and `player_frame`, which pick animation
  frames.
- `solong.render`: `Renderer` draws a game onto a `pygame.Surface`.
  `run(game, sprite_dir)` opens the window. `key_direction(key)` maps a
  pygame key to a `Direction`.
- `solong.errors`: `SoLongError`, whose `message` holds the text shown to the
  user.

## What it does not do

- No sprite images come with the package. They must be supplied in
  `./sprites` as listed above.
- Ghosts do not move. They stay on the cells where the map places them.
- There are no levels beyond the single map file given, and no scores are
  saved.