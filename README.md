# foxmaze

foxmaze is a small tile-based maze game. You move a fox around a walled map,
pick up every collectable, and then walk out through the exit. If you step
onto an enemy, the game is over.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Playing

Pass exactly one map file. Its name must end in `.ber`:

```
foxmaze maps/level1.ber
```

Any other arguments print a usage error. If the map cannot be opened or
breaks a rule, the game prints `Error` and the reason, then exits.

Controls. A move happens when you release the key:

| Key | Action     |
|-----|------------|
| W   | move up    |
| S   | move down  |
| A   | move left  |
| D   | move right |
| Esc | quit       |

Closing the window also quits the game.

- After each move, the game prints the number of steps taken and the number of
  collectables still on the map.
- The window shows the same two values as "Collectables" and "Movement".
- The exit only opens once every collectable has been picked up.
- If you step onto an enemy, the game prints a game-over message. It then
  shows a game-over picture for five seconds and closes.

Sprites are loaded from a `sprites/` directory in the current working
directory:

- `floor.xpm`, `wall.xpm`, `exit.xpm`, `item.xpm`, `enemy.xpm`
- `fox.xpm` and `fox_2.xpm` through `fox_16.xpm`, four animation frames for
  each direction
- `game_over.xpm`

If a sprite cannot be loaded, a plain coloured square is drawn in its place.
If the game-over picture is missing, the text "GAME OVER" is shown instead.

## Map files

A map is plain text with one row of tiles per line. The first row sets the
map's width.

| Char | Tile                            |
|------|---------------------------------|
| `1`  | wall                            |
| `0`  | floor                           |
| `P`  | player start (exactly one)      |
| `E`  | exit (exactly one)              |
| `C`  | collectable (at least two)      |
| `B`  | enemy                           |

A map is rejected if any of these hold:

- The top row or the bottom row is not all walls.
- A row does not start and end with a wall.
- A row contains a character that is not listed above.
- The counts of `P`, `E` or `C` are wrong.
- The player cannot reach any collectable.

Example:

```
1111111111
1P0C000C01
1000B00001
10C00000E1
1111111111
```

## Using it as a library

The map and game logic have no display code, so you can drive them without
a window:

```python
from foxmaze.gamemap import read_map
from foxmaze.game import Game, Direction

game_map = read_map("maps/level1.ber")
game_map.validate()          # raises foxmaze.gamemap.MapError on a bad map
game = Game(game_map)
game.move(Direction.RIGHT)   # True when the game state changed
print(game.steps, game.collectables, game.status)
```

- `foxmaze.gamemap`
  - `read_map`, `parse_map`, `is_ber_file` and `check_file` load and check
    maps.
  - `GameMap.check_walls`, `GameMap.count_characters`, `GameMap.find_player`
    and `can_reach_collectable` apply the individual rules.
- `foxmaze.game`
  - `Game.handle_key` maps key codes to moves, and Esc to
    `GameStatus.QUIT`.
  - `direction_for_key` returns the `Direction` for a key code.
- `foxmaze.render`
  - `build_scene(game)` lists the sprite to draw at each tile.
  - `counters_text(game)` gives the counter text shown on screen.
  - `FrameCycler` steps through animation frames.
  - `PygameView` is the window itself.
- `foxmaze.cli`
  - `run(path)` loads, validates and plays one map in a window.
  - `main(argv)` is the command-line entry point.
- `foxmaze.printf`
  - `format_text`, `printf`, `itoa` and `to_base` do printf-style formatting
    for `%c %s %u %d %i %x %X %p %%`.
- `foxmaze.linereader`
  - `LineReader` and `read_lines` read a stream one line at a time through a
    fixed-size buffer.

## What it does not do

- Each run plays one map and then exits. There is no level sequence.
- There is no menu, saving, score table or sound.
- Enemies stay where the map puts them.