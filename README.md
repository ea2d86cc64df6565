# hamster-long

A small top-down puzzle game. You play a hamster on a walled grid: pick up
every coin, then walk onto the exit. In enemy mode an enemy wanders the map,
and meeting it ends the game.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
hamster-long path/to/level.ber
hamster-long --enemies path/to/level.ber
```

The map file must end in `.ber`. With `--enemies` the map must contain at
least one enemy tile, and the game runs in enemy mode.

Controls:

| Key               | Action     |
|-------------------|------------|
| `W` / Up arrow    | move up    |
| `S` / Down arrow  | move down  |
| `D` / Right arrow | move right |
| `A` / Left arrow  | move left  |
| `Esc`             | quit       |

Closing the window also quits.

Each tile is drawn 50×50 pixels. Textures are loaded from a `texture/`
directory in the current working directory. For each name the files
`<name>.xpm`, `<name>.png` and `<name>.bmp` are tried in that order:
`wall`, `coin`, `exit`, `exit1` (the exit once all coins are taken),
`player_f`, `player_up`, `player_down`, `player_l`, `player_r`, `backgrnd`,
and, when the map holds enemies, `enemy1`, `enemy2` and `enemy3`, which are
cycled to animate the enemy. A missing or unreadable texture stops the game
with `Invalid images`.

Without enemies, `Hamster moved N times` is printed each time the move count
changes. In enemy mode the count is drawn in the top-left corner of the
window instead. About every 500 loop steps the first enemy on the map (in
reading order) takes one random step onto free floor; stepping onto the
player ends the game.

Exit status: `0` after quitting (it prints `Exit🚪❌`); `1` after a win or a
loss (the message goes to standard error) and for an invalid map or missing
textures (an `Error` line and the reason go to standard error). Called with
the wrong number of arguments it prints `💥Invalid arguments !` and exits
with `0`.

## Map format

A map is a rectangle of characters, one row per line:

- `1` wall
- `0` empty floor
- `P` the player's starting square (exactly one)
- `E` the exit (exactly one)
- `C` a coin (at least one)
- `N` an enemy (enemy mode only, at least one)

Any of these makes a map invalid:

- an empty file, or empty lines, including a newline at the end of the file
- any other character
- rows of unequal length
- fewer than two rows
- any gap in the surrounding wall
- a coin or the exit that the player cannot reach (the exit cannot be
  walked through on the way, and enemies block the path)

For example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from hamster_long.mapfile import load_map, MapError
from hamster_long.game import Game, Direction, GameOver

game_map = load_map("level.ber", enemies=False)
game = Game(game_map)
try:
    game.move(Direction.RIGHT)
except GameOver as over:
    print(over.outcome, over.moves)
```

`hamster_long.mapfile`:

- `check_extension(path)`, `read_map(path)`, `parse_map(text, enemies=False)`
  and `load_map(path, enemies=False)` raise `MapError` with the reason when a
  file or map is not valid.
- `GameMap` holds the `rows`, the `player` position, the number of
  `collectibles` and `enemy_count`, with `width` and `height`.

`hamster_long.game`:

- `Game(game_map)` keeps a mutable `grid`, the `player` position, remaining
  `collectibles`, the `moves` count, the direction the player `face`s and the
  enemy animation `frame`.
- `Game.move(direction)` returns `True` if the player stepped, `False` if
  blocked. Reaching the exit once every coin is taken raises `GameOver` with
  `Outcome.WON`; walking into an enemy raises it with `Outcome.LOST`.
- `Game.handle_key(keycode)` maps key codes (126/13 up, 125/1 down,
  124/2 right, 123/0 left) to moves; key code 53 raises `GameOver` with
  `Outcome.QUIT`.
- `Game.move_enemy(rng=None)` steps the first enemy in a random direction
  and returns `False` if there is none; `Game.tick(rng=None)` calls it every
  501st call and returns `True` when it did. `rng` is any object with a
  `randrange` method, such as `random.Random(seed)`.

`hamster_long.render`:

- `tile_for(game, row, col)` returns the texture names drawn at a cell,
  bottom layer first.
- `Renderer(game, texture_dir)` loads the textures and `draw(surface)` paints
  the board onto a pygame surface, returning `True` when the move count
  changed since the last draw.
- `run(path, enemies=False)` plays a map in a window and returns the exit
  status; `main(argv=None)` is the command above.

## What it does not do

There are no levels bundled, no textures shipped with the package, and no
saved scores or progress: you supply the `.ber` map and the `texture/`
directory yourself.