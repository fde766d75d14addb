# raycube

A small first-person maze explorer. It reads a `.cub` scene description,
checks it, and shows the maze in a window with textured walls drawn by a
grid raycaster.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
raycube path/to/level.cub
```

The command takes exactly one argument. The name must end in `.cub` (with
something before the extension) and the file must be readable. Any problem
with the arguments, the file or its map is printed as an `Error: ...`
message and the command exits with status 1. It exits with status 0 when
the window is closed.

### Controls

| Key         | Action            |
|-------------|-------------------|
| W / S       | move forward/back |
| A / D       | strafe left/right |
| Left/Right  | turn the camera   |
| Escape      | quit              |

Closing the window also quits. Movement that would end inside a wall, or
outside the map, is ignored.

## The `.cub` format

The file starts with six configuration lines, in any order, with blank
lines allowed between them:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA` give the wall texture for each side. The path is a
  single word; anything after it on the line is an error. Textures are read
  with Pillow, so any image format Pillow can open is accepted.
- `F` and `C` give the floor and ceiling colours as `R,G,B`, exactly three
  components, each from 0 to 255. Any extra text on these lines is an error.
- Both `F` and `C` must be present, and all four texture paths must be set.
- The first six non-blank lines are taken as configuration; a line among
  them with no known identifier is ignored.

The map follows, made of:

- `1` for a wall, `0` for open floor,
- one of `N`, `S`, `E`, `W` for the player's start and facing,
- spaces (or tabs) for the outside of the map.

```
        1111111111111
        1000000000001
        1011000001101
11111111100000000001
10000000000000000001
1111111111111N000001
        1111111111111
```

Rows are padded with spaces to the width of the longest row. Rules the map
must follow:

- only the characters listed above;
- exactly one player start;
- at most 1024 rows, and at least 3 rows and 3 columns;
- every row and every column begins and ends with a wall;
- no space reachable from the player's start;
- no empty lines inside the map (blank lines after it are fine).

## Using it as a library

Parsing and checking a scene:

```python
from raycube.parser import parse_map
from raycube.player import place_player

cub_map = parse_map("level.cub")
player = place_player(cub_map)
print(cub_map.width, cub_map.height, player.x, player.y)
```

`parse_map` (and `parse_map_text` for a string) raises
`raycube.model.MapError` with a readable message whenever the scene is not
valid. `place_player` returns a `Player` standing in the middle of the
start cell, facing its compass letter, and turns that cell into floor.

Drawing a frame without opening a window:

```python
from raycube.game import Game
from raycube.textures import load_textures

game = Game(cub_map, player, textures=load_textures(cub_map), win_width=320, win_height=200)
frame = game.render()  # numpy array [row, column] of 0xRRGGBB values
```

`Game.keys` holds the pressed keys (`press` / `release` take the names
`"w"`, `"s"`, `"a"`, `"d"`, `"left"`, `"right"`), and `Game.update()`
applies them for one tick, redrawing the frame when something changed.
`Game.run()` opens the pygame window and runs the event loop.

The lower-level pieces are available too: `raycube.raycast` (`cast_ray`,
`Ray`, `Wall`), `raycube.render` (`draw_background`, `draw_walls`) and
`raycube.debug` (`format_all` and friends, which describe the state as
text).