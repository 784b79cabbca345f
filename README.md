# cubraycast

A small first-person maze viewer. It reads a `.cub` scene file that gives four wall
textures, a floor colour, a ceiling colour and a map. It checks the map, opens a
1200×1000 window and draws the maze with a raycaster.

## Installing

```
pip install .
```

## Running

```
cubraycast path/to/scene.cub
```

The same entry point is available as `python -m cubraycast.app path/to/scene.cub`.

The program takes exactly one argument. The argument must name a readable file
whose name ends in `.cub`. When the arguments, the scene or the map cannot be
used, the program prints `cub3d: ` and a short message to standard error and
exits with status 1. When the file cannot be opened, it prints the path on the
line after the message. Closing the window or pressing `Esc` exits with status 0.

## Scene files

The first six non-empty lines are elements. They may come in any order.
Surrounding spaces and tabs are ignored.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` each name a texture image. The path must end in
  `.xpm` and be readable; the image is decoded with Pillow. If a texture is
  missing or cannot be loaded, the scene fails with `invalid texture`. The
  four images are applied to the wall faces in the order their lines appear
  in the file.
- `F` (floor) and `C` (ceiling) take three decimal integers from 0 to 255,
  separated by commas. If either colour is missing or malformed, the scene
  fails with `invalid color`.
- Any other identifier fails with `invalid map`. So does a second `F` or `C`
  line once that colour is already set.
- A file with no elements at all fails with `empty file`.

Every line after the six elements is a map row. Shorter rows are padded with
spaces to the width of the longest line.

| Character | Meaning |
| --- | --- |
| `1` | wall |
| `0` | floor |
| `N`, `S`, `E`, `W` | the player's starting cell; the letter sets the starting view angle |
| space | void (drawn as wall) |

A map is rejected in these cases:

- The first or last row holds anything other than `1` and spaces.
- A row does not begin and end with `1`, ignoring spaces at its ends.
- A space sits next to a `0`, diagonals included (`map not surrounded by walls`).
- The map has no player, or has more than one (`invalid number of players`).
- The map holds any other character (`invalid character`).

```
111111
100001
10N001
111111
```

## Controls

| Key | Action |
| --- | --- |
| `W` | step forward |
| `S` | step back |
| `A` | strafe left |
| `D` | strafe right |
| Left arrow / Right arrow | turn |
| Mouse movement to the side | turn |
| `Esc` or closing the window | quit |

Each step is checked against the map, so the player cannot walk into a wall.

## Using it from Python

You can load and check a scene without opening a window:

```python
from cubraycast.app import prepare_game
from cubraycast.render import render_frame

game = prepare_game("maps/level.cub")   # raises cubraycast.errors.CubeError on bad input
render_frame(game.frame, game.grid, game.player, game.textures, game.floor, game.ceiling)
print(hex(game.frame.get(600, 500)))    # one 0xRRGGBB pixel of the view

game.run()                               # opens the pygame window
```

Other entry points:

- `cubraycast.scene.parse_scene(lines, texture_loader)` builds a `Scene` from an
  iterable of lines. `load_scene(path)` does the same for a file.
- `cubraycast.scene.parse_rgb("R,G,B")` returns a packed colour.
- `cubraycast.validate.square_map(rows, width)` pads the rows to one width.
  `check_map(rows, width)` validates the padded rows and returns a
  `StartPosition`. `fill_spaces(rows)` turns spaces into walls.
- `cubraycast.player.Player` holds the position and view angle.
  `Player.handle_key(key, grid)` takes a `Key` code and returns `False` for `Esc`.
- `cubraycast.render.cast_ray(...)` traces one ray and returns a `RayHit`.
  `render_frame(...)` draws a whole view into a `Frame`.
- `cubraycast.texture.load_texture(path)` loads an XPM image into a `Texture`.
- `cubraycast.errors.CubeError` carries an `ErrorKind` and the matching
  message. It also has an `exit_code`.

## Tests

```
pip install .[test]
pytest
```