# cubed

`cubed` reads a `.cub` scene file and checks that it is well formed. It then
opens a window that shows a scrolling top-down mini-map, and you can walk the
player around that map with the keyboard.

## Installing

```
pip install .
```

The window uses pygame. To run the tests, install the `test` extra:

```
pip install .[test]
pytest
```

## Running

```
cubed path/to/level.cub
```

Textures are looked up in `texture/` under the current directory. If the file
passes every check, the padded map is printed to standard output, one
`i: |row|` line per row, with the player's start letter shown as `P`. The
window then opens. The command exits with status 1 once the window is closed.

If a check fails, the command prints `Error` and the reason on standard error
and exits with status 4. It does the same when it is not given exactly one
argument.

### Controls

| Key                   | Action     |
|-----------------------|------------|
| `W` / Up arrow        | move up    |
| `S` / Down arrow      | move down  |
| `A` / Left arrow      | move left  |
| `D` / Right arrow     | move right |
| `Esc` / close window  | quit       |

A wall (`1`) or the edge of the grid blocks a move. Any other cell can be
entered, and the cell the player leaves becomes floor (`0`).

## The scene file

The file name must end in `.cub`. The file starts with six header entries.
They may come in any order, and blank lines may separate them:

```
NO ./north.xpm
SO ./south.xpm
WE ./west.xpm
EA ./east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give texture paths. Each path must start with
  `./`, and the file it names must exist in the texture directory.
- `F` (floor) and `C` (ceiling) each give three comma-separated numbers from
  0 to 255. Only digits and commas are allowed.
- Any other non-blank line also counts as one of the six entries.

The map comes after the header. Blank lines after the header are skipped. The
map may use only these characters:

- `1` for a wall
- `0` for floor
- a space for void
- exactly one of `N`, `S`, `W` or `E`, which marks the player and the
  direction the player faces

A void cell may border only another void cell or a wall, so the walkable area
has to be closed in by walls.

## The window

The window is 720×320. The background is painted with the ceiling colour
above pixel row 540 and the floor colour below it, so at this window size only
the ceiling colour shows. Only the low hexadecimal digit of each colour
component is used, and it is repeated to fill the byte.

The mini-map is drawn from `wall.xpm`, `floor.xpm`, `player.xpm` and
`empty.xpm` in the texture directory. It covers 13 rows by 19 columns around
the player, in 16-pixel tiles. If one of these images cannot be loaded, a
plain coloured square is drawn in its place.

## What it does not do

There is no first-person or 3D view. The `NO`, `SO`, `WE` and `EA` textures
are only checked for existence and are never drawn. The player's facing
direction is stored but not used. The command has no option to change the
texture directory.

## Using it from Python

```python
from cubed.parser import parse_scene
from cubed.grid import format_grid
from cubed.minimap import find_player, minimap_tiles
from cubed.movement import Direction, move_player

scene = parse_scene("maps/level.cub", "texture")
print(format_grid(scene.grid))
print(scene.orientation, find_player(scene.grid))
move_player(scene.grid, Direction.UP)
tiles = minimap_tiles(scene.grid, scene.row, scene.max_len)
```

`parse_scene` raises `cubed.scene.SceneError` when a check fails. The error
message is the reason the command prints.

You can also check the parts of a scene file on their own:

- `cubed.info.read_header`, `check_textures` and `check_colors` handle the
  header.
- `cubed.grid.read_map_lines`, `build_grid`, `validate_chars`,
  `validate_walls` and `mark_player` handle the map.

`cubed.app.Game(scene, texture_dir)` holds a running scene.
`Game.handle_key(keysym)` applies an X11 key symbol and returns `False` once
Escape has been pressed. `Game.run()` opens the window.