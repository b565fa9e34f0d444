# raycube

A library for `.cub` scene files, the scene format of a grid raycaster in
the classic first-person style. It reads a scene file that gives four wall
textures, floor and ceiling colours and a map, checks that the scene is
valid, and finds where the player starts. It also provides a simple 32-bit
frame buffer and a texture loader.

## Installing

```
pip install .
```

## Scene files

A scene file starts with header lines in any order, followed by the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
1000N1
111111
```

- `NO`, `SO`, `WE`, `EA` give the wall texture for each side. After its last
  dot, each path must end in `.xpm` (or a shorter start of it). When files
  are checked, the path must be something that can be opened for reading.
- `F` and `C` give the floor and ceiling colours as three numbers of one to
  three digits each, from 0 to 255. The commas between them are optional.
- The header ends at the first line made only of digits. From there on the
  map uses `1` for walls, `0` for open floor, and exactly one of `N`, `S`,
  `E` or `W` for where the player starts and which way they face. Spaces may
  pad the map, but every open cell must be enclosed by walls.

A scene that breaks any of these rules raises `raycube.reader.CubError`.
The error message says what is wrong, for example `Invalid texture path`,
`Invalid RGB range` or `Map not surrounded by walls`.

## Usage

```python
from raycube.config import load_scene

scene = load_scene("scene.cub")
print(scene.north, scene.floor_color, scene.ceiling_color)
print(scene.spawn.x, scene.spawn.y, scene.spawn.dir_x, scene.spawn.dir_y)
```

### Modules

- `raycube.reader`
  - `read_lines(path)` reads a file into lines without their line breaks.
  - `iter_lines(stream, buffer_size)` yields the lines of a text stream and
    keeps their newlines.
  - `CubError` is the exception raised for any invalid input.
- `raycube.colors`
  - `parse_color(line)` turns a line such as `"F 220,100,0"` into an
    `(r, g, b)` triple.
  - `rgb_to_int(rgb)` packs a triple into `0xRRGGBB`.
  - `atoi(text)` parses a leading integer.
- `raycube.mapcheck`
  - `check_invalid_characters`, `check_player_count` and `check_map_closed`
    validate a map grid.
  - `find_spawn(grid)` returns a `Spawn`, which holds the start position,
    the view direction and the camera plane. It also turns the start cell
    into floor.
- `raycube.config`
  - `parse_scene(lines, check_files)` validates the lines of a scene and
    returns a `SceneConfig`.
  - `load_scene(path)` reads a file and validates it.
  - `check_texture_path(text, check_files)` validates one texture entry.
  - `SceneConfig.wall_textures` gives the paths in the order west, east,
    north, south.
- `raycube.image`
  - `Frame` is a mutable 32-bit image. Its methods are `put_pixel`,
    `get_pixel`, `fill`, `fill_halves` and `to_bytes`.
  - `Texture` is an immutable image. Use `color_at` to read a texel.
  - `load_texture(path)` loads an XPM file, or any other image that Pillow
    can read, as a `Texture`.

Pass `check_files=False` to `parse_scene` to skip checking that the
texture files exist. This is useful when validating scenes on their own.

## What this package does not do

This package has no command-line program and opens no window. It does not
cast rays or draw walls or floors into a frame, and it does not move or
turn a player in response to keys. It covers loading and validating
scenes, and the pixel buffers a renderer would draw with.

## Running the tests

```
pip install .[test]
pytest
```