# wirefdf

`wirefdf` draws `.fdf` height maps as 3D wireframes. A map is a grid of
integer heights, and each cell may carry a hexadecimal colour. The package
projects the grid isometrically, scales it to fit the window and centres it.
It then draws every grid edge as a line whose colour fades from one end to the
other.

## Installation

```
pip install .
```

This installs `pygame`, which provides the window.

## Map format

The second dot-separated part of the file name must start with `fdf`, as in
`maps/42.fdf`. Each line of the file is one row of the grid. Values are
separated by spaces, and every row must hold the same number of values. A
value is a height, optionally followed by a colour written as `height,0xRRGGBB`:

```
0 0 0 0
0 10 10,0xff0000 0
0 0 0 0
```

If no cell has a colour, points are coloured by height: flat points are
white, raised points are orange (`0xFF4400`) and sunken points are blue
(`0x00A2FF`). `read_map` raises `MapError` for a file that cannot be opened,
is empty, has rows of different lengths, has no values, or lacks the `.fdf`
extension.

## Command line

```
wirefdf path/to/map.fdf
wirefdf --interactive path/to/map.fdf
```

The command takes exactly one map path. With any other number of paths it
prints `Invalid number of args!` and exits with status 1. If the map cannot be
read it prints `error: ...` on standard error and exits with status 1.

Without a flag, the map is drawn once in a 1920x1020 window. Escape or
closing the window quits.

With `--interactive`, a 960x1020 window opens. The relief rises from flat to
its full height in an animation, and these keys are handled:

| Key             | Action                                                     |
|-----------------|------------------------------------------------------------|
| Escape          | quit (closing the window also quits)                       |
| Up / Down       | rotate around the X axis                                   |
| Left / Right    | rotate around the Y axis                                   |
| Page Up / Down  | rotate around the Z axis                                   |
| `=` / `-`       | zoom in / out (zooming out stops near zero)                |
| `w` `a` `s` `d` | move the view                                              |
| `[`             | flatten the drawn heights, so that they rise again         |
| `]`             | keep the current heights (no visible change)               |
| `p`             | toggle perspective projection                              |
| `f`             | switch to a fixed straight-on view (X angle 3.14/2)        |
| `r`             | reset angles, zoom, position and perspective               |

## Library use

```python
from wirefdf.parsing import read_map
from wirefdf.wireframe import render

heightmap = read_map("maps/42.fdf")
canvas = render(heightmap, 1920, 1020)
raw = canvas.to_bytes()  # row by row, 32-bit little-endian B, G, R, 0
```

The modules are:

- `wirefdf.parsing`: `read_map(path)` and `parse_map(lines)` build a
  `HeightMap` (`width`, `height`, `points`, `colored`). Also provides
  `parse_int`, `parse_hex`, `count_words`, `has_fdf_extension` and
  `apply_height_colors`.
- `wirefdf.geometry`: the `Point` dataclass and in-place transforms on
  lists of points: `rotate_x`, `rotate_y`, `rotate_z`, `isometric`,
  `translate`, `scale`, `bounds_min`, `bounds_max`, `center`,
  `translate_to_center` and `fit_scale`.
- `wirefdf.coloring`: `channel`, `color_distance` and `gradient_color`,
  which gives the colour at a step along a fade between two colours.
- `wirefdf.canvas`: `Canvas`, an off-screen pixel buffer with `put_pixel`,
  `get_pixel`, `clear`, `draw_line` and `to_bytes`. `line_pixels` yields
  the pixels of a line in order, with their colours.
- `wirefdf.wireframe`: `edges`, `draw_map`, `project`, `render` and
  `is_quit_key`.
- `wirefdf.viewer`: `ViewState` holds the interactive view. It provides
  `handle_key`, `step_animation`, `change_heights`, `reset`, `project` and
  `render`.
- `wirefdf.cube`: `CubeScene` draws a cube in perspective that turns a little
  on each `step()`. `cube_vertices` and `perspective` are also available.
- `wirefdf.noise`: `perlin2d` sums octaves of value noise into `[0, 1)`.
  It returns NaN when `depth` is 0.
- `wirefdf.cli`: `main` and `parse_args`, behind the `wirefdf` command.

## What it does not do

The command only shows height maps. The cube scene and the noise functions
are library code only, and no command opens them. Nothing is saved to an image
file. `Canvas.to_bytes` returns the raw pixels, and writing them out is left to
the caller.