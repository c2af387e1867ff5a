# wirefdf

A viewer that draws a height map as an isometric wireframe.

## Map files

A map file is plain text: each line is one row of the grid, and each
space-separated value is the height at that point. Every row must have
the same number of values.

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Each value is read as its leading integer, with an optional `+` or `-`
sign; anything after the digits (for example `10,0xFF`) is ignored, and a
value with no leading digits counts as 0. A file with no values at all is
rejected.

## Installing

```
pip install .
```

## Running

```
wirefdf MAPFILE
```

The map opens in a 1280×720 window titled "FdF", rotated into an
isometric view, centred and scaled to fit with a small margin. Points at
ground level are orange; heights above ground shade towards purple and
depths below ground shade towards dark blue, and the colour along each
edge blends between its two ends.

Press Escape or close the window to quit.

If the wrong number of arguments is given, the file cannot be opened, its
rows differ in length or it holds no values, or no display can be opened,
the command prints a message to standard error and exits with status 1.

## What it does not do

The view is fixed once the window opens. There are no controls to zoom,
pan, rotate, change the height scale or animate the model; Escape is the
only key that is handled.

## Using it as a library

```python
from wirefdf.geometry import Point
from wirefdf.mapfile import load_map
from wirefdf.model import Wireframe
from wirefdf.raster import Canvas, draw_map

heights = load_map("terrain.fdf")      # raises MapFileError on bad input
frame = Wireframe.from_heights(heights)
frame.iso_view()
frame.autoscale()

canvas = Canvas()                      # 1280x720, all black
canvas.fill(0x000000)
draw_map(canvas, frame, Point(640, 360, 0))
print(hex(canvas.get(640, 360)))
```

The modules:

- `wirefdf.geometry` — `Point` (with `+` and `-`), `Matrix3` with
  `apply`, and `scale_matrix`, `rotation_x`, `rotation_y`.
- `wirefdf.colors` — colour constants and the gradient helpers
  `get_percentage`, `mix_channel`, `line_color`, `height_gradient_color`.
- `wirefdf.mapfile` — `parse_int_prefix`, `count_columns`, `parse_map`,
  `load_map` and `MapFileError`.
- `wirefdf.model` — `Wireframe`, with `from_heights`, `copy`, `transform`,
  `zoom`, `rotate_x`, `rotate_y`, `iso_view`, `xy_bounds` and `autoscale`.
- `wirefdf.raster` — `Canvas` (`put`, `get`, `fill`), `draw_line` and
  `draw_map`.
- `wirefdf.app` — `build_scene` loads, projects and autoscales a map file;
  `render` draws a wireframe centred on a fresh black canvas; `run` opens a
  window that shows it; `main` is the command above.