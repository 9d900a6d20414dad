# wirefdf

`wirefdf` draws a height map as a wireframe. Each point of the map is joined
to its right-hand and lower neighbours by a straight line, and the grid is
shown either in isometric projection or flat (parallel) from above.

## Map files

A map is a plain text file. Each line is one row of the grid, and each
space-separated number on a line is the height of one point:

```
0 0 0 0 0
0 5 5 5 0
0 5 10 5 0
0 5 5 5 0
0 0 0 0 0
```

Numbers are read like C `atoi`: an optional sign followed by digits, with
anything after the digits ignored (so `10,0xFF` reads as `10`).

The number of columns is the number of words on the **last** line. Rows
with more values than that are cut to that width; a row with fewer values
(including an empty line) makes the map invalid. A file with no rows, or
whose last line holds no words, is also rejected.

## Running the viewer

```
wirefdf path/to/map.fdf
```

Exactly one argument is expected. With any other number, or when the file
cannot be opened or is not a valid map, the viewer prints an error and
exits with status 1.

The window is drawn with `tkinter`, which must be available in your Python
installation. Its size and the zoom are chosen from the size of the map:

| Rows or columns over | Zoom | Window (width x height) |
|----------------------|------|-------------------------|
| 300                  | 1    | 2400 x 1300             |
| 200                  | 2    | 2200 x 1200             |
| 100                  | 4    | 2000 x 1000             |
| 25                   | 8    | 1600 x 1000             |
| otherwise            | 25   | 1000 x 800              |

Pixels that fall outside the window are not drawn. A menu in the top-left
corner lists the keys:

| Key   | Action                      |
|-------|-----------------------------|
| Esc   | quit                        |
| I     | isometric projection        |
| P     | parallel (top-down) view    |
| V     | vibrant colour palette      |
| E     | elegant colour palette      |
| C     | clear the window and redraw |

Points are coloured by their height: heights strictly between 9 and 95 get
one colour, negative heights another, and all other points a third, with
the choice of colours set by the palette. Each line takes the colour of its
starting point.

## Using it as a library

The map reader, the scene and the viewer can be used without opening a
window:

```python
from wirefdf.mapfile import read_map, parse_map
from wirefdf.scene import setup_scene, Key
from wirefdf.app import Viewer

height_map = read_map("path/to/map.fdf")        # raises MapError if invalid
height_map = parse_map(["0 1 2", "3 4 5"])      # or from lines of text
print(height_map.width, height_map.height, height_map.at(2, 1))

scene = setup_scene(height_map)
for (start, end, colour) in scene.segments():   # edges in window coordinates
    ...
for (x, y, colour) in scene.pixels():           # every wireframe pixel
    ...

scene.handle_key(Key.PARALLEL)                  # False only for Key.ESCAPE

viewer = Viewer(scene)                           # no canvas: nothing is shown
frame = viewer.redraw()                          # {(x, y): 0xRRGGBB}
viewer.on_key("e")                               # key symbols or raw key codes
```

`wirefdf.geometry` holds the building blocks: `isometric(x, y, z)` projects
a point, and `line_points(x0, y0, x1, y1)` yields the pixels of a straight
line by Bresenham's algorithm, including the start point but not the end
point. `wirefdf.textutil` has the text helpers used by the reader: `atoi`,
`is_space`, `word_count`, `split` and `iter_lines`.

## What it does not do

The viewer only switches projection and palette. It has no panning,
zooming, rotation or altitude controls at run time, does not read colours
from the map file, and cannot save the picture to a file.

## Tests

```
pip install -e ".[test]"
pytest
```