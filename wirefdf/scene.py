"""Scene state, colouring and wireframe layout for a height map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator

from wirefdf.geometry import isometric, line_points
from wirefdf.mapfile import HeightMap


class Projection(Enum):
    ISOMETRIC = "isometric"
    PARALLEL = "parallel"


class Palette(Enum):
    VIBRANT = "vibrant"
    ELEGANT = "elegant"


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    ESCAPE = 53
    CLEAR = 8
    ISOMETRIC = 34
    PARALLEL = 35
    ELEGANT = 14
    VIBRANT = 9


MENU_COLOR = 0xFF14B6

MENU: tuple[tuple[int, int, int, str], ...] = (
    (20, 10, MENU_COLOR, "*=====MENU=====*"),
    (20, 30, MENU_COLOR, "   ESC to Exit"),
    (20, 50, MENU_COLOR, "I ISOMETRIC View"),
    (20, 70, MENU_COLOR, "P  PARALLEL View"),
    (20, 90, 0xF2D0EF, "V  VIBRANT Color"),
    (20, 110, 0x860ACD, "E  ELEGANT Color"),
    (20, 130, MENU_COLOR, "=======**======="),
)
"""Menu entries as (x, y, colour, text)."""

# (mid-range heights, negative scaled heights, everything else)
_PALETTES = {
    Palette.VIBRANT: (0x860ACD, 0x009292, 0xF2D0EF),
    Palette.ELEGANT: (0xF2D0EF, 0xCC1A99, 0x860ACD),
}

# (min rows or columns exceeded, zoom, window height, window width)
_SIZE_STEPS = (
    (300, 1, 1300, 2400),
    (200, 2, 1200, 2200),
    (100, 4, 1000, 2000),
    (25, 8, 1000, 1600),
)


def point_color(height_map: HeightMap, x: int, y: int, palette: Palette, altitude: int) -> int:
    """Return the 0xRRGGBB colour for the grid point (x, y)."""
    mid, below, other = _PALETTES[Palette(palette)]
    z = height_map.at(x, y)
    if 9 < z < 95:
        return mid
    if z * altitude < 0:
        return below
    return other


Point = tuple[int, int]


@dataclass
class Scene:
    """What is drawn and how: zoom, window size, palette and projection."""

    height_map: HeightMap
    zoom: int = 25
    map_height: int = 800
    map_width: int = 1000
    altitude: int = 1
    palette: Palette = Palette.VIBRANT
    projection: Projection = Projection.ISOMETRIC
    pos_x: int = 0
    pos_y: int = 200

    def _screen(self, x: int, y: int) -> Point:
        sx, sy = x * self.zoom, y * self.zoom
        if self.projection is Projection.ISOMETRIC:
            z = self.height_map.at(x, y) * self.altitude
            sx, sy = isometric(sx, sy, z)
        return self.pos_x + sx, self.pos_y + sy

    def segments(self) -> Iterator[tuple[Point, Point, int]]:
        """Yield (start, end, colour) for every edge, in window coordinates.

        Each point is joined to its right and lower neighbours, row by row;
        the colour is that of the starting point.
        """
        width, height = self.height_map.width, self.height_map.height
        for y in range(height):
            for x in range(width):
                colour = point_color(self.height_map, x, y, self.palette, self.altitude)
                start = self._screen(x, y)
                if x < width - 1:
                    yield start, self._screen(x + 1, y), colour
                if y < height - 1:
                    yield start, self._screen(x, y + 1), colour

    def pixels(self) -> Iterator[tuple[int, int, int]]:
        """Yield (x, y, colour) for every pixel of the wireframe."""
        for (x0, y0), (x1, y1), colour in self.segments():
            for x, y in line_points(x0, y0, x1, y1):
                yield x, y, colour

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return False when the viewer should close."""
        try:
            key = Key(key)
        except ValueError:
            return True
        if key is Key.ESCAPE:
            return False
        if key is Key.ISOMETRIC:
            self.projection = Projection.ISOMETRIC
        elif key is Key.PARALLEL:
            self.projection = Projection.PARALLEL
        elif key is Key.ELEGANT:
            self.palette = Palette.ELEGANT
        elif key is Key.VIBRANT:
            self.palette = Palette.VIBRANT
        return True


def setup_scene(height_map: HeightMap) -> Scene:
    """Create a scene whose zoom and window size suit the map's size."""
    scene = Scene(height_map)
    for limit, zoom, map_height, map_width in _SIZE_STEPS:
        if height_map.height > limit or height_map.width > limit:
            scene.zoom = zoom
            scene.map_height = map_height
            scene.map_width = map_width
            break
    scene.pos_x = scene.map_width // 2 - scene.map_width // 15
    scene.pos_y = 200
    return scene