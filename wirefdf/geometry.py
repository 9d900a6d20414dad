"""Isometric projection and Bresenham line rasterisation."""

from __future__ import annotations

import math
from typing import Iterator

ANGLE = 0.523599
"""Projection angle in radians (about 30 degrees)."""

_COS = math.cos(ANGLE)
_SIN = math.sin(ANGLE)


def isometric(x: int, y: int, z: int) -> tuple[int, int]:
    """Project a 3D grid point onto the screen, truncating toward zero."""
    screen_x = int((x - y) * _COS)
    screen_y = int(-z + (x + y) * _SIN)
    return screen_x, screen_y


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of the line from (x0, y0) toward (x1, y1).

    The start point is included and the end point is not, so a line whose
    ends coincide yields nothing.
    """
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while x != x1 or y != y1:
        yield x, y
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy