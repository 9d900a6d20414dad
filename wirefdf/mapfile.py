"""Reading height-map files into a rectangular grid of integers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from wirefdf.textutil import atoi, iter_lines, split, word_count


class MapError(ValueError):
    """Raised when a height-map file cannot be opened or is not valid."""


@dataclass(frozen=True)
class HeightMap:
    """A grid of heights; ``rows[y][x]`` is the height at column x, row y."""

    rows: tuple[tuple[int, ...], ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def at(self, x: int, y: int) -> int:
        """Return the height at column *x* of row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"point ({x}, {y}) is outside the map")
        return self.rows[y][x]


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of space-separated integers.

    The width is the number of words on the last line. Longer rows are cut
    to that width; shorter rows make the map invalid.
    """
    collected = list(lines)
    if not collected:
        raise MapError("Your map is not valid")
    width = word_count(collected[-1])
    if width == 0:
        raise MapError("Your map is not valid")
    rows = []
    for number, line in enumerate(collected, start=1):
        values = [atoi(token) for token in split(line, " ")]
        if len(values) < width:
            raise MapError(f"Your map is not valid: row {number} has fewer than {width} values")
        rows.append(tuple(values[:width]))
    return HeightMap(tuple(rows))


def read_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the height-map file at *path*."""
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError as exc:
        raise MapError("Invalid Map") from exc
    with handle:
        return parse_map(iter_lines(handle))