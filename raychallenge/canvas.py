"""A pixel grid and its plain PPM (P3) serialisation."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from .tuples import Color

_BLACK = Color(0.0, 0.0, 0.0)
_MAX_LINE = 70


@dataclass
class Canvas:
    """A width by height grid of colours, initially black."""

    width: int
    height: int
    pixels: list[Color] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.pixels = [_BLACK] * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} canvas")
        return y * self.width + x

    def write_pixel(self, x: int, y: int, c: Color) -> None:
        self.pixels[self._index(x, y)] = c

    def pixel_at(self, x: int, y: int) -> Color:
        return self.pixels[self._index(x, y)]

    def rows(self) -> Iterator[list[Color]]:
        for y in range(self.height):
            yield self.pixels[y * self.width : (y + 1) * self.width]


def _channel(value: float) -> str:
    scaled = min(max(value * 255.0, 0.0), 255.0)
    return str(int(math.floor(scaled + 0.5)))


def _wrapped(tokens: list[str]) -> Iterator[str]:
    line: list[str] = []
    length = 0
    for token in tokens:
        size = len(token) + 1
        if line and length + size > _MAX_LINE:
            yield " ".join(line)
            line, length = [], 0
        line.append(token)
        length += size
    if line:
        yield " ".join(line)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialise a canvas as plain PPM with lines of at most 70 characters."""
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]
    for row in canvas.rows():
        tokens = [_channel(v) for c in row for v in (c.red, c.green, c.blue)]
        lines.extend(_wrapped(tokens))
    return "\n".join(lines) + "\n"