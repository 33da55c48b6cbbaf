"""A rectangular grid of colours that can be written out as a PPM image."""

from __future__ import annotations

import os
from collections.abc import Iterator

from raytrace.colors import Color

_MAX_LINE = 70


class Canvas:
    """A width-by-height grid of pixels, all black to begin with."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._pixels = [[Color(0.0, 0.0, 0.0)] * width for _ in range(height)]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside canvas of {self.width}x{self.height}"
            )

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the colour at column x, row y."""
        self._check(x, y)
        return self._pixels[y][x]

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the colour at column x, row y."""
        self._check(x, y)
        self._pixels[y][x] = color

    def fill(self, color: Color) -> None:
        """Set every pixel to the same colour."""
        self._pixels = [[color] * self.width for _ in range(self.height)]

    def _row_lines(self, row: list[Color]) -> Iterator[str]:
        parts: list[str] = []
        length = 0
        for pixel in row:
            for channel in (pixel.red, pixel.green, pixel.blue):
                token = f"{Color.to_byte(channel)} "
                if length + len(token) >= _MAX_LINE:
                    yield "".join(parts).rstrip(" ")
                    parts, length = [], 0
                parts.append(token)
                length += len(token)
        if parts:
            yield "".join(parts).rstrip(" ")

    def to_ppm(self) -> str:
        """Render the canvas as plain PPM (P3) text, lines kept under 70 characters."""
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for row in self._pixels:
            lines.extend(self._row_lines(row))
        return "\n".join(lines) + "\n"

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the canvas to a PPM file."""
        with open(path, "w", encoding="ascii", newline="\n") as handle:
            handle.write(self.to_ppm())