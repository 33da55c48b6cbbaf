"""RGB colours with component-wise arithmetic and tolerant comparison."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPSILON = 0.00001


def is_close(a: float, b: float) -> bool:
    """Return True when two floats differ by less than EPSILON."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Color:
    """A colour as three floating-point channels, usually within 0..1."""

    red: float
    green: float
    blue: float

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            self.red + other.red,
            self.green + other.green,
            self.blue + other.blue,
        )

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            self.red - other.red,
            self.green - other.green,
            self.blue - other.blue,
        )

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(
                self.red * other.red,
                self.green * other.green,
                self.blue * other.blue,
            )
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            is_close(self.red, other.red)
            and is_close(self.green, other.green)
            and is_close(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def to_byte(value: float) -> int:
        """Scale a channel to 0..255, rounding up and saturating at the ends."""
        scaled = 255.0 * value
        if math.isnan(scaled):
            return 0
        return max(0, min(255, math.ceil(scaled))) if math.isfinite(scaled) else (
            255 if scaled > 0 else 0
        )