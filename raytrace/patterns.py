"""Colour patterns that vary over space, each with its own transformation."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any

from raytrace.colors import Color
from raytrace.matrices import Matrix

WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def _xyz(point: Any) -> tuple[float, float, float]:
    """Return the spatial coordinates of a point object or sequence."""
    if all(hasattr(point, name) for name in ("x", "y", "z")):
        return point.x, point.y, point.z
    x, y, z, *_ = point
    return x, y, z


def _homogeneous(point: Any) -> Any:
    """Return the point in a form a 4x4 matrix can multiply."""
    if all(hasattr(point, name) for name in ("x", "y", "z", "w")):
        return point
    values = tuple(point)
    if len(values) == 3:
        return (*values, 1.0)
    if len(values) == 4:
        return values
    raise ValueError(f"a point needs 3 or 4 coordinates, not {len(values)}")


class Pattern(ABC):
    """A colour pattern with a transformation from object space to pattern space."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self.transform = Matrix.identity().calculate_inverse()

    @abstractmethod
    def color_at(self, point: Any) -> Color:
        """Return the colour at a point given in pattern space."""

    def set_transform(self, transformation: Matrix) -> None:
        """Use a copy of the given matrix as this pattern's transformation."""
        self.transform = Matrix(transformation.rows).calculate_inverse()

    def pattern_at(self, point: Any) -> Color:
        """Return the colour at a point in pattern space."""
        return self.color_at(point)

    def pattern_at_object(self, object_transform: Matrix, world_point: Any) -> Color:
        """Return the colour at a world point on an object with the given transform.

        The object's transform must have its inverse calculated.
        """
        object_point = object_transform.inverse * _homogeneous(world_point)
        pattern_point = self.transform.inverse * object_point
        return self.pattern_at(pattern_point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in vars(self).items() if name != "transform"
        )
        return f"{type(self).__name__}({fields})"


class Stripes(Pattern):
    """Alternating stripes along the x axis."""

    def __init__(self, color_a: Color = WHITE, color_b: Color = BLACK) -> None:
        super().__init__()
        self.color_a = color_a
        self.color_b = color_b

    def color_at(self, point: Any) -> Color:
        x, _, _ = _xyz(point)
        return self.color_a if math.floor(x) % 2 == 0 else self.color_b


class Gradient(Pattern):
    """A linear blend from one colour to another, repeating each unit of x."""

    def __init__(self, color_a: Color = WHITE, color_b: Color = BLACK) -> None:
        super().__init__()
        self.color_a = color_a
        self.color_b = color_b

    def color_at(self, point: Any) -> Color:
        x, _, _ = _xyz(point)
        distance = self.color_b - self.color_a
        fraction = x - math.floor(x)
        return self.color_a + distance * fraction


class Ring(Pattern):
    """Concentric rings around the y axis."""

    def __init__(self, color_a: Color = WHITE, color_b: Color = BLACK) -> None:
        super().__init__()
        self.color_a = color_a
        self.color_b = color_b

    def color_at(self, point: Any) -> Color:
        x, _, z = _xyz(point)
        magnitude = math.sqrt(x * x + z * z)
        return self.color_a if math.floor(magnitude) % 2 == 0 else self.color_b


class Checker(Pattern):
    """Alternating cubes in all three dimensions."""

    def __init__(self, color_a: Color = WHITE, color_b: Color = BLACK) -> None:
        super().__init__()
        self.color_a = color_a
        self.color_b = color_b

    def color_at(self, point: Any) -> Color:
        x, y, z = _xyz(point)
        total = math.floor(x) + math.floor(y) + math.floor(z)
        return self.color_a if total % 2 == 0 else self.color_b


class Solid(Pattern):
    """A single colour everywhere."""

    def __init__(self, color: Color = BLACK) -> None:
        super().__init__()
        self.color = color

    def color_at(self, point: Any) -> Color:
        return self.color