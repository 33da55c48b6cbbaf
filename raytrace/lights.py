"""Light sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from raytrace.colors import Color


@dataclass(frozen=True)
class Light:
    """A light with a position in space and a colour intensity."""

    position: Any
    intensity: Color

    @classmethod
    def point_light(cls, position: Any, intensity: Color) -> Light:
        """Create a point light at the given position."""
        return cls(position=position, intensity=intensity)