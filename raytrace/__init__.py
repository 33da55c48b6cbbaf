"""Colours, PPM canvases, square matrices, point lights and surface patterns."""

__version__ = "0.1.0"

__all__ = ["canvas", "colors", "lights", "matrices", "patterns"]