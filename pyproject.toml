[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytrace"
version = "0.1.0"
description = "Building blocks for a ray tracer: colours, canvases with PPM output, square matrices, point lights and surface patterns."
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "ppm", "matrix", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["raytrace"]

[tool.pytest.ini_options]
addopts = "-ra"
