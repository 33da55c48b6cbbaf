# raytrace

Building blocks for a ray tracer in plain Python, with no third-party
dependencies: colours, a pixel canvas that writes PPM images, square
matrices with cached inverses, point lights and surface patterns.

## Modules

### `raytrace.colors`

- `Color(red, green, blue)` — an immutable RGB triple. Supports `+`, `-`,
  `*` by another `Color` (component-wise) and `*` by a number. Equality
  compares each channel within a tolerance of `EPSILON` (0.00001); colours
  are not hashable.
- `Color.to_byte(value)` — scales a channel by 255, rounds up and clamps
  to 0..255 (NaN gives 0).
- `is_close(a, b)` — true when two floats differ by less than `EPSILON`.

### `raytrace.canvas`

- `Canvas(width, height)` — a grid of colours, all black to begin with,
  with `width` and `height` attributes.
- `pixel_at(x, y)` and `write_pixel(x, y, color)` read and write one
  pixel; coordinates outside the canvas raise `IndexError`.
- `fill(color)` sets every pixel.
- `to_ppm()` returns plain PPM (P3) text with a maximum value of 255;
  pixel lines are wrapped so none reaches 70 characters, and the text
  ends with a newline.
- `save(path)` writes that text to a file.

### `raytrace.lights`

- `Light(position, intensity)` — a frozen dataclass;
  `Light.point_light(position, intensity)` builds one. The position may be
  any point object you use.

### `raytrace.matrices`

- `Matrix(rows)` — a square matrix of size 2, 3 or 4. Rows of unequal
  length raise `AsymmetricMatrixError`; any other size raises
  `InvalidSizeError`.
- `Matrix.empty(size)` and `Matrix.identity()` (4x4).
- `m[row, column]` reads and writes elements; `size`, `rows` and
  `is_inverted` describe the matrix.
- `transpose()` (4x4 only), `determinant()`, `submatrix(row, column)`,
  `minor(row, column)`, `cofactor(row, column)` and `invertible()`.
- `calculate_inverse()` computes and caches the inverse and returns the
  matrix itself; a zero determinant raises `NonInvertibleError`. The
  `inverse` property returns the cached inverse, or raises
  `NotInvertedError` if it has not been calculated.
- `*` multiplies two 4x4 matrices, or a 4x4 matrix by a 4-element tuple
  (giving a tuple) or by an object with `x`, `y`, `z`, `w` attributes
  (giving an object of the same type). Other sizes raise
  `InvalidSizeError`.

All errors derive from `MatrixError`.

### `raytrace.patterns`

- `Pattern` — the abstract base. Each pattern starts with the identity as
  its `transform`. `set_transform(matrix)` stores a copy with its inverse
  calculated. `pattern_at(point)` gives the colour at a point in pattern
  space; `pattern_at_object(object_transform, world_point)` maps a world
  point through the inverse of an object's transform (which must already
  have its inverse calculated) and then through the pattern's own.
- `Stripes(color_a, color_b)` — alternates along x.
- `Gradient(color_a, color_b)` — blends linearly, repeating each unit of x.
- `Ring(color_a, color_b)` — concentric rings around the y axis.
- `Checker(color_a, color_b)` — alternating unit cubes.
- `Solid(color)` — one colour everywhere.

Two-colour patterns default to white and black; `Solid` defaults to
black. Points may be 3- or 4-element sequences or objects with `x`, `y`,
`z` attributes.

## What this package does not do

There are no shapes, rays, intersections, shading, world, camera or
rendering here, and no command-line program: the package supplies the
pieces listed above, and producing an image from a scene is left to the
code that uses them.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from raytrace.canvas import Canvas
from raytrace.colors import Color

canvas = Canvas(5, 3)
canvas.write_pixel(0, 0, Color(1.5, 0.0, 0.0))
canvas.write_pixel(2, 1, Color(0.0, 0.5, 0.0))
canvas.save("out.ppm")
```

```python
from raytrace.matrices import Matrix

m = Matrix([
    [8.0, -5.0, 9.0, 2.0],
    [7.0, 5.0, 6.0, 1.0],
    [-6.0, 0.0, 9.0, 6.0],
    [-3.0, 0.0, -9.0, -4.0],
])
m.calculate_inverse()
print(m.inverse)
print(m * (1.0, 2.0, 3.0, 1.0))
```

```python
from raytrace.colors import Color
from raytrace.patterns import Stripes

stripes = Stripes(Color(1.0, 1.0, 1.0), Color(0.0, 0.0, 0.0))
print(stripes.color_at((0.5, 0.0, 0.0)))
```