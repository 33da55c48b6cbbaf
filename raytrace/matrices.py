"""Square matrices of size 2, 3 or 4 for geometric transformations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from raytrace.colors import is_close

_DIM = 4


class MatrixError(Exception):
    """Base class for matrix errors."""


class AsymmetricMatrixError(MatrixError):
    """The rows given do not form a square matrix."""


class InvalidSizeError(MatrixError):
    """The matrix size is not supported by the operation."""


class NonInvertibleError(MatrixError):
    """The matrix has a zero determinant and cannot be inverted."""


class NotInvertedError(MatrixError):
    """The inverse was asked for before it was calculated."""


def _zeros() -> list[list[float]]:
    return [[0.0] * _DIM for _ in range(_DIM)]


class Matrix:
    """A square matrix of size 2, 3 or 4 that can cache its own inverse."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        grid = [[float(value) for value in row] for row in rows]
        size = len(grid)
        if any(len(row) != size for row in grid):
            raise AsymmetricMatrixError("matrix rows must all have as many columns as there are rows")
        if not 2 <= size <= _DIM:
            raise InvalidSizeError(f"matrix size must be 2, 3 or 4, not {size}")
        self._size = size
        self._cells = _zeros()
        for r, row in enumerate(grid):
            self._cells[r][:size] = row
        self._inverse: list[list[float]] | None = None

    @classmethod
    def empty(cls, size: int) -> Matrix:
        """Return a zero matrix of the given size."""
        if not 2 <= size <= _DIM:
            raise InvalidSizeError(f"matrix size must be 2, 3 or 4, not {size}")
        return cls([[0.0] * size for _ in range(size)])

    @classmethod
    def identity(cls) -> Matrix:
        """Return the 4x4 identity matrix."""
        return cls([[1.0 if r == c else 0.0 for c in range(_DIM)] for r in range(_DIM)])

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._size

    def _locate(self, index: tuple[int, int]) -> tuple[int, int]:
        row, column = index
        if not (0 <= row < self._size and 0 <= column < self._size):
            raise IndexError(f"element ({row}, {column}) outside {self._size}x{self._size} matrix")
        return row, column

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = self._locate(index)
        return self._cells[row][column]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = self._locate(index)
        self._cells[row][column] = float(value)

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        """The matrix elements, row by row."""
        return tuple(tuple(row[: self._size]) for row in self._cells[: self._size])

    @property
    def is_inverted(self) -> bool:
        """Whether the inverse has been calculated and cached."""
        return self._inverse is not None

    @property
    def inverse(self) -> Matrix:
        """The cached inverse; raises NotInvertedError if not yet calculated."""
        if self._inverse is None:
            raise NotInvertedError("calculate_inverse() has not been called")
        n = self._size
        return Matrix(row[:n] for row in self._inverse[:n])

    def transpose(self) -> Matrix:
        """Return the transpose of a 4x4 matrix."""
        if self._size != _DIM:
            raise InvalidSizeError("only 4x4 matrices can be transposed")
        return Matrix(zip(*self.rows))

    def determinant(self) -> float:
        """Return the determinant."""
        cells = self._cells
        if self._size == 2:
            return cells[0][0] * cells[1][1] - cells[0][1] * cells[1][0]
        return sum(
            cells[0][column] * self.cofactor(0, column) for column in range(self._size)
        )

    def submatrix(self, row: int, column: int) -> Matrix:
        """Return the matrix with the given row and column removed."""
        if self._size <= 2:
            raise InvalidSizeError("a 2x2 matrix has no submatrix")
        return Matrix(
            [value for c, value in enumerate(cells) if c != column]
            for r, cells in enumerate(self.rows)
            if r != row
        )

    def minor(self, row: int, column: int) -> float:
        """Return the determinant of the submatrix at (row, column)."""
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        """Return the signed minor at (row, column)."""
        if self._size <= 2:
            raise InvalidSizeError("cofactors need a matrix larger than 2x2")
        minor = self.minor(row, column)
        return minor if (row + column) % 2 == 0 else -minor

    def invertible(self) -> bool:
        """Whether the determinant is non-zero."""
        return not is_close(self.determinant(), 0.0)

    def calculate_inverse(self) -> Matrix:
        """Calculate and cache the inverse; return this matrix."""
        det = self.determinant()
        if is_close(det, 0.0):
            raise NonInvertibleError("matrix determinant is zero")
        inverse = _zeros()
        for row in range(self._size):
            for column in range(self._size):
                inverse[column][row] = self.cofactor(row, column) / det
        self._inverse = inverse
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        n = self._size
        return all(
            is_close(self._cells[r][c], other._cells[r][c])
            for r in range(n)
            for c in range(n)
        )

    def __mul__(self, other: Any) -> Any:
        if self._size != _DIM:
            raise InvalidSizeError("only 4x4 matrices can be multiplied")
        if isinstance(other, Matrix):
            if other._size != _DIM:
                raise InvalidSizeError("only 4x4 matrices can be multiplied")
            columns = list(zip(*other._cells))
            return Matrix(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._cells
            )
        if all(hasattr(other, name) for name in ("x", "y", "z", "w")):
            vector: Sequence[float] = (other.x, other.y, other.z, other.w)
            return type(other)(*self._apply(vector))
        try:
            vector = tuple(other)
        except TypeError:
            return NotImplemented
        if len(vector) != _DIM:
            raise InvalidSizeError("a 4x4 matrix multiplies only 4-element tuples")
        return self._apply(vector)

    def _apply(self, vector: Sequence[float]) -> tuple[float, float, float, float]:
        x, y, z, w = (sum(a * b for a, b in zip(row, vector)) for row in self._cells)
        return (x, y, z, w)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.rows]!r})"