from numbers import Real
from typing import Sequence

import numpy as np

from .errors import NotInvertibleError, ShapeMismatchError
from .tuples import Tuple
from .types import MatrixArr
from .utils import EPSILON, float_eq


class Matrix:
    """
    Fixed-size grid of floats, immutable by convention.

    Every operation returns a new matrix, which is what makes it safe to
    memoise the inverse on the instance.
    """

    __slots__ = ("_data", "_inverse")

    def __init__(self, rows: Sequence[Sequence[float]] | MatrixArr):
        data = np.array(rows, dtype=np.float64)
        if data.ndim != 2 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ShapeMismatchError(f"Matrix needs a non-empty 2D grid, got shape {data.shape}")
        self._data: MatrixArr = data
        self._inverse = None

    @classmethod
    def _wrap(cls, data: MatrixArr) -> "Matrix":
        matrix = cls.__new__(cls)
        matrix._data = data
        matrix._inverse = None
        return matrix

    @classmethod
    def identity(cls, size: int = 4) -> "Matrix":
        return cls._wrap(np.eye(size, dtype=np.float64))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return Matrix._wrap(np.zeros((rows, cols), dtype=np.float64))

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    def is_square(self) -> bool:
        return self._data.shape[0] == self._data.shape[1]

    def __getitem__(self, key):
        item = self._data[key]
        if isinstance(item, np.ndarray):
            return item.copy()
        return float(item)

    def as_array(self) -> MatrixArr:
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def __matmul__(self, other):
        if isinstance(other, Tuple):
            if self.shape != (4, 4):
                raise ShapeMismatchError(f"Only 4x4 matrices transform tuples, got {self.shape}")
            return Tuple.from_array(self._data @ other.as_array())
        if isinstance(other, Matrix):
            if self.shape[1] != other.shape[0]:
                raise ShapeMismatchError(f"Cannot multiply {self.shape} by {other.shape}")
            product = self._data @ other._data
            if product.shape == self.shape:
                return type(self)._wrap(product)
            return Matrix._wrap(product)
        return NotImplemented

    def __truediv__(self, scalar: float) -> "Matrix":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Matrix._wrap(self._data / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data.tolist()})"

    def transpose(self) -> "Matrix":
        return Matrix._wrap(self._data.T.copy())

    def _require_square(self, operation: str):
        if not self.is_square():
            raise ShapeMismatchError(f"{operation} needs a square matrix, got {self.shape}")

    def submatrix(self, row: int, column: int) -> "Matrix":
        """Copy of the matrix with `row` and `column` removed."""
        rows, cols = self.shape
        if rows < 2 or cols < 2:
            raise ShapeMismatchError(f"Cannot take a submatrix of {self.shape}")
        data = np.delete(np.delete(self._data, row, axis=0), column, axis=1)
        return Matrix._wrap(data)

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        minor = self.minor(row, column)
        return -minor if (row + column) % 2 else minor

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        2x2 matrices are the base case; a 1x1 matrix is its own determinant.
        """
        self._require_square("Determinant")
        size = self.shape[0]
        if size == 1:
            return float(self._data[0, 0])
        if size == 2:
            (a, b), (c, d) = self._data
            return float(a * d - b * c)
        return sum(float(self._data[0, col]) * self.cofactor(0, col) for col in range(size))

    def is_invertible(self) -> bool:
        return not float_eq(self.determinant(), 0.0)

    def inverse(self) -> "Matrix":
        """
        Transposed cofactor matrix divided by the determinant.

        Raises NotInvertibleError when the determinant is within EPSILON of 0.
        """
        if self._inverse is not None:
            return self._inverse

        det = self.determinant()
        if float_eq(det, 0.0):
            raise NotInvertibleError(f"Matrix is singular (determinant {det:g}): {self!r}")

        size = self.shape[0]
        cofactors = np.array(
            [[self.cofactor(row, col) for col in range(size)] for row in range(size)],
            dtype=np.float64,
        )
        self._inverse = type(self)._wrap(cofactors.T / det)
        return self._inverse
