import math
from numbers import Real

import numpy as np

from .errors import InvalidOperandError
from .types import Vec4
from .utils import EPSILON, float_eq


class Tuple:
    """
    Homogeneous 4-component value.

    `w == 1` marks a point, `w == 0` a vector. Arithmetic is component-wise,
    equality uses the package tolerance.
    """

    __slots__ = ("_data",)

    def __init__(self, x: float, y: float, z: float, w: float):
        self._data: Vec4 = np.array([x, y, z, w], dtype=np.float64)

    @staticmethod
    def from_array(arr: Vec4) -> "Tuple":
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Tuple needs exactly 4 components, got shape {arr.shape}")
        tup = Tuple.__new__(Tuple)
        tup._data = arr
        return tup

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    def as_array(self) -> Vec4:
        return self._data.copy()

    def is_point(self) -> bool:
        return float_eq(self.w, 1.0)

    def is_vector(self) -> bool:
        return float_eq(self.w, 0.0)

    def __add__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._data + other._data)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple.from_array(self._data - other._data)

    def __mul__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Tuple.from_array(self._data * scalar)

    def __rmul__(self, scalar: float) -> "Tuple":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Tuple":
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Division by zero in Tuple")
        return Tuple.from_array(self._data / scalar)

    def __neg__(self) -> "Tuple":
        return Tuple.from_array(-self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __iter__(self):
        return iter(self._data.tolist())

    def __repr__(self) -> str:
        x, y, z, w = self._data.tolist()
        if float_eq(w, 1.0):
            return f"point({x:g}, {y:g}, {z:g})"
        if float_eq(w, 0.0):
            return f"vector({x:g}, {y:g}, {z:g})"
        return f"Tuple({x:g}, {y:g}, {z:g}, {w:g})"

    def magnitude(self) -> float:
        return math.sqrt(float(np.dot(self._data, self._data)))

    def normalize(self) -> "Tuple":
        return self / self.magnitude()

    def _require_vectors(self, other: "Tuple", operation: str):
        if not (self.is_vector() and other.is_vector()):
            raise InvalidOperandError(
                f"{operation} product is only defined for vectors, got {self!r} and {other!r}"
            )

    def dot(self, other: "Tuple") -> float:
        self._require_vectors(other, "Dot")
        return float(np.dot(self._data[:3], other._data[:3]))

    def cross(self, other: "Tuple") -> "Tuple":
        self._require_vectors(other, "Cross")
        x, y, z = np.cross(self._data[:3], other._data[:3])
        return Tuple(x, y, z, 0.0)

    def reflect(self, normal: "Tuple") -> "Tuple":
        """Reflect this vector around `normal`."""
        return self - normal * (2 * self.dot(normal))


def point(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    return Tuple(x, y, z, 0.0)


ORIGIN = point(0, 0, 0)
