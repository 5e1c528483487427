from numbers import Real

import numpy as np

from .types import Rgb
from .utils import EPSILON


class Color:
    """
    RGB color. Channels are unclamped floats; clamping only happens when a
    color is converted to 8 bit for output.
    """

    __slots__ = ("_data",)

    def __init__(self, red: float, green: float, blue: float):
        self._data: Rgb = np.array([red, green, blue], dtype=np.float64)

    @staticmethod
    def from_array(arr: Rgb) -> "Color":
        arr = np.asarray(arr, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Color needs exactly 3 channels, got shape {arr.shape}")
        color = Color.__new__(Color)
        color._data = arr
        return color

    @staticmethod
    def black() -> "Color":
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> "Color":
        return Color(1.0, 1.0, 1.0)

    @property
    def red(self) -> float:
        return float(self._data[0])

    @property
    def green(self) -> float:
        return float(self._data[1])

    @property
    def blue(self) -> float:
        return float(self._data[2])

    def as_array(self) -> Rgb:
        return self._data.copy()

    def as_8bit(self) -> tuple[int, int, int]:
        """Clamp to [0, 1] and scale to 0-255, rounding to the nearest step."""
        r, g, b = np.rint(np.clip(self._data, 0.0, 1.0) * 255).astype(int).tolist()
        return r, g, b

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data + other._data)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color.from_array(self._data - other._data)

    def __mul__(self, other) -> "Color":
        # Color * Color is the Hadamard product
        if isinstance(other, Color):
            return Color.from_array(self._data * other._data)
        if isinstance(other, Real):
            return Color.from_array(self._data * other)
        return NotImplemented

    def __rmul__(self, other) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None

    def __iter__(self):
        return iter(self._data.tolist())

    def __repr__(self) -> str:
        r, g, b = self._data.tolist()
        return f"Color({r:g}, {g:g}, {b:g})"
