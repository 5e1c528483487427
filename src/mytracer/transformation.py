import math
from enum import Enum

import numpy as np

from .errors import ShapeMismatchError
from .matrix import Matrix
from .tuples import Tuple


class Axis(Enum):
    X = "x"
    Y = "y"
    Z = "z"


class Transform(Matrix):
    """
    4x4 affine matrix mapping object space to world space.

    The builder methods right-multiply the new factor, so a chain reads in the
    order the factors appear:

        translation(1, 0, 0).scale(2, 2, 2)   # == translation @ scaling
    """

    __slots__ = ()

    def __init__(self, rows):
        super().__init__(rows)
        if self.shape != (4, 4):
            raise ShapeMismatchError(f"Transform must be 4x4, got {self.shape}")

    @classmethod
    def identity(cls, size: int = 4) -> "Transform":
        if size != 4:
            raise ShapeMismatchError(f"Transform must be 4x4, got size {size}")
        return super().identity(4)

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "Transform":
        if isinstance(matrix, Transform):
            return matrix
        return cls(matrix.as_array())

    def translate(self, x: float, y: float, z: float) -> "Transform":
        return self @ translation(x, y, z)

    def scale(self, x: float, y: float, z: float) -> "Transform":
        return self @ scaling(x, y, z)

    def rotate(self, axis: Axis, radians: float) -> "Transform":
        return self @ rotation(axis, radians)

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "Transform":
        return self @ shearing(xy, xz, yx, yz, zx, zy)


def translation(x: float, y: float, z: float) -> Transform:
    data = np.eye(4)
    data[:3, 3] = (x, y, z)
    return Transform._wrap(data)


def scaling(x: float, y: float, z: float) -> Transform:
    return Transform._wrap(np.diag([x, y, z, 1.0]))


def rotation(axis: Axis, radians: float) -> Transform:
    """Right-handed rotation by `radians` around one of the coordinate axes."""
    cos, sin = math.cos(radians), math.sin(radians)
    data = np.eye(4)
    if axis is Axis.X:
        data[1:3, 1:3] = [[cos, -sin], [sin, cos]]
    elif axis is Axis.Y:
        data[0, 0], data[0, 2] = cos, sin
        data[2, 0], data[2, 2] = -sin, cos
    elif axis is Axis.Z:
        data[0:2, 0:2] = [[cos, -sin], [sin, cos]]
    else:
        raise ValueError(f"Unknown rotation axis: {axis!r}")
    return Transform._wrap(data)


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Transform:
    """
    Shear where each coordinate moves in proportion to the other two,
    e.g. `xy` moves x in proportion to y.
    """
    data = np.eye(4)
    data[0, 1], data[0, 2] = xy, xz
    data[1, 0], data[1, 2] = yx, yz
    data[2, 0], data[2, 1] = zx, zy
    return Transform._wrap(data)


def view_transform(from_: Tuple, to: Tuple, up: Tuple) -> Transform:
    """
    World-to-camera matrix for an eye at `from_` looking at `to`.

    `up` only needs to point roughly upwards; the true up vector is
    re-derived so the basis is orthonormal.
    """
    forward = (to - from_).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = np.eye(4)
    orientation[0, :3] = (left.x, left.y, left.z)
    orientation[1, :3] = (true_up.x, true_up.y, true_up.z)
    orientation[2, :3] = (-forward.x, -forward.y, -forward.z)

    return Transform._wrap(orientation) @ translation(-from_.x, -from_.y, -from_.z)
