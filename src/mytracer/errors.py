class RaytraceError(Exception):
    """Base class of every error raised by mytracer."""


class InvalidOperandError(RaytraceError, TypeError):
    """A vector-only operation received a point."""


class NotInvertibleError(RaytraceError, ArithmeticError):
    """Inverse requested on a matrix whose determinant is (nearly) zero."""


class OutOfRangeError(RaytraceError, ValueError):
    """A material parameter lies outside its domain."""


class OutOfBoundsError(RaytraceError, IndexError):
    """A pixel coordinate or a scene index lies outside its container."""


class ShapeMismatchError(RaytraceError, ValueError):
    """Matrix dimensions do not fit the requested operation."""


class FrozenSceneError(RaytraceError, RuntimeError):
    """A frozen world was asked to change."""
