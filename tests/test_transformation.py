import math
import unittest

from mytracer.errors import ShapeMismatchError
from mytracer.matrix import Matrix
from mytracer.transformation import (
    Axis,
    Transform,
    rotation,
    scaling,
    shearing,
    translation,
    view_transform,
)
from mytracer.tuples import point, vector

HALF_SQRT2 = math.sqrt(2) / 2


class TranslationTests(unittest.TestCase):
    def test_moves_points(self) -> None:
        transform = translation(5, -3, 2)
        self.assertEqual(transform @ point(-3, 4, 5), point(2, 1, 7))
        self.assertEqual(transform.inverse() @ point(-3, 4, 5), point(-8, 7, 3))

    def test_leaves_vectors_alone(self) -> None:
        self.assertEqual(translation(5, -3, 2) @ vector(-3, 4, 5), vector(-3, 4, 5))


class ScalingTests(unittest.TestCase):
    def test_scales_points_and_vectors(self) -> None:
        transform = scaling(2, 3, 4)
        self.assertEqual(transform @ point(-4, 6, 8), point(-8, 18, 32))
        self.assertEqual(transform @ vector(-4, 6, 8), vector(-8, 18, 32))
        self.assertEqual(transform.inverse() @ vector(-4, 6, 8), vector(-2, 2, 2))

    def test_reflection_is_negative_scaling(self) -> None:
        self.assertEqual(scaling(-1, 1, 1) @ point(2, 3, 4), point(-2, 3, 4))


class RotationTests(unittest.TestCase):
    def test_around_x(self) -> None:
        p = point(0, 1, 0)
        self.assertEqual(rotation(Axis.X, math.pi / 4) @ p, point(0, HALF_SQRT2, HALF_SQRT2))
        self.assertEqual(rotation(Axis.X, math.pi / 2) @ p, point(0, 0, 1))
        self.assertEqual(rotation(Axis.X, math.pi / 4).inverse() @ p, point(0, HALF_SQRT2, -HALF_SQRT2))

    def test_around_y(self) -> None:
        p = point(0, 0, 1)
        self.assertEqual(rotation(Axis.Y, math.pi / 4) @ p, point(HALF_SQRT2, 0, HALF_SQRT2))
        self.assertEqual(rotation(Axis.Y, math.pi / 2) @ p, point(1, 0, 0))

    def test_around_z(self) -> None:
        p = point(0, 1, 0)
        self.assertEqual(rotation(Axis.Z, math.pi / 4) @ p, point(-HALF_SQRT2, HALF_SQRT2, 0))
        self.assertEqual(rotation(Axis.Z, math.pi / 2) @ p, point(-1, 0, 0))


class ShearingTests(unittest.TestCase):
    def test_each_coordinate_pair(self) -> None:
        p = point(2, 3, 4)
        cases = [
            ((1, 0, 0, 0, 0, 0), point(5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), point(6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), point(2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), point(2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), point(2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), point(2, 3, 7)),
        ]
        for factors, expected in cases:
            with self.subTest(factors=factors):
                self.assertEqual(shearing(*factors) @ p, expected)


class ChainingTests(unittest.TestCase):
    def test_individual_transformations_in_sequence(self) -> None:
        p = point(1, 0, 1)
        p2 = rotation(Axis.X, math.pi / 2) @ p
        self.assertEqual(p2, point(1, -1, 0))
        p3 = scaling(5, 5, 5) @ p2
        self.assertEqual(p3, point(5, -5, 0))
        p4 = translation(10, 5, 7) @ p3
        self.assertEqual(p4, point(15, 0, 7))

    def test_chained_builders_apply_last_factor_first(self) -> None:
        transform = Transform.identity().translate(10, 5, 7).scale(5, 5, 5).rotate(Axis.X, math.pi / 2)
        self.assertIsInstance(transform, Transform)
        self.assertEqual(transform @ point(1, 0, 1), point(15, 0, 7))
        expected = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation(Axis.X, math.pi / 2)
        self.assertEqual(transform, expected)

    def test_shear_builder(self) -> None:
        transform = Transform.identity().shear(1, 0, 0, 0, 0, 0)
        self.assertEqual(transform @ point(2, 3, 4), point(5, 3, 4))

    def test_transform_must_be_4x4(self) -> None:
        with self.assertRaises(ShapeMismatchError):
            Transform([[1, 0], [0, 1]])
        with self.assertRaises(ShapeMismatchError):
            Transform.identity(3)

    def test_from_matrix(self) -> None:
        transform = Transform.from_matrix(Matrix.identity())
        self.assertIsInstance(transform, Transform)
        self.assertEqual(transform, Matrix.identity())


class ViewTransformTests(unittest.TestCase):
    def test_default_orientation(self) -> None:
        transform = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        self.assertEqual(transform, Matrix.identity())

    def test_looking_in_positive_z(self) -> None:
        transform = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        self.assertEqual(transform, scaling(-1, 1, -1))

    def test_moves_the_world(self) -> None:
        transform = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        self.assertEqual(transform, translation(0, 0, -8))

    def test_arbitrary_view(self) -> None:
        transform = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        self.assertEqual(transform, Matrix([
            [-0.50709, 0.50709, 0.67612, -2.36643],
            [0.76772, 0.60609, 0.12122, -2.82843],
            [-0.35857, 0.59761, -0.71714, 0.00000],
            [0.00000, 0.00000, 0.00000, 1.00000],
        ]))


if __name__ == "__main__":
    unittest.main()
