import math
import unittest

from mytracer.camera import Camera
from mytracer.canvas import Canvas
from mytracer.color import Color
from mytracer.matrix import Matrix
from mytracer.transformation import Axis, rotation, translation, view_transform
from mytracer.tuples import point, vector
from mytracer.world import World


class RecordingSink:
    """Sink that keeps the writes in call order."""

    def __init__(self):
        self.writes = []

    def write_pixel(self, x, y, color):
        self.writes.append((x, y, color))


class CameraTests(unittest.TestCase):
    def test_construction(self) -> None:
        camera = Camera(160, 120, math.pi / 2)
        self.assertEqual(camera.hsize, 160)
        self.assertEqual(camera.vsize, 120)
        self.assertEqual(camera.field_of_view, math.pi / 2)
        self.assertEqual(camera.transformation, Matrix.identity())

    def test_pixel_size(self) -> None:
        self.assertAlmostEqual(Camera(200, 125, math.pi / 2).pixel_size, 0.01)
        self.assertAlmostEqual(Camera(125, 200, math.pi / 2).pixel_size, 0.01)

    def test_invalid_size(self) -> None:
        with self.assertRaises(ValueError):
            Camera(0, 10, math.pi / 2)

    def test_ray_through_center(self) -> None:
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        self.assertEqual(ray.origin, point(0, 0, 0))
        self.assertEqual(ray.direction, vector(0, 0, -1))

    def test_ray_through_corner(self) -> None:
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        self.assertEqual(ray.origin, point(0, 0, 0))
        self.assertEqual(ray.direction, vector(0.66519, 0.33259, -0.66851))

    def test_ray_when_camera_is_transformed(self) -> None:
        camera = Camera(201, 101, math.pi / 2)
        camera.set_transform(rotation(Axis.Y, math.pi / 4) @ translation(0, -2, 5))
        ray = camera.ray_for_pixel(100, 50)
        half = math.sqrt(2) / 2
        self.assertEqual(ray.origin, point(0, 2, -5))
        self.assertEqual(ray.direction, vector(half, 0, -half))

    def test_chained_transform(self) -> None:
        camera = Camera(201, 101, math.pi / 2).transform(rotation(Axis.Y, math.pi / 4)).transform(translation(0, -2, 5))
        self.assertEqual(camera.transformation, rotation(Axis.Y, math.pi / 4) @ translation(0, -2, 5))


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.world = World.default()
        self.camera = Camera(11, 11, math.pi / 2)
        self.camera.set_transform(view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))

    def test_render_default_world(self) -> None:
        image = self.camera.render(self.world)
        self.assertIsInstance(image, Canvas)
        self.assertEqual((image.width, image.height), (11, 11))
        self.assertEqual(image.pixel_at(5, 5), Color(0.38066, 0.47583, 0.2855))

    def test_render_into_custom_sink(self) -> None:
        sink = RecordingSink()
        result = self.camera.render(self.world, sink)
        self.assertIs(result, sink)
        self.assertEqual(len(sink.writes), 11 * 11)
        # row by row, left to right
        self.assertEqual([(x, y) for x, y, _ in sink.writes[:12]], [(x, 0) for x in range(11)] + [(0, 1)])
        center = next(color for x, y, color in sink.writes if (x, y) == (5, 5))
        self.assertEqual(center, Color(0.38066, 0.47583, 0.2855))

    def test_render_leaves_world_editable(self) -> None:
        self.camera.render(self.world)
        self.assertFalse(self.world.is_frozen)


if __name__ == "__main__":
    unittest.main()
