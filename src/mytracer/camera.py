import math
from datetime import datetime
from typing import Optional

from loguru import logger

from .canvas import Canvas, PixelSink
from .matrix import Matrix
from .raytrace import Ray
from .transformation import Transform
from .tuples import ORIGIN, point
from .world import World


class Camera:
    def __init__(
            self,
            hsize: int,
            vsize: int,
            field_of_view: float,
            transformation: Optional[Matrix] = None,
        ):
        """
        Pinhole camera looking down -z from the origin of camera space.

        Parameters:
            - hsize, vsize: Canvas size in pixels.
            - field_of_view: Angle in radians covered by the longer side of
              the canvas.
            - transformation: World-to-camera view matrix, identity when
              omitted. See `transformation.view_transform`.
        """
        if hsize < 1 or vsize < 1:
            raise ValueError(f"Camera requires hsize and vsize >= 1, got {hsize}x{vsize}")

        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transformation = (
            Transform.identity() if transformation is None else Transform.from_matrix(transformation)
        )

        # The canvas sits one unit in front of the eye; half_view is half its
        # extent along the longer side.
        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def set_transform(self, transformation: Matrix) -> "Camera":
        self.transformation = Transform.from_matrix(transformation)
        return self

    def transform(self, by: Matrix) -> "Camera":
        self.transformation = Transform.from_matrix(self.transformation @ by)
        return self

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """World-space ray through the centre of pixel (x, y)."""
        x_offset = (x + 0.5) * self.pixel_size
        y_offset = (y + 0.5) * self.pixel_size

        # camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self.transformation.inverse()
        pixel = inverse @ point(world_x, world_y, -1)
        origin = inverse @ ORIGIN
        direction = (pixel - origin).normalize()
        return Ray(origin=origin, direction=direction)

    def render(self, world: World, sink: Optional[PixelSink] = None) -> PixelSink:
        """
        Trace one ray per pixel through a frozen snapshot of `world` and write
        the colors into `sink` (a new Canvas when omitted), row by row.
        """
        scene = world.freeze()
        if sink is None:
            sink = Canvas(self.hsize, self.vsize)

        logger.info(
            f"Rendering {self.hsize}x{self.vsize}, "
            f"{len(scene.objects)} objects, {len(scene.lights)} lights"
        )
        start_time = datetime.now()

        for y in range(self.vsize):
            for x in range(self.hsize):
                ray = self.ray_for_pixel(x, y)
                sink.write_pixel(x, y, scene.color_at(ray))

        elapsed_time = datetime.now() - start_time
        logger.info(f"Rendering time: {elapsed_time}")
        return sink
