from mytracer.canvas import Canvas
from mytracer.color import Color
from mytracer.config import RenderSettings
from mytracer.objects import Sphere
from mytracer.raytrace import Ray, find_hit
from mytracer.transformation import scaling
from mytracer.tuples import point

settings = RenderSettings(width=100, height=100)

ray_origin = point(0, 0, -5)
wall_z = 10
wall_size = 7.0
pixel_size = wall_size / settings.width
half_wall = wall_size / 2

canvas = Canvas(settings.width, settings.height)
red = Color(1, 0, 0)
shape = Sphere().transform(scaling(1, 0.5, 1))

for y in range(settings.height):
    world_y = half_wall - pixel_size * y
    for x in range(settings.width):
        world_x = -half_wall + pixel_size * x
        target = point(world_x, world_y, wall_z)
        ray = Ray(origin=ray_origin, direction=(target - ray_origin).normalize())
        if find_hit(shape.intersect(ray)) is not None:
            canvas.write_pixel(x, y, red)

canvas.save(settings.output_path("silhouette"))
