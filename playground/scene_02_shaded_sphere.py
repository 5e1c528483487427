from mytracer.canvas import Canvas
from mytracer.color import Color
from mytracer.config import RenderSettings
from mytracer.lighting import PointLight
from mytracer.material import Material
from mytracer.objects import Sphere
from mytracer.raytrace import Ray, find_hit
from mytracer.tuples import point

settings = RenderSettings(width=200, height=200)

ray_origin = point(0, 0, -5)
wall_z = 10
wall_size = 7.0
pixel_size = wall_size / settings.width
half_wall = wall_size / 2

canvas = Canvas(settings.width, settings.height)
shape = Sphere().set_material(Material().set_color(Color(1, 0.2, 1)))
light = PointLight(position=point(-10, 10, -10), intensity=Color.white())

for y in range(settings.height):
    world_y = half_wall - pixel_size * y
    for x in range(settings.width):
        world_x = -half_wall + pixel_size * x
        target = point(world_x, world_y, wall_z)
        ray = Ray(origin=ray_origin, direction=(target - ray_origin).normalize())
        hit = find_hit(shape.intersect(ray))
        if hit is None:
            continue
        hit_point = ray.position(hit.t)
        color = shape.material.lighting(light, hit_point, -ray.direction, shape.normal_at(hit_point))
        canvas.write_pixel(x, y, color)

canvas.save(settings.output_path("shaded_sphere"))
