from mytracer.color import Color
from mytracer.config import RenderSettings
from mytracer.lighting import PointLight
from mytracer.material import Material
from mytracer.objects import Plane, Sphere
from mytracer.transformation import translation, view_transform
from mytracer.tuples import point, vector
from mytracer.world import World

settings = RenderSettings(width=500, height=250)

floor = Plane().set_material(Material(color=Color(1, 0.9, 0.9), specular=0))

middle = Sphere(
    transformation=translation(-0.5, 1, 0.5),
    material=Material(color=Color(0.1, 1, 0.5), diffuse=0.7, specular=0.3),
)
right = Sphere(
    transformation=translation(1.5, 0.5, -0.5).scale(0.5, 0.5, 0.5),
    material=Material(color=Color(0.5, 1, 0.1), diffuse=0.7, specular=0.3),
)
left = Sphere(
    transformation=translation(-1.5, 0.33, -0.75).scale(0.33, 0.33, 0.33),
    material=Material(color=Color(1, 0.8, 0.1), diffuse=0.7, specular=0.3),
)

world = World()
world.add_light(PointLight(position=point(-10, 10, -10), intensity=Color.white()))
world.add_object(floor).add_object(middle).add_object(right).add_object(left)

camera = settings.camera().set_transform(
    view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))
)

canvas = camera.render(world)
canvas.save(settings.output_path("world"))
# canvas.to_image().show()
