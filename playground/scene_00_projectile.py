from mytracer.canvas import Canvas
from mytracer.color import Color
from mytracer.config import RenderSettings
from mytracer.tuples import point, vector

settings = RenderSettings(width=800, height=400)
canvas = Canvas(settings.width, settings.height)

position = point(0, 1, 0)
velocity = vector(1, 1.8, 0).normalize() * 11.25
gravity = vector(0, -0.1, 0)
wind = vector(-0.01, 0, 0)

# y grows downwards on the canvas, so flip the height
while 0 <= round(position.x) < canvas.width and position.y >= 0:
    y = min(canvas.height - 1, max(0, round(position.y)))
    canvas.write_pixel(round(position.x), canvas.height - 1 - y, Color(0, 1, 0))
    position = position + velocity
    velocity = velocity + gravity + wind

canvas.save(settings.output_path("projectile"))
