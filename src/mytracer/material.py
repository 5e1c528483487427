import math

from flax.struct import dataclass, field

from .color import Color
from .errors import OutOfRangeError
from .lighting import Light
from .tuples import Tuple
from .utils import float_eq


def _check_unit_interval(name: str, value: float):
    if not (0.0 <= value <= 1.0):
        raise OutOfRangeError(f"{name} must be within [0, 1], got {value}")


@dataclass
class Material:
    """
    Phong reflectance parameters.

    Instances are immutable; the `set_*` methods return a validated copy.
    """

    color: Color = field(default_factory=Color.white)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self):
        _check_unit_interval("ambient", self.ambient)
        _check_unit_interval("diffuse", self.diffuse)
        _check_unit_interval("specular", self.specular)
        if not (self.shininess >= 10.0) or math.isinf(self.shininess):
            raise OutOfRangeError(f"shininess must be a finite value >= 10, got {self.shininess}")

    def set_color(self, color: Color) -> "Material":
        return self.replace(color=color)

    def set_ambient(self, ambient: float) -> "Material":
        return self.replace(ambient=ambient)

    def set_diffuse(self, diffuse: float) -> "Material":
        return self.replace(diffuse=diffuse)

    def set_specular(self, specular: float) -> "Material":
        return self.replace(specular=specular)

    def set_shininess(self, shininess: float) -> "Material":
        return self.replace(shininess=shininess)

    def lighting(
            self,
            light: Light,
            position: Tuple,
            eyev: Tuple,
            normalv: Tuple,
            in_shadow: bool = False,
        ) -> Color:
        """
        Phong shading of `position` lit by `light`, seen along `eyev`.

        Ambient light always reaches the surface. Diffuse and specular
        contributions are dropped when the point is in shadow, when the light
        is behind the surface or placed on the point itself, and (specular
        only) when the reflection points away from the eye.
        """
        effective_color = self.color * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        to_light = light.position - position
        if float_eq(to_light.magnitude(), 0.0):
            # a light sitting on the surface has no direction
            return ambient
        lightv = to_light.normalize()
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0:
            # light on the far side of the surface
            return ambient

        diffuse = effective_color * (self.diffuse * light_dot_normal)

        reflectv = (-lightv).reflect(normalv)
        reflect_dot_eye = reflectv.dot(eyev)
        if reflect_dot_eye < 0:
            return ambient + diffuse

        factor = reflect_dot_eye ** self.shininess
        specular = light.intensity * (self.specular * factor)
        return ambient + diffuse + specular
