import math

from flax.struct import dataclass

from .raytrace import Body, Intersection, Ray
from .tuples import ORIGIN, Tuple, vector
from .utils import EPSILON


@dataclass
class Sphere(Body):
    """Unit sphere centred at the object-space origin."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []

        # A tangent ray still yields two (equal) intersections
        root = math.sqrt(discriminant)
        return [
            Intersection(t=(-b - root) / (2 * a), object_id=self.id),
            Intersection(t=(-b + root) / (2 * a), object_id=self.id),
        ]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return point - ORIGIN


@dataclass
class Plane(Body):
    """The object-space x-z plane, facing +y."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        # Parallel and coplanar rays never hit
        if abs(ray.direction.y) < EPSILON:
            return []
        t = -ray.origin.y / ray.direction.y
        return [Intersection(t=t, object_id=self.id)]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return vector(0, 1, 0)
