import uuid
from typing import Iterable, Optional

from loguru import logger

from .color import Color
from .errors import FrozenSceneError, OutOfBoundsError
from .lighting import Light, PointLight
from .material import Material
from .objects import Sphere
from .raytrace import Body, Computations, Intersection, Ray, find_hit, sort_intersections
from .transformation import scaling
from .tuples import Tuple, point
from .utils import float_eq


class World:
    """
    Scene graph: the lights and bodies rendered together.

    A world is built by adding lights and bodies, then `freeze()` returns an
    immutable snapshot for rendering. Both answer the same queries.
    """

    def __init__(self, objects: Iterable[Body] = (), lights: Iterable[Light] = ()):
        self._objects: list[Body] | tuple[Body, ...] = list(objects)
        self._lights: list[Light] | tuple[Light, ...] = list(lights)
        self._frozen = False
        self._lookup: Optional[dict[uuid.UUID, Body]] = None

    @staticmethod
    def default() -> "World":
        """
        One white light at (-10, 10, -10) and two concentric spheres: a
        green-ish unit sphere and a default sphere scaled by 0.5.
        """
        light = PointLight(position=point(-10, 10, -10), intensity=Color.white())
        outer = Sphere(
            material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
        )
        inner = Sphere(transformation=scaling(0.5, 0.5, 0.5))
        return World(objects=[outer, inner], lights=[light])

    @property
    def objects(self) -> tuple[Body, ...]:
        return tuple(self._objects)

    @property
    def lights(self) -> tuple[Light, ...]:
        return tuple(self._lights)

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self):
        if self._frozen:
            raise FrozenSceneError("Cannot modify a frozen world")

    def add_object(self, body: Body) -> "World":
        self._check_mutable()
        self._objects.append(body)
        return self

    def add_light(self, light: Light) -> "World":
        self._check_mutable()
        self._lights.append(light)
        return self

    def remove_light(self, index: int) -> Light:
        self._check_mutable()
        if not 0 <= index < len(self._lights):
            raise OutOfBoundsError(f"Light index {index} out of range (world has {len(self._lights)} lights)")
        return self._lights.pop(index)

    def remove_object(self, index: int) -> Body:
        self._check_mutable()
        if not 0 <= index < len(self._objects):
            raise OutOfBoundsError(f"Object index {index} out of range (world has {len(self._objects)} objects)")
        return self._objects.pop(index)

    def freeze(self) -> "World":
        """Immutable snapshot of the current scene; a frozen world returns itself."""
        if self._frozen:
            return self

        snapshot = World.__new__(World)
        snapshot._objects = tuple(self._objects)
        snapshot._lights = tuple(self._lights)
        snapshot._frozen = True
        snapshot._lookup = {}
        for body in snapshot._objects:
            snapshot._lookup.setdefault(body.id, body)
        logger.debug(f"Frozen world with {len(snapshot._objects)} objects and {len(snapshot._lights)} lights")
        return snapshot

    def get_object(self, object_id: uuid.UUID) -> Body:
        """First body with `object_id`; copies of one body share their id."""
        if self._lookup is not None:
            body = self._lookup.get(object_id)
        else:
            body = next((b for b in self._objects if b.id == object_id), None)
        if body is None:
            raise KeyError(f"No object with id {object_id} in this world")
        return body

    def _resolve(self, object_id: uuid.UUID, body_index: Optional[int]) -> Body:
        if body_index is None:
            return self.get_object(object_id)
        body = self._objects[body_index]
        if body.id != object_id:
            raise KeyError(f"Body at index {body_index} is not object {object_id}")
        return body

    def intersect(self, ray: Ray) -> list[Intersection]:
        """
        Intersections with every body, sorted by ascending `t`.

        Each intersection carries the index of its body in `objects`.
        """
        intersections = []
        for index, body in enumerate(self._objects):
            intersections.extend(i.replace(body_index=index) for i in body.intersect(ray))
        return sort_intersections(intersections)

    def is_shadowed(self, position: Tuple, light: Optional[Light] = None) -> bool:
        """
        Whether something blocks the path from `position` to `light`.

        Without a light, the point counts as shadowed when it is shadowed from
        at least one light of the world.
        """
        if light is None:
            return any(self.is_shadowed(position, each) for each in self._lights)

        to_light = light.position - position
        distance = to_light.magnitude()
        if float_eq(distance, 0.0):
            # nothing fits between a point and a light placed on it
            return False
        hit = find_hit(self.intersect(Ray(origin=position, direction=to_light.normalize())))
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: Computations) -> Color:
        """Sum of the contributions of every light, each with its own shadow test."""
        material = self._resolve(comps.object_id, comps.body_index).material
        color = Color.black()
        for light in self._lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            color = color + material.lighting(light, comps.point, comps.eyev, comps.normalv, shadowed)
        return color

    def color_at(self, ray: Ray) -> Color:
        hit = find_hit(self.intersect(ray))
        if hit is None:
            return Color.black()
        comps = hit.prepare_computations(ray, self._resolve(hit.object_id, hit.body_index))
        return self.shade_hit(comps)
