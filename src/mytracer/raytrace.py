import uuid
from typing import Iterable, Optional

from flax.struct import dataclass, field

from .material import Material
from .matrix import Matrix
from .transformation import Transform
from .tuples import Tuple
from .utils import EPSILON


@dataclass
class Ray:
    """
    Half-line `origin + direction * t`.

    `origin` is a point and `direction` a vector. The direction is not
    normalised: transforming a ray into object space stretches it, and the
    intersection parameters stay valid in world space because of that.
    """
    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        return self.origin + self.direction * t

    def transform(self, by: Matrix) -> "Ray":
        # the direction has w == 0, so translation leaves it untouched
        return Ray(origin=by @ self.origin, direction=by @ self.direction)


@dataclass
class Intersection:
    """
    Candidate hit of a ray at parameter `t`.

    Only the identity of the body is kept. A world also records the position
    of the body in its own body sequence as `body_index`, since copies made
    with `transform` or `set_material` share one `object_id`.
    """
    t: float
    object_id: uuid.UUID = field(pytree_node=False)
    body_index: Optional[int] = field(pytree_node=False, default=None)

    def prepare_computations(self, ray: Ray, body: "Body") -> "Computations":
        """
        Precompute the shading inputs for this intersection.

        `body` must be the body the intersection was produced by.
        """
        if body.id != self.object_id:
            raise ValueError(f"Intersection belongs to body {self.object_id}, got {body.id}")

        point = ray.position(self.t)
        normalv = body.normal_at(point)
        eyev = -ray.direction

        # The ray starts inside the body when the normal points away from the eye
        inside = normalv.dot(eyev) < 0
        if inside:
            normalv = -normalv

        return Computations(
            t=self.t,
            object_id=self.object_id,
            body_index=self.body_index,
            point=point,
            over_point=point + normalv * EPSILON,
            eyev=eyev,
            normalv=normalv,
            inside=inside,
        )


@dataclass
class Computations:
    """
    Shading inputs of one intersection.

    `over_point` is `point` nudged along the normal; it is the origin of
    shadow rays so a surface never shadows itself through rounding errors.
    """
    t: float
    object_id: uuid.UUID = field(pytree_node=False)
    body_index: Optional[int] = field(pytree_node=False)
    point: Tuple
    over_point: Tuple
    eyev: Tuple
    normalv: Tuple
    inside: bool


def sort_intersections(intersections: Iterable[Intersection]) -> list[Intersection]:
    return sorted(intersections, key=lambda i: i.t)


def find_hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """
    The visible intersection: the lowest non-negative `t`.

    Intersections behind the ray origin are ignored. Returns None when there
    is no such intersection, which is a miss and not an error.
    """
    for intersection in sort_intersections(intersections):
        if intersection.t >= 0:
            return intersection
    return None


@dataclass
class Body:
    """
    Base class of every renderable primitive.

    Bodies are immutable values. `transform` and `set_material` return a copy
    that keeps the identity of the original, so intersections computed with
    either copy refer to the same body.

    Subclasses only describe their geometry in object space by implementing
    `local_intersect` and `local_normal_at`.
    """
    id: uuid.UUID = field(pytree_node=False, default_factory=uuid.uuid4)
    transformation: Transform = field(default_factory=Transform.identity)
    material: Material = field(default_factory=Material)

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        raise NotImplementedError("local_intersect() method not implemented in base class")

    def local_normal_at(self, point: Tuple) -> Tuple:
        raise NotImplementedError("local_normal_at() method not implemented in base class")

    def intersect(self, ray: Ray) -> list[Intersection]:
        """
        Intersect a world-space ray with the body.

        Raises NotInvertibleError when the body's transformation is singular.
        """
        local_ray = ray.transform(self.transformation.inverse())
        return self.local_intersect(local_ray)

    def normal_at(self, world_point: Tuple) -> Tuple:
        inverse = self.transformation.inverse()
        local_normal = self.local_normal_at(inverse @ world_point)

        # The inverse transpose keeps normals perpendicular under non-uniform
        # scaling, but it also drags the translation into w.
        world_normal = inverse.transpose() @ local_normal
        world_normal = Tuple(world_normal.x, world_normal.y, world_normal.z, 0.0)
        return world_normal.normalize()

    def transform(self, by: Matrix) -> "Body":
        return self.replace(transformation=Transform.from_matrix(self.transformation @ by))

    def set_transformation(self, transformation: Matrix) -> "Body":
        return self.replace(transformation=Transform.from_matrix(transformation))

    def set_material(self, material: Material) -> "Body":
        return self.replace(material=material)

    def get_transformation(self) -> Transform:
        return self.transformation

    def get_material(self) -> Material:
        return self.material
