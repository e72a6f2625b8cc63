"""Rays, intersections and the shapes they hit."""

from __future__ import annotations

import math
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .materials import Material
from .materials import material as default_material
from .matrix import Matrix, identity, inverse, transpose
from .tuples import EPS, Tuple, dot, normalize, point, vector


@dataclass(frozen=True)
class Ray:
    origin: Tuple
    direction: Tuple


def ray(origin: Tuple, direction: Tuple) -> Ray:
    return Ray(origin, direction)


def position(ray: Ray, t: float) -> Tuple:
    """The point at distance t along the ray."""
    return ray.origin + ray.direction * t


def transform_ray(ray: Ray, m: Matrix) -> Ray:
    return Ray(m @ ray.origin, m @ ray.direction)


class Shape(ABC):
    """A transformable object with a material and a unique id."""

    def __init__(self, transform: Matrix | None = None, material: Material | None = None):
        self.id = uuid.uuid4()
        self.transform = transform if transform is not None else identity()
        self.material = material if material is not None else default_material()

    @abstractmethod
    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersections with a ray given in object space."""

    @abstractmethod
    def local_normal_at(self, point: Tuple) -> Tuple:
        """Surface normal at a point given in object space."""

    def intersect(self, ray: Ray) -> list[Intersection]:
        return self.local_intersect(transform_ray(ray, inverse(self.transform)))

    def normal_at(self, point: Tuple) -> Tuple:
        inv = inverse(self.transform)
        local_normal = self.local_normal_at(inv @ point)
        world_normal = transpose(inv) @ local_normal
        return normalize(vector(world_normal.x, world_normal.y, world_normal.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id})"


@dataclass(frozen=True, eq=False)
class Intersection:
    t: float
    object: Shape

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.object.id == other.object.id

    __hash__ = None  # type: ignore[assignment]


def intersection(t: float, obj: Shape) -> Intersection:
    return Intersection(t, obj)


def hit(xs: list[Intersection]) -> Intersection | None:
    """The intersection with the lowest non-negative t, if any."""
    return next((i for i in sorted(xs, key=lambda i: i.t) if i.t >= 0.0), None)


class Sphere(Shape):
    """A unit sphere centred on the origin."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        sphere_to_ray = ray.origin - point(0.0, 0.0, 0.0)
        a = dot(ray.direction, ray.direction)
        b = 2.0 * dot(ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []
        root = math.sqrt(discriminant)
        return [
            Intersection((-b - root) / (2.0 * a), self),
            Intersection((-b + root) / (2.0 * a), self),
        ]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return vector(point.x, point.y, point.z)


class Plane(Shape):
    """The infinite xz plane."""

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        if abs(ray.direction.y) < EPS:
            return []
        return [Intersection(-ray.origin.y / ray.direction.y, self)]

    def local_normal_at(self, point: Tuple) -> Tuple:
        return vector(0.0, 1.0, 0.0)


class TestShape(Shape):
    """A shape that records the last local ray and never reports hits."""

    __test__ = False

    def __init__(self, transform: Matrix | None = None, material: Material | None = None):
        super().__init__(transform, material)
        self.saved_ray = Ray(point(0.0, 0.0, 0.0), vector(0.0, 0.0, 0.0))

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        self.saved_ray = ray
        return []

    def local_normal_at(self, point: Tuple) -> Tuple:
        return vector(point.x, point.y, point.z)


def sphere() -> Sphere:
    return Sphere()


def glass_sphere() -> Sphere:
    glass = default_material()
    glass.transparency = 1.0
    glass.refractive_index = 1.5
    return Sphere(material=glass)


def plane() -> Plane:
    return Plane()


def test_shape() -> TestShape:
    return TestShape()


test_shape.__test__ = False  # type: ignore[attr-defined]