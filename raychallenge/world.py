"""A scene of shapes and lights, and the shading of rays through it."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .materials import PointLight, lighting, material, point_light
from .shapes import Intersection, Ray, Shape, hit as find_hit, position, ray, sphere
from .transformations import scaling
from .tuples import EPS, Color, Tuple, color, dot, magnitude, normalize, point, reflect

DEFAULT_REFLECTION_NUMBER = 4

_BLACK = Color(0.0, 0.0, 0.0)
_VACUUM_INDEX = 1.0


@dataclass
class World:
    """The shapes and lights that make up a scene."""

    objects: list[Shape] = field(default_factory=list)
    lights: list[PointLight] = field(default_factory=list)


@dataclass(frozen=True, eq=False)
class Computation:
    """Values precomputed at a hit, shared by the shading functions."""

    t: float
    object: Shape
    point: Tuple
    eye_v: Tuple
    normal_v: Tuple
    inside: bool
    over_point: Tuple
    under_point: Tuple
    reflect_v: Tuple
    n1: float
    n2: float


def world() -> World:
    """An empty world."""
    return World()


def default_world() -> World:
    """Two concentric spheres lit from the upper left."""
    light = point_light(point(-10.0, 10.0, -10.0), color(1.0, 1.0, 1.0))

    outer = sphere()
    outer_material = material()
    outer_material.color = color(0.8, 1.0, 0.6)
    outer_material.diffuse = 0.7
    outer_material.specular = 0.2
    outer.material = outer_material

    inner = sphere()
    inner.transform = scaling(0.5, 0.5, 0.5)
    return World(objects=[outer, inner], lights=[light])


def intersect_world(w: World, r: Ray) -> list[Intersection]:
    """All intersections of the ray with the world, sorted by t."""
    return sorted((i for obj in w.objects for i in obj.intersect(r)), key=lambda i: i.t)


def _current_index(containers: list[Shape]) -> float:
    return containers[-1].material.refractive_index if containers else _VACUUM_INDEX


def _refractive_indices(hit: Intersection, xs: list[Intersection]) -> tuple[float, float]:
    containers: list[Shape] = []
    for candidate in xs:
        is_hit = candidate == hit
        if is_hit:
            n1 = _current_index(containers)
        if candidate.object in containers:
            containers.remove(candidate.object)
        else:
            containers.append(candidate.object)
        if is_hit:
            return n1, _current_index(containers)
    return 0.0, 0.0


def prepare_computations(hit: Intersection, r: Ray, xs: list[Intersection]) -> Computation:
    """Precompute the geometry and refractive indices at a hit."""
    pt = position(r, hit.t)
    eye_v = -r.direction
    normal_v = hit.object.normal_at(pt)
    inside = dot(normal_v, eye_v) < 0.0
    if inside:
        normal_v = -normal_v
    n1, n2 = _refractive_indices(hit, xs)
    return Computation(
        t=hit.t,
        object=hit.object,
        point=pt,
        eye_v=eye_v,
        normal_v=normal_v,
        inside=inside,
        over_point=pt + normal_v * EPS,
        under_point=pt - normal_v * EPS,
        reflect_v=reflect(r.direction, normal_v),
        n1=n1,
        n2=n2,
    )


def shade_hit(w: World, comps: Computation, remaining: int = DEFAULT_REFLECTION_NUMBER) -> Color:
    """Surface colour plus reflected and refracted contributions at a hit."""
    shadowed = is_shadowed(w, comps.over_point)
    surface = lighting(
        comps.object.material,
        comps.object,
        w.lights[0],
        comps.over_point,
        comps.eye_v,
        comps.normal_v,
        shadowed,
    )
    return surface + reflected_color(w, comps, remaining) + refracted_color(w, comps, remaining)


def reflected_color(
    w: World, comps: Computation, remaining: int = DEFAULT_REFLECTION_NUMBER
) -> Color:
    reflective = comps.object.material.reflective
    if remaining <= 0 or reflective == 0.0:
        return _BLACK
    reflect_ray = ray(comps.over_point, comps.reflect_v)
    return color_at(w, reflect_ray, remaining - 1) * reflective


def _ratio(n1: float, n2: float) -> float:
    if n2 != 0.0:
        return n1 / n2
    if n1 == 0.0:
        return math.nan
    return math.copysign(math.inf, n1)


def refracted_color(
    w: World, comps: Computation, remaining: int = DEFAULT_REFLECTION_NUMBER
) -> Color:
    transparency = comps.object.material.transparency
    if remaining <= 0 or transparency == 0.0:
        return _BLACK
    n_ratio = _ratio(comps.n1, comps.n2)
    cos_i = dot(comps.eye_v, comps.normal_v)
    sin2_t = n_ratio**2 * (1.0 - cos_i**2)
    if sin2_t > 1.0:
        return _BLACK
    cos_t = math.sqrt(1.0 - sin2_t) if sin2_t <= 1.0 else math.nan
    direction = comps.normal_v * (n_ratio * cos_i - cos_t) - comps.eye_v * n_ratio
    refracted_ray = ray(comps.under_point, direction)
    return color_at(w, refracted_ray, remaining - 1) * transparency


def color_at(w: World, r: Ray, remaining: int = DEFAULT_REFLECTION_NUMBER) -> Color:
    """The colour seen along a ray, black when nothing is hit."""
    xs = intersect_world(w, r)
    found = find_hit(xs)
    if found is None:
        return _BLACK
    return shade_hit(w, prepare_computations(found, r, xs), remaining)


def is_shadowed(w: World, p: Tuple) -> bool:
    """Whether an object lies between the point and the first light."""
    v = w.lights[0].position - p
    distance = magnitude(v)
    shadow_ray = ray(p, normalize(v))
    found = find_hit(intersect_world(w, shadow_ray))
    return found is not None and found.t < distance