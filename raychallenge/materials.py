"""Surface materials, point lights and Phong lighting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from .matrix import Matrix
from .patterns import Pattern
from .tuples import Color, Tuple, dot, normalize, reflect

_BLACK = Color(0.0, 0.0, 0.0)


class _Transformed(Protocol):
    transform: Matrix


@dataclass(frozen=True)
class PointLight:
    """A light with no size at a single position."""

    position: Tuple
    intensity: Color


@dataclass(eq=False)
class Material:
    """Surface properties used by the lighting model."""

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0
    pattern: Pattern | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.color == other.color
            and self.specular == other.specular
            and self.diffuse == other.diffuse
            and self.ambient == other.ambient
            and _same_pattern(self.pattern, other.pattern)
        )

    __hash__ = None  # type: ignore[assignment]


def _same_pattern(a: Pattern | None, b: Pattern | None) -> bool:
    if a is None or b is None:
        return a is b
    return a.transform == b.transform


def point_light(position: Tuple, intensity: Color) -> PointLight:
    return PointLight(position, intensity)


def material() -> Material:
    """The default material."""
    return Material()


def lighting(
    material: Material,
    shape: _Transformed,
    light: PointLight,
    point: Tuple,
    eye_v: Tuple,
    normal_v: Tuple,
    in_shadow: bool,
) -> Color:
    """Phong shading of a surface point as seen from eye_v."""
    if material.pattern is None:
        surface = material.color
    else:
        surface = material.pattern.pattern_at_shape(shape, point)
    effective = surface * light.intensity
    ambient = effective * material.ambient
    if in_shadow:
        return ambient

    light_v = normalize(light.position - point)
    light_dot_normal = dot(light_v, normal_v)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective * material.diffuse * light_dot_normal
    reflect_dot_eye = dot(reflect(-light_v, normal_v), eye_v)
    if reflect_dot_eye <= 0.0:
        specular = _BLACK
    else:
        specular = light.intensity * material.specular * reflect_dot_eye**material.shininess
    return ambient + diffuse + specular