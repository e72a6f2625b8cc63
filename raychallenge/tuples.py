"""Points, vectors and colours with tolerant equality."""

from __future__ import annotations

import math
from dataclasses import dataclass

EPS = 0.0001


def _close(a: float, b: float) -> bool:
    return abs(a - b) < EPS


@dataclass(frozen=True, eq=False)
class Tuple:
    """A homogeneous coordinate: a point when w is 1, a vector when w is 0."""

    x: float
    y: float
    z: float
    w: float

    @property
    def is_point(self) -> bool:
        return self.w == 1.0

    @property
    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: Tuple) -> Tuple:
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return _close(self.x, other.x) and _close(self.y, other.y) and _close(self.z, other.z)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB colour with channels nominally in 0..1."""

    red: float
    green: float
    blue: float

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return self * scalar

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            _close(self.red, other.red)
            and _close(self.green, other.green)
            and _close(self.blue, other.blue)
        )

    __hash__ = None  # type: ignore[assignment]


def point(x: float, y: float, z: float) -> Tuple:
    """Return a point (w = 1)."""
    return Tuple(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Return a vector (w = 0)."""
    return Tuple(x, y, z, 0.0)


def color(red: float, green: float, blue: float) -> Color:
    return Color(red, green, blue)


def _require_vector(*values: Tuple) -> None:
    for v in values:
        if v.w != 0.0:
            raise ValueError(f"expected a vector (w == 0), got w == {v.w}")


def magnitude(v: Tuple) -> float:
    _require_vector(v)
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Tuple) -> Tuple:
    _require_vector(v)
    return v / magnitude(v)


def dot(a: Tuple, b: Tuple) -> float:
    _require_vector(a, b)
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross(a: Tuple, b: Tuple) -> Tuple:
    _require_vector(a, b)
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def reflect(incoming: Tuple, normal: Tuple) -> Tuple:
    """Reflect a vector about a surface normal."""
    return incoming - normal * 2.0 * dot(incoming, normal)