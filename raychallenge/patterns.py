"""Procedural colour patterns applied to shape surfaces."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol

from .matrix import Matrix, identity, inverse
from .tuples import Color, Tuple, color


class _Transformed(Protocol):
    transform: Matrix


def _blend(a: Color, b: Color, fraction: float) -> Color:
    return a + (b - a) * fraction


def _radius(point: Tuple) -> float:
    return math.sqrt(point.x**2 + point.z**2)


class Pattern(ABC):
    """A colour function over pattern space with its own transformation."""

    transform: Matrix

    @abstractmethod
    def pattern_at(self, point: Tuple) -> Color:
        """Colour at a point given in pattern space."""

    def pattern_at_shape(self, shape: _Transformed, point: Tuple) -> Color:
        """Colour at a world-space point on the given shape."""
        object_point = inverse(shape.transform) @ point
        pattern_point = inverse(self.transform) @ object_point
        return self.pattern_at(pattern_point)


@dataclass
class StripePattern(Pattern):
    """Alternating stripes along x."""

    a: Color
    b: Color
    transform: Matrix = field(default_factory=identity)

    def pattern_at(self, point: Tuple) -> Color:
        return self.a if math.floor(point.x % 2.0) == 0 else self.b


@dataclass
class TestPattern(Pattern):
    """Returns the pattern-space coordinates as a colour."""

    __test__ = False

    transform: Matrix = field(default_factory=identity)

    def pattern_at(self, point: Tuple) -> Color:
        return color(point.x, point.y, point.z)


@dataclass
class GradientPattern(Pattern):
    """Linear blend from a to b repeating every unit along x."""

    a: Color
    b: Color
    transform: Matrix = field(default_factory=identity)

    def pattern_at(self, point: Tuple) -> Color:
        return _blend(self.a, self.b, point.x - math.floor(point.x))


@dataclass
class CheckersPattern(Pattern):
    """Alternating cells based on the summed absolute coordinates."""

    a: Color
    b: Color
    transform: Matrix = field(default_factory=identity)

    def pattern_at(self, point: Tuple) -> Color:
        total = abs(point.x) + abs(point.y) + abs(point.z)
        return self.a if math.floor(total % 2.0) == 0 else self.b


@dataclass
class RingPattern(Pattern):
    """Concentric rings in the xz plane."""

    a: Color
    b: Color
    transform: Matrix = field(default_factory=identity)

    def pattern_at(self, point: Tuple) -> Color:
        return self.a if math.floor(_radius(point) % 2.0) == 0 else self.b


@dataclass
class RadialGradient(Pattern):
    """Concentric gradient rings in the xz plane."""

    a: Color
    b: Color
    transform: Matrix = field(default_factory=identity)

    def pattern_at(self, point: Tuple) -> Color:
        v = _radius(point) % 2.0
        return _blend(self.a, self.b, v - math.floor(v))


def stripe_pattern(a: Color, b: Color) -> StripePattern:
    return StripePattern(a, b)


def test_pattern() -> TestPattern:
    return TestPattern()


test_pattern.__test__ = False  # type: ignore[attr-defined]


def gradient_pattern(a: Color, b: Color) -> GradientPattern:
    return GradientPattern(a, b)


def checkers_pattern(a: Color, b: Color) -> CheckersPattern:
    return CheckersPattern(a, b)


def ring_pattern(a: Color, b: Color) -> RingPattern:
    return RingPattern(a, b)


def ring_gradient(a: Color, b: Color) -> RadialGradient:
    return RadialGradient(a, b)