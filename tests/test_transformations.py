import math

from raychallenge.matrix import Matrix, identity, inverse
from raychallenge.transformations import (
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transformation,
)
from raychallenge.tuples import point, vector

HALF_SQRT2 = math.sqrt(2) / 2


def test_multiplying_by_translation():
    assert translation(5, -3, 2) @ point(-3, 4, 5) == point(2, 1, 7)


def test_multiplying_by_inverse_translation():
    inv = inverse(translation(5, -3, 2))
    assert inv @ point(-3, 4, 5) == point(-8, 7, 3)


def test_translation_does_not_affect_vectors():
    v = vector(-3, 4, 5)
    result = translation(5, -3, 2) @ v
    assert result == v
    assert result.w == 0.0


def test_scaling_a_point():
    assert scaling(2, 3, 4) @ point(-4, 6, 8) == point(-8, 18, 32)


def test_scaling_a_vector():
    assert scaling(2, 3, 4) @ vector(-4, 6, 8) == vector(-8, 18, 32)


def test_inverse_scaling():
    assert inverse(scaling(2, 3, 4)) @ vector(-4, 6, 8) == vector(-2, 2, 2)


def test_reflection_is_negative_scaling():
    assert scaling(-1, 1, 1) @ point(2, 3, 4) == point(-2, 3, 4)


def test_rotating_around_x():
    p = point(0, 1, 0)
    assert rotation_x(math.pi / 4) @ p == point(0, HALF_SQRT2, HALF_SQRT2)
    assert rotation_x(math.pi / 2) @ p == point(0, 0, 1)


def test_rotating_around_y():
    p = point(0, 0, 1)
    assert rotation_y(math.pi / 4) @ p == point(HALF_SQRT2, 0, HALF_SQRT2)
    assert rotation_y(math.pi / 2) @ p == point(1, 0, 0)


def test_rotating_around_z():
    p = point(0, 1, 0)
    assert rotation_z(math.pi / 4) @ p == point(-HALF_SQRT2, HALF_SQRT2, 0)
    assert rotation_z(math.pi / 2) @ p == point(-1, 0, 0)


def test_shearing_x_in_proportion_to_y():
    assert shearing(1, 0, 0, 0, 0, 0) @ point(2, 3, 4) == point(5, 3, 4)


def test_shearing_x_in_proportion_to_z():
    assert shearing(0, 1, 0, 0, 0, 0) @ point(2, 3, 4) == point(6, 3, 4)


def test_shearing_y_in_proportion_to_x():
    assert shearing(0, 0, 1, 0, 0, 0) @ point(2, 3, 4) == point(2, 5, 4)


def test_shearing_y_in_proportion_to_z():
    assert shearing(0, 0, 0, 1, 0, 0) @ point(2, 3, 4) == point(2, 7, 4)


def test_shearing_z_in_proportion_to_x():
    assert shearing(0, 0, 0, 0, 1, 0) @ point(2, 3, 4) == point(2, 3, 6)


def test_shearing_z_in_proportion_to_y():
    assert shearing(0, 0, 0, 0, 0, 1) @ point(2, 3, 4) == point(2, 3, 7)


def test_transformations_in_sequence():
    p = point(1, 0, 1)
    p2 = rotation_x(math.pi / 2) @ p
    assert p2 == point(1, -1, 0)
    p3 = scaling(5, 5, 5) @ p2
    assert p3 == point(5, -5, 0)
    p4 = translation(10, 5, 7) @ p3
    assert p4 == point(15, 0, 7)


def test_chained_transformations_in_reverse_order():
    t = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
    assert t @ point(1, 0, 1) == point(15, 0, 7)


def test_view_default_orientation():
    t = view_transformation(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
    assert t == identity()


def test_view_looking_in_positive_z():
    t = view_transformation(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
    assert t == scaling(-1, 1, -1)


def test_view_moves_the_world():
    t = view_transformation(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
    assert t == translation(0, 0, -8)


def test_arbitrary_view_transformation():
    t = view_transformation(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
    assert t == Matrix(
        [
            [-0.50709, 0.50709, 0.67612, -2.36643],
            [0.76772, 0.60609, 0.12122, -2.82843],
            [-0.35857, 0.59761, -0.71714, 0.00000],
            [0.00000, 0.00000, 0.00000, 1.00000],
        ]
    )