"""Constructors for 4x4 transformation matrices."""

from __future__ import annotations

import math

from .matrix import Matrix
from .tuples import Tuple, cross, normalize


def translation(x: float, y: float, z: float) -> Matrix:
    return Matrix([[1, 0, 0, x], [0, 1, 0, y], [0, 0, 1, z], [0, 0, 0, 1]])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([[x, 0, 0, 0], [0, y, 0, 0], [0, 0, z, 0], [0, 0, 0, 1]])


def rotation_x(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([[1, 0, 0, 0], [0, c, -s, 0], [0, s, c, 0], [0, 0, 0, 1]])


def rotation_y(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([[c, 0, s, 0], [0, 1, 0, 0], [-s, 0, c, 0], [0, 0, 0, 1]])


def rotation_z(r: float) -> Matrix:
    c, s = math.cos(r), math.sin(r)
    return Matrix([[c, -s, 0, 0], [s, c, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    return Matrix([[1, xy, xz, 0], [yx, 1, yz, 0], [zx, zy, 1, 0], [0, 0, 0, 1]])


def view_transformation(from_point: Tuple, to: Tuple, up: Tuple) -> Matrix:
    """Orient the world relative to an eye at from_point looking at to."""
    forward = normalize(to - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0],
            [true_up.x, true_up.y, true_up.z, 0],
            [-forward.x, -forward.y, -forward.z, 0],
            [0, 0, 0, 1],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)