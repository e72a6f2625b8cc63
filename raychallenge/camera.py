"""A pinhole camera that maps canvas pixels to world rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .canvas import Canvas
from .matrix import Matrix, identity, inverse
from .shapes import Ray
from .tuples import normalize, point
from .world import DEFAULT_REFLECTION_NUMBER, World, color_at


@dataclass
class Camera:
    """Image size, field of view and the view transformation."""

    hsize: int
    vsize: int
    field_of_view: float
    half_width: float
    half_height: float
    pixel_size: float
    transform: Matrix = field(default_factory=identity)


def camera(hsize: int, vsize: int, field_of_view: float) -> Camera:
    """A camera at the origin looking down negative z."""
    half_view = math.tan(field_of_view / 2.0)
    aspect = hsize / vsize
    if aspect >= 1.0:
        half_width, half_height = half_view, half_view / aspect
    else:
        half_width, half_height = half_view * aspect, half_view
    return Camera(
        hsize=hsize,
        vsize=vsize,
        field_of_view=field_of_view,
        half_width=half_width,
        half_height=half_height,
        pixel_size=half_width * 2.0 / hsize,
    )


def ray_for_pixel(cam: Camera, px: int, py: int) -> Ray:
    """The world ray through the centre of the given pixel."""
    x_offset = (px + 0.5) * cam.pixel_size
    y_offset = (py + 0.5) * cam.pixel_size
    world_x = cam.half_width - x_offset
    world_y = cam.half_height - y_offset

    inv = inverse(cam.transform)
    pixel = inv @ point(world_x, world_y, -1.0)
    origin = inv @ point(0.0, 0.0, 0.0)
    return Ray(origin, normalize(pixel - origin))


def render(cam: Camera, w: World) -> Canvas:
    """Render the world into a new canvas of the camera's size."""
    image = Canvas(cam.hsize, cam.vsize)
    for y in range(cam.vsize):
        for x in range(cam.hsize):
            image.write_pixel(x, y, color_at(w, ray_for_pixel(cam, x, y), DEFAULT_REFLECTION_NUMBER))
    return image