"""Demonstration scenes and the command that renders the mirror scene."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

from .camera import Camera, camera, render
from .canvas import Canvas, canvas_to_ppm
from .materials import Material, point_light
from .patterns import Pattern, ring_gradient, stripe_pattern
from .shapes import Plane, Sphere
from .transformations import rotation_z, scaling, translation, view_transformation
from .tuples import color, point, vector
from .world import World

_WHITE = color(1.0, 1.0, 1.0)
_DEFAULT_HSIZE = 480
_DEFAULT_VSIZE = 360


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def clock_canvas() -> Canvas:
    """A 400x400 canvas with a white pixel at each of the twelve hour marks."""
    canvas = Canvas(400, 400)
    centre = translation(canvas.width / 2.0, canvas.height / 2.0, 0.0)
    scale = scaling(75.0, 75.0, 1.0)
    for hour in range(12):
        mark = centre @ scale @ rotation_z(hour * math.pi / 6.0) @ point(0.0, 1.0, 0.0)
        canvas.write_pixel(_round_half_away(mark.x), _round_half_away(mark.y), _WHITE)
    return canvas


def _patterned(pattern: Pattern, transform, base) -> Material:
    pattern.transform = transform
    return Material(color=base, diffuse=0.7, specular=0.3, pattern=pattern)


def _view_camera(hsize: int, vsize: int) -> Camera:
    cam = camera(hsize, vsize, math.pi / 3.0)
    cam.transform = view_transformation(
        point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)
    )
    return cam


def _scene(middle_material: Material) -> tuple[World, Camera]:
    floor = Plane(
        transform=translation(0.0, 0.0, 0.0),
        material=Material(color=color(1.0, 0.9, 0.9), specular=0.0),
    )
    middle = Sphere(transform=translation(-0.5, 1.0, 0.5), material=middle_material)
    right = Sphere(
        transform=translation(1.5, 0.5, -0.5) @ scaling(0.5, 0.5, 0.5),
        material=_patterned(
            stripe_pattern(color(0.5, 1.0, 0.1), _WHITE),
            rotation_z(math.pi / 4.0) @ scaling(0.1, 0.1, 0.1),
            color(0.5, 1.0, 0.1),
        ),
    )
    left = Sphere(
        transform=translation(-1.5, 0.33, -0.75) @ scaling(0.33, 0.33, 0.33),
        material=_patterned(
            ring_gradient(color(1.0, 0.8, 0.1), color(0.8, 1.0, 0.1)),
            scaling(0.1, 0.1, 0.1),
            color(1.0, 0.8, 0.1),
        ),
    )
    w = World(
        objects=[floor, middle, right, left],
        lights=[point_light(point(-10.0, 3.0, -10.0), _WHITE)],
    )
    return w, _view_camera(_DEFAULT_HSIZE, _DEFAULT_VSIZE)


def pattern_world() -> tuple[World, Camera]:
    """A floor and three patterned spheres, with the camera that views them."""
    middle = _patterned(
        stripe_pattern(color(0.1, 1.0, 0.5), _WHITE),
        scaling(0.25, 0.25, 0.25),
        color(0.1, 1.0, 0.5),
    )
    return _scene(middle)


def mirror_world() -> tuple[World, Camera]:
    """Like the pattern scene, but with a transparent, reflective middle sphere."""
    middle = Material(
        transparency=0.9,
        shininess=0.9,
        refractive_index=0.3,
        reflective=0.5,
    )
    return _scene(middle)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv: list[str] | None = None) -> int:
    """Render the mirror scene to a PPM file."""
    parser = argparse.ArgumentParser(description="Render the mirror scene to a PPM file.")
    parser.add_argument("--hsize", type=_positive_int, default=_DEFAULT_HSIZE)
    parser.add_argument("--vsize", type=_positive_int, default=_DEFAULT_VSIZE)
    parser.add_argument("-o", "--output", type=Path, default=None)
    args = parser.parse_args(argv)

    w, _ = mirror_world()
    cam = _view_camera(args.hsize, args.vsize)
    output = args.output or Path(f"world-with-mirrors{args.hsize}x{args.vsize}.ppm")
    output.write_text(canvas_to_ppm(render(cam, w)))
    print("Done")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())