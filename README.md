# raychallenge

A compact ray tracer in pure Python. It traces spheres and planes under affine
transformations, shades them with the Phong lighting model and hard shadows,
colours surfaces with procedural patterns, follows reflected and refracted
rays, and writes images in the plain-text PPM (`P3`) format.

There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
raychallenge
```

renders the built-in scene (a floor plane, a reflective and transparent
sphere, and two patterned spheres) and writes it to
`world-with-mirrors<hsize>x<vsize>.ppm` in the current directory, then prints
`Done`. Options:

- `--hsize N` – image width in pixels (default 480)
- `--vsize N` – image height in pixels (default 360)
- `-o PATH`, `--output PATH` – write the image to `PATH` instead

Both sizes must be positive integers. Rendering in pure Python is slow at the
full default size; a smaller size such as `--hsize 120 --vsize 90` finishes
much sooner.

## Library use

```python
import math

from raychallenge.tuples import point, vector, color
from raychallenge.transformations import translation, scaling, view_transformation
from raychallenge.shapes import sphere, plane
from raychallenge.materials import point_light
from raychallenge.patterns import stripe_pattern
from raychallenge.world import world
from raychallenge.camera import camera, render
from raychallenge.canvas import canvas_to_ppm

w = world()
w.lights.append(point_light(point(-10, 10, -10), color(1, 1, 1)))

w.objects.append(plane())

ball = sphere()
ball.transform = translation(0, 1, 0) @ scaling(0.8, 0.8, 0.8)
ball.material.pattern = stripe_pattern(color(1, 0.2, 0.2), color(1, 1, 1))
ball.material.pattern.transform = scaling(0.2, 0.2, 0.2)
w.objects.append(ball)

cam = camera(160, 120, math.pi / 3)
cam.transform = view_transformation(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0))

image = render(cam, w)
with open("scene.ppm", "w") as fh:
    fh.write(canvas_to_ppm(image))
```

Matrices compose with `@` (or `*`), and a 4×4 matrix applied to a point or
vector with `@` transforms it. Points, vectors, colours and matrices compare
equal when their components differ by less than `0.0001`.

### Modules

- `raychallenge.tuples` – `Tuple` (points and vectors) and `Color`, with
  `point`, `vector`, `color`, `magnitude`, `normalize`, `dot`, `cross` and
  `reflect`. Vector operations raise `ValueError` when given a point.
- `raychallenge.matrix` – `Matrix`, `identity`, `transpose`, `determinant`,
  `submatrix`, `minor`, `cofactor` and `inverse`; `inverse` raises
  `ValueError` for a singular matrix.
- `raychallenge.transformations` – `translation`, `scaling`, `rotation_x`,
  `rotation_y`, `rotation_z`, `shearing` and `view_transformation`.
- `raychallenge.patterns` – `StripePattern`, `GradientPattern`,
  `CheckersPattern`, `RingPattern`, `RadialGradient` and `TestPattern`, each
  with its own `transform`, and the factories `stripe_pattern`,
  `gradient_pattern`, `checkers_pattern`, `ring_pattern`, `ring_gradient` and
  `test_pattern`.
- `raychallenge.materials` – `Material`, `PointLight`, `material`,
  `point_light` and the Phong `lighting` function.
- `raychallenge.shapes` – `Ray`, `Intersection`, `Sphere`, `Plane`,
  `TestShape`, and `ray`, `position`, `transform_ray`, `intersection`, `hit`,
  `sphere`, `glass_sphere`, `plane` and `test_shape`.
- `raychallenge.canvas` – `Canvas` (`write_pixel`, `pixel_at`, raising
  `IndexError` outside its bounds) and `canvas_to_ppm`, which keeps lines to
  at most 70 characters.
- `raychallenge.world` – `World`, `Computation`, `world`, `default_world`,
  `intersect_world`, `prepare_computations`, `shade_hit`, `reflected_color`,
  `refracted_color`, `color_at` and `is_shadowed`. Reflection and refraction
  recurse up to `DEFAULT_REFLECTION_NUMBER` (4) levels.
- `raychallenge.camera` – `Camera`, `camera`, `ray_for_pixel` and `render`.
- `raychallenge.scenes` – `clock_canvas` (twelve hour marks on a 400×400
  canvas), `pattern_world` and `mirror_world` (each returning a world and the
  480×360 camera that views it), and `main`, the command-line entry point.

## Limitations

- Only spheres and planes are available; there are no cubes, cylinders,
  cones, triangles or groups of shapes.
- Shading and shadows use only the first light in `World.lights`.
- Images are written only as plain PPM; there is no other image format and no
  on-screen display.