[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raychallenge"
version = "0.1.0"
description = "A small Whitted-style ray tracer with spheres, planes, patterns, shadows, reflection and refraction, rendering to plain PPM."
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "rendering", "ppm", "graphics", "3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raychallenge = "raychallenge.scenes:main"

[tool.hatch.build.targets.wheel]
packages = ["raychallenge"]

[tool.pytest.ini_options]
addopts = "-ra"
