"""A small ray tracer: spheres and planes, patterns, Phong lighting, shadows, reflection and refraction, with PPM output."""

__version__ = "0.1.0"