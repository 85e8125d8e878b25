"""Ray tracer that reads .rt scene files and renders spheres over a sky gradient."""

__version__ = "0.1.0"