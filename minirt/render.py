"""Camera rays, sphere intersection and rendering of a scene into pixels."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.scene import Camera, Color, Scene, Sphere
from minirt.vector import Vec3

WIDTH = 800
HEIGHT = 600

WORLD_UP = Vec3(0.0, 1.0, 0.0)
SKY_TOP = Color(135.0, 206.0, 235.0)
SKY_BOTTOM = Color(25.0, 25.0, 112.0)


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Vec3
    direction: Vec3


def init_camera(camera: Camera) -> None:
    """Compute the camera's forward, right and up vectors from its direction."""
    camera.forward = camera.direction.normalized()
    camera.right = camera.forward.cross(WORLD_UP).normalized()
    camera.up = camera.right.cross(camera.forward)


def hit_sphere(ray: Ray, sphere: Sphere) -> float:
    """Return the discriminant of the ray-sphere equation.

    A non-negative value means the ray's line meets the sphere.
    """
    oc = ray.origin - sphere.center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - sphere.radius * sphere.radius
    return b * b - 4.0 * a * c


def primary_ray(camera: Camera, x: int, y: int, width: int, height: int) -> Ray:
    """Return the ray through pixel ``(x, y)`` of a ``width`` by ``height`` image."""
    aspect_ratio = width / height
    scale = math.tan((camera.fov * math.pi / 180.0) / 2.0)
    px = (2.0 * ((x + 0.5) / width) - 1.0) * aspect_ratio * scale
    py = 1.0 - 2.0 * ((y + 0.5) / height) * scale
    direction = (camera.forward + (camera.right * px + camera.up * py)).normalized()
    return Ray(camera.position, direction)


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate between ``a`` and ``b``."""
    return a + t * (b - a)


def lerp_color(c1: Color, c2: Color, t: float) -> Color:
    """Interpolate each channel between two colours."""
    return Color(lerp(c1.r, c2.r, t), lerp(c1.g, c2.g, t), lerp(c1.b, c2.b, t))


def _rgba(color: Color) -> bytes:
    return bytes(
        (int(color.r) & 0xFF, int(color.g) & 0xFF, int(color.b) & 0xFF, 255)
    )


def _row_blend(y: int, height: int) -> float:
    # The gradient lags one row behind: rows 0 and 1 share the top colour.
    if height < 2:
        return 0.0
    return max(y - 1, 0) / (height - 1)


def render(scene: Scene, width: int = WIDTH, height: int = HEIGHT) -> bytes:
    """Render the scene into RGBA bytes, row by row from the top.

    Pixels whose ray meets a sphere take the colour of the first such sphere
    in scene order; the rest show a vertical sky gradient. The camera basis
    must already be set up with :func:`init_camera`.
    """
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")
    camera = scene.camera
    pixels = bytearray()
    for y in range(height):
        background = lerp_color(SKY_TOP, SKY_BOTTOM, _row_blend(y, height))
        for x in range(width):
            ray = primary_ray(camera, x, y, width, height)
            color = next(
                (s.color for s in scene.spheres if hit_sphere(ray, s) >= 0),
                background,
            )
            pixels += _rgba(color)
    return bytes(pixels)