import math

import pytest

from minirt.render import (
    SKY_TOP,
    Ray,
    hit_sphere,
    init_camera,
    lerp,
    lerp_color,
    primary_ray,
    render,
)
from minirt.scene import Ambient, Camera, Color, Scene, Sphere
from minirt.vector import Vec3


def _camera(fov=90.0):
    camera = Camera(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), fov)
    init_camera(camera)
    return camera


def _scene(spheres=()):
    return Scene(
        ambient=Ambient(0.2, Color(255.0, 255.0, 255.0)),
        camera=_camera(),
        spheres=list(spheres),
    )


def test_lerp_endpoints():
    assert lerp(3.0, 11.0, 0.0) == 3.0
    assert lerp(3.0, 11.0, 1.0) == 11.0


def test_lerp_color_endpoints():
    a = Color(10.0, 20.0, 30.0)
    b = Color(200.0, 100.0, 0.0)
    assert lerp_color(a, b, 0.0) == a
    assert lerp_color(a, b, 1.0) == b


def test_init_camera_builds_unit_basis():
    camera = Camera(Vec3(1.0, 2.0, 3.0), Vec3(0.0, 0.0, -4.0), 70.0)
    init_camera(camera)
    assert camera.forward == camera.direction.normalized()
    assert math.isclose(camera.right.length(), 1.0)
    assert math.isclose(camera.right.dot(camera.forward), 0.0, abs_tol=1e-9)
    assert math.isclose(camera.up.dot(camera.right), 0.0, abs_tol=1e-9)


def test_hit_sphere_in_front():
    sphere = Sphere(Vec3(0.0, 0.0, -5.0), 1.5, Color(123.0, 0.0, 0.0))
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    assert hit_sphere(ray, sphere) >= 0


def test_hit_sphere_miss():
    sphere = Sphere(Vec3(0.0, 0.0, -5.0), 1.5, Color(123.0, 0.0, 0.0))
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
    assert hit_sphere(ray, sphere) < 0


def test_primary_ray_starts_at_camera_and_is_unit():
    camera = _camera(60.0)
    camera.position = Vec3(1.0, -2.0, 3.0)
    ray = primary_ray(camera, 5, 7, 20, 10)
    assert ray.origin == camera.position
    assert math.isclose(ray.direction.length(), 1.0)


def test_primary_ray_single_pixel_at_ninety_degrees_is_forward():
    camera = _camera(90.0)
    ray = primary_ray(camera, 0, 0, 1, 1)
    assert math.isclose(ray.direction.x, camera.forward.x, abs_tol=1e-9)
    assert math.isclose(ray.direction.y, camera.forward.y, abs_tol=1e-9)
    assert math.isclose(ray.direction.z, camera.forward.z, abs_tol=1e-9)


def test_render_size_and_alpha():
    image = render(_scene(), 6, 4)
    assert len(image) == 6 * 4 * 4
    assert all(alpha == 255 for alpha in image[3::4])


def test_render_top_row_is_sky():
    image = render(_scene(), 3, 5)
    top = bytes((int(SKY_TOP.r), int(SKY_TOP.g), int(SKY_TOP.b), 255))
    assert image[: 3 * 4] == top * 3


def test_render_large_sphere_covers_image():
    color = Color(123.0, 0.0, 0.0)
    scene = _scene([Sphere(Vec3(0.0, 0.0, -5.0), 100.0, color)])
    image = render(scene, 4, 3)
    assert image == bytes((123, 0, 0, 255)) * 12


def test_render_first_sphere_wins():
    first = Sphere(Vec3(0.0, 0.0, -5.0), 100.0, Color(1.0, 2.0, 3.0))
    second = Sphere(Vec3(0.0, 0.0, -5.0), 100.0, Color(9.0, 9.0, 9.0))
    image = render(_scene([first, second]), 2, 2)
    assert image[:4] == bytes((1, 2, 3, 255))


@pytest.mark.parametrize("size", [(0, 3), (3, 0), (-1, 2)])
def test_render_rejects_bad_size(size):
    with pytest.raises(ValueError):
        render(_scene(), *size)