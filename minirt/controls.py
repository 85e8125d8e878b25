"""Keyboard moves of the camera."""

from __future__ import annotations

import enum

from minirt.render import init_camera
from minirt.scene import Camera
from minirt.vector import Vec3


class Key(enum.Enum):
    """Camera commands bound to keys."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    A = enum.auto()
    D = enum.auto()


_MOVES = {
    Key.UP: Vec3(0.0, 1.0, 0.0),
    Key.DOWN: Vec3(0.0, -1.0, 0.0),
    Key.LEFT: Vec3(-1.0, 0.0, 0.0),
    Key.RIGHT: Vec3(1.0, 0.0, 0.0),
}

_TURNS = {
    Key.A: Vec3(1.0, 0.0, 0.0),
    Key.D: Vec3(-1.0, 0.0, 0.0),
}


def apply_key(camera: Camera, key: Key) -> None:
    """Move or turn the camera in place.

    Arrow keys shift the position by one unit; A and D shift the direction
    along x by one unit and rebuild the camera basis.
    """
    if key in _MOVES:
        camera.position = camera.position + _MOVES[key]
    elif key in _TURNS:
        camera.direction = camera.direction + _TURNS[key]
        init_camera(camera)
    else:
        raise ValueError(f"unknown key: {key!r}")