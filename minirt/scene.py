"""Scene description: element records and their construction from tokens."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from os import PathLike

from minirt.numbers import parse_float
from minirt.tokens import ElementType, SceneError, Token, tokenize_scene
from minirt.vector import Vec3

_NUMERIC_CHARS = frozenset("0123456789-.,")
_COLOR_MAX = 255.0


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in the 0-255 range."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


@dataclass
class Camera:
    """Viewpoint of the scene and its orthonormal basis."""

    position: Vec3
    direction: Vec3
    fov: float
    forward: Vec3 = field(default_factory=Vec3)
    up: Vec3 = field(default_factory=Vec3)
    right: Vec3 = field(default_factory=Vec3)


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float
    color: Color


@dataclass(frozen=True)
class Plane:
    point: Vec3
    normal: Vec3
    color: Color


@dataclass(frozen=True)
class Light:
    position: Vec3
    intensity: float
    color: Color


@dataclass(frozen=True)
class Ambient:
    intensity: float
    color: Color


@dataclass
class Scene:
    """Every element of a parsed scene file."""

    ambient: Ambient
    camera: Camera
    lights: list[Light] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    spheres: list[Sphere] = field(default_factory=list)


def _triple(text: str) -> tuple[float, float, float]:
    if text.count(",") != 2:
        raise SceneError("invalid data vecs")
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise SceneError("invalid data vecs")
    first, second, third = (parse_float(part) for part in parts)
    return first, second, third


def parse_vec(text: str) -> Vec3:
    """Parse ``x,y,z`` into a vector."""
    return Vec3(*_triple(text))


def parse_color(text: str) -> Color:
    """Parse ``r,g,b`` into a colour, each channel within 0-255."""
    r, g, b = _triple(text)
    if any(channel < 0.0 or channel > _COLOR_MAX for channel in (r, g, b)):
        raise SceneError("Color admit numbers 0 to 255")
    return Color(r, g, b)


def _check_fields(fields: Sequence[str], needed: int) -> None:
    """Ensure enough fields follow the identifier and all are numeric."""
    values = fields[1:]
    if len(values) < needed:
        raise SceneError(
            f"Element {fields[0] if fields else '?'} needs {needed} parameters"
        )
    for value in values:
        if not set(value) <= _NUMERIC_CHARS:
            raise SceneError("Only admit numbers")


def _check_intensity(value: float) -> float:
    if value < 0.0 or value > 1.0:
        raise SceneError("Intensity light just can be 0.0 - 1.0")
    return value


def make_sphere(fields: Sequence[str]) -> Sphere:
    """Build a sphere from ``sp center diameter color`` fields."""
    _check_fields(fields, 3)
    center = parse_vec(fields[1])
    radius = parse_float(fields[2])
    return Sphere(center, radius, parse_color(fields[3]))


def make_light(fields: Sequence[str]) -> Light:
    """Build a light from ``L position intensity color`` fields."""
    _check_fields(fields, 3)
    position = parse_vec(fields[1])
    intensity = _check_intensity(parse_float(fields[2]))
    return Light(position, intensity, parse_color(fields[3]))


def make_plane(fields: Sequence[str]) -> Plane:
    """Build a plane from ``pl point normal color`` fields."""
    _check_fields(fields, 3)
    point = parse_vec(fields[1])
    normal = parse_vec(fields[2])
    if normal == Vec3(0.0, 0.0, 0.0):
        raise SceneError("plane normal can't be 0,0,0")
    return Plane(point, normal, parse_color(fields[3]))


def make_camera(fields: Sequence[str]) -> Camera:
    """Build a camera from ``C position direction fov`` fields."""
    _check_fields(fields, 3)
    position = parse_vec(fields[1])
    direction = parse_vec(fields[2])
    fov = parse_float(fields[3])
    if fov < 0 or fov > 180:
        raise SceneError("Camera pov needs a parameter between 0-180")
    return Camera(position, direction, fov)


def make_ambient(fields: Sequence[str]) -> Ambient:
    """Build ambient lighting from ``A intensity color`` fields."""
    _check_fields(fields, 2)
    intensity = _check_intensity(parse_float(fields[1]))
    return Ambient(intensity, parse_color(fields[2]))


def _single(tokens: list[Token], kind: ElementType, missing: str, extra: str) -> Token:
    found = [token for token in tokens if token.type is kind]
    if not found:
        raise SceneError(missing)
    if len(found) > 1:
        raise SceneError(extra)
    return found[0]


def build_scene(tokens: Iterable[Token]) -> Scene:
    """Assemble a scene from tokens.

    Exactly one ambient light and one camera are required; lights, planes
    and spheres keep their file order. Cylinders are not yet supported and
    are ignored.
    """
    tokens = list(tokens)
    ambient = make_ambient(
        _single(
            tokens,
            ElementType.AMBIENT,
            "Program needs one light ambient",
            "Program needs only light ambient",
        ).fields
    )
    camera = make_camera(
        _single(
            tokens,
            ElementType.CAMERA,
            "Program needs one camera",
            "Program needs only one camera",
        ).fields
    )

    def of(kind: ElementType) -> list[Sequence[str]]:
        return [token.fields for token in tokens if token.type is kind]

    return Scene(
        ambient=ambient,
        camera=camera,
        lights=[make_light(f) for f in of(ElementType.LIGHT)],
        planes=[make_plane(f) for f in of(ElementType.PLANE)],
        spheres=[make_sphere(f) for f in of(ElementType.SPHERE)],
    )


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read and parse a ``.rt`` scene file."""
    return build_scene(tokenize_scene(path))