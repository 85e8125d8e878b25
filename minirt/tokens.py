"""Splitting a scene file into typed element tokens."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike


class SceneError(Exception):
    """Raised when a scene file or one of its elements is invalid."""


class ElementType(enum.Enum):
    """Kinds of element a scene line can describe."""

    SPHERE = "sp"
    PLANE = "pl"
    AMBIENT = "A"
    CAMERA = "C"
    LIGHT = "L"
    CYLINDER = "cy"
    VOID = ""


@dataclass(frozen=True)
class Token:
    """One scene element: its type and its space-separated fields.

    ``fields[0]`` is the element identifier as written in the file.
    """

    type: ElementType
    fields: tuple[str, ...]


# Checked in this order; an identifier matches when it appears within the
# first three characters of the trimmed line.
_IDENTIFIERS = (
    ElementType.SPHERE,
    ElementType.PLANE,
    ElementType.AMBIENT,
    ElementType.CAMERA,
    ElementType.LIGHT,
    ElementType.CYLINDER,
)
_IDENTIFIER_WINDOW = 3


def classify_line(line: str) -> ElementType:
    """Return the element type of one scene line.

    Comments (lines starting with ``#``), blank lines and lines without a
    known identifier are all :attr:`ElementType.VOID` and carry no element.
    """
    trimmed = line.strip(" ")
    if trimmed.startswith("#"):
        return ElementType.VOID
    head = trimmed[:_IDENTIFIER_WINDOW]
    for element in _IDENTIFIERS:
        if element.value in head:
            return element
    return ElementType.VOID


def _split_fields(line: str) -> tuple[str, ...]:
    return tuple(part for part in line.split(" ") if part)


def tokenize_lines(lines: Iterable[str]) -> list[Token]:
    """Turn scene lines into tokens, in file order, dropping void lines."""
    tokens = []
    for raw in lines:
        line = raw.rstrip("\n")
        element = classify_line(line)
        if element is ElementType.VOID:
            continue
        tokens.append(Token(element, _split_fields(line)))
    return tokens


def tokenize_scene(path: str | PathLike[str]) -> list[Token]:
    """Read a ``.rt`` scene file and return its tokens.

    Raises :class:`SceneError` for a wrong extension, an unreadable file or
    an empty file.
    """
    name = str(path)
    if not name.endswith(".rt"):
        raise SceneError("The file is only .rt format")
    try:
        with open(name, encoding="utf-8", errors="replace") as handle:
            lines = handle.readlines()
    except OSError as exc:
        raise SceneError(f"Cannot read scene file: {name}") from exc
    if not lines:
        raise SceneError(f"Scene file is empty: {name}")
    return tokenize_lines(lines)