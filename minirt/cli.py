"""Command-line entry point: load a scene and show it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from minirt.controls import Key, apply_key
from minirt.render import HEIGHT, WIDTH, init_camera, render
from minirt.scene import Scene, load_scene
from minirt.tokens import SceneError

_TITLE = "minirt"


def show_window(scene: Scene) -> int:
    """Render the scene in a window and react to keys until it is closed.

    Returns 0 when the window is closed and 1 when Escape is pressed.
    """
    import pygame

    key_map = {
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_a: Key.A,
        pygame.K_d: Key.D,
    }

    def draw(screen) -> None:
        pixels = render(scene, WIDTH, HEIGHT)
        image = pygame.image.frombuffer(pixels, (WIDTH, HEIGHT), "RGBA")
        screen.blit(image, (0, 0))
        pygame.display.flip()

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(_TITLE)
        init_camera(scene.camera)
        draw(screen)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return 1
            command = key_map.get(event.key)
            if command is not None:
                apply_key(scene.camera, command)
                draw(screen)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program with one scene-file argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("One scene requires", file=sys.stderr)
        return 1
    try:
        scene = load_scene(args[0])
    except SceneError as exc:
        print(exc, file=sys.stderr)
        return 1
    return show_window(scene)


if __name__ == "__main__":
    sys.exit(main())