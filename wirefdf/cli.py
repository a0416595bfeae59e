"""Command-line entry point: open a height map in a window."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

from wirefdf.canvas import Canvas
from wirefdf.geometry import WINDOW_HEIGHT, WINDOW_WIDTH
from wirefdf.parsing import HeightMap, MapError, read_map
from wirefdf.viewer import VIEW_HEIGHT, VIEW_WIDTH, Key, ViewState
from wirefdf.wireframe import is_quit_key, render

TITLE = "FDF"
INTERACTIVE_FLAG = "--interactive"
USAGE_MESSAGE = "Invalid number of args!"
FRAME_PAUSE = 0.01


class UsageError(Exception):
    """Raised when the command line is not usable."""


@dataclass(frozen=True)
class Options:
    """What the command line asked for."""

    path: str
    interactive: bool = False


def parse_args(argv: Sequence[str]) -> Options:
    """Read the map path and the optional ``--interactive`` flag."""
    interactive = INTERACTIVE_FLAG in argv
    rest = [arg for arg in argv if arg != INTERACTIVE_FLAG]
    if len(rest) != 1:
        raise UsageError(USAGE_MESSAGE)
    return Options(path=rest[0], interactive=interactive)


def _to_surface(pygame, canvas: Canvas):
    data = canvas.to_bytes()
    rgb = bytearray(len(data) // 4 * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return pygame.image.frombuffer(bytes(rgb), (canvas.width, canvas.height), "RGB")


def _keysym(pygame, key: int) -> int:
    special = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_UP: Key.UP,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_PAGEUP: Key.PAGE_UP,
        pygame.K_PAGEDOWN: Key.PAGE_DOWN,
    }
    return int(special.get(key, key))


def _run_static(heightmap: HeightMap) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        screen.blit(_to_surface(pygame, render(heightmap)), (0, 0))
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN and is_quit_key(_keysym(pygame, event.key)):
                return
    finally:
        pygame.quit()


def _run_interactive(state: ViewState) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat(200, 20)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if event.type == pygame.KEYDOWN and not state.handle_key(
                    _keysym(pygame, event.key)
                ):
                    return
            moved = state.step_animation()
            screen.blit(_to_surface(pygame, state.render()), (0, 0))
            pygame.display.flip()
            if moved:
                time.sleep(FRAME_PAUSE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_args(args)
    except UsageError as exc:
        sys.stdout.write(f"{exc}\n")
        return 1
    try:
        heightmap = read_map(options.path)
    except MapError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if options.interactive:
        _run_interactive(ViewState(heightmap))
    else:
        _run_static(heightmap)
    return 0


if __name__ == "__main__":
    sys.exit(main())