"""Interactive viewer: opens a window, draws the fractal and reacts to input."""

from __future__ import annotations

import sys
from typing import Sequence

import numpy as np
import pygame

from .controls import Key, handle_key, handle_mouse
from .fractals import HEIGHT, WIDTH, Fractal, render
from .parsing import UsageError, parse_arguments, usage_text

TITLE = "Fract-ol"
WINDOW_ERROR = "Failed to create window"

_KEYMAP = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}


def _draw(screen: pygame.Surface, fractal: Fractal) -> None:
    colors = render(fractal)
    rgb = np.stack(
        ((colors >> 16) & 0xFF, (colors >> 8) & 0xFF, colors & 0xFF), axis=-1
    ).astype(np.uint8)
    screen.blit(pygame.surfarray.make_surface(rgb.transpose(1, 0, 2)), (0, 0))
    pygame.display.flip()


def run(fractal: Fractal) -> None:
    """Show the fractal until the window is closed or ESC is pressed.

    Raises pygame.error when the window cannot be created.
    """
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        _draw(screen, fractal)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if not handle_key(fractal, _KEYMAP.get(event.key, 0)):
                    return
                _draw(screen, fractal)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                if handle_mouse(fractal, event.button, x, y):
                    _draw(screen, fractal)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the viewer; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        fractal = parse_arguments(args)
    except UsageError as exc:
        if exc.show_help:
            sys.stdout.write(usage_text())
        return 0
    try:
        run(fractal)
    except pygame.error:
        print(WINDOW_ERROR, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())