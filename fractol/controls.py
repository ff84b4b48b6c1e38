"""Keyboard and mouse handling: panning and pointer-centred zoom."""

from __future__ import annotations

from enum import IntEnum

from .fractals import HEIGHT, WIDTH, Fractal, pixel_to_complex

ZOOM_FACTOR = 1.2
MOVE_STEP = 0.1


class Key(IntEnum):
    """X11 key symbols the viewer reacts to."""

    ESC = 65307
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364


class MouseButton(IntEnum):
    """Mouse button numbers as reported by X11."""

    LEFT_CLICK = 1
    SCROLL_UP = 4
    SCROLL_DOWN = 5


def zoom(fractal: Fractal, factor: float) -> None:
    """Multiply the zoom by factor, nudging the view to keep it centred."""
    width = WIDTH / fractal.zoom
    height = HEIGHT / fractal.zoom
    new_width = width / factor
    new_height = height / factor
    fractal.zoom *= factor
    fractal.shift_x += (width - new_width) / 2.0 / WIDTH
    fractal.shift_y += (height - new_height) / 2.0 / HEIGHT


def handle_key(fractal: Fractal, keycode: int) -> bool:
    """Apply a key press; return False when it asks to quit, True when the view should be redrawn."""
    if keycode == Key.ESC:
        return False
    step = MOVE_STEP / fractal.zoom
    if keycode == Key.LEFT:
        fractal.shift_x -= step
    elif keycode == Key.RIGHT:
        fractal.shift_x += step
    elif keycode == Key.UP:
        fractal.shift_y -= step
    elif keycode == Key.DOWN:
        fractal.shift_y += step
    return True


def handle_mouse(fractal: Fractal, button: int, x: float, y: float) -> bool:
    """Zoom around the pointer on scroll; return True when the view changed."""
    if button not in (MouseButton.SCROLL_UP, MouseButton.SCROLL_DOWN):
        return False
    center = pixel_to_complex(fractal, x, y)
    fractal.shift_x, fractal.shift_y = center.real, center.imag
    zoom(fractal, ZOOM_FACTOR if button == MouseButton.SCROLL_UP else 1.0 / ZOOM_FACTOR)
    return True