"""Escape-time fractals (Mandelbrot and Julia) and their colouring."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

WIDTH = 800
HEIGHT = 800
MAX_ITER = 120
IN_SET_COLOR = 0x000000

_ESCAPE_RADIUS_SQUARED = 4.0


@dataclass
class Fractal:
    """The fractal being shown and the current view onto the complex plane."""

    name: str
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    julia_re: float = 0.0
    julia_im: float = 0.0
    max_iter: int = MAX_ITER


def _escape_count(z: complex, c: complex, max_iterations: int) -> int:
    zr, zi = z.real, z.imag
    cr, ci = c.real, c.imag
    iteration = 0
    while zr * zr + zi * zi <= _ESCAPE_RADIUS_SQUARED and iteration < max_iterations:
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        iteration += 1
    return iteration


def mandelbrot_iterations(c: complex, max_iterations: int) -> int:
    """Count iterations of z -> z*z + c, starting from z = c, before escape."""
    c = complex(c)
    return _escape_count(c, c, max_iterations)


def julia_iterations(z: complex, fractal: Fractal) -> int:
    """Count iterations of z -> z*z + k before escape, k being the Julia constant."""
    constant = complex(fractal.julia_re, fractal.julia_im)
    return _escape_count(complex(z), constant, fractal.max_iter)


def iteration_color(iteration: int, max_iter: int) -> int:
    """Map an escape count to a 0xRRGGBB colour with smooth polynomial channels."""
    t = iteration / max_iter
    red = int(9 * (1 - t) * t * t * t * 255)
    green = int(15 * (1 - t) * (1 - t) * t * t * 255)
    blue = int(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return (red << 16) | (green << 8) | blue


def _iterations(fractal: Fractal, c: complex) -> int:
    if fractal.name == "mandelbrot":
        return mandelbrot_iterations(c, fractal.max_iter)
    if fractal.name == "julia":
        return julia_iterations(c, fractal)
    return 0


def pixel_color(fractal: Fractal, c: complex) -> int:
    """Colour of the point c: black inside the set, a gradient outside."""
    iteration = _iterations(fractal, c)
    if iteration == fractal.max_iter:
        return IN_SET_COLOR
    return iteration_color(iteration, fractal.max_iter)


def pixel_to_complex(fractal: Fractal, x: float, y: float) -> complex:
    """Point of the complex plane shown at window pixel (x, y)."""
    real = (x - WIDTH / 2.0) * 4.0 / WIDTH / fractal.zoom + fractal.shift_x
    imag = (y - HEIGHT / 2.0) * 4.0 / WIDTH / fractal.zoom + fractal.shift_y
    return complex(real, imag)


def _escape_counts(fractal: Fractal, real: np.ndarray, imag: np.ndarray) -> np.ndarray:
    counts = np.zeros(real.shape, dtype=np.int64)
    if fractal.name == "mandelbrot":
        cr, ci = real.copy(), imag.copy()
    elif fractal.name == "julia":
        cr = np.full_like(real, fractal.julia_re)
        ci = np.full_like(imag, fractal.julia_im)
    else:
        return counts

    zr, zi = real.copy(), imag.copy()
    index = np.arange(real.size)
    with np.errstate(over="ignore", invalid="ignore"):
        for _ in range(max(fractal.max_iter, 0)):
            inside = zr * zr + zi * zi <= _ESCAPE_RADIUS_SQUARED
            if not inside.any():
                break
            index, zr, zi, cr, ci = index[inside], zr[inside], zi[inside], cr[inside], ci[inside]
            counts[index] += 1
            zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
    return counts


def _colorize(counts: np.ndarray, max_iter: int) -> np.ndarray:
    colors = np.full(counts.shape, IN_SET_COLOR, dtype=np.int32)
    outside = counts != max_iter
    if outside.any():
        t = counts[outside] / max_iter
        red = (9 * (1 - t) * t * t * t * 255).astype(np.int64)
        green = (15 * (1 - t) * (1 - t) * t * t * 255).astype(np.int64)
        blue = (8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255).astype(np.int64)
        colors[outside] = (red << 16) | (green << 8) | blue
    return colors


def render(fractal: Fractal) -> np.ndarray:
    """Render the whole view as a HEIGHT x WIDTH array of 0xRRGGBB colours."""
    xs = (np.arange(WIDTH, dtype=np.float64) - WIDTH / 2.0) * 4.0 / WIDTH / fractal.zoom + fractal.shift_x
    ys = (np.arange(HEIGHT, dtype=np.float64) - HEIGHT / 2.0) * 4.0 / WIDTH / fractal.zoom + fractal.shift_y
    real, imag = np.meshgrid(xs, ys)
    counts = _escape_counts(fractal, real.ravel(), imag.ravel()).reshape(HEIGHT, WIDTH)
    return _colorize(counts, fractal.max_iter)