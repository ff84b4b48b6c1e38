import numpy as np
import pytest

from fractol.fractals import (
    HEIGHT,
    IN_SET_COLOR,
    MAX_ITER,
    WIDTH,
    Fractal,
    iteration_color,
    julia_iterations,
    mandelbrot_iterations,
    pixel_color,
    pixel_to_complex,
    render,
)

SAMPLE_POINTS = [0.3 + 0.5j, -0.75 + 0.1j, -1.5 + 0j, 0.25 + 0j, -0.1 + 0.9j]


def test_fractal_defaults():
    f = Fractal("mandelbrot")
    assert (f.zoom, f.shift_x, f.shift_y, f.max_iter) == (1.0, 0.0, 0.0, 120)


def test_origin_belongs_to_mandelbrot_set():
    assert mandelbrot_iterations(0j, MAX_ITER) == MAX_ITER


def test_far_point_escapes_immediately():
    assert mandelbrot_iterations(3 + 0j, 50) == 0


@pytest.mark.parametrize("c", SAMPLE_POINTS)
def test_iteration_count_is_capped(c):
    assert mandelbrot_iterations(c, 40) == min(mandelbrot_iterations(c, 200), 40)


@pytest.mark.parametrize("c", SAMPLE_POINTS)
def test_julia_seeded_with_c_matches_mandelbrot(c):
    f = Fractal("julia", julia_re=c.real, julia_im=c.imag, max_iter=80)
    assert julia_iterations(c, f) == mandelbrot_iterations(c, 80)


def test_julia_with_zero_constant():
    f = Fractal("julia")
    assert julia_iterations(0.5 + 0.5j, f) == f.max_iter
    assert julia_iterations(3j, f) == 0


def test_iteration_color_zero_is_black():
    assert iteration_color(0, MAX_ITER) == 0


def test_iteration_colors_stay_in_range():
    for iteration in range(MAX_ITER):
        color = iteration_color(iteration, MAX_ITER)
        assert 0 <= color <= 0xFFFFFF
        assert (color >> 16) <= 0xFF


def test_pixel_color_inside_set():
    assert pixel_color(Fractal("mandelbrot"), 0j) == IN_SET_COLOR


def test_pixel_color_outside_set_uses_gradient():
    f = Fractal("mandelbrot")
    c = 0.4 + 0.4j
    iterations = mandelbrot_iterations(c, f.max_iter)
    assert iterations < f.max_iter
    assert pixel_color(f, c) == iteration_color(iterations, f.max_iter)


def test_pixel_color_unknown_fractal():
    assert pixel_color(Fractal("burningship"), 0.3j) == iteration_color(0, MAX_ITER)


def test_center_pixel_maps_to_shift():
    f = Fractal("mandelbrot", shift_x=0.3, shift_y=-0.2)
    assert pixel_to_complex(f, WIDTH // 2, HEIGHT // 2) == complex(0.3, -0.2)


def test_view_is_symmetric_about_center():
    f = Fractal("mandelbrot")
    assert pixel_to_complex(f, 0, 0) == -pixel_to_complex(f, WIDTH, HEIGHT)


def test_zoom_shrinks_view():
    wide = pixel_to_complex(Fractal("mandelbrot"), 0, 0)
    close = pixel_to_complex(Fractal("mandelbrot", zoom=2.0), 0, 0)
    assert close.real == pytest.approx(wide.real / 2)
    assert close.imag == pytest.approx(wide.imag / 2)


@pytest.mark.parametrize(
    "fractal",
    [
        Fractal("mandelbrot", max_iter=30),
        Fractal("julia", julia_re=-0.8, julia_im=0.156, max_iter=30),
    ],
)
def test_render_matches_pixel_color(fractal):
    image = render(fractal)
    assert image.shape == (HEIGHT, WIDTH)
    for x, y in [(0, 0), (400, 400), (123, 456), (799, 799), (250, 380), (600, 200), (512, 300)]:
        assert image[y, x] == pixel_color(fractal, pixel_to_complex(fractal, x, y))


def test_render_unknown_fractal_is_uniform():
    f = Fractal("burningship")
    image = render(f)
    assert image.shape == (HEIGHT, WIDTH)
    assert np.unique(image).tolist() == [0]


def test_render_without_iterations_is_all_in_set():
    f = Fractal("mandelbrot", max_iter=0)
    image = render(f)
    assert np.all(image == IN_SET_COLOR)
    assert pixel_color(f, 2 + 2j) == IN_SET_COLOR