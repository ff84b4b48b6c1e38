from unittest.mock import patch

import pygame
import pytest

from fractol.app import WINDOW_ERROR, main, run
from fractol.controls import MOVE_STEP, ZOOM_FACTOR
from fractol.fractals import Fractal
from fractol.parsing import usage_text


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def _quit():
    return pygame.event.Event(pygame.QUIT)


def test_run_stops_on_window_close():
    fractal = Fractal("mandelbrot", max_iter=5)
    with patch("pygame.event.wait", side_effect=[_quit()]) as wait:
        run(fractal)
    assert wait.call_count == 1
    assert fractal.shift_x == 0.0


def test_run_stops_on_escape():
    fractal = Fractal("mandelbrot", max_iter=5)
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)]
    with patch("pygame.event.wait", side_effect=events) as wait:
        run(fractal)
    assert wait.call_count == 1
    assert (fractal.shift_x, fractal.shift_y, fractal.zoom) == (0.0, 0.0, 1.0)


def test_arrow_key_pans_view():
    fractal = Fractal("julia", julia_re=-0.8, julia_im=0.156, max_iter=5)
    events = [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT), _quit()]
    with patch("pygame.event.wait", side_effect=events):
        run(fractal)
    assert fractal.shift_x == pytest.approx(-MOVE_STEP)
    assert fractal.shift_y == 0.0


def test_scroll_zooms_in():
    fractal = Fractal("mandelbrot", max_iter=5)
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=4, pos=(400, 400)),
        _quit(),
    ]
    with patch("pygame.event.wait", side_effect=events):
        run(fractal)
    assert fractal.zoom == pytest.approx(ZOOM_FACTOR)


def test_left_click_does_not_change_view():
    fractal = Fractal("mandelbrot", max_iter=5)
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)),
        _quit(),
    ]
    with patch("pygame.event.wait", side_effect=events):
        run(fractal)
    assert fractal.zoom == 1.0
    assert (fractal.shift_x, fractal.shift_y) == (0.0, 0.0)


def test_main_without_arguments_exits_quietly(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("argv", [["burningship"], ["julia", "x", "1.0"], ["mandelbrot", "extra"]])
def test_main_invalid_arguments_print_usage(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == usage_text()


def test_main_runs_viewer():
    with patch("pygame.event.wait", side_effect=[_quit()]) as wait:
        status = main(["julia", "-0.8", "0.156"])
    assert status == 0
    assert wait.call_count == 1


def test_main_reports_window_failure(capsys):
    with patch("pygame.display.set_mode", side_effect=pygame.error("no display")):
        status = main(["mandelbrot"])
    assert status == 1
    assert WINDOW_ERROR in capsys.readouterr().err