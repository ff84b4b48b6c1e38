import math

import pytest

from fractol.parsing import UsageError, atod, is_numeric, parse_arguments, usage_text


@pytest.mark.parametrize("text, expected", [("-0.8", -0.8), ("0.156", 0.156), ("-3.25", -3.25)])
def test_atod_decimals(text, expected):
    assert atod(text) == pytest.approx(expected)


def test_atod_skips_leading_whitespace():
    assert atod(" \t1.5") == pytest.approx(1.5)


def test_atod_non_numeric_is_zero():
    assert atod("abc") == 0.0


def test_atod_empty_is_zero():
    assert atod("") == atod("abc")


def test_atod_trailing_characters_widen_scale():
    assert atod("1.5x") == pytest.approx(0.15)


def test_atod_repeated_dots():
    assert atod("1.2.3") == pytest.approx(0.123)


def test_atod_integer_has_no_finite_scale():
    assert math.isinf(atod("7")) and atod("7") > 0
    assert atod("-7") == -math.inf
    assert math.isnan(atod("0"))


@pytest.mark.parametrize("text", ["-0.8", "0.156", "42", "+3.5", "1..2"])
def test_is_numeric_accepts(text):
    assert is_numeric(text)


@pytest.mark.parametrize("text", ["", ".5", "5.", "1-2", "-", "+.5", "abc", "1e5", "--1"])
def test_is_numeric_rejects(text):
    assert not is_numeric(text)


def test_usage_text_mentions_commands():
    text = usage_text()
    assert "./fractol julia [real] [imaginary]" in text
    assert "./fractol mandelbrot" in text
    assert text.startswith("\n\n") and text.endswith("\n\n")


def test_parse_mandelbrot():
    fractal = parse_arguments(["mandelbrot"])
    assert fractal.name == "mandelbrot"
    assert (fractal.zoom, fractal.max_iter) == (1.0, 120)


def test_parse_julia():
    fractal = parse_arguments(["julia", "-0.8", "0.156"])
    assert fractal.name == "julia"
    assert fractal.julia_re == pytest.approx(-0.8)
    assert fractal.julia_im == pytest.approx(0.156)


def test_parse_no_arguments_is_silent():
    with pytest.raises(UsageError) as excinfo:
        parse_arguments([])
    assert excinfo.value.show_help is False


@pytest.mark.parametrize(
    "argv",
    [
        ["mandelbrot", "extra"],
        ["julia", "a", "b"],
        ["julia", "1.0"],
        ["julia", "1.0", "2.0", "3.0"],
        ["burningship"],
        ["unknown"],
    ],
)
def test_parse_invalid_shows_help(argv):
    with pytest.raises(UsageError) as excinfo:
        parse_arguments(argv)
    assert excinfo.value.show_help is True