"""Command-line arguments: numeric validation, decimal parsing and usage text."""

from __future__ import annotations

import math
from functools import reduce
from itertools import takewhile, zip_longest
from typing import Sequence

from .fractals import Fractal

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"
_LARGEST_DECIMAL_EXPONENT = 308

_USAGE = (
    "\n\n"
    "|--------------- How to launch fractol---------------|\n"
    "|                                                    |\n"
    "|    ./fractol mandelbrot                            |\n"
    "|    ./fractol burningship                           |\n"
    "|    ./fractol julia [real] [imaginary]              |\n"
    "|    Example: ./fractol julia -0.8 0.156             |\n"
    "|                                                    |\n"
    "|-------------- How to use the keyboard -------------|\n"
    "|                                                    |\n"
    "|     Press arrow keys to move the view              |\n"
    "|     Press ESC to close the window                  |\n"
    "|     Click the window's close button to exit        |\n"
    "|     Scroll to zoom in/out (follows the mouse)      |\n"
    "|                                                    |\n"
    "|----------------------------------------------------|\n"
    "\n\n"
)


class UsageError(Exception):
    """The arguments do not describe a fractal; show_help says whether to print usage."""

    def __init__(self, show_help: bool = True) -> None:
        super().__init__("invalid arguments" if show_help else "no fractal requested")
        self.show_help = show_help


def _decimal_scale(text: str) -> float:
    dot = text.find(".")
    if dot < 0:
        return 0.0
    exponent = len(text) - dot - 1
    if exponent > _LARGEST_DECIMAL_EXPONENT:
        return math.inf
    return 10.0**exponent


def atod(text: str) -> float:
    """Parse a decimal number.

    The divisor is ten to the number of characters after the first dot, up to
    the end of the text. A value without a dot therefore has no finite scale
    and yields infinity (NaN for zero). Text that does not start with a digit
    or a dot after optional whitespace and sign yields 0.0.
    """
    scale = _decimal_scale(text)
    rest = text.lstrip(_WHITESPACE)
    sign = 1.0
    if rest[:1] in ("+", "-") and rest:
        if rest[0] == "-":
            sign = -1.0
        rest = rest[1:]
    if not rest or (rest[0] not in _DIGITS and rest[0] != "."):
        return 0.0
    number = takewhile(lambda ch: ch in _DIGITS or ch == ".", rest)
    value = reduce(lambda acc, ch: acc * 10 + int(ch), (ch for ch in number if ch != "."), 0.0)
    if scale == 0:
        quotient = math.nan if value == 0 else math.inf
    else:
        quotient = value / scale
    return quotient * sign


def is_numeric(text: str) -> bool:
    """Whether text looks like a signed decimal: digits, one leading sign, no bare dots at the ends."""
    if not text:
        return False
    for position, (ch, following) in enumerate(zip_longest(text, text[1:], fillvalue="")):
        if ch not in _DIGITS and ch not in ".+-":
            return False
        if ch in "+-" and (position > 0 or not following or following not in _DIGITS):
            return False
        if ch == "." and (position == 0 or not following):
            return False
    return True


def usage_text() -> str:
    """The help screen shown for invalid arguments."""
    return _USAGE


def parse_arguments(argv: Sequence[str]) -> Fractal:
    """Build the requested fractal from the arguments that follow the program name."""
    args = list(argv)
    if not args:
        raise UsageError(show_help=False)
    name, *rest = args
    if name == "mandelbrot" and not rest:
        return Fractal(name)
    if name == "julia" and len(rest) == 2 and all(map(is_numeric, rest)):
        real, imag = rest
        return Fractal(name, julia_re=atod(real), julia_im=atod(imag))
    raise UsageError(show_help=True)