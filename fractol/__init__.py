"""Interactive Mandelbrot and Julia set explorer, with small text, byte and list helpers."""

__version__ = "0.1.0"