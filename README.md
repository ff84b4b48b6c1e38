# fractol

An interactive fractal explorer. It draws the Mandelbrot set or a Julia set
in an 800×800 window (using pygame) and lets you pan and zoom around it.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

Draw the Mandelbrot set:

```
fractol mandelbrot
```

Draw a Julia set for the constant `c = real + imaginary·i`:

```
fractol julia -0.8 0.156
```

Both numbers must pass `fractol.parsing.is_numeric`: digits with at most one
leading `+` or `-` (which must be followed by a digit), and dots that are
neither the first nor the last character. Anything else prints a usage guide
and exits with status 0. With no arguments at all the program exits quietly.
If the window cannot be created, `Failed to create window` is written to
standard error and the exit status is 1.

How the numbers are read (`fractol.parsing.atod`): the digits are read as one
integer and divided by ten to the power of the number of characters after the
first dot. Write the constants with a decimal point, as in `-0.8` or `1.0`. A
number without a dot has no finite scale and becomes infinite (or NaN for
zero), which gives an empty picture.

## Controls

| Input                     | Effect                                   |
|---------------------------|------------------------------------------|
| Arrow keys                | Move the view                            |
| Mouse wheel up / down     | Zoom in / out around the mouse pointer   |
| Esc                       | Close the window                         |
| Window close button       | Exit                                     |

Each arrow-key step is `0.1 / zoom`, so panning feels the same at every
depth. Each wheel step zooms by a factor of 1.2. Other keys redraw the view
without moving it; other mouse buttons are ignored.

## Colouring

A point takes up to 120 iterations, escaping once `|z|² > 4`. Points that
never escape are drawn black. Every other point gets a colour from a
polynomial palette based on how quickly it escaped
(`fractol.fractals.iteration_color`).

## What it does not do

The usage guide lists `fractol burningship`, but no Burning Ship fractal is
available: that argument is rejected like any other unknown name and the
usage guide is printed. The iteration limit and the window size are fixed.
The program cannot save images to a file; `render` returns the pixel array
and leaves storing it to you.

## Using it as a library

The fractal maths does not depend on the window:

```python
from fractol.fractals import Fractal, mandelbrot_iterations, pixel_color, render
from fractol.parsing import parse_arguments

fractal = parse_arguments(["julia", "-0.8", "0.156"])
image = render(fractal)  # 800×800 numpy array of 0xRRGGBB pixel values

steps = mandelbrot_iterations(complex(-0.5, 0.0), 120)
colour = pixel_color(Fractal("mandelbrot"), complex(1.0, 1.0))
```

- `fractol.fractals`: the `Fractal` dataclass (name, shift, zoom, Julia
  constant, iteration limit), `mandelbrot_iterations`, `julia_iterations`,
  `iteration_color`, `pixel_color`, `pixel_to_complex` and `render`.
- `fractol.parsing`: `parse_arguments` (raises `UsageError`, whose
  `show_help` says whether the guide should be shown), `atod`, `is_numeric`
  and `usage_text`.
- `fractol.controls`: `handle_key`, `handle_mouse` and `zoom`, which change a
  `Fractal` in place, plus the `Key` and `MouseButton` code enums.
  `handle_key` returns `False` for Esc.
- `fractol.app`: `run(fractal)` opens the window; `main(argv=None)` is the
  `fractol` command.

## Helper modules

The package also carries small general-purpose helpers:

- `fractol.chars`: ASCII classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), case changes (`to_lower`, `to_upper`), `atoi` and
  `itoa`. They accept either a one-character string or a character code.
- `fractol.printf`: `format_string` and `print_formatted` support `%c %s %p
  %d %i %u %x %X %%`; an unknown conversion expands to nothing.
  `print_formatted` returns the number of characters written, or -1 for a
  `None` template. `format_signed`, `format_unsigned`, `format_hex` and
  `format_pointer` format single values with 32-bit (or, for hex and
  pointers, 64-bit) wrapping.
- `fractol.strings`: `find_char`, `find_last_char`, `compare`, `compare_n`,
  `iter_indexed`, `map_indexed`, `join`, `bounded_copy`, `bounded_concat`,
  `find_substring`, `trim`, `substring`, `split` and `split_all`.
- `fractol.memory`: byte-buffer helpers `zero`, `allocate`, `find_byte`,
  `compare_bytes`, `copy_bytes`, `move_bytes` (overlap-safe) and `fill`.
- `fractol.output`: `put_char_fd`, `put_str_fd`, `put_endl_fd` and
  `put_nbr_fd` write directly to a file descriptor; negative descriptors are
  ignored.
- `fractol.linked`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `clear`, `remove_first`, `for_each` and
  `map`, and support for `len()` and iteration.