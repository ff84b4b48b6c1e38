"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def format_signed(value: int) -> str:
    """Decimal text of value taken as a 32-bit signed integer."""
    return str(_to_int32(value))


def format_unsigned(value: int) -> str:
    """Decimal text of value taken as a 32-bit unsigned integer."""
    return str(int(value) & _UINT_MASK)


def format_hex(value: int, upper: bool) -> str:
    """Hexadecimal digits of a non-negative value, without prefix."""
    digits = format(int(value) & _ULONG_MASK, "x")
    return digits.upper() if upper else digits


def format_pointer(value: int | None) -> str:
    """Address as 0x-prefixed lower-case hex, or (nil) for a null address."""
    if not value:
        return "(nil)"
    return "0x" + format_hex(value, upper=False)


def _next(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(kind: str, args: Iterator[Any]) -> str:
    if kind == "c":
        value = _next(args)
        return value[:1] if isinstance(value, str) else chr(int(value) & 0xFF)
    if kind == "s":
        value = _next(args)
        return "(null)" if value is None else str(value)
    if kind == "p":
        return format_pointer(_next(args))
    if kind in ("d", "i"):
        return format_signed(_next(args))
    if kind == "u":
        return format_unsigned(_next(args))
    if kind in ("x", "X"):
        return format_hex(int(_next(args)) & _UINT_MASK, upper=kind == "X")
    if kind == "%":
        return "%"
    return ""


def format_string(template: str, *args: Any) -> str:
    """Expand the conversions in template; an unknown conversion expands to nothing."""
    pieces = []
    values = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch == "%":
            pieces.append(_convert(next(chars, ""), values))
        else:
            pieces.append(ch)
    return "".join(pieces)


def print_formatted(template: str | None, *args: Any) -> int:
    """Write the expanded template to standard output; return its length, or -1 for no template."""
    if template is None:
        return -1
    text = format_string(template, *args)
    sys.stdout.write(text)
    return len(text)