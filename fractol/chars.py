"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

_WHITESPACE = "\t\n\v\f\r "


def _code(c: int | str) -> int:
    return ord(c) if isinstance(c, str) else int(c)


def is_alpha(c: int | str) -> bool:
    """Whether c is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """Whether c is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Whether c is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Whether c lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Whether c is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _shift_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII capital; anything else is returned unchanged."""
    return _shift_case(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII small letter; anything else is returned unchanged."""
    return _shift_case(c, "a", "z", -32)


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and the digits that follow."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-") and rest:
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if not is_digit(ch):
            break
        digits += ch
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Decimal text of n, with a leading minus sign when negative."""
    return str(int(n))