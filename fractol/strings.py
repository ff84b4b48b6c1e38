"""Text helpers: searching, comparing, slicing, trimming, splitting and bounded copies."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Callable, Optional, Sequence, Tuple, Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    The character is folded into the 7-bit range first. Looking for the
    terminator (code 0) gives the length of s.
    """
    code = _code(c) % 128
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def find_last_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, or None; the terminator gives len(s)."""
    target = c if isinstance(c, str) and len(c) == 1 else chr(_code(c) & 0xFF)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def _difference(s1: str, s2: str, limit: Optional[int]) -> int:
    end = max(len(s1), len(s2)) + 1
    if limit is not None:
        end = min(end, limit)
    for position in range(end):
        a = ord(s1[position]) if position < len(s1) else 0
        b = ord(s2[position]) if position < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def compare(s1: str, s2: str) -> int:
    """Difference of the first pair of characters that differ; zero when equal."""
    return _difference(s1, s2, None)


def compare_n(s1: str, s2: str, n: int) -> int:
    """Like compare, looking at no more than n characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _difference(s1, s2, n)


def iter_indexed(
    s: Union[str, MutableSequence], f: Callable[[int, object], object]
) -> None:
    """Call f(index, character) for each character of s.

    When s is a mutable sequence and f returns something other than None,
    that value replaces the character in place.
    """
    mutable = isinstance(s, MutableSequence)
    for index, ch in enumerate(s):
        result = f(index, ch)
        if mutable and result is not None:
            s[index] = result


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """New text made of f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def join(s1: str, s2: str) -> str:
    """Concatenation of s1 and s2."""
    return s1 + s2


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits and the full length of src, so truncation
    happened when the length is not less than size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    length = len(src)
    if size > length:
        return src, length
    return src[: max(size - 1, 0)], length


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had,
    taking dst as at most size long.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    kept = min(len(dst), size)
    if kept >= size:
        return dst, kept + len(src)
    room = size - 1 - kept
    return dst + src[:room], kept + len(src)


def find_substring(big: str, little: str, length: int) -> Optional[int]:
    """Index of little in the first length characters of big, or None; empty little gives 0."""
    if not little:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = big[:length].find(little)
    return None if index < 0 else index


def trim(s: str, charset: str) -> str:
    """s without the characters of charset at either end."""
    return s.strip(charset)


def substring(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def split(s: str, sep: CharLike) -> list[str]:
    """Non-empty pieces of s between occurrences of the separator character."""
    separator = chr(_code(sep))
    return [piece for piece in s.split(separator) if piece]


def split_all(texts: Sequence[str], sep: CharLike) -> list[list[str]]:
    """Split each text in turn."""
    return [split(text, sep) for text in texts]