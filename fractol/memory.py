"""Byte-buffer helpers: zeroing, allocation, searching, comparing, copying and filling."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Optional, Sequence

_SIZE_LIMIT = 1 << 64


def _check_length(n: int, *buffers: Sequence[int]) -> None:
    if n < 0:
        raise ValueError("n must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError("n is larger than the buffer")


def zero(buffer: MutableSequence[int], n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    _check_length(n, buffer)
    buffer[:n] = bytes(n)


def allocate(count: int, size: int) -> bytearray:
    """A zero-filled buffer for count items of size bytes each.

    Raises MemoryError when the total does not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total >= _SIZE_LIMIT:
        raise MemoryError("requested size overflows")
    return bytearray(total)


def find_byte(buffer: Sequence[int], value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value among the first n bytes, or None."""
    _check_length(n, buffer)
    index = bytes(buffer[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Difference of the first differing unsigned bytes within n; zero when equal."""
    _check_length(n, a, b)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def copy_bytes(dest: MutableSequence[int], src: Sequence[int], n: int) -> MutableSequence[int]:
    """Copy the first n bytes of src over the start of dest; return dest."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def move_bytes(
    buffer: MutableSequence[int], dest_offset: int, src_offset: int, n: int
) -> MutableSequence[int]:
    """Copy n bytes within buffer from src_offset to dest_offset; the ranges may overlap."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("n must not be negative")
    if max(dest_offset, src_offset) + n > len(buffer):
        raise ValueError("range runs past the end of the buffer")
    if n and dest_offset != src_offset:
        buffer[dest_offset : dest_offset + n] = bytes(buffer[src_offset : src_offset + n])
    return buffer


def fill(buffer: MutableSequence[int], value: int, n: int) -> MutableSequence[int]:
    """Set the first n bytes of buffer to the low byte of value; return buffer."""
    _check_length(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer