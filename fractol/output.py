"""Writing characters, text and numbers straight to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: Union[str, int], fd: int) -> None:
    """Write one character to fd; negative descriptors are ignored."""
    if fd < 0:
        return
    data = c.encode() if isinstance(c, str) else bytes([int(c) & 0xFF])
    _write_all(fd, data)


def put_str_fd(s: Optional[str], fd: int) -> None:
    """Write s to fd; nothing is written for None or a negative descriptor."""
    if fd < 0 or s is None:
        return
    _write_all(fd, s.encode())


def put_endl_fd(s: Optional[str], fd: int) -> None:
    """Write s followed by a newline to fd."""
    put_str_fd(s, fd)
    put_char_fd("\n", fd)


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of n to fd."""
    if fd < 0:
        return
    _write_all(fd, str(int(n)).encode())