"""Writing characters, strings and integers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a one-character str or a byte value."""
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str, not bool")
    if isinstance(c, int):
        if not 0 <= c <= 0xFF:
            raise ValueError(f"character code out of byte range: {c}")
        c = chr(c)
    elif isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
    else:
        raise TypeError(f"a character must be an int or a one-character str, not {type(c).__name__}")
    _target(stream).write(c)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s``; None writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, not {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, not {type(s).__name__}")
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, not {type(n).__name__}")
    _target(stream).write(str(n))