"""String helpers: integer conversion, splitting, trimming and mapping."""

from __future__ import annotations

from typing import Callable

from ftkit.chars import is_digit

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def atoi(s: str) -> int:
    """Parse a leading decimal integer from ``s``.

    Leading ASCII whitespace is skipped, then one optional ``+`` or ``-`` sign
    is accepted, then as many ASCII digits as follow. Parsing stops at the
    first other character; a string with no digits gives 0.
    """
    text = _require_str(s, "s")
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, not {type(n).__name__}")
    return str(n)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    text = _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def trim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return text
    return text.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of ``s`` gives an empty string.
    """
    text = _require_str(s, "s")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return _require_str(first, "first") + _require_str(second, "second")


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string by applying ``func(index, char)`` to every character.

    ``func`` must return a single character for each call.
    """
    text = _require_str(s, "s")
    pieces = []
    for index, ch in enumerate(text):
        mapped = func(index, ch)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(
                f"mapping function must return a single character, got {mapped!r}"
            )
        pieces.append(mapped)
    return "".join(pieces)