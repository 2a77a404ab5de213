"""Bounded string searching, comparison, copying and concatenation."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

CharLike = Union[int, str]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def _require_count(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _char_code(c: CharLike) -> int:
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str, not bool")
    if isinstance(c, int):
        if c < 0:
            raise ValueError(f"character code must not be negative, got {c}")
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"a character must be an int or a one-character str, not {type(c).__name__}")


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of ``needle`` within the first ``length`` characters of ``haystack``.

    The whole of ``needle`` must fit inside that window. An empty needle is
    found at index 0. Returns None when there is no match.
    """
    text = _require_str(haystack, "haystack")
    target = _require_str(needle, "needle")
    limit = _require_count(length, "length")
    if not target:
        return 0
    index = text.find(target, 0, min(limit, len(text)))
    return None if index < 0 else index


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character gives the length of ``s``, the position
    of its terminator. Integer codes are reduced to a byte.
    """
    text = _require_str(s, "s")
    code = _char_code(c) & 0xFF
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    Searching for the NUL character gives the length of ``s``. Integer codes
    are reduced to the 7-bit ASCII range.
    """
    text = _require_str(s, "s")
    code = _char_code(c)
    if code == 0:
        return len(text)
    code %= 128
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Comparison stops at the first difference or at the end of either string.
    The result is the difference of the character codes at that point (the
    end of a string counts as code 0), or 0 if the compared parts are equal.
    """
    a = _require_str(first, "first")
    b = _require_str(second, "second")
    count = _require_count(n, "n")
    pairs = zip_longest(a, b, fillvalue="\0")
    for left, right in islice(pairs, count):
        lcode, rcode = ord(left), ord(right)
        if lcode != rcode or lcode == 0 or rcode == 0:
            return lcode - rcode
    return 0


def copy_bounded(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, one kept for the terminator.

    Returns the copied text, truncated to ``size - 1`` characters if needed,
    together with the full length of ``src`` so that truncation can be
    detected by comparing it with ``size``.
    """
    text = _require_str(src, "src")
    limit = _require_count(size, "size")
    if limit > len(text):
        return text, len(text)
    return text[: max(limit - 1, 0)], len(text)


def concat_bounded(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a destination of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` is zero the result length is that of ``src``;
    when ``size`` does not exceed the length of ``dst``, ``dst`` is left
    unchanged and the length reported is ``size + len(src)``.
    """
    head = _require_str(dst, "dst")
    tail = _require_str(src, "src")
    limit = _require_count(size, "size")
    if limit == 0:
        return head, len(tail)
    if limit <= len(head):
        return head, limit + len(tail)
    room = limit - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)