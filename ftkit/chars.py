"""Classification and case conversion of single ASCII characters.

Every function accepts either an integer character code or a one-character
string. The case converters give back the same kind of value they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, validating its form."""
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"a character must be an int or a one-character str, not {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _is_lower(code):
        code -= 32
    return _convert(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _is_upper(code):
        code += 32
    return _convert(c, code)