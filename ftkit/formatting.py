"""A small printf-style formatter supporting ``%c %s %p %d %i %u %x %X %%``.

Two dialects are offered. ``format_printf``/``printf`` keep the character
after an unknown ``%`` sequence and drop only the ``%``. ``format_printf_fd``
and ``printf_fd`` drop both. In both dialects a lone ``%`` at the end of the
format is dropped.

Integer conversions follow C ``int`` semantics. ``%d`` and ``%i`` wrap the
value to a signed 32-bit integer. ``%u``, ``%x`` and ``%X`` wrap it to an
unsigned 32-bit integer. ``%p`` prints ``(nil)`` for None or 0. For any other
value it prints ``0x`` and the hexadecimal address. An object that is not an
int uses its ``id()`` as the address.
"""

from __future__ import annotations

import os
import sys
from typing import Any, Iterator, Optional, TextIO, Union

CONVERSIONS = frozenset("cspdiuxX%")

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _require_fmt(fmt: object) -> str:
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, not {type(fmt).__name__}")
    return fmt


def _require_int(value: object, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} requires an int, not {type(value).__name__}")
    return int(value)


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a str or None, not {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = int(value) if isinstance(value, int) else id(value)
    address &= _UINT64
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    number = _require_int(value, spec)
    if spec in "di":
        return str(_to_int32(number))
    unsigned = number & _UINT32
    if spec == "u":
        return str(unsigned)
    if spec == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def _render(fmt: str, args: tuple[Any, ...], keep_unknown: bool) -> str:
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in CONVERSIONS:
            pieces.append(_convert(spec, remaining))
        elif keep_unknown:
            pieces.append(spec)
    return "".join(pieces)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``.

    An unknown conversion drops the ``%`` and keeps the following character.
    """
    return _render(_require_fmt(fmt), args, keep_unknown=True)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)


def format_printf_fd(fmt: str, *args: Any) -> str:
    """Return ``fmt`` formatted, dropping unknown ``%`` sequences entirely."""
    return _render(_require_fmt(fmt), args, keep_unknown=False)


def printf_fd(stream: Union[int, TextIO], fmt: str, *args: Any) -> int:
    """Write the formatted text to a file descriptor or a text stream.

    Returns the number of characters written.
    """
    text = format_printf_fd(fmt, *args)
    if isinstance(stream, bool):
        raise TypeError("stream must be a file descriptor or a text stream, not bool")
    if isinstance(stream, int):
        if stream < 0:
            raise ValueError(f"file descriptor must not be negative, got {stream}")
        os.write(stream, text.encode("utf-8", errors="surrogateescape"))
    else:
        stream.write(text)
    return len(text)