"""Minimal printf-style formatting with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import os
import re
import sys
from typing import Any, Iterator

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int32(value: Any) -> int:
    number = int(value) & _UINT32
    return number - (1 << 32) if number >= (1 << 31) else number


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) & 0xFF)


def _as_pointer(value: Any) -> str:
    if value is None or (isinstance(value, int) and value == 0):
        return "(nil)"
    address = value & _UINT64 if isinstance(value, int) else id(value)
    return f"0x{address:x}"


def _as_hex(value: Any, upper: bool) -> str:
    # Every hexadecimal conversion carries one leading zero.
    digits = format(int(value) & _UINT32, "X" if upper else "x")
    return "0" + digits


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        return _as_char(_take(args))
    if spec == "s":
        value = _take(args)
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _as_pointer(_take(args))
    if spec in ("d", "i"):
        return str(_as_int32(_take(args)))
    if spec == "u":
        return str(int(_take(args)) & _UINT32)
    if spec in ("x", "X"):
        return _as_hex(_take(args), spec == "X")
    if spec == "%":
        return "%"
    return ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions produce nothing and consume no argument.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    remaining = iter(args)
    return _DIRECTIVE.sub(lambda match: _convert(match.group(1), remaining), fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the number of bytes written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text.encode("utf-8", errors="surrogateescape"))


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Write the formatted text to file descriptor ``fd``; return the number of bytes written."""
    data = sprintf(fmt, *args).encode("utf-8", errors="surrogateescape")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)