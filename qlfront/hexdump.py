"""Classic hex and ASCII dump of a block of bytes."""

from __future__ import annotations

_LINE = 16
_HALF = 8


def _ascii(chunk: bytes) -> str:
    return "".join(chr(b) if 0x20 <= b <= 0x7E else "." for b in chunk)


def _format_line(chunk: bytes) -> str:
    n = len(chunk)
    hex_bytes = [f"{b:02X} " for b in chunk]
    line = "".join(hex_bytes[:_HALF]) + " "
    if n > _HALF:
        line += "".join(hex_bytes[_HALF:]) + " "
    if n < _LINE:
        if n <= _HALF:
            line += " "
        line += "   " * (_LINE - n)
    return f"{line}|  {_ascii(chunk)} \n"


def format_hexdump(data: bytes) -> str:
    """Return ``data`` as lines of 16 hex bytes followed by their ASCII text."""
    data = bytes(data)
    return "".join(
        _format_line(data[start : start + _LINE])
        for start in range(0, len(data), _LINE)
    )


def hexdump(data: bytes) -> None:
    """Print a hex dump of ``data`` to standard output."""
    print(format_hexdump(data), end="")