"""Conversion between host time and QL time, and related host settings."""

from __future__ import annotations

import os
import time
from dataclasses import dataclass, field
from typing import Callable, Mapping

# Seconds between the QL epoch (1961-01-01) and the Unix epoch.
TIME_DIFF = 283996800


def ux_to_ql_time(t: int, tz_offset: int) -> int:
    """Convert a Unix timestamp to QL seconds in local time."""
    return t + TIME_DIFF + tz_offset


def ql_to_ux_time(t: int, tz_offset: int) -> int:
    """Convert QL local seconds back to a Unix timestamp."""
    return t - TIME_DIFF - tz_offset


def local_tz_offset(now: float | None = None) -> int:
    """Return the local time zone's offset from UTC in seconds at ``now``."""
    if now is None:
        now = time.time()
    ltime = time.localtime(now)
    gtime = time.gmtime(now)
    gparts = tuple(gtime)[:8] + (ltime.tm_isdst,)
    return int(time.mktime(ltime) - time.mktime(time.struct_time(gparts)))


def home_directory(environ: Mapping[str, str] | None = None) -> str:
    """Return the user's home directory, or an empty string if unknown."""
    if environ is None:
        environ = os.environ
    return environ.get("HOME", "") or ""


def _to_w32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


@dataclass
class QLClock:
    """The emulated real-time clock, with an adjustable offset."""

    adjustment: int = 0
    tz_offset: int | None = None
    clock: Callable[[], float] = field(default=time.time, repr=False)

    def __post_init__(self) -> None:
        if self.tz_offset is None:
            self.tz_offset = local_tz_offset()

    def now(self) -> int:
        """Return the current QL time as a signed 32-bit value."""
        seconds = int(self.clock())
        return _to_w32(ux_to_ql_time(seconds, self.tz_offset) + self.adjustment)