"""Instruction trace regions and a ring buffer of control-flow events."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple

BACKTRACE_SIZE = 100

_EXCEPTION_NAMES = {
    2: "bus error",
    3: "address error",
    4: "Illegal code",
    5: "divide by zero",
    6: "CHK instruction",
    7: "TRAPV instruction",
    8: "privilege violation",
    9: "trace xc",
    10: "Axxx instruction code",
    11: "Fxxx instruction code",
}


class Event(IntEnum):
    """Control-flow events; negative values stand for exception numbers."""

    RTS = 1
    RTE = 2
    RTR = 3
    JSR = 4
    BSR = 5


@dataclass(frozen=True)
class TraceRegion:
    """A named address range to trace."""

    low: int
    high: int
    comment: str


def _default_regions() -> list[TraceRegion]:
    return [TraceRegion(0, 16384 * 3, "ROM")]


@dataclass
class TraceTable:
    """The set of regions that tracing follows."""

    regions: list[TraceRegion] = field(default_factory=_default_regions)

    def find(self, pc: int) -> TraceRegion | None:
        """Return the region holding ``pc``, or else the nearest one above it."""
        current: TraceRegion | None = None
        for region in self.regions:
            inside = region.low <= pc <= region.high
            above = region.low >= pc and (current is None or region.low <= current.low)
            if inside or above:
                current = region
        return current


def exception_name(xc: int) -> str:
    """Describe an exception vector number for a backtrace line."""
    if xc != 4:
        if 32 <= xc <= 32 + 15:
            return f"\tTRAP #{xc - 32}\t"
        if 24 <= xc <= 24 + 7:
            return f"\tInterrupt #{xc - 24}\t"
    return f"\tException {_EXCEPTION_NAMES.get(xc, '')} \t"


class _Entry(NamedTuple):
    where: int
    to: int
    what: int


class BackTrace:
    """Remembers the most recent control-flow events."""

    def __init__(self, size: int = BACKTRACE_SIZE) -> None:
        self._size = size
        self._entries: deque[_Entry] = deque(maxlen=size)
        self._unchanged = True

    def add(self, where: int, to: int, what: int) -> None:
        """Record an event at address ``where`` that continues at ``to``."""
        self._entries.append(_Entry(where, to, int(what)))
        self._unchanged = False

    def lines(self, depth: int) -> list[str]:
        """Return report lines for up to ``depth`` events, most recent first."""
        out = ["BackTrace:"]
        if self._unchanged:
            out.append("\tunchanged")
            return out
        self._unchanged = True
        depth = min(depth, self._size)
        for entry in list(reversed(self._entries))[:depth]:
            if entry.what > 0:
                try:
                    name = Event(entry.what).name
                except ValueError:
                    name = "unknown"
                prefix = f"\t {name}\t"
            else:
                prefix = exception_name(-entry.what)
            out.append(f"{prefix}at PC={entry.where:x}, new pc={entry.to:x}")
        return out