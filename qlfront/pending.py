"""Non-blocking check whether a file descriptor is ready."""

from __future__ import annotations

import select
from enum import IntEnum
from typing import Any


class PendMode(IntEnum):
    """Which kind of readiness to test for."""

    READ = 0
    WRITE = 1
    ERR = 2


def check_pending(fd: Any, mode: int) -> bool:
    """Return whether ``fd`` is ready for ``mode`` right now, without waiting.

    A descriptor that cannot be polled counts as not ready.
    """
    try:
        pend = PendMode(mode)
    except ValueError:
        raise ValueError(f"wrong mode for check_pending: {mode}") from None

    sets: list[list[Any]] = [[], [], []]
    sets[pend] = [fd]
    try:
        ready = select.select(sets[0], sets[1], sets[2], 0)
    except (OSError, ValueError, TypeError):
        return False
    return bool(ready[pend])