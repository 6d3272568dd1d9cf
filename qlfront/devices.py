"""The directory device table: QDOS device names mapped to host paths."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Sequence

logger = logging.getLogger(__name__)

MAXDEV = 16
UNITS = 8

# Values of DeviceEntry.where.
_WHERE_NATIVE = 1
_WHERE_QDOS_LIKE = 2


@dataclass
class DeviceEntry:
    """One emulated directory device and its eight units.

    ``where`` per unit: 0 host file system, 1 QL floppy/QXL.WIN image,
    2 host file system, case-insensitive.
    """

    name: str
    where: list[int] = field(default_factory=lambda: [0] * UNITS)
    present: list[bool] = field(default_factory=lambda: [False] * UNITS)
    mount_points: list[str | None] = field(default_factory=lambda: [None] * UNITS)
    clean: list[bool] = field(default_factory=lambda: [False] * UNITS)


def _replace_pid(path: str, pid: int | None) -> str:
    if "%x" not in path:
        return path
    parts = path.split("%x")
    if len(parts) > 2:
        logger.warning("Only one %%x allowed")
    if pid is None:
        pid = os.getpid()
    return f"{parts[0]}{pid:x}{parts[1]}"


class DeviceTable:
    """A fixed-size table of directory devices."""

    def __init__(self) -> None:
        self._slots: list[DeviceEntry | None] = [None] * MAXDEV

    def __iter__(self):
        return (entry for entry in self._slots if entry is not None)

    def find(self, name: str) -> DeviceEntry | None:
        """Return the device called ``name`` (any case), or None."""
        wanted = name.lower()
        for entry in self:
            if entry.name.lower() == wanted:
                return entry
        return None

    def install(
        self,
        fields: Sequence[str],
        home: str = "",
        pid: int | None = None,
    ) -> DeviceEntry | None:
        """Install a device from ``NAMEn,path,flags...`` fields.

        A unit number of 0 on an existing device removes it.
        Returns the affected entry, or None when nothing was installed.
        """
        if not fields:
            return None
        name = fields[0]
        if name and name[-1] in "0123456789":
            unit = int(name[-1])
            name = name[:-1]
        else:
            unit = -1

        found: int | None = None
        free: int | None = None
        for index, entry in enumerate(self._slots):
            if entry is not None and entry.name.lower() == name.lower():
                found = index
                break
            if entry is None and free is None:
                free = index

        if found is None and free is None:
            logger.error(
                "sorry, no more free entries in Directory Device Driver table"
            )
            return None

        if found is not None and unit == 0:
            self._slots[found] = None
            return None

        if free is not None:
            found = free
            self._slots[found] = DeviceEntry(name.upper())
        entry = self._slots[found]
        assert entry is not None

        if not 1 <= unit <= UNITS:
            return entry
        slot = unit - 1

        if len(fields) > 1:
            path = fields[1]
            if path.startswith("~"):
                path = f"{home}/{path[1:]}"
            path = _replace_pid(path, pid)
            is_ram = entry.name.lower() == "ram"
            if not is_ram and not os.path.exists(path):
                logger.warning(
                    "Mountpoint %s for device %s%d_ may not be accessible",
                    path,
                    name,
                    unit,
                )
            if os.path.isdir(path) and not path.endswith("/"):
                path += "/"
            if is_ram and not path.endswith("/"):
                path += "/"
            entry.mount_points[slot] = path
            entry.present[slot] = True
        else:
            entry.present[slot] = False

        if len(fields) > 2:
            flag_set = False
            for flag in fields[2:]:
                if "native" in flag or "qdos-fs" in flag:
                    entry.where[slot] = _WHERE_NATIVE
                    flag_set = True
                elif "qdos-like" in flag:
                    entry.where[slot] = _WHERE_QDOS_LIKE
                    flag_set = True
                if "clean" in flag:
                    entry.clean[slot] = True
                    flag_set = True
            if not flag_set:
                logger.warning(
                    "flag %s in definition of %s%d_ not recognised",
                    ",".join(fields[2:]),
                    name,
                    unit,
                )
        return entry