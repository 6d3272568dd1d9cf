"""ROM loading and memory and screen layout for emulator start-up."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_K = 1024
_SCREEN_BASE = 128 * _K


class RomError(Exception):
    """A ROM image could not be loaded."""


@dataclass(frozen=True)
class ScreenLayout:
    """Screen geometry and where screen memory lies, with the resulting RAM top."""

    xres: int
    yres: int
    linel: int
    qm_lo: int
    qm_hi: int
    qm_len: int
    rtop: int


def rom_path(rom_dir: str, rom_name: str, home: str = "") -> str:
    """Return the path of a ROM image; a leading '~' means the home directory."""
    if rom_dir.startswith("~"):
        return f"{home}/{rom_dir[1:]}/{rom_name}"
    return f"{rom_dir}/{rom_name}"


def load_rom(
    memory: bytearray,
    rom_dir: str,
    rom_name: str,
    addr: int,
    size: int,
    home: str = "",
) -> int:
    """Read a ROM image of exactly ``size`` bytes into ``memory`` at ``addr``."""
    path = rom_path(rom_dir, rom_name, home)
    try:
        actual = os.stat(path).st_size
    except OSError as exc:
        raise RomError(f"{exc.strerror}: {path}") from exc
    if actual != size:
        raise RomError(f"Rom Size Error {size} != {actual}: {path}")
    if addr < 0 or addr + size > len(memory):
        raise RomError(f"Rom does not fit in memory at {addr:#x}: {path}")
    try:
        with open(path, "rb") as handle:
            data = handle.read(size)
    except OSError as exc:
        raise RomError(f"{exc.strerror}: {path}") from exc
    memory[addr : addr + len(data)] = data
    return len(data)


def ram_top(ramsize: int, ramtop: int) -> int:
    """Return the top of memory in bytes from the ramsize or ramtop option."""
    rtop = (128 + ramsize) * _K if ramsize else ramtop * _K
    if rtop < 256 * _K:
        raise ValueError(
            f"Sorry not enough ram defined for QDOS {rtop // _K - 128}K"
        )
    return rtop


def clamp_ram_top(rtop: int, is_minerva: bool) -> int:
    """Limit memory to what the ROM can handle: 16M for Minerva, else 4M."""
    limit = 16384 * _K if is_minerva else 4096 * _K
    return min(rtop, limit)


def _standard_layout(rtop: int) -> ScreenLayout:
    return ScreenLayout(
        xres=512,
        yres=256,
        linel=128,
        qm_lo=_SCREEN_BASE,
        qm_hi=_SCREEN_BASE + 32 * _K,
        qm_len=0x8000,
        rtop=rtop,
    )


def screen_layout(xres: int, yres: int, rtop: int, is_minerva: bool) -> ScreenLayout:
    """Place screen memory; only Minerva supports screens other than 512x256.

    A large Minerva screen is moved to the top of RAM, which lowers RAM top.
    """
    if not is_minerva:
        return _standard_layout(rtop)
    xres &= ~7
    linel = xres // 4
    qm_len = linel * yres
    qm_lo = _SCREEN_BASE
    if qm_len > 0x8000:
        if rtop - qm_len < 256 * _K + 8192:
            logger.warning("sorry, not enough RAM for such a big screen")
            return _standard_layout(rtop)
        qm_lo = ((rtop - qm_len) >> 15) << 15
        rtop = qm_lo
    return ScreenLayout(
        xres=xres,
        yres=yres,
        linel=linel,
        qm_lo=qm_lo,
        qm_hi=qm_lo + qm_len,
        qm_len=qm_len,
        rtop=rtop,
    )