"""QL palette, screen memory decoding and window geometry for the display."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from qlfront.viewport import Rect

USER_CODE_SCREENREFRESH = 0
USER_CODE_EMUEXIT = 1

_FLASH_BIT = 1 << 5
_MODE8_LINE = 256


class Palette(IntEnum):
    """Colour palette choices."""

    FULL = 0
    UNSATURATED = 1
    GRAY = 2


RGB = tuple[int, int, int]

_FULL: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00), (0x00, 0x00, 0xFF), (0xFF, 0x00, 0x00),
    (0xFF, 0x00, 0xFF), (0x00, 0xFF, 0x00), (0x00, 0xFF, 0xFF),
    (0xFF, 0xFF, 0x00), (0xFF, 0xFF, 0xFF), (0x3F, 0x3F, 0x3F),
    (0x00, 0x00, 0x7F), (0x7F, 0x00, 0x00), (0x7F, 0x00, 0x7F),
    (0x00, 0x7F, 0x00), (0x00, 0x7F, 0x7F), (0x7F, 0x7F, 0x00),
    (0x7F, 0x7F, 0x7F),
)

_UNSATURATED: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00), (0x00, 0x00, 0xB0), (0xB0, 0x00, 0x00),
    (0xB0, 0x00, 0xB0), (0x00, 0xB0, 0x00), (0x00, 0xB0, 0xB0),
    (0xB0, 0xB0, 0x00), (0xB0, 0xB0, 0xB0), (0x3F, 0x3F, 0x3F),
    (0x00, 0x00, 0x7F), (0x7F, 0x00, 0x00), (0x7F, 0x00, 0x7F),
    (0x00, 0x7F, 0x00), (0x00, 0x7F, 0x7F), (0x7F, 0x7F, 0x00),
    (0x7F, 0x7F, 0x7F),
)

_GRAY: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00), (0x12, 0x12, 0x12), (0x36, 0x36, 0x36),
    (0x48, 0x48, 0x48), (0xB6, 0xB6, 0xB6), (0xC8, 0xC8, 0xC8),
    (0xEC, 0xEC, 0x00), (0xFF, 0xFF, 0xFF), (0x3F, 0x3F, 0x3F),
    (0x09, 0x09, 0x09), (0x1B, 0x1B, 0x1B), (0x24, 0x00, 0x24),
    (0x5A, 0x5A, 0x5A), (0x63, 0x63, 0x63), (0x75, 0x75, 0x75),
    (0x7F, 0x7F, 0x7F),
)


def palette_colors(option: int) -> list[RGB]:
    """Return the 16 RGB colours of a palette option; unknown means full colour."""
    if option == Palette.GRAY:
        return list(_GRAY)
    if option == Palette.UNSATURATED:
        return list(_UNSATURATED)
    return list(_FULL)


class PixelDecoder:
    """Turns QL screen memory into a row-major list of pixel values.

    Each call advances the frame counter that drives mode 8 flashing.
    """

    def __init__(self, colors: Sequence | None = None) -> None:
        self.colors = list(colors) if colors is not None else palette_colors(0)
        self.frame = 0

    def decode(self, screen: bytes, mode: int) -> list:
        """Decode screen memory in display ``mode`` (4 or 8; 1 acts as 4)."""
        out: list = []
        colors = self.colors
        flashing = bool(self.frame & _FLASH_BIT)
        curpix = 0
        flashbg = colors[0] if False else 0
        flashon = False
        for t1, t2 in zip(screen[0::2], screen[1::2]):
            if mode == 8:
                for shift in (6, 4, 2, 0):
                    p1 = (t1 >> shift) & 0x03
                    p2 = (t2 >> shift) & 0x03
                    value = colors[((p1 & 2) << 1) + (p2 & 3)]
                    if flashing and flashon:
                        value = flashbg
                    out.append(value)
                    out.append(value)
                    if p1 & 1:
                        if not flashon:
                            flashbg = value
                            flashon = True
                        else:
                            flashon = False
                    curpix = (curpix + 1) % _MODE8_LINE
                    if curpix == 0:
                        flashbg = 0
                        flashon = False
            elif mode in (1, 4):
                for shift in range(7, -1, -1):
                    p1 = (t1 >> shift) & 1
                    p2 = (t2 >> shift) & 1
                    out.append(colors[(p1 << 2) + (p2 << 1) + (p1 & p2)])
        self.frame = (self.frame + 1) % 64
        return out


def sdl_mouse_to_ql(
    x: int, y: int, dest_rect: Rect, xres: int, yres: int, high_dpi: bool = False
) -> tuple[int, int]:
    """Convert window mouse coordinates to QL coordinates without shaders."""
    if high_dpi:
        x *= 2
        y *= 2

    if x < dest_rect.x:
        qlx = 0
    elif x > dest_rect.w + dest_rect.x:
        qlx = xres - 1
    else:
        qlx = int((x - dest_rect.x) / (dest_rect.w / xres))

    if y < dest_rect.y:
        qly = 0
    elif y > dest_rect.h + dest_rect.y:
        qly = yres - 1
    else:
        qly = int((y - dest_rect.y) / (dest_rect.h / yres))
    return qlx, qly


def screen_ratio(fixaspect: int) -> float:
    """Return the vertical stretch for the fixaspect option."""
    if fixaspect == 1:
        return 3.0 / 2.0
    if fixaspect == 2:
        return 1.355
    return 1.0


def window_size(xres: int, yres: int, ratio: float, win_size: str) -> tuple[int, int]:
    """Return the initial window size for the win_size option."""
    ay = yres * ratio
    if win_size == "2x":
        return xres * 2, round(ay * 2.0)
    if win_size == "3x":
        return xres * 3, round(ay * 3.0)
    return xres, round(ay)