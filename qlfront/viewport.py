"""Screen placement, shader source assembly and mouse mapping for the GPU display."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_DEFAULT_HEADER = "#version 100\nprecision mediump int;\nprecision mediump float;\n"
_DIRECTIVES = {
    "vertex": "#define VERTEX\n",
    "fragment": "#define FRAGMENT\n",
}
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DELIMITERS = re.compile(r"[ \t\n]")


@dataclass(frozen=True)
class Rect:
    """An integer rectangle in window coordinates."""

    x: int
    y: int
    w: int
    h: int


def fit_viewport(
    width: int, height: int, pixel_ratio: float, screen_ratio: float
) -> Rect:
    """Place the QL image in a window so its aspect ratio is kept."""
    target_width = (pixel_ratio * height) / screen_ratio
    if abs(width - target_width) < 3.0:
        return Rect(0, 0, width, height)
    if width > target_width:
        w = int(target_width)
        return Rect((width - w) // 2, 0, w, height)
    h = int(width * screen_ratio / pixel_ratio)
    return Rect(0, (height - h) // 2, width, h)


def distort(x: float, y: float, curve_x: float, curve_y: float) -> tuple[float, float]:
    """Apply the curved-screen barrel distortion to a point in the unit square."""
    scale_x = 1.0 - 0.23 * curve_x
    scale_y = 1.0 - 0.23 * curve_y
    cx = x - 0.5
    cy = y - 0.5
    rsq = cx * cx + cy * cy
    cx += cx * curve_x * rsq
    cy += cy * curve_y * rsq
    return cx * scale_x + 0.5, cy * scale_y + 0.5


def _parse_float(token: str) -> float:
    match = _FLOAT_PREFIX.match(token)
    return float(match.group()) if match else 0.0


def read_curve(source: str) -> tuple[float, float]:
    """Read the CURVATURE_X and CURVATURE_Y defines from shader source.

    Falls back to (1.0, 1.0) when either value is missing.
    """
    tokens = iter(t for t in _DELIMITERS.split(source) if t)
    curve_x: float | None = None
    curve_y: float | None = None
    define = False
    for token in tokens:
        if define and token in ("CURVATURE_X", "CURVATURE_Y"):
            value = next(tokens, None)
            if value is None:
                break
            if token == "CURVATURE_X":
                curve_x = _parse_float(value)
            else:
                curve_y = _parse_float(value)
            token = value
        define = token == "#define"
    if curve_x is None or curve_y is None:
        logger.warning("Cannot read curve data")
        return 1.0, 1.0
    return curve_x, curve_y


def shader_source(
    stage: str,
    data: str,
    prepend: str | None,
    language: str,
    min_version: int,
    max_version: int,
) -> str:
    """Build the full source for one shader stage.

    ``stage`` is "vertex" or "fragment"; ``language`` is "glsl" or "glsles".
    """
    header = _DEFAULT_HEADER
    if language == "glsl":
        if min_version >= 120:
            header = f"#version {min_version}\n"
        elif max_version >= 120:
            header = "#version 120\n"
        else:
            header = "#version 110\n"
    directive = _DIRECTIVES.get(stage, "")
    return header + directive + (prepend or "") + data


def map_mouse(
    x: int,
    y: int,
    rect: Rect,
    xres: int,
    yres: int,
    curve: tuple[float, float] | None = None,
) -> tuple[int, int]:
    """Convert window mouse coordinates to QL screen coordinates."""
    qlx = int(((x - rect.x) * xres + 0.5) / rect.w)
    qly = int(((y - rect.y) * yres + 0.5) / rect.h)

    if curve is not None:
        fx, fy = distort(qlx / xres, qly / yres, curve[0], curve[1])
        qlx = int(fx * xres)
        qly = int(fy * yres)

    qlx = max(qlx, 0)
    qlx = qlx if qlx < xres else xres - 1
    qly = max(qly, 0)
    qly = qly if qly < yres else yres - 1
    return qlx, qly