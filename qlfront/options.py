"""Emulator options from the command line and an ini file."""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Sequence

from qlfront.devices import DeviceTable

logger = logging.getLogger(__name__)

_RELEASE = "0.1.0"

_HELP_HEAD = """
Usage: sqlux [OPTIONS] [args...]

Positionals:
  args                        Arguments passed to QDOS

Options:
  -h,--help                   Print this help message and exit
  -f,--config [sqlux.ini]     Read an ini file
"""

_HELP_TAIL = "  --version                   version number\n"


class OptionType(Enum):
    INT = "int"
    CHAR = "char"
    DEV = "dev"


@dataclass(frozen=True)
class OptionSpec:
    """One emulator option with its alias, help and default."""

    name: str
    alias: str
    help: str
    type: OptionType
    default: int | str | None = None


_I, _C, _D = OptionType.INT, OptionType.CHAR, OptionType.DEV

OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec("bdi1", "", "file exposed by the BDI interface", _C),
    OptionSpec("boot_cmd", "b", "command to run on boot (executed in basic)", _C),
    OptionSpec("boot_device", "d", "device to load BOOT file from", _C, "mdv1"),
    OptionSpec("cpu_hog", "", "1 = use all cpu, 0 = sleep when idle", _I, 1),
    OptionSpec("device", "", "QDOS_name,path,flags (may be used multiple times", _D),
    OptionSpec("fast_startup", "", "1 = skip ram test (does not affect Minerva)", _I, 0),
    OptionSpec("filter", "", "enable bilinear filter when zooming", _I, 0),
    OptionSpec(
        "fixaspect",
        "",
        "0 = 1:1 pixel mapping, 1 = 2:3 non square pixels, "
        "2 = BBQL aspect non square pixels",
        _I,
        0,
    ),
    OptionSpec("iorom1", "", "rom in 1st IO area (Minerva only 0x10000 address)", _C),
    OptionSpec("iorom2", "", "rom in 2nd IO area (Minerva only 0x14000 address)", _C),
    OptionSpec("joy1", "", "1-8 SDL2 joystick index", _I, 0),
    OptionSpec("joy2", "", "1-8 SDL2 joystick index", _I, 0),
    OptionSpec("kbd", "", "keyboard language DE, GB, ES, US", _C, "US"),
    OptionSpec("no_patch", "n", "disable patching the rom", _I, 0),
    OptionSpec(
        "palette",
        "",
        "0 = Full colour, 1 = Unsaturated colours (slightly more CRT like), "
        "2 =  Enable grayscale display",
        _I,
        0,
    ),
    OptionSpec("print", "", "command to use for print jobs", _C, "lpr"),
    OptionSpec(
        "ramtop",
        "r",
        "The memory space top (128K + QL ram, not valid if ramsize set)",
        _I,
        256,
    ),
    OptionSpec("ramsize", "", "The size of ram", _I, 0),
    OptionSpec("resolution", "g", "resolution of screen in mode 4", _C, "512x256"),
    OptionSpec("romdir", "", "path to the roms", _C, "roms"),
    OptionSpec("romport", "", "rom in QL rom port (0xC000 address)", _C),
    OptionSpec(
        "romim", "", "rom in QL rom port (0xC000 address, legacy alias for romport)", _C
    ),
    OptionSpec("ser1", "", "device for ser1", _C),
    OptionSpec("ser2", "", "device for ser2", _C),
    OptionSpec("ser3", "", "device for ser3", _C),
    OptionSpec("ser4", "", "device for ser4", _C),
    OptionSpec(
        "shader", "", "0 = Disabled, 1 = Use flat shader, 2 = Use curved shader", _I, 0
    ),
    OptionSpec(
        "shader_file", "", "Path to shader file to use if SHADER is 1 or 2", _C,
        "shader.glsl",
    ),
    OptionSpec("skip_boot", "", "1 = skip f1/f2 screen, 0 = show f1/f2 screen", _I, 1),
    OptionSpec("sound", "", "volume in range 1-8, 0 to disable", _I, 0),
    OptionSpec("speed", "", "speed in factor of BBQL speed, 0.0 for full speed", _C, "0.0"),
    OptionSpec("strict_lock", "", "enable strict file locking", _I, 0),
    OptionSpec("sysrom", "", "system rom", _C, "MIN198.rom"),
    OptionSpec("win_size", "w", "window size 1x, 2x, 3x, max, full", _C, "1x"),
    OptionSpec("verbose", "v", "verbosity level 0-3", _I, 1),
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INLINE_COMMENT = re.compile(r"\s;.*$")


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def help_text() -> str:
    """Return the usage text listing every option with its default."""
    parts = [_HELP_HEAD]
    for spec in OPTIONS:
        item = f"  -{spec.alias}," if spec.alias else "  "
        item += f"--{spec.name}"
        if spec.type is OptionType.INT:
            item += f" [{spec.default}]"
        elif spec.type is OptionType.CHAR and spec.default is not None:
            item += f" [{spec.default}]"
        parts.append(f"{item.ljust(30)}{spec.help}\n")
    parts.append(_HELP_TAIL)
    return "".join(parts)


def _iter_ini(text: str) -> Iterator[tuple[str, str, str]]:
    section = ""
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line.startswith("["):
            end = line.find("]")
            if end > 0:
                section = line[1:end].strip()
            continue
        line = _INLINE_COMMENT.sub("", line)
        separator = re.search(r"[=:]", line)
        if separator is None:
            continue
        yield section, line[: separator.start()].strip(), line[separator.end():].strip()


class EmulatorOptions:
    """Option values: command line first, then ini file, then defaults."""

    def __init__(self, home: str = "", pid: int | None = None) -> None:
        self.home = home
        self.pid = pid
        self.devices = DeviceTable()
        self.args: list[str] = []
        self.config_file = "sqlux.ini"
        self._specs = {spec.name: spec for spec in OPTIONS}
        self._values: dict[str, int | str | None] = {
            spec.name: spec.default for spec in OPTIONS
        }
        self._cli: dict[str, list] = {}

    def _parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="sqlux", add_help=False, allow_abbrev=False
        )
        parser.add_argument("-h", "--help", action="store_true")
        parser.add_argument("--version", action="version", version=_RELEASE)
        parser.add_argument("-f", "--config", default="sqlux.ini")
        for spec in OPTIONS:
            flags = [f"--{spec.name}"]
            if spec.alias:
                flags.append(f"-{spec.alias}")
            kind = int if spec.type is OptionType.INT else str
            parser.add_argument(*flags, dest=spec.name, type=kind, action="append")
        parser.add_argument("args", nargs="*")
        return parser

    def parse(self, argv: Sequence[str] | None = None) -> bool:
        """Parse the command line, install devices and read the ini file.

        Returns True when the ini file was read, False when it could not be.
        """
        namespace = self._parser().parse_args(argv)
        if namespace.help:
            print(help_text(), end="")
            raise SystemExit(0)
        self.args = list(namespace.args)
        self.config_file = namespace.config
        for spec in OPTIONS:
            given = getattr(namespace, spec.name)
            if given:
                self._cli[spec.name] = given
        for device in self._cli.get("device", []):
            self.devices.install(device.split(","), self.home, self.pid)
        try:
            self.load_ini(self.config_file)
        except OSError:
            logger.error("Can't load '%s'", self.config_file)
            return False
        return True

    def load_ini(self, path: str | Path) -> list[str]:
        """Apply the settings of an ini file; return the names it did not know."""
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        unknown: list[str] = []
        for _section, name, value in _iter_ini(text):
            key = name.lower()
            if key == "device":
                self.devices.install(value.split(","), self.home, self.pid)
                continue
            spec = self._specs.get(key)
            if spec is None or spec.type is OptionType.DEV:
                unknown.append(name)
            elif spec.type is OptionType.CHAR:
                self._values[spec.name] = value
            else:
                self._values[spec.name] = _atoi(value)
        return unknown

    def string(self, name: str) -> str:
        """Return a text option, or an empty string if it has no value."""
        if name in self._cli:
            return str(self._cli[name][-1])
        spec = self._specs.get(name)
        if spec is not None and spec.type is OptionType.CHAR:
            value = self._values[name]
            if value is not None:
                return str(value)
        return ""

    def integer(self, name: str) -> int:
        """Return a numeric option, or 0 if it has none."""
        if name in self._cli:
            value = self._cli[name][-1]
            return value if isinstance(value, int) else _atoi(value)
        spec = self._specs.get(name)
        if spec is not None and spec.type is OptionType.INT:
            return int(self._values[name])
        return 0