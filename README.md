# qlfront

`qlfront` holds host-side pieces of a Sinclair QL emulator, written as a
plain Python library with no third-party dependencies.

## What it provides

- **Options** – `qlfront.options.EmulatorOptions` reads the command line
  (`parse`) and an ini file (`load_ini`), with the option names, aliases and
  defaults listed in `qlfront.options.OPTIONS`. Values are looked up with
  `string(name)` and `integer(name)`; command-line values win over ini
  values, which win over defaults. `help_text()` returns the usage text.
- **Directory devices** – `qlfront.devices.DeviceTable` installs
  `NAMEn,path,flags` definitions (`install`) and looks devices up by name
  (`find`). A leading `~` in a path means the home directory, `%x` is
  replaced by the process id in hex, and the flags `native`/`qdos-fs`,
  `qdos-like` and `clean` are recognised.
- **ROMs and memory layout** – `qlfront.rom` builds ROM paths (`rom_path`),
  loads an image of exact size into a `bytearray` (`load_rom`, raising
  `RomError`), works out the top of RAM (`ram_top`, `clamp_ram_top`) and
  places screen memory (`screen_layout`, returning a `ScreenLayout`).
- **Time** – `qlfront.qltime` converts between Unix time and QL time
  (seconds since 1961) with `ux_to_ql_time` and `ql_to_ux_time`, finds the
  local time-zone offset, and offers `QLClock` with an adjustable offset.
- **Display** – `qlfront.display` has the three QL palettes
  (`palette_colors`), a `PixelDecoder` for mode 4 and mode 8 screen memory
  (with flashing), `sdl_mouse_to_ql`, `screen_ratio` and `window_size`.
  `qlfront.viewport` fits the picture into a window (`fit_viewport`),
  mirrors the curved-screen distortion (`distort`, `read_curve`), assembles
  shader source text (`shader_source`) and maps mouse positions
  (`map_mouse`).
- **Helpers** – `qlfront.c68` translates host socket errors and protocol
  numbers to their C68 values; `qlfront.conditions` evaluates 68000
  condition codes against a `Flags` value; `qlfront.trace` keeps a
  `TraceTable` of regions and a `BackTrace` ring of control-flow events;
  `qlfront.hexdump` formats hex dumps; `qlfront.pending.check_pending`
  polls a file descriptor without blocking.

## Examples

```python
from qlfront.qltime import ux_to_ql_time, ql_to_ux_time

ql = ux_to_ql_time(0, 0)        # the Unix epoch in QL seconds
assert ql == 283996800
assert ql_to_ux_time(ql, 0) == 0
```

```python
import errno
from qlfront.c68 import c68_error, protocol_name

assert c68_error(errno.ECONNREFUSED) == 63
assert protocol_name(6) == " tcp "
```

```python
from qlfront.viewport import fit_viewport, Rect

assert fit_viewport(1024, 768, 2.0, 1.0) == Rect(0, 128, 1024, 512)
```

```python
from qlfront.rom import ram_top
from qlfront.display import palette_colors
from qlfront.hexdump import format_hexdump

assert ram_top(0, 512) == 512 * 1024
assert palette_colors(0)[1] == (0x00, 0x00, 0xFF)
print(format_hexdump(b"]!QDOS File Header"), end="")
```

## What it does not do

The package does not execute 68000 code, open a window or render the
screen, and has no command to start an emulator. It does not translate
host key presses or joystick input into QL keys, and it does not read or
write QDOS file headers. Those parts must come from elsewhere.

## Tests

The test suite uses pytest and is installed with the `test` extra.