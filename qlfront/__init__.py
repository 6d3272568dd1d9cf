"""Host-side support for a Sinclair QL emulator: options, devices, ROMs, time, display and helpers."""

__version__ = "0.1.0"

__all__ = [
    "c68",
    "conditions",
    "devices",
    "display",
    "hexdump",
    "options",
    "pending",
    "qltime",
    "rom",
    "trace",
    "viewport",
]