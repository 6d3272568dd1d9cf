"""68000 condition codes evaluated against the processor flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


@dataclass
class Flags:
    """The condition flags of the status register."""

    carry: bool = False
    zero: bool = False
    negative: bool = False
    overflow: bool = False


class Condition(IntEnum):
    """Condition codes in the order of the instruction's condition field."""

    T = 0
    F = 1
    HI = 2
    LS = 3
    CC = 4
    CS = 5
    NE = 6
    EQ = 7
    VC = 8
    VS = 9
    PL = 10
    MI = 11
    GE = 12
    LT = 13
    GT = 14
    LE = 15


_TESTS = {
    Condition.T: lambda f: True,
    Condition.F: lambda f: False,
    Condition.HI: lambda f: not (f.carry or f.zero),
    Condition.LS: lambda f: f.carry or f.zero,
    Condition.CC: lambda f: not f.carry,
    Condition.CS: lambda f: f.carry,
    Condition.NE: lambda f: not f.zero,
    Condition.EQ: lambda f: f.zero,
    Condition.VC: lambda f: not f.overflow,
    Condition.VS: lambda f: f.overflow,
    Condition.PL: lambda f: not f.negative,
    Condition.MI: lambda f: f.negative,
    Condition.GE: lambda f: f.negative == f.overflow,
    Condition.LT: lambda f: f.negative != f.overflow,
    Condition.GT: lambda f: (not f.zero) and f.negative == f.overflow,
    Condition.LE: lambda f: f.zero or f.negative != f.overflow,
}


def condition_true(condition: int, flags: Flags) -> bool:
    """Return whether ``condition`` holds for ``flags``."""
    return bool(_TESTS[Condition(condition)](flags))