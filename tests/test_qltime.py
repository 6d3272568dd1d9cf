import time

import pytest

from qlfront.qltime import (
    TIME_DIFF,
    QLClock,
    home_directory,
    local_tz_offset,
    ql_to_ux_time,
    ux_to_ql_time,
)


@pytest.fixture
def tz(monkeypatch):
    def set_tz(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield set_tz
    monkeypatch.undo()
    time.tzset()


def test_unix_epoch_is_ql_time_diff():
    assert ux_to_ql_time(0, 0) == 283996800


def test_tz_offset_added():
    assert ux_to_ql_time(0, 3600) == TIME_DIFF + 3600


@pytest.mark.parametrize("t,tz_offset", [(0, 0), (1_600_000_000, 3600), (12345, -18000)])
def test_round_trip(t, tz_offset):
    assert ql_to_ux_time(ux_to_ql_time(t, tz_offset), tz_offset) == t


def test_local_tz_offset_utc(tz):
    tz("UTC")
    assert local_tz_offset(1_000_000_000) == 0


def test_local_tz_offset_fixed_zone(tz):
    tz("EST5")
    assert local_tz_offset(1_000_000_000) == -5 * 3600


def test_home_directory_from_environ():
    assert home_directory({"HOME": "/home/example"}) == "/home/example"


def test_home_directory_missing():
    assert home_directory({}) == ""


def test_clock_now_uses_time_source():
    clock = QLClock(adjustment=10, tz_offset=0, clock=lambda: 0.0)
    assert clock.now() == TIME_DIFF + 10


def test_clock_now_applies_tz_offset():
    clock = QLClock(tz_offset=7200, clock=lambda: 100.9)
    assert clock.now() == ux_to_ql_time(100, 7200)


def test_clock_wraps_to_signed_32_bits():
    clock = QLClock(tz_offset=0, clock=lambda: float(2**31 - TIME_DIFF))
    assert clock.now() == -(2**31)


def test_clock_default_tz_offset(tz):
    tz("UTC")
    clock = QLClock(clock=lambda: 0.0)
    assert clock.tz_offset == 0
    assert clock.now() == TIME_DIFF