import itertools

import pytest

from qlfront.conditions import Condition, Flags, condition_true

ALL_FLAGS = [
    Flags(carry=c, zero=z, negative=n, overflow=v)
    for c, z, n, v in itertools.product((False, True), repeat=4)
]


@pytest.mark.parametrize("flags", ALL_FLAGS)
def test_pairs_are_complementary(flags):
    for even in range(0, 16, 2):
        assert condition_true(even, flags) != condition_true(even + 1, flags)


@pytest.mark.parametrize("flags", ALL_FLAGS)
def test_true_and_false(flags):
    assert condition_true(Condition.T, flags) is True
    assert condition_true(Condition.F, flags) is False


@pytest.mark.parametrize("flags", ALL_FLAGS)
def test_single_flag_conditions(flags):
    assert condition_true(Condition.EQ, flags) == flags.zero
    assert condition_true(Condition.CS, flags) == flags.carry
    assert condition_true(Condition.MI, flags) == flags.negative
    assert condition_true(Condition.VS, flags) == flags.overflow


@pytest.mark.parametrize("flags", ALL_FLAGS)
def test_signed_comparisons(flags):
    ge = flags.negative == flags.overflow
    assert condition_true(Condition.GE, flags) == ge
    assert condition_true(Condition.GT, flags) == (ge and not flags.zero)
    assert condition_true(Condition.HI, flags) == (
        not flags.carry and not flags.zero
    )


def test_unknown_condition_rejected():
    with pytest.raises(ValueError):
        condition_true(16, Flags())