from adapters.evaluator.checked_int32 import (
    checked_add,
    checked_div,
    checked_mul,
    checked_sub,
    fits_int32,
)
from contracts import INT32_MAX, INT32_MIN


def test_fits_int32_bounds():
    assert fits_int32(INT32_MAX)
    assert fits_int32(INT32_MIN)
    assert not fits_int32(INT32_MAX + 1)
    assert not fits_int32(INT32_MIN - 1)


def test_checked_add_and_sub_detect_range_exit():
    assert checked_add(INT32_MAX - 1, 1) == INT32_MAX
    assert checked_add(INT32_MAX, 1) is None
    assert checked_sub(INT32_MIN + 1, 1) == INT32_MIN
    assert checked_sub(INT32_MIN, 1) is None


def test_checked_mul():
    assert checked_mul(46340, 46340) == 2_147_395_600
    assert checked_mul(46341, 46341) is None
    assert checked_mul(-65536, 32768) == INT32_MIN


def test_checked_div_truncates_toward_zero():
    assert checked_div(7, 2) == 3
    assert checked_div(-7, 2) == -3
    assert checked_div(7, -2) == -3
    assert checked_div(-7, -2) == 3


def test_checked_div_failures():
    assert checked_div(5, 0) is None
    assert checked_div(INT32_MIN, -1) is None
    assert checked_div(INT32_MIN, 1) == INT32_MIN
