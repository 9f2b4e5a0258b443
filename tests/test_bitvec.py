import pytest

from impeval.z3_ops import WORD_MAX, check_word, wrapping_add, wrapping_mul, less_than
from impeval.z3_ops.bitvec import word


def test_word_values_are_cached():
    assert word(12345) is word(12345)


def test_wrapping_ops():
    assert wrapping_add(WORD_MAX, 2) == 1
    assert wrapping_mul(WORD_MAX, WORD_MAX) == 1
    assert wrapping_add(3, 4) == 7


def test_less_than_unsigned():
    assert less_than(0, WORD_MAX)
    assert not less_than(WORD_MAX, WORD_MAX)


def test_check_word_bounds():
    check_word(0)
    check_word(WORD_MAX)
    with pytest.raises(ValueError):
        check_word(WORD_MAX + 1)
