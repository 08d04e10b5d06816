import pytest

from xorpl.layout import (
    LayoutError, default_layout, has_plaintext, min_max_row_sum, unpermuted_end_state, valid_end_state,
)
from xorpl.xmatrix import XMatrix


@pytest.mark.parametrize("r, c", [(2, 2), (4, 2), (6, 6), (8, 6), (10, 4)])
def test_default_layout(r, c):
    x = default_layout(r, c)
    assert x.rank() == c
    assert not has_plaintext(x)
    assert valid_end_state(x)
    assert unpermuted_end_state(x)
    assert x.row_sum(r - 1) == (1 if r == c else 0)


@pytest.mark.parametrize("r, c", [(4, 6), (8, 5), (8, 0)])
def test_default_layout_rejects_bad_dimensions(r, c):
    with pytest.raises(LayoutError):
        default_layout(r, c)


def test_has_plaintext():
    # register 1 holds cipher 0 xor key 0
    assert has_plaintext(XMatrix.parse("1000\n1100\n0010\n", 3, 4))
    assert has_plaintext(XMatrix.parse("0011\n", 2, 4))


def test_has_plaintext_ignores_other_pairs():
    # mixes across pairs, or more than two values
    assert not has_plaintext(XMatrix.parse("0110\n", 2, 4))
    assert not has_plaintext(XMatrix.parse("1010\n", 2, 4))
    assert not has_plaintext(XMatrix.parse("1110\n", 2, 4))
    assert not has_plaintext(XMatrix.parse("1111\n", 2, 4))


def test_has_plaintext_odd_columns():
    with pytest.raises(LayoutError):
        has_plaintext(XMatrix(3, 3))


def test_valid_end_state_permuted():
    x = XMatrix.parse("0100\n1011\n1000\n0001\n0010\n", 5, 4)
    assert valid_end_state(x)
    assert not unpermuted_end_state(x)


def test_valid_end_state_duplicate_cover():
    # two registers both hold column 0 alone, column 1 is never alone
    x = XMatrix.parse("10\n10\n11\n", 3, 2)
    assert not valid_end_state(x)
    y = XMatrix.parse("10\n10\n01\n", 3, 2)
    assert valid_end_state(y)


def test_valid_end_state_missing_column():
    assert not valid_end_state(XMatrix.parse("100\n110\n001\n", 3, 3))


def test_min_max_row_sum():
    x = XMatrix.parse("110\n000\n111\n", 3, 3)
    assert min_max_row_sum(x) == (0, 3)
    with pytest.raises(LayoutError):
        min_max_row_sum(XMatrix(2, 256))
