import pytest

DIGITS = list("12345")

@pytest.mark.parametrize(
    "length,expected",
    [
        (None, "12345"),
        (0, "12345"),
        (5, "12345"),
        (-5, "12345"),
        (3, "345"),        # low digits kept
        (-3, "123"),       # high digits kept
        (7, "0012345"),    # left-padded
        (-7, "1234500"),   # right-padded
        (1, "5"),
        (-1, "1"),
    ],
)
def test_apply_length_matrix(codec, length, expected):
    assert "".join(codec.apply_length(DIGITS, length, "0")) == expected

def test_apply_length_pads_with_alphabet_zero(codec):
    assert codec.apply_length([], 3, 0) == [0, 0, 0]
    assert codec.apply_length([1], -4, 0) == [1, 0, 0, 0]

def test_apply_length_returns_new_list(codec):
    out = codec.apply_length(DIGITS, None, "0")
    assert out == DIGITS
    assert out is not DIGITS

@pytest.mark.parametrize("bad", ["3", 2.0, True])
def test_apply_length_rejects_non_integers(codec, bad):
    with pytest.raises(ValueError):
        codec.apply_length(DIGITS, bad, "0")
