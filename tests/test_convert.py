import pytest

from bn_str.errors import EncodingDomainError, InvalidNumberError

N = "4910210853121048192949129121"
BIG = "115792089237316195423570985008687907853269984665640564039457584007913129639935"  # 2^256-1


def test_encode_big(convert):
    assert convert.to_hex(BIG) == "0x" + "f" * 64
    assert convert.to_octal(BIG) == "0" + "1" + "7" * 85
    assert convert.to_binary(BIG) == "0b" + "1" * 256


@pytest.mark.parametrize(
    "func,value,length,expected",
    [
        # truncated to the low digits
        ("to_hex", N, 5, "0x38fa1"),
        ("to_octal", N, 5, "007641"),
        ("to_binary", N, 5, "0b00001"),
        # left-padded
        ("to_hex", "3121048", 10, "0x00002f9f98"),
        ("to_octal", "3121048", 12, "0000013717630"),
        ("to_binary", "3121048", 26, "0b00001011111001111110011000"),
        # truncated to the high digits
        ("to_hex", "0x123456781abcdef", -5, "0x12345"),
        ("to_binary", "0b110011", -3, "0b110"),
        # right-padded
        ("to_hex", "0x12345", -10, "0x1234500000"),
        ("to_octal", "0777", -5, "077700"),
    ],
)
def test_length_matrix(convert, func, value, length, expected):
    assert getattr(convert, func)(value, length) == expected


@pytest.mark.parametrize("func,expected", [("to_hex", "0x0"), ("to_octal", "00"), ("to_binary", "0b0")])
def test_zero(convert, func, expected):
    assert getattr(convert, func)(0) == expected
    assert getattr(convert, func)("-0") == expected


def test_to_buffer(convert):
    assert convert.to_buffer(N).hex() == "0fdda197b73dd343fae38fa1"
    assert convert.to_buffer(0) == b"\x00"
    assert convert.to_buffer("0x1234", 4) == b"\x00\x00\x12\x34"
    assert convert.to_buffer("0x123456", 2) == b"\x34\x56"
    assert convert.to_buffer("0x1234", -3) == b"\x12\x34\x00"
    assert convert.to_buffer("0xffffff", -2) == b"\xff\xff"


def test_buffer_roundtrip_through_expand(convert, arith):
    assert arith.expand(convert.to_buffer(N)) == N


def test_to_bits(convert):
    assert convert.to_bits(5) == [1, 0, 1]
    assert convert.to_bits(0) == [0]
    assert convert.to_bits(5, 8) == [0, 0, 0, 0, 0, 1, 0, 1]
    assert convert.to_bits(5, -4) == [1, 0, 1, 0]
    assert convert.to_bits("0b110110", 3) == [1, 1, 0]


@pytest.mark.parametrize(
    "bits,expected",
    [([1, 0, 1], "5"), ([], "0"), ([0, 0, 0], "0"), ([True, False], "2"), ((1,) * 256, BIG)],
)
def test_from_bits(convert, bits, expected):
    assert convert.from_bits(bits) == expected


def test_from_bits_inverts_to_bits(convert):
    for n in ("1", "645", N, BIG):
        assert convert.from_bits(convert.to_bits(n)) == n


@pytest.mark.parametrize("bits", [[2], [1, -1], "101", None])
def test_from_bits_rejects(convert, bits):
    with pytest.raises(InvalidNumberError):
        convert.from_bits(bits)


@pytest.mark.parametrize("func", ["to_hex", "to_octal", "to_binary", "to_bits", "to_buffer"])
@pytest.mark.parametrize("value", ["-1", "1.5", "-16"])
def test_encoding_domain(convert, func, value):
    with pytest.raises(EncodingDomainError):
        getattr(convert, func)(value)


def test_integral_decimal_string_encodes(convert):
    assert convert.to_hex("255.000") == "0xff"


def test_bad_length(convert):
    with pytest.raises(ValueError):
        convert.to_hex(255, "2")
