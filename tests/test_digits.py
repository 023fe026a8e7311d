import pytest

from printfmt.digits import (
    hex_len,
    hex_to_str,
    int_len,
    int_to_str,
    to_int32,
    to_uint32,
    to_uint64,
    unsigned_len,
    unsigned_to_str,
)

SIGNED = [0, 1, -1, 9, 10, -10, 42, -42200, 2147483647, -2147483648]
UNSIGNED = [0, 1, 9, 10, 255, 4096, 2147483648, 2**32 - 1]


def test_zero_is_single_digit():
    assert int_to_str(0) == "0"
    assert unsigned_to_str(0) == "0"
    assert hex_to_str(0) == "0"
    assert int_len(0) == unsigned_len(0) == hex_len(0) == 1


def test_int_min_text():
    assert int_to_str(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", SIGNED)
def test_int_to_str_round_trip(n):
    assert int(int_to_str(n)) == n


@pytest.mark.parametrize("n", SIGNED)
def test_int_len_matches_text(n):
    assert int_len(n) == len(int_to_str(n))


def test_negative_length_counts_sign():
    assert int_len(-42200) == int_len(42200) + 1


@pytest.mark.parametrize("n", UNSIGNED)
def test_unsigned_round_trip(n):
    assert int(unsigned_to_str(n)) == n
    assert unsigned_len(n) == len(unsigned_to_str(n))


@pytest.mark.parametrize("n", UNSIGNED + [2**63, 2**64 - 1])
def test_hex_round_trip(n):
    assert int(hex_to_str(n), 16) == n
    assert hex_len(n) == len(hex_to_str(n))


@pytest.mark.parametrize("n", UNSIGNED)
def test_hex_upper_is_upper_of_lower(n):
    assert hex_to_str(n, True) == hex_to_str(n).upper()
    assert hex_to_str(n, upper=False) == hex_to_str(n).lower()


def test_hex_single_digits_follow_base():
    base = "0123456789abcdef"
    assert [hex_to_str(d) for d in range(16)] == list(base)
    assert [hex_to_str(d, True) for d in range(16)] == list(base.upper())


def test_hex_rejects_negative():
    with pytest.raises(ValueError):
        hex_to_str(-1)
    with pytest.raises(ValueError):
        hex_len(-5)


def test_to_int32_wraps_past_max():
    assert to_int32(2147483648) == -2147483648
    assert int_to_str(2147483648) == "-2147483648"


@pytest.mark.parametrize("n", SIGNED)
def test_int32_uint32_round_trip(n):
    assert to_int32(to_uint32(n)) == n
    assert 0 <= to_uint32(n) < 2**32


def test_unsigned_wraps_negative():
    assert to_uint32(-1) == 2**32 - 1
    assert unsigned_to_str(-1) == str(2**32 - 1)


def test_uint64_wraps():
    assert to_uint64(-1) == 2**64 - 1
    assert to_uint64(2**64) == 0
    assert to_uint64(255) == 255