"""BCD to DPD declet conversion and the conversion tables."""

import pytest

import dpd
from bcd import bcd_to_decimal, decimal_to_bcd
from dpd import (
    bcd2dpd_logic,
    bcd_to_dpd,
    declet_hex,
    declet_str,
    decimal_to_dpd,
    dpd2bcd_logic,
    dpd_to_bcd,
    dpd_to_decimal,
    is_canonical,
)
from dpdutil import LengthError, RangeError, int2bits


# Reference declets covering each declet format
KNOWN = [
    (0, "0000000000"),
    (5, "0000000101"),
    (9, "0000001001"),
    (10, "0000010000"),
    (79, "0001111001"),
    (80, "0000001010"),
    (99, "0001011111"),
    (100, "0010000000"),
    (123, "0010100011"),
    (555, "1011010101"),
    (888, "0001101110"),
    (899, "0001111111"),
    (979, "1110111111"),
    (998, "0011111110"),
    (999, "0011111111"),
]


class TestKnownDeclets:

    @pytest.mark.parametrize("decimal,declet", KNOWN)
    def test_encode(self, decimal, declet):
        assert declet_str(decimal_to_dpd(decimal)) == declet

    @pytest.mark.parametrize("decimal,declet", KNOWN)
    def test_decode(self, decimal, declet):
        assert dpd_to_decimal(declet) == decimal

    def test_small_digits_are_packed_unchanged(self):
        # All digits 0-7: BCD with the high-order bit of each digit removed
        assert decimal_to_dpd(765) == (1, 1, 1, 1, 1, 0, 0, 1, 0, 1)


class TestRoundTrip:

    def test_decimal_through_bcd_and_dpd(self):
        for n in range(1000):
            assert dpd_to_decimal(bcd_to_dpd(decimal_to_bcd(n))) == n

    def test_bcd_through_dpd(self):
        for n in range(1000):
            bits = decimal_to_bcd(n)
            assert dpd_to_bcd(bcd_to_dpd(bits)) == bits

    def test_declets_are_distinct(self):
        assert len({decimal_to_dpd(n) for n in range(1000)}) == 1000


class TestTables:
    """The tables must agree with the boolean logic over the whole input space"""

    def test_bcd_table_matches_logic(self):
        assert len(dpd.dpd_table) == 4096
        for n in range(4096):
            bits = int2bits(n, 12)
            assert bcd_to_dpd(bits) == bcd2dpd_logic(bits)

    def test_dpd_table_matches_logic(self):
        assert len(dpd.bcd_table) == 1024
        for n in range(1024):
            bits = int2bits(n, 10)
            assert dpd_to_bcd(bits) == dpd2bcd_logic(bits)

    def test_every_declet_decodes_to_digits(self):
        for n in range(1024):
            value = bcd_to_decimal(dpd_to_bcd(int2bits(n, 10)))
            assert 0 <= value <= 999

    def test_invalid_bcd_is_encoded_not_rejected(self):
        declet = bcd_to_dpd("111111111111")
        assert len(declet) == 10


class TestCanonical:

    def test_twenty_four_non_canonical(self):
        non = [n for n in range(1024) if not is_canonical(int2bits(n, 10))]
        assert len(non) == 24

    def test_non_canonical_decodes_like_canonical(self):
        # Format 7 ignores the two high-order bits
        assert dpd_to_decimal("1111111111") == 999
        assert dpd_to_decimal("1101101110") == 888
        assert not is_canonical("1111111111")
        assert is_canonical("0011111111")

    def test_every_encoded_declet_is_canonical(self):
        for n in range(1000):
            assert is_canonical(decimal_to_dpd(n))


class TestErrors:

    @pytest.mark.parametrize("length", [0, 10, 11, 13])
    def test_bcd_length(self, length):
        with pytest.raises(LengthError):
            bcd_to_dpd((0,) * length)

    @pytest.mark.parametrize("length", [0, 9, 11, 12])
    def test_dpd_length(self, length):
        with pytest.raises(LengthError):
            dpd_to_bcd((0,) * length)

    def test_dpd_to_decimal_length(self):
        with pytest.raises(LengthError):
            dpd_to_decimal("101")

    def test_decimal_to_dpd_range(self):
        with pytest.raises(RangeError):
            decimal_to_dpd(1000)

    def test_bad_bit(self):
        with pytest.raises(RangeError):
            dpd_to_bcd("00000000x0")


def test_display():
    assert declet_str(decimal_to_dpd(123)) == "0010100011"
    assert declet_hex(decimal_to_dpd(123)) == "0A3"
    assert declet_hex(decimal_to_dpd(999)) == "0FF"
