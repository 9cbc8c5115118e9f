"""Decimal to BCD and BCD to decimal conversion."""

import pytest

from bcd import bcd_to_decimal, decimal_to_bcd
from dpdutil import DPDError, InvalidDigitError, LengthError, RangeError


class TestDecimalToBCD:

    def test_three_digits(self):
        assert decimal_to_bcd(567) == (0, 1, 0, 1, 0, 1, 1, 0, 0, 1, 1, 1)

    def test_zero_padded(self):
        assert decimal_to_bcd(0) == (0,) * 12
        assert decimal_to_bcd(7) == (0,) * 8 + (0, 1, 1, 1)
        assert decimal_to_bcd(42) == (0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0)

    def test_largest(self):
        assert decimal_to_bcd(999) == (1, 0, 0, 1) * 3

    def test_always_twelve_bits(self):
        for n in range(1000):
            assert len(decimal_to_bcd(n)) == 12

    @pytest.mark.parametrize("value", [1000, -1, 12345])
    def test_out_of_range(self, value):
        with pytest.raises(RangeError):
            decimal_to_bcd(value)

    @pytest.mark.parametrize("value", [1.5, 5.0, "5", None, True])
    def test_not_an_integer(self, value):
        with pytest.raises(RangeError):
            decimal_to_bcd(value)


class TestBCDToDecimal:

    def test_round_trip(self):
        for n in range(1000):
            assert bcd_to_decimal(decimal_to_bcd(n)) == n

    def test_string_of_bits(self):
        assert bcd_to_decimal("010101100111") == 567

    def test_list_of_bits(self):
        assert bcd_to_decimal([1, 0, 0, 1, 0, 0, 0, 0]) == 90

    def test_any_number_of_digits(self):
        assert bcd_to_decimal("0001001000110100") == 1234
        assert bcd_to_decimal("1000") == 8

    def test_empty_is_zero(self):
        assert bcd_to_decimal(()) == 0

    @pytest.mark.parametrize("bits", ["010", "01010", "0101011001110"])
    def test_length_not_multiple_of_four(self, bits):
        with pytest.raises(LengthError):
            bcd_to_decimal(bits)

    @pytest.mark.parametrize("bits", ["1010", "0001" "1111", "0000" "0000" "1100"])
    def test_invalid_nibble(self, bits):
        with pytest.raises(InvalidDigitError):
            bcd_to_decimal(bits)

    @pytest.mark.parametrize("bits", ["01a0", [0, 1, 2, 0], [0, 1, True, 0], 5])
    def test_not_bits(self, bits):
        with pytest.raises(RangeError):
            bcd_to_decimal(bits)


def test_errors_are_value_errors():
    """Callers catching ValueError see every codec error"""
    for cls in (RangeError, LengthError, InvalidDigitError):
        assert issubclass(cls, DPDError)
        assert issubclass(cls, ValueError)
    with pytest.raises(ValueError) as exc:
        decimal_to_bcd(1000)
    assert "bcd.py - decimal_to_bcd() -" in str(exc.value)
    assert exc.value.msg == str(exc.value)
