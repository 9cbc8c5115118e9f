#!/usr/bin/python3
# Copyright (C) 2016 Harold Grovesteen
#
# This file is part of SATK.
#
#     SATK is free software: you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation, either version 3 of the License, or
#     (at your option) any later version.
#
#     SATK is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     You should have received a copy of the GNU General Public License
#     along with SATK.  If not, see <http://www.gnu.org/licenses/>.

# This module converts between decimal integers and binary coded decimal (BCD).
#
# Each decimal digit occupies four bits, the high-order bit first.  A group of
# three digits, the unit compressed by densely packed decimal encoding, is
# therefore 12 bits:
#
#      567  ->  0101 0110 0111
#
# See dpd.py for the compression of the 12 BCD bits into a 10-bit declet.

this_module="bcd.py"

# SATK imports:
from dpdutil import eloc, ck_bits, RangeError, InvalidDigitError


# Convert a decimal integer between 0 and 999 into 12 bits of BCD.
# Function Argument:
#   decimal   an integer in the range 0-999 inclusive
# Returns:
#   a tuple of 12 bits, three zero padded digits of four bits each
# Exception:
#   RangeError if the argument is not an integer or is out of range
def decimal_to_bcd(decimal):
    if isinstance(decimal,bool) or not isinstance(decimal,int):
        raise RangeError("%s 'decimal' argument must be an integer: %r" \
            % (eloc(this_module,"decimal_to_bcd"),decimal))
    if decimal < 0 or decimal > 999:
        raise RangeError("%s 'decimal' argument out of range (0-999): %s" \
            % (eloc(this_module,"decimal_to_bcd"),decimal))

    bits=[]
    for c in "%03d" % decimal:
        digit=int(c)
        for n in range(3,-1,-1):
            bits.append((digit >> n) & 1)
    return tuple(bits)


# Convert a BCD sequence of any number of digits into a decimal integer.
# Function Argument:
#   bcd   a sequence of bits whose length is a multiple of 4
# Returns:
#   the integer composed of the nibbles read as base 10 digits, left to right.
#   An empty sequence is 0.
# Exceptions:
#   LengthError        if the length is not a multiple of 4
#   InvalidDigitError  if a nibble exceeds 9
def bcd_to_decimal(bcd):
    where=eloc(this_module,"bcd_to_decimal")
    bits=ck_bits(bcd,multiple=4,role="bcd",where=where)

    decimal=0
    for n in range(0,len(bits),4):
        b0,b1,b2,b3=bits[n:n+4]
        digit = b0 << 3 | b1 << 2 | b2 << 1 | b3
        if digit > 9:
            raise InvalidDigitError("%s 'bcd' digit %s invalid (0-9): %s" \
                % (where,n // 4 + 1,digit))
        decimal = decimal * 10 + digit
    return decimal
