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

# This module supports the 32-bit decimal floating point interchange format using
# the decimal (densely packed decimal) encoding of the significand as described in
# IEEE-754-2008, Sections 3.5.2 and 3.5.3.
#
# The 32-bit interchange format consists of four fields:
#
#   Bits   Length  Field
#   0         1    sign, 0 == +, 1 == -
#   1-5       5    combination field
#   6-11      6    exponent continuation: biased exponent bits 2-7
#   12-31    20    coefficient continuation: two 10-bit declets
#
# The significand is always seven decimal digits, the integer (right-units) view.
# The left most digit (LMD) is carried by the combination field, the remaining six
# digits by the two declets.  The biased exponent is eight bits, the unbiased
# exponent plus 101.  Its two left most bits (LME) are also carried by the
# combination field.
#
# The combination field has two formats depending upon the size of the LMD:
#
#  FMT   a   b   c   d   e        LMD             LME
#   0    x   x   x   x   x    4(c)+2(d)+e        a,b     a and b not both 1
#   1    1   1   x   x   x       8+e             c,d
#
# Because the biased exponent never exceeds 191 (binary 10111111) format 0 never
# has a and b both 1 when created by the encoder.  The IEEE infinity (11110) and
# NaN (11111) combination patterns are not recognized: the decoder treats them as
# format 1 numbers.
#
# The encoder accepts a decimal literal string:
#
#      [+-] [digits] [.[digits]] [e [+-]digits]
#
# Either the decimal integer or fraction digits are required.  Digits beyond the
# seventh significant digit are truncated, not rounded, and the exponent is
# increased by the number of digits dropped.
#
# The decoder produces a string of the sign, all seven significand digits, the
# letter 'e' and the unbiased exponent, for example '-0123456e-3'.  A positive
# sign is not shown.

this_module="dfp32.py"

# Python imports:
import decimal      # Access Python native decimal floating point support
import re           # Access regular expressions
# SATK imports:
from dpdutil import eloc, bit_str, bits2int, ck_bits, int2bits, \
    InvalidDigitError, LengthError, LiteralError, RangeError
import dpd          # Access densely packed decimal declet conversions


#
# +------------------------------------------+
# |                                          |
# |   decimal32 Interchange Format Values    |
# |                                          |
# +------------------------------------------+
#

# Attributes of the 32-bit interchange format integer view.
class dpd32_values(object):
    def __init__(self):
        self.length=32       # Length of the interchange format in bits
        self.size=4          # Length of the interchange format in bytes
        self.prec=7          # Number of significand digits
        self.bias=101        # Integer view (RUV) exponent bias
        self.ebmin=0         # Minimum biased exponent
        self.ebmax=191       # Maximum biased exponent
        self.emin=self.ebmin-self.bias   # Minimum unbiased exponent, -101
        self.emax=self.ebmax-self.bias   # Maximum unbiased exponent, 90
        self.comb_len=5      # Combination field length in bits
        self.rbe_len=6       # Exponent continuation length in bits
        self.declets=2       # Number of declets in the coefficient continuation
        self.sig_len=20      # Coefficient continuation length in bits

    def __str__(self):
        return "%s prec: %s - bias:%s biased exp:%s-%s exp:%s-%s" \
            % (self.__class__.__name__,self.prec,self.bias,self.ebmin,\
                self.ebmax,self.emin,self.emax)


values=dpd32_values()


#
# +-----------------------------------+
# |                                   |
# |   Combination Field Formats       |
# |                                   |
# +-----------------------------------+
#

# Base class for each combination field format.  The objects are stateless.
class comb_format(object):
    format=None       # Combination field format number
    is_mask=None      # Mask for recognizing this format
    set_mask=None     # Mask for setting format bits
    digits=None       # Dictionary mapping an LMD to its format object
    small=None        # comb_small object, set by init()
    large=None        # comb_large object, set by init()

    # Return the format object required to decode a combination field.
    # Method Argument:
    #   comb    An integer of the five combination field bits
    @staticmethod
    def decode_format(comb):
        # Format 1 is the more restrictive test.  The default is format 0.
        if comb_large.isFormat(comb):
            return comb_format.large
        return comb_format.small

    # Returns the format object required to encode a left most digit
    # Exception:
    #   InvalidDigitError if the digit is not 0-9
    @staticmethod
    def encode_format(digit):
        try:
            return comb_format.digits[digit]
        except KeyError:
            raise InvalidDigitError(\
                "%s - comb_format.encode_format() - unrecognized left most digit: %r"\
                    % (this_module,digit)) from None

    @staticmethod
    def init():
        comb_format.small=comb_small()
        comb_format.large=comb_large()
        comb_format.digits={}
        for digit in range(8):
            comb_format.digits[digit]=comb_format.small
        for digit in [8,9]:
            comb_format.digits[digit]=comb_format.large

    # Returns True if the supplied combination field is in the format supported by
    # this class for decoding, False otherwise.
    @classmethod
    def isFormat(cls,comb):
        return (comb & cls.is_mask) == cls.set_mask

    def __str__(self):
        return "comb: fmt %s is_mask: %s set_mask: %s" \
            % (self.format,bit_str(self.is_mask,5),bit_str(self.set_mask,5))

    def _ck_lme(self,lme):
        assert isinstance(lme,int) and lme>=0 and lme<=2,\
            "%s 'lme' argument must be an integer between 0 and 2: %s" \
                % (eloc(self,"_ck_lme",module=this_module),lme)

    # Decode the combination field bits into the LMD and LME.
    # Returns:
    #   a tuple: tuple[0] the left most significand digit
    #            tuple[1] the left most two bits of the biased exponent
    def decode(self,comb):
        raise NotImplementedError("%s subclass %s must provide the decode() method"\
            % (eloc(self,"decode",module=this_module),self.__class__.__name__))

    # Encode the LMD and LME into the combination field bits as an integer
    def encode(self,digit,lme):
        raise NotImplementedError("%s subclass %s must provide the encode() method"\
            % (eloc(self,"encode",module=this_module),self.__class__.__name__))


# Number with a small left most digit, 0-7
#  FMT   a   b   c   d   e        LMD             LME
#   0    x   x   x   x   x    4(c)+2(d)+e        a,b
class comb_small(comb_format):
    format=0
    is_mask =0b00000
    set_mask=0b00000

    def decode(self,comb):
        lmd = comb & 0b111           # Isolate the left most digit, c,d,e
        lme = ( comb >> 3 ) & 0b11   # Isolate the left two exponent bits, a,b
        return (lmd,lme)

    def encode(self,digit,lme):
        assert digit>=0 and digit<=7,\
            "%s 'digit' argument must be an integer between 0 and 7: %s" \
                % (eloc(self,"encode",module=this_module),digit)
        self._ck_lme(lme)

        return ( lme << 3 ) | digit


# Number with a large left most digit, 8 or 9
#  FMT   a   b   c   d   e        LMD             LME
#   1    1   1   x   x   x       8+e             c,d
class comb_large(comb_format):
    format=1
    is_mask =0b11000
    set_mask=0b11000

    def decode(self,comb):
        lmd = 8 + ( comb & 0b1 )
        lme = ( comb >> 1 ) & 0b11
        return (lmd,lme)

    def encode(self,digit,lme):
        assert digit==8 or digit==9,\
            "%s 'digit' argument must be either 8 or 9: %s" \
                % (eloc(self,"encode",module=this_module),digit)
        self._ck_lme(lme)

        return self.set_mask | ( lme << 1 ) | ( digit & 0b1 )


comb_format.init()


#
# +-----------------------------+
# |                             |
# |   decimal32 Number Object   |
# |                             |
# +-----------------------------+
#

# Decimal literal recognition regular expression pattern:
String_Pattern=\
        r"(?P<sign>[+-])?(?P<int>[0-9]+)?(?P<frac>\.[0-9]*)?"\
        r"(?P<exp>[eE][+-]?[0-9]+)?\Z"

# This class represents one finite 32-bit decimal floating point number.
# Instance Arguments:
#   sign      0 for positive, 1 for negative.  Defaults to 0.
#   digits    a list of seven integers between 0 and 9.  Defaults to all zeros.
#   exponent  the unbiased integer exponent.  Defaults to 0.
#   log       a logging.Logger receiving debug messages or None.  Defaults to None.
# Exception:
#   LengthError if digits does not contain seven digits
#
# Use the class methods from_string() or from_bits() to create an object from a
# decimal literal or from an interchange format image.
class dfp32(object):
    parse=re.compile(String_Pattern)   # Parse a decimal literal
    sign_str={"+":0,"-":1,None:0}      # Convert string sign to value

    # Create a dfp32 object from a decimal literal
    # Exception:
    #   LiteralError if the string is not a decimal literal
    @classmethod
    def from_string(cls,string,log=None):
        obj=cls(log=log)
        obj._parse(string)
        return obj

    # Create a dfp32 object by decoding the 32-bit interchange format.
    # Method Argument:
    #   bits   a bytes or bytearray sequence of 4 bytes, big-endian, or a sequence
    #          of 32 bits as a list, tuple or string.
    # Exceptions:
    #   LengthError        if the sequence is not 4 bytes or 32 bits
    #   InvalidDigitError  if the left most digit is not 0-9
    @classmethod
    def from_bits(cls,bits,log=None):
        obj=cls(log=log)
        obj.decode(bits)
        return obj

    def __init__(self,sign=0,digits=None,exponent=0,log=None):
        self.log=log
        self.values=values
        self.sign=sign              # Sign of the number  (0 == +, 1 == -)
        if digits is None:
            self.digits=[0,] * self.values.prec
        else:
            self.digits=list(digits)
            if len(self.digits) != self.values.prec:
                raise LengthError("%s significand must have %s digits: %s" \
                    % (eloc(self,"__init__",module=this_module),\
                        self.values.prec,self.digits))
        self.exponent=exponent      # Unbiased exponent
        self.bits=None              # The interchange format as an integer

    def __str__(self):
        if self.sign:
            sign="-"
        else:
            sign=""
        return "%s%se%s" % (sign,self.coefficient(),self.exponent)

    def _debug(self,method,msg):
        self.log.debug("%s %s" % (eloc(self,method,module=this_module),msg))

    # Parse a decimal literal into the sign, seven significand digits and exponent.
    def _parse(self,string):
        where=eloc(self,"from_string",module=this_module)
        if not isinstance(string,str):
            raise LiteralError("%s 'string' argument must be a string: %r" \
                % (where,string))
        text=string.strip()
        mo=self.parse.match(text)
        if mo is None:
            raise LiteralError("%s not a decimal literal: '%s'" % (where,string))

        integer=mo.group("int") or ""
        frac=mo.group("frac")
        if frac is None:
            frac=""
        else:
            frac=frac[1:]          # Drop the decimal point
        if len(integer) == 0 and len(frac) == 0:
            raise LiteralError("%s decimal literal requires a digit: '%s'" \
                % (where,string))

        self.sign=self.sign_str[mo.group("sign")]
        exp=mo.group("exp")
        if exp is None:
            exponent=0
        else:
            exponent=int(exp[1:],10)

        # Fold the fraction into the integer digits
        digits="%s%s" % (integer,frac)
        exponent -= len(frac)

        digits=digits.lstrip("0")
        if len(digits) == 0:
            digits="0"

        prec=self.values.prec
        if len(digits) < prec:
            digits=digits.rjust(prec,"0")
        elif len(digits) > prec:
            # Truncate, do not round, keeping the magnitude
            dropped=len(digits)-prec
            if __debug__:
                if self.log:
                    self._debug("from_string","truncating %s digits: %s" \
                        % (dropped,digits[prec:]))
            digits=digits[:prec]
            exponent += dropped

        self.digits=[int(c) for c in digits]
        self.exponent=exponent
        if __debug__:
            if self.log:
                self._debug("from_string","'%s' sign:%s digits:%s exponent:%s" \
                    % (string,self.sign,self.coefficient(),self.exponent))

    # Returns the significand digits as a string
    def coefficient(self):
        return "".join(["%s" % d for d in self.digits])

    # Decode the 32-bit interchange format into sign, significand and exponent
    def decode(self,bits):
        where=eloc(self,"decode",module=this_module)
        vals=self.values
        if isinstance(bits,(bytes,bytearray)):
            if len(bits) != vals.size:
                raise LengthError("%s bytes sequence must contain %s bytes: %s" \
                    % (where,vals.size,len(bits)))
            value=int.from_bytes(bits,byteorder="big",signed=False)
        else:
            value=bits2int(ck_bits(bits,length=vals.length,where=where))
        self.bits=value
        if __debug__:
            if self.log:
                self._debug("decode","bits: %s" % bit_str(value,vals.length))

        tsig = value & ( ( 1 << vals.sig_len ) - 1 )
        value = value >> vals.sig_len
        rbe = value & ( ( 1 << vals.rbe_len ) - 1 )
        value = value >> vals.rbe_len
        comb = value & 0b11111
        self.sign = ( value >> vals.comb_len ) & 0b1

        fmt=comb_format.decode_format(comb)
        lmd,lme=fmt.decode(comb)
        if lmd > 9:
            raise InvalidDigitError("%s left most digit invalid (0-9): %s" \
                % (where,lmd))
        bexp = ( lme << vals.rbe_len ) | rbe
        self.exponent=bexp-vals.bias
        if __debug__:
            if self.log:
                self._debug("decode","comb: %s fmt %s LMD:%s LME:%s biased exp:%s"\
                    % (bit_str(comb,5),fmt.format,lmd,lme,bexp))

        # Declets are decoded left to right
        digits=[lmd,]
        for n in range(vals.declets-1,-1,-1):
            dlet=( tsig >> ( n * 10 ) ) & 0b1111111111
            digits.extend([int(c) for c in \
                "%03d" % dpd.dpd_to_decimal(int2bits(dlet,10))])
        self.digits=digits
        if __debug__:
            if self.log:
                self._debug("decode","result: %s" % self)

    # Encode the number into its 32-bit interchange format
    # Returns:
    #   a bytes sequence of length 4, big-endian
    # Exceptions:
    #   RangeError         if the biased exponent is out of range (0-191)
    #   InvalidDigitError  if the left most digit is not 0-9
    def encode(self):
        where=eloc(self,"encode",module=this_module)
        vals=self.values

        bexp=self.exponent+vals.bias
        if bexp < vals.ebmin or bexp > vals.ebmax:
            raise RangeError("%s biased exponent out of range (%s-%s): %s" \
                % (where,vals.ebmin,vals.ebmax,bexp))

        lmd=self.digits[0]
        fmt=comb_format.encode_format(lmd)
        lme=bexp >> vals.rbe_len
        rbe=bexp & ( ( 1 << vals.rbe_len ) - 1 )
        comb=fmt.encode(lmd,lme)
        if __debug__:
            if self.log:
                self._debug("encode","exponent:%s bias:%s = biased exponent: %s" \
                    % (self.exponent,vals.bias,bit_str(bexp,8)))
                self._debug("encode","LMD %s fmt %s comb: %s RBE: %s" \
                    % (lmd,fmt.format,bit_str(comb,5),bit_str(rbe,6)))

        bits = self.sign
        bits = ( bits << vals.comb_len ) | comb
        bits = ( bits << vals.rbe_len ) | rbe
        for n in range(1,vals.prec,3):
            group=self.digits[n]*100 + self.digits[n+1]*10 + self.digits[n+2]
            declet=dpd.decimal_to_dpd(group)
            if __debug__:
                if self.log:
                    self._debug("encode","digits %03d declet: %s" \
                        % (group,dpd.declet_str(declet)))
            bits = ( bits << 10 ) | bits2int(declet)

        self.bits=bits
        if __debug__:
            if self.log:
                self._debug("encode","result: %s" % self.to_hex())
        return bits.to_bytes(vals.size,byteorder="big",signed=False)

    # Returns the interchange format as a string of 32 binary digits
    def to_bin(self):
        if self.bits is None:
            self.encode()
        return bit_str(self.bits,self.values.length)

    # Returns a decimal.Decimal object with the same sign, digits and exponent
    def to_decimal(self):
        return decimal.Decimal((self.sign,tuple(self.digits),self.exponent))

    # Returns the interchange format as eight hex digits
    def to_hex(self):
        if self.bits is None:
            self.encode()
        return "%08X" % self.bits


#
# +--------------------------+
# |                          |
# |   Codec Entry Points     |
# |                          |
# +--------------------------+
#

# Encode a decimal literal string into the 32-bit interchange format.
# Function Arguments:
#   string   the decimal literal
#   log      a logging.Logger for debug messages or None.  Defaults to None.
# Returns:
#   a bytes sequence of 4 bytes, big-endian
def encode_decimal32(string,log=None):
    return dfp32.from_string(string,log=log).encode()


# Decode the 32-bit interchange format into its textual scientific form
# Function Arguments:
#   bits     a 32-bit string, list or tuple, or a 4 byte bytes sequence
#   log      a logging.Logger for debug messages or None.  Defaults to None.
# Returns:
#   a string: sign, seven coefficient digits, 'e', unbiased exponent
def decode_decimal32(bits,log=None):
    return str(dfp32.from_bits(bits,log=log))
