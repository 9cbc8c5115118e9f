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

# This module provides the primitives shared by the densely packed decimal (DPD)
# modules: bcd.py, dpd.py, dfp32.py and dpdquiz.py.
#
# A bit is an integer, either 0 or 1.  A sequence of bits is presented to the
# DPD modules as a list or tuple of such integers, or as a string of the
# characters '0' and '1'.  Bit sequences produced by the modules are always
# tuples of integers, the left most bit being the most significant.
#
# The module includes the following classes:
#   DPDError           The base exception of the DPD modules
#   RangeError         A value is outside of its documented domain
#   LengthError        A bit or byte sequence has the wrong length for its role
#   InvalidDigitError  A decoded nibble or left most digit exceeds 9
#   LiteralError       A string is not a recognized decimal literal
#
# The module includes the following functions:
#   bit_str      Converts an integer into a right justified string of binary digits
#   bits2int     Converts a sequence of bits into an unsigned integer
#   bits2str     Converts a sequence of bits into a string of binary digits
#   bytes2str    Converts a bytes sequence into a string of hex digits
#   ck_bits      Validates a sequence of bits returning it as a tuple
#   eloc         Standardizes reporting of error locations
#   int2bits     Converts an unsigned integer into a tuple of bits

this_module="dpdutil.py"

# Python imports: none
# SATK imports: none


#
# +------------------------------------+
# |                                    |
# |    Standardized Error Reporting    |
# |                                    |
# +------------------------------------+
#

# This method returns a standard identification of an error's location.
# It is expected to be used like this:
#
#     cls_str=eloc(self,"method")
# or
#     cls_str=eloc(self,"method",module=this_module)
#     raise Exception("%s %s" % (cls_str,"error information"))
#
# It results in a Exception string of:
#     'module - class_name.method_name() - error information'
#
# Module level functions have no instance.  Supply the module name as the
# 'clso' argument and None for the module:
#     'module - function_name() - error information'
def eloc(clso,method_name,module=None):
    if isinstance(clso,str):
        return "%s - %s() -" % (clso,method_name)
    if module is None:
        m=this_module
    else:
        m=module
    return "%s - %s.%s() -" % (m,clso.__class__.__name__,method_name)


#
# +------------------+
# |                  |
# |    DPD Errors    |
# |                  |
# +------------------+
#

# This class is the base for all errors raised by the DPD modules.  It is a
# ValueError so that callers treating a bad argument generically continue to work.
# Instance Argument:
#    msg    a string descibing the error.  Defaults to an empty string.
class DPDError(ValueError):
    def __init__(self,msg=""):
        self.msg=msg
        super().__init__(msg)


# A value is outside of its documented domain: a decimal outside 0-999, a
# biased exponent outside 0-191, or a bit that is neither 0 nor 1.
class RangeError(DPDError):
    pass


# A bit or byte sequence does not have the length required for its role.
class LengthError(DPDError):
    pass


# A BCD nibble or a decoded left most digit has a value greater than 9.
class InvalidDigitError(DPDError):
    pass


# A string is not a decimal literal recognized by the decimal32 encoder.
class LiteralError(DPDError):
    pass


#
# +-----------------------+
# |                       |
# |    Bit Sequences      |
# |                       |
# +-----------------------+
#

# Validate a sequence of bits.
# Function Arguments:
#   bits     a list or tuple of integers, or a string of '0' and '1' characters
#   length   the required number of bits.  Specify None when any length is
#            acceptable.  Defaults to None.
#   multiple when not None, the length of the sequence must be a multiple of this
#            value.  Defaults to None.
#   role     a name for the sequence used in error messages.  Defaults to 'bits'.
#   where    the error location prefix (see eloc()).  Defaults to this function.
# Returns:
#   the bits as a tuple of integers
# Exceptions:
#   LengthError if the sequence has the wrong length
#   RangeError  if an element is not a bit or the argument is not a sequence
def ck_bits(bits,length=None,multiple=None,role="bits",where=None):
    if where is None:
        where=eloc(this_module,"ck_bits")

    if isinstance(bits,str):
        lst=[]
        for n,c in enumerate(bits):
            if c == "0":
                lst.append(0)
            elif c == "1":
                lst.append(1)
            else:
                raise RangeError("%s '%s' character %s not a binary digit: '%s'" \
                    % (where,role,n+1,bits))
        seq=tuple(lst)
    elif isinstance(bits,(list,tuple)):
        for n,b in enumerate(bits):
            # A bool is an int, but True and False are not bits here
            if isinstance(b,bool) or not isinstance(b,int) or b not in (0,1):
                raise RangeError("%s '%s' element %s must be 0 or 1: %r" \
                    % (where,role,n+1,b))
        seq=tuple(bits)
    else:
        raise RangeError("%s '%s' must be a list, tuple or string of bits: %r" \
            % (where,role,bits))

    if length is not None and len(seq) != length:
        raise LengthError("%s '%s' must contain %s bits: %s" \
            % (where,role,length,len(seq)))
    if multiple is not None and len(seq) % multiple != 0:
        raise LengthError("%s '%s' length must be a multiple of %s: %s" \
            % (where,role,multiple,len(seq)))
    return seq


# Convert an unsigned integer into a string of binary digits.
# Function Arguments:
#   bits     the unsigned integer being converted
#   length   the number of binary digits in the resulting string
def bit_str(bits,length):
    assert bits.bit_length() <= length,\
        "%s - bit_str() - value (%s) requires %s bits, too large for %s" \
            % (this_module,bits,bits.bit_length(),length)

    b=bin(bits)                    # Convert value to a binary literal string
    b=b[2:]                        # Drop off the initial 0b
    pad="0" * length               # Create left padding of zeros
    b="%s%s" % (pad,b)             # Pad with bits on the left
    return b[-length:]             # Right justify the binary digits


# Returns an unsigned integer from a validated sequence of bits
def bits2int(bits):
    v=0
    for b in bits:
        v = ( v << 1 ) | b
    return v


# Returns a string of binary digits from a validated sequence of bits
def bits2str(bits):
    return "".join(["%s" % b for b in bits])


# This method turns a sequence of bytes into a string of hex digits with each
# byte optionally separated by a space
# Function Arguments:
#   byts   The bytes sequence being converted
#   space  Whether bytes are separated by a space.  Defaults to False.
def bytes2str(byts,space=False):
    if space:
        sp=" "
    else:
        sp=""
    return sp.join(["%02X" % byt for byt in byts])


# Convert an unsigned integer into a tuple of bits
# Function Arguments:
#   value    the unsigned integer
#   length   the number of bits in the resulting tuple
def int2bits(value,length):
    assert value >= 0 and value.bit_length() <= length,\
        "%s - int2bits() - value (%s) does not fit in %s bits" \
            % (this_module,value,length)

    return tuple([(value >> n) & 1 for n in range(length-1,-1,-1)])
