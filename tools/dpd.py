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

# This module converts between three binary coded decimal (BCD) digits, 12 bits,
# and their densely packed decimal (DPD) encoding, a 10-bit declet, as described
# in IEEE-754-2008, Section 3.5.2.
#
# Decimal digits 0-7 are small digits and need three bits.  Decimal digits 8 and 9
# are large digits and need only their low-order bit, the high-order bit being
# implied.  Bits 6, 7 and 8 of the declet (v, w and x below) identify which of
# the three digits are large and therefore where the remaining bits of each
# digit are placed:
#
# B0 B1 B2 B3 B4 B5 B6 B7 B8 B9
#                                     D(1)             D(2)             D(3)
# .  .  .  x  x  .  0  x  x  .   4(b0)+2(b1)+b2   4(b3)+2(b4)+b5   4(b7)+2(b8)+b9
# .  .  .  x  x  .  1  0  0  .   4(b0)+2(b1)+b2   4(b3)+2(b4)+b5        8+b9
# .  .  .  x  x  .  1  0  1  .   4(b0)+2(b1)+b2        8+b5        4(b3)+2(b4)+b9
# .  .  .  x  x  .  1  1  0  .        8+b2        4(b3)+2(b4)+b5   4(b0)+2(b1)+b9
# .  .  .  0  0  .  1  1  1  .        8+b2             8+b5        4(b0)+2(b1)+b9
# .  .  .  0  1  .  1  1  1  .        8+b2        4(b0)+2(b1)+b5        8+b9
# .  .  .  1  0  .  1  1  1  .   4(b0)+2(b1)+b2        8+b5             8+b9
# .  .  .  1  1  .  1  1  1  .        8+b2             8+b5             8+b9
#
# Rather than selecting a format by table, the conversion is performed by the
# boolean expressions of the standard.  The BCD bits are named a through m (there
# is no l) and the declet bits p through y, each left to right:
#
#    BCD     a b c d  e f g h  i j k m
#    declet  p q r s t u v w x y
#
# The declet space has 1024 values of which 1000 represent the three digit values.
# The remaining 24 are non-canonical: format 7 (all three digits large) ignores
# declet bits 0 and 1, so the 8 values of that format have three additional
# encodings each.  They decode without error to the same digits as the canonical
# declet.  The BCD space has 4096 values; nibbles greater than 9 are not
# rejected by the encoding logic and produce whatever declet the expressions
# yield.
#
# The expressions are the authority.  Both directions are evaluated once for the
# whole of their input space when this module is imported and the results kept
# in lookup tables.  The public conversion functions validate their argument and
# use the tables.  bcd2dpd_logic() and dpd2bcd_logic() remain available as the
# oracle for the tables.

this_module="dpd.py"

# SATK imports:
from dpdutil import eloc, ck_bits, bits2int, bits2str, int2bits
import bcd          # Access decimal to BCD conversions


#
# +------------------------------------+
# |                                    |
# |    Densely Packed Decimal Logic    |
# |                                    |
# +------------------------------------+
#

# Compress 12 BCD bits into a 10-bit declet.
# Function Argument:
#   bits   a validated sequence of exactly 12 bits, a-m.
# Returns:
#   a tuple of 10 bits, p-y
def bcd2dpd_logic(bits):
    a,b,c,d,e,f,g,h,i,j,k,m = [bit == 1 for bit in bits]

    p = b or (a and j) or (a and f and i)
    q = c or (a and k) or (a and g and i)
    r = d
    s = (f and (not a or not i)) or (not a and e and j) or (e and i)
    t = g or (not a and e and k) or (a and i)
    u = h
    v = a or e or i
    w = a or (e and i) or (not e and j)
    x = e or (a and i) or (not a and k)
    y = m

    return tuple([int(z) for z in (p,q,r,s,t,u,v,w,x,y)])


# Expand a 10-bit declet into 12 BCD bits.  v, w and x select which of the
# original digits were large.
# Function Argument:
#   bits   a validated sequence of exactly 10 bits, p-y.
# Returns:
#   a tuple of 12 bits, a-m
def dpd2bcd_logic(bits):
    p,q,r,s,t,u,v,w,x,y = [bit == 1 for bit in bits]

    a = v and w and (not s or t or not x)
    b = p and (not v or not w or (s and not t and x))
    c = q and (not v or not w or (s and not t and x))
    d = r
    e = v and ((not w and x) or (not t and x) or (s and x))
    f = (s and (not v or not x)) or (p and not s and t and v and w and x)
    g = (t and (not v or not x)) or (q and not s and t and w)
    h = u
    i = v and ((not w and not x) or (w and x and (s or t)))
    j = (not v and w) or (s and v and not w and x) \
        or (p and w and (not x or (not s and not t)))
    k = (not v and x) or (t and not w and x) \
        or (q and v and w and (not x or (not s and not t)))
    m = y

    return tuple([int(z) for z in (a,b,c,d,e,f,g,h,i,j,k,m)])


#
# +--------------------------+
# |                          |
# |    Conversion Tables     |
# |                          |
# +--------------------------+
#

# These lists are created by the init() function
dpd_table=[]       # Declet indexed by the 12 BCD bits as an integer, 4096 entries
bcd_table=[]       # BCD bits indexed by the declet as an integer, 1024 entries
canonical=[]       # Whether the declet indexed by its integer value is canonical

# Build the conversion tables from the DPD logic
def init():
    global dpd_table,bcd_table,canonical
    dpd_table=[bcd2dpd_logic(int2bits(n,12)) for n in range(4096)]
    bcd_table=[dpd2bcd_logic(int2bits(n,10)) for n in range(1024)]

    # A declet is canonical when re-encoding its digits yields the same declet
    canonical=[bits2int(dpd_table[bits2int(bcd_table[n])]) == n \
        for n in range(1024)]


#
# +----------------------------------+
# |                                  |
# |    Public Conversion Functions   |
# |                                  |
# +----------------------------------+
#

# Convert 12 bits of BCD to a declet.
# Exception:
#   LengthError if the argument is not exactly 12 bits
def bcd_to_dpd(bcd):
    bits=ck_bits(bcd,length=12,role="bcd",where=eloc(this_module,"bcd_to_dpd"))
    return dpd_table[bits2int(bits)]


# Convert a declet to 12 bits of BCD.  Non-canonical declets are accepted.
# Exception:
#   LengthError if the argument is not exactly 10 bits
def dpd_to_bcd(dpd):
    bits=ck_bits(dpd,length=10,role="dpd",where=eloc(this_module,"dpd_to_bcd"))
    return bcd_table[bits2int(bits)]


# Convert a declet to its decimal value, 0-999
def dpd_to_decimal(dpd):
    return bcd.bcd_to_decimal(dpd_to_bcd(dpd))


# Convert a decimal integer between 0 and 999 to a declet
def decimal_to_dpd(decimal):
    return bcd_to_dpd(bcd.decimal_to_bcd(decimal))


# Returns True if the declet is one of the 1000 canonical encodings, False if it
# is one of the 24 non-canonical ones.
def is_canonical(dpd):
    bits=ck_bits(dpd,length=10,role="dpd",where=eloc(this_module,"is_canonical"))
    return canonical[bits2int(bits)]


# Returns the declet as a string of 10 binary digits
def declet_str(dpd):
    return bits2str(ck_bits(dpd,length=10,role="dpd",\
        where=eloc(this_module,"declet_str")))


# Returns the declet as a three character string of hex digits
def declet_hex(dpd):
    bits=ck_bits(dpd,length=10,role="dpd",where=eloc(this_module,"declet_hex"))
    return "%03X" % bits2int(bits)


# Establish the conversion tables
init()
