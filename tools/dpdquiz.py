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

# This module generates practice questions for densely packed decimal encoding.
# Each question is a decimal value between 0 and 999 together with its BCD and
# DPD encodings.  How the question is presented, and which of the three forms
# is shown or asked for, is left to the user of the module.
#
# The random source is supplied by the caller so that a seeded random.Random
# object reproduces the same questions.

this_module="dpdquiz.py"

# Python imports:
import random       # Access the default random number generator
# SATK imports:
from dpdutil import eloc, bits2str, RangeError
import bcd          # Access decimal to BCD conversion
import dpd          # Access BCD to DPD conversion


# One question: a decimal value and its encodings.
# Instance Argument:
#   decimal   an integer between 0 and 999
class encoded_number(object):
    def __init__(self,decimal):
        self.decimal=decimal
        self.bcd=bcd.decimal_to_bcd(decimal)    # 12 bits
        self.dpd=dpd.bcd_to_dpd(self.bcd)       # 10 bits

    def __eq__(self,other):
        if not isinstance(other,encoded_number):
            return NotImplemented
        return self.decimal == other.decimal

    def __hash__(self):
        return hash(self.decimal)

    def __repr__(self):
        return "%s(%s)" % (self.__class__.__name__,self.decimal)

    def __str__(self):
        return "%03d  BCD: %s  DPD: %s" \
            % (self.decimal,bits2str(self.bcd),bits2str(self.dpd))


# Returns the question for a chosen decimal value
def question(decimal):
    return encoded_number(decimal)


# Generate a list of random questions
# Function Arguments:
#   count   the number of questions, a non-negative integer
#   rng     an object with a randint() method, normally a random.Random object.
#           Specify None to use a new unseeded random.Random.  Defaults to None.
#   log     a logging.Logger receiving a debug message for each question or None.
#           Defaults to None.
# Returns:
#   a list of encoded_number objects
# Exception:
#   RangeError if count is not a non-negative integer
def generate_questions(count,rng=None,log=None):
    if isinstance(count,bool) or not isinstance(count,int) or count < 0:
        raise RangeError("%s 'count' argument must be a non-negative integer: %r" \
            % (eloc(this_module,"generate_questions"),count))
    if rng is None:
        rng=random.Random()

    questions=[]
    for n in range(count):
        q=question(rng.randint(0,999))
        if __debug__:
            if log:
                log.debug("%s question %s: %s" \
                    % (eloc(this_module,"generate_questions"),n+1,q))
        questions.append(q)
    return questions
