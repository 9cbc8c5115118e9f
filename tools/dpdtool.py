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

# This module is the command-line conversion utility for densely packed decimal
# values and the 32-bit decimal floating point interchange format.
#
# Usage:
#   dpdtool.py [-m MODE] [-n COUNT] [--seed SEED] [-q] [--debug] [--prompt]
#              [value ...]
#
# The -m or --mode argument selects the conversion applied to each value:
#   declet   a decimal value 0-999 is shown with its BCD and DPD encodings
#   bcd      12 BCD bits are converted to the declet and decimal value
#   dpd      a 10-bit declet is converted to BCD bits and decimal value
#   encode   a decimal literal is encoded in the 32-bit interchange format.  This
#            is the default.
#   decode   32 binary digits or 8 hexadecimal digits are decoded
#   quiz     COUNT practice questions are generated, values are ignored.  The
#            --seed argument makes the questions repeatable.
#
# Negative decimal literals may only be entered in prompt mode due to conflicts
# with argument parsing.  In prompt mode, enter 'end' or 'quit' to terminate.
#
# A value that can not be converted is reported with an 'ERROR:' prefix and
# processing continues.  The exit status is 1 if any value failed, 0 otherwise.

this_module="dpdtool.py"
copyright="%s Copyright (C) %s Harold Grovesteen" % (this_module,"2016")

# Python imports:
import argparse      # Access the command line parser
import logging       # Access the Python logger
import random        # Access the seedable random number generator
import re            # Access regular expressions
import sys           # Access the standard output stream
# SATK imports:
from dpdutil import eloc, bits2str, bytes2str, DPDError, RangeError
import bcd           # Access decimal to BCD conversion
import dpd           # Access densely packed decimal conversion
import dfp32         # Access the 32-bit interchange format
import dpdquiz       # Access practice question generation


# Performs the requested conversions
# Instance Arguments:
#   args   the argparse.Namespace from parse_args()
#   out    the stream receiving output.  Defaults to sys.stdout.
class Converter(object):
    is_hexadecimal=re.compile(r"[0-9A-Fa-f]{8}\Z")
    modes=["declet","bcd","dpd","encode","decode","quiz"]
    prompt_intro="\n"\
        "Welcome to the densely packed decimal tool: %s\n"\
        "At the %sprompt enter a value to be converted.\n"\
        "\nTo terminate, enter either 'end' or 'quit' (without quotation "\
        "marks) or Cntrl-C."

    def __init__(self,args,out=None):
        self.args=args             # Argument parser command line arguments
        self.mode=args.mode        # Conversion mode
        self.values=args.value     # command-line values
        self.count=args.count      # Number of quiz questions
        self.seed=args.seed        # Quiz random number seed
        if out is None:
            self.out=sys.stdout
        else:
            self.out=out
        self.failed=False          # Whether any conversion failed
        if args.debug:
            self.log=logging.getLogger("dpdtool")
        else:
            self.log=None

        self.convert={"declet":self.declet,
                      "bcd":   self.bcd,
                      "dpd":   self.dpd,
                      "encode":self.encode,
                      "decode":self.decode}

    def _print(self,string):
        print(string,file=self.out)

    def _integer(self,value):
        try:
            return int(value,10)
        except ValueError:
            raise RangeError("%s not a decimal integer: '%s'" \
                % (eloc(self,"declet",module=this_module),value)) from None

  #
  # Conversion methods
  #

    def bcd(self,value):
        n=bcd.bcd_to_decimal(value)
        declet=dpd.bcd_to_dpd(value)
        return "BCD: %s  DPD: %s  decimal: %03d" % (value,bits2str(declet),n)

    def declet(self,value):
        q=dpdquiz.question(self._integer(value))
        return "%s  (%s)" % (q,dpd.declet_hex(q.dpd))

    def decode(self,value):
        if Converter.is_hexadecimal.match(value):
            bits=bytes.fromhex(value)
        else:
            bits=value
        d=dfp32.dfp32.from_bits(bits,log=self.log)
        return "%s  %s  %s" % (d.to_hex(),d.to_bin(),d)

    def dpd(self,value):
        bits=dpd.dpd_to_bcd(value)
        if dpd.is_canonical(value):
            can="canonical"
        else:
            can="non-canonical"
        return "DPD: %s  BCD: %s  decimal: %03d  %s" \
            % (value,bits2str(bits),bcd.bcd_to_decimal(bits),can)

    def encode(self,value):
        d=dfp32.dfp32.from_string(value,log=self.log)
        byts=d.encode()
        return "%s  %s  %s" % (bytes2str(byts),d.to_bin(),d)

  #
  # Processing methods
  #

    # Convert one value, reporting any error
    def one(self,value):
        try:
            self._print(self.convert[self.mode](value))
        except DPDError as de:
            self.failed=True
            self._print("ERROR: %s" % de)

    def query(self):
        prompt="%s> " % self.mode
        if not self.args.quiet:
            self._print(Converter.prompt_intro % (this_module,prompt))
        while True:
            string=input(prompt)
            if not string.isprintable():
                self._print("ERROR: nonprintable characters")
                continue
            string=string.strip()
            if string.lower() in ["end","quit"]:
                return
            if len(string) == 0:
                continue
            self.one(string)

    def quiz(self):
        rng=random.Random(self.seed)
        for n,q in enumerate(dpdquiz.generate_questions(self.count,rng=rng,\
                log=self.log)):
            self._print("[%02d] %s" % (n+1,q))

    # Perform the requested conversions.
    # Returns:
    #   the process exit status
    def run(self):
        if self.mode == "quiz":
            try:
                self.quiz()
            except DPDError as de:
                self.failed=True
                self._print("ERROR: %s" % de)
        elif self.args.prompt:
            try:
                self.query()
            except (KeyboardInterrupt,EOFError):
                self._print("")
        else:
            for v in self.values:
                self.one(v)
        if self.failed:
            return 1
        return 0


# Parse the command-line arguments
def parse_args(argv=None):
    parser=argparse.ArgumentParser(prog=this_module,
        epilog=copyright,
        description="Convert densely packed decimal and 32-bit decimal floating "\
            "point values")
    parser.add_argument("value",nargs="*",\
        help="one or more strings to be converted.  Ignored by quiz mode.")
    parser.add_argument("-m","--mode",default="encode",choices=Converter.modes,\
        help="conversion performed on each value.  Defaults to encode.")
    parser.add_argument("-n","--count",default=10,type=int,\
        help="number of quiz questions.  Defaults to 10.")
    parser.add_argument("--seed",default=None,type=int,\
        help="quiz random number seed for repeatable questions")
    parser.add_argument("-q","--quiet",default=False,action="store_true",\
        help="disable copyright notice")
    parser.add_argument("--prompt",default=False,action="store_true",\
        help="enable input prompt mode")
    parser.add_argument("--debug",default=False,action="store_true",\
        help="enable debugging of value conversions")
    return parser.parse_args(argv)


def main(argv=None):
    logging.basicConfig(level=logging.WARNING)
    args=parse_args(argv)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.quiet:
        print(copyright)

    return Converter(args).run()


if __name__ == "__main__":
    sys.exit(main())
