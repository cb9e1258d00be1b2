"""Reading ratios and computing their canonical keys.

All the data structures accept ratios in many forms: ints, floats,
strings, (numerator,denominator) pairs, records and existing
C{Fraction}s. This module is the one place where all of those are
turned into a C{fractions.Fraction}, which is then used everywhere
else.

String format
=============
A ratio string may be:
 - an integer: C{"5"};
 - a fraction: C{"5/4"};
 - a mixed number: C{"1 1/4"}, the integer part followed by a space and
   the fractional part;
 - a decimal: C{"1.25"}, which is read exactly.
A C{-} at the beginning negates the whole value, not just the integer
part: C{"-1 1/4"} is -5/4.

Floats
======
Floats are approximated by the closest fraction with a denominator no
greater than L{settings.RATIOS.MAX_DENOMINATOR<harmonical.settings.RATIOS>}.
So C{0.1} becomes C{1/10}, not the exact binary value. For values
smaller than 1 the limit is divided by the value, so C{1e-8} becomes
C{1/100000000} rather than 0. Two floats that
look the same may still approximate to different fractions: they will
then be treated as different ratios.

"""
"""
============================== License ========================================
 Copyright (C) 2008, 2010-12 University of Edinburgh, Mark Granroth-Wilding
 
 This file is part of The Harmonical.
 
 The Harmonical is free software: you can redistribute it and/or modify
 it under the terms of the GNU General Public License as published by
 the Free Software Foundation, either version 3 of the License, or
 (at your option) any later version.
 
 The Harmonical is distributed in the hope that it will be useful,
 but WITHOUT ANY WARRANTY; without even the implied warranty of
 MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
 GNU General Public License for more details.
 
 You should have received a copy of the GNU General Public License
 along with The Harmonical.  If not, see <http://www.gnu.org/licenses/>.

============================ End license ======================================

"""
__author__ = "Mark Granroth-Wilding <mark.granroth-wilding@ed.ac.uk>"

import math
import numbers
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from collections.abc import Mapping

from harmonical import settings
from .errors import RatioError

def euclid(num1, num2):
    while num2 != 0:
        remainder = num1 % num2
        num1 = num2
        num2 = remainder
    return num1

def parse_ratio_string(string):
    """
    Reads a ratio from a string. See the module docs for the accepted
    formats.

    @rtype: Fraction
    @raise RatioError: if the string can't be read

    """
    whole_string = string
    # Get rid of extra spaces
    string = string.strip()
    # Check for negation at the beginning: has to negate whole fraction
    # If we don't split this off now, it only negates the integer part
    if string.startswith("-"):
        neg = True
        string = string[1:].strip()
    else:
        neg = False
    # Split the integer part from the fractional part
    string_parts = string.split()
    if len(string_parts) == 1:
        fract_parts = [p.strip() for p in string.split("/")]
        if len(fract_parts) == 1:
            # An integer or a decimal
            value = _parse_decimal(string, whole_string)
        elif len(fract_parts) == 2:
            # a/b
            value = _from_pair(_parse_int(fract_parts[0], whole_string),
                               _parse_int(fract_parts[1], whole_string))
        else:
            raise RatioError("too many slashes in ratio '%s'" % whole_string)
    elif len(string_parts) == 2:
        integer = _parse_int(string_parts[0], whole_string)
        fract_parts = string_parts[1].split("/")
        if len(fract_parts) != 2:
            raise RatioError("fractional part of mixed number '%s' must "\
                "have the form n/d" % whole_string)
        value = integer + _from_pair(_parse_int(fract_parts[0], whole_string),
                                     _parse_int(fract_parts[1], whole_string))
    else:
        raise RatioError("could not parse ratio string '%s'" % whole_string)
    if neg:
        # There was a - at the beginning, so negate the whole thing
        value = -value
    return value

def _parse_int(string, whole_string):
    try:
        return int(string)
    except ValueError:
        raise RatioError("error parsing ratio string '%s'" % whole_string)

def _parse_decimal(string, whole_string):
    try:
        value = Decimal(string)
    except InvalidOperation:
        raise RatioError("error parsing ratio string '%s'" % whole_string)
    if not value.is_finite():
        raise RatioError("ratio string '%s' is not a finite number" % whole_string)
    return Fraction(value)

def _from_pair(numerator, denominator):
    if isinstance(numerator, bool) or isinstance(denominator, bool) or \
            not isinstance(numerator, numbers.Integral) or \
            not isinstance(denominator, numbers.Integral):
        raise RatioError("a ratio pair must be two integers, got (%r, %r)" % \
                            (numerator, denominator))
    if denominator == 0:
        raise RatioError("zero denominator in ratio %r/%r" % \
                            (numerator, denominator))
    return Fraction(int(numerator), int(denominator))

def _approximate_float(value):
    """
    Closest fraction to a finite float, with the denominator limit
    scaled up for values smaller than 1, so that small values keep the
    same relative precision as large ones and a non-zero float never
    becomes 0.

    """
    exact = Fraction(value)
    if exact == 0:
        return exact
    limit = settings.RATIOS.MAX_DENOMINATOR
    if abs(exact) < 1:
        # Exact arithmetic here: 1/value overflows a float for subnormals
        limit = int(limit / abs(exact))
    return exact.limit_denominator(limit)

def to_fraction(value):
    """
    Turns any of the accepted ratio inputs into a C{Fraction}. This is
    always in lowest terms with a positive denominator.

    Accepted values:
     - C{Fraction}s, ints and other C{numbers.Rational}s: exact;
     - C{Decimal}s: exact;
     - floats: approximated (see module docs);
     - strings: see module docs;
     - C{(numerator, denominator)} pairs, as a tuple or list;
     - mappings with keys C{n} and C{d}, or C{numerator} and
       C{denominator}, as in a serialized harmonic's frequency.

    @raise RatioError: if the value is of an accepted type but can't be
        read as a ratio
    @raise TypeError: if the value isn't of any accepted type

    """
    if isinstance(value, Fraction):
        return value
    elif isinstance(value, bool):
        raise TypeError("can't use a bool as a ratio")
    elif isinstance(value, numbers.Rational):
        return Fraction(int(value.numerator), int(value.denominator))
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise RatioError("ratio must be finite, got %s" % value)
        return Fraction(value)
    elif isinstance(value, numbers.Real):
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise RatioError("ratio must be finite, got %s" % value)
        return _approximate_float(value)
    elif isinstance(value, str):
        return parse_ratio_string(value)
    elif isinstance(value, (tuple, list)):
        if len(value) != 2:
            raise RatioError("a ratio pair must have exactly two items, "\
                "got %d" % len(value))
        return _from_pair(value[0], value[1])
    elif isinstance(value, Mapping):
        if "n" in value and "d" in value:
            return _from_pair(value["n"], value["d"])
        elif "numerator" in value and "denominator" in value:
            return _from_pair(value["numerator"], value["denominator"])
        else:
            raise RatioError("a ratio mapping needs keys n and d (or "\
                "numerator and denominator), got %s" % ", ".join(value.keys()))
    raise TypeError("can't read a ratio from a value of type %s" % \
                        type(value).__name__)

def ratio_key(value):
    """
    The canonical key of a ratio: its reduced (numerator, denominator)
    pair. Two inputs are the same entry in a L{Spectrum} or
    L{IntervalSet} exactly when their keys are equal.

    """
    fraction = to_fraction(value)
    return (fraction.numerator, fraction.denominator)

def ratio_to_string(value):
    """
    Canonical string form of a ratio: C{"n/d"}, or just C{"n"} for whole
    numbers.

    """
    fraction = to_fraction(value)
    if fraction.denominator == 1:
        return "%d" % fraction.numerator
    return "%d/%d" % (fraction.numerator, fraction.denominator)

def fraction_gcd(fraction1, fraction2):
    """
    Greatest common divisor of two ratios: the largest ratio of which
    both are whole multiples. For reduced fractions this is
    gcd(n1,n2)/lcm(d1,d2).

    """
    fraction1 = to_fraction(fraction1)
    fraction2 = to_fraction(fraction2)
    numerator = euclid(abs(fraction1.numerator), abs(fraction2.numerator))
    denominator_hcf = euclid(fraction1.denominator, fraction2.denominator)
    denominator = fraction1.denominator * fraction2.denominator // denominator_hcf
    return Fraction(numerator, denominator)
