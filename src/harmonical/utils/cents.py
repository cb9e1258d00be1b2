"""Conversion between ratios and cents.

A cent is a hundredth of an equal-tempered semitone: 1200 cents make
an octave (ratio 2/1). Cents are a logarithmic measure, so they can't
be represented exactly as fractions: the results here are rounded
floats, or fractions approximating them.

All the functions accept either a single value or a sequence of
values, in which case they're applied element-wise and a numpy array
is returned (or a list of C{Fraction}s).

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

import numpy

from harmonical import settings
from harmonical.data.ratios import to_fraction

def _is_sequence(value):
    return isinstance(value, (list, numpy.ndarray)) or \
        (isinstance(value, tuple) and len(value) != 2)

def ratio_to_cents(ratio, places=0):
    """
    Size of the interval in cents: M{1200 * log2(ratio)}.

    @param ratio: anything L{to_fraction<harmonical.data.ratios.to_fraction>}
        accepts, or a list of such values. Note that a 2-tuple is read
        as a single (numerator,denominator) pair.
    @type places: int
    @param places: number of decimal places to round to. Use None to
        turn rounding off.

    """
    if _is_sequence(ratio):
        values = numpy.array([float(to_fraction(r)) for r in ratio])
    else:
        values = float(to_fraction(ratio))
    cents = settings.INTERVALS.CENTS_PER_OCTAVE * numpy.log2(values)
    if places is not None:
        cents = numpy.round(cents, places)
    if numpy.ndim(cents) == 0:
        return float(cents)
    return cents

def cents_to_float_ratio(cents):
    """
    Ratio of an interval of the given size in cents as a float:
    M{2^(cents/1200)}.

    """
    cents = numpy.asarray(cents, dtype=float)
    ratio = numpy.power(2.0, cents / settings.INTERVALS.CENTS_PER_OCTAVE)
    if numpy.ndim(ratio) == 0:
        return float(ratio)
    return ratio

def cents_to_ratio(cents, places=None):
    """
    Ratio of an interval of the given size in cents, as a C{Fraction}.
    Since this is nearly always irrational, the result is the closest
    fraction within the usual float approximation limits.

    @type places: int
    @param places: if given, the float ratio is first rounded to this
        many decimal places, giving a simpler fraction
    @return: a C{Fraction}, or a list of them if a sequence was given

    """
    ratio = cents_to_float_ratio(cents)
    if places is not None:
        ratio = numpy.round(ratio, places)
    if numpy.ndim(ratio) == 0:
        return to_fraction(float(ratio))
    return [to_fraction(float(r)) for r in ratio]
