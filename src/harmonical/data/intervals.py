"""Interval sets: collections of distinct frequency ratios.

Interval sets are useful for building tuning systems and scales and for
analysing the intervals between sounds. Besides the basic set
operations, this module provides ways of generating sets:
 - L{IntervalSet.range}: all the simple fractions in a range;
 - L{IntervalSet.affinitive}: all the ratios between the harmonics of
   two spectra;
and of refining them:
 - L{IntervalSet.densify}: fill in the gaps until no two neighbouring
   ratios are more than a given number of cents apart.

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
import logging
from fractions import Fraction

from harmonical import settings
from harmonical.utils import cents
from harmonical.utils.base import group_pairs
from .ratios import to_fraction, ratio_key, ratio_to_string
from .spectrum import Spectrum
from .errors import InvalidRange, InvalidDenominatorLimit, InvalidGapThreshold

# Get the logger from the logging system
logger = logging.getLogger(settings.LOGGING.LOGGER_NAME)

def _check_bounds(min_ratio, max_ratio):
    lower = to_fraction(min_ratio)
    upper = to_fraction(max_ratio)
    if lower > upper:
        raise InvalidRange("min must be less than or equal to max, got %s > %s" \
                            % (ratio_to_string(lower), ratio_to_string(upper)))
    return lower, upper

class IntervalSet(object):
    """
    A set of frequency ratios (intervals). Ratios are compared exactly:
    two inputs are the same member if they're the same fraction once
    simplified (see L{ratio_key<harmonical.data.ratios.ratio_key>}), so
    C{IntervalSet(["6/4", "3/2"])} has just one member.

    Members are stored as C{Fraction}s. Anything that reads them out in
    order (L{get_ratios}, iteration, L{to_strings}, etc) sorts them in
    ascending order.

    The mutating methods return the set itself, so calls can be chained.

    """
    def __init__(self, ratios=None):
        self._ratios = {}

        if ratios is not None:
            for ratio in ratios:
                self.add(ratio)

    def add(self, ratio):
        """
        Adds a ratio to the set. Adding one that's already in the set
        has no effect.

        """
        fraction = to_fraction(ratio)
        self._ratios[(fraction.numerator, fraction.denominator)] = fraction
        return self

    def has(self, ratio):
        return ratio_key(ratio) in self._ratios

    def delete(self, ratio):
        """
        Removes a ratio from the set, if it's in it.

        """
        self._ratios.pop(ratio_key(ratio), None)
        return self

    remove = delete

    def get(self, ratio):
        """
        Returns the stored C{Fraction} equal to the ratio, or None if
        it's not in the set.

        """
        return self._ratios.get(ratio_key(ratio))

    def _get_size(self):
        return len(self._ratios)
    size = property(_get_size, doc="Number of ratios in the set")

    def __len__(self):
        return len(self._ratios)

    def __contains__(self, ratio):
        return self.has(ratio)

    def __iter__(self):
        return iter(self.get_ratios())

    def is_empty(self):
        return len(self._ratios) == 0

    def clear(self):
        self._ratios.clear()
        return self

    def clone(self):
        return IntervalSet(self._ratios.values())

    def get_ratios(self):
        """
        Returns a new list of all the ratios in ascending order.

        """
        return sorted(self._ratios.values())

    def min(self):
        """ Smallest ratio in the set, or None if it's empty. """
        if not self._ratios:
            return None
        return min(self._ratios.values())

    def max(self):
        """ Largest ratio in the set, or None if it's empty. """
        if not self._ratios:
            return None
        return max(self._ratios.values())

    def equals(self, other):
        """
        True if the two sets contain exactly the same ratios.

        """
        if self.size != other.size:
            return False
        for ratio in self._ratios.values():
            if not other.has(ratio):
                return False
        return True

    def to_strings(self):
        """ Sorted ratios as canonical strings: "3/2", "2", etc. """
        return [ratio_to_string(r) for r in self.get_ratios()]

    def to_numbers(self):
        """ Sorted ratios as floats. """
        return [float(r) for r in self.get_ratios()]

    def to_cents(self, places=None):
        """
        Sorted ratios as sizes in cents, in a numpy array.

        @see: L{ratio_to_cents<harmonical.utils.cents.ratio_to_cents>}

        """
        return cents.ratio_to_cents(self.get_ratios(), places=places)

    def to_sweep_intervals(self):
        """
        The interval from each ratio to the next, in ascending order. The
        first is always 1 (the interval from the first ratio to itself).
        If the ratios are [1, 5/4, 3/2, 2], the sweep intervals are
        [1, 5/4, 6/5, 4/3].

        @rtype: list of C{Fraction}s

        """
        ratios = self.get_ratios()
        if not ratios:
            return []
        intervals = [Fraction(1)]
        for left, right in group_pairs(ratios):
            intervals.append(right / left)
        return intervals

    def to_spectrum(self, amplitude_fn):
        """
        Builds a spectrum with a harmonic at each ratio, with phase 0.

        @type amplitude_fn: function
        @param amplitude_fn: called as C{amplitude_fn(ratio, index)} for
            each ratio in ascending order, where index is its position in
            that order, to get the amplitude of its harmonic
        @rtype: L{Spectrum}

        """
        spectrum = Spectrum()
        for index, ratio in enumerate(self.get_ratios()):
            spectrum.add(ratio, amplitude_fn(ratio, index), 0.0)
        return spectrum

    def min_max(self, min_ratio, max_ratio):
        """
        Removes all the ratios that lie outside the range, in place.
        Both bounds are inclusive.

        @raise InvalidRange: if C{min_ratio > max_ratio}

        """
        lower, upper = _check_bounds(min_ratio, max_ratio)
        for key, ratio in list(self._ratios.items()):
            if ratio < lower or ratio > upper:
                del self._ratios[key]
        return self

    @staticmethod
    def range(min_ratio, max_ratio, max_denominator):
        """
        Generates all the fractions M{n/d} such that:
         - C{min_ratio <= n/d <= max_ratio},
         - C{1 <= d <= max_denominator},
         - C{n >= 1}.
        Fractions that aren't in lowest terms (like 6/4) are the same
        member as their simplified form (3/2), so each ratio appears
        once.

        The work done grows with the square of C{max_denominator} (for a
        fixed range), so be careful with large values.

        Examples::
         # All simple ratios in one octave:
         #  1, 6/5, 5/4, 4/3, 7/5, 3/2, 8/5, 5/3, 7/4, 9/5, 2
         IntervalSet.range(1, 2, 5)
         # Ratios across 1.5 octaves
         IntervalSet.range(1, 3, 12)

        @raise InvalidDenominatorLimit: if C{max_denominator} isn't an
            integer, or is less than 1
        @raise InvalidRange: if C{min_ratio > max_ratio}

        """
        if isinstance(max_denominator, bool) or \
                not isinstance(max_denominator, numbers.Integral):
            raise InvalidDenominatorLimit("max_denominator must be an integer, "\
                "got %r" % (max_denominator,))
        if max_denominator < 1:
            raise InvalidDenominatorLimit("max_denominator must be at least 1, "\
                "got %s" % max_denominator)
        lower, upper = _check_bounds(min_ratio, max_ratio)

        interval_set = IntervalSet()
        for denominator in range(1, max_denominator+1):
            # Exact bounds on the numerator for this denominator
            min_numerator = max(1, math.ceil(lower * denominator))
            max_numerator = math.floor(upper * denominator)
            for numerator in range(min_numerator, max_numerator+1):
                interval_set.add(Fraction(numerator, denominator))
        logger.debug("Generated %d ratios between %s and %s with denominators "\
            "up to %d" % (interval_set.size, ratio_to_string(lower),
                          ratio_to_string(upper), max_denominator))
        return interval_set

    @staticmethod
    def affinitive(context, complement):
        """
        Generates the ratios between every pair of harmonics from two
        spectra: for each harmonic h1 of C{context} and h2 of
        C{complement}, the ratio h2/h1. This is useful for analysing the
        harmonic relationships (and consonance) between two sounds.

        @type context: L{Spectrum}
        @type complement: L{Spectrum}

        """
        interval_set = IntervalSet()
        complement_harmonics = complement.get_harmonics()
        for h1 in context.get_harmonics():
            for h2 in complement_harmonics:
                interval_set.add(h2.frequency / h1.frequency)
        return interval_set

    def densify(self, max_gap_cents):
        """
        Fills in the set until no two neighbouring ratios are more than
        C{max_gap_cents} apart.

        Each gap that's too big gets the geometric mean of its ends
        added to it: this is the midpoint on a logarithmic scale, so
        the gap from 1 to 2 gets as many new points as the gap from 2
        to 4 (both are octaves). This is repeated until no gap is too
        big. The means are computed as floats and approximated back to
        fractions, so they're not exact midpoints.

        For example, for smooth dissonance curves::
         extrema = IntervalSet.affinitive(spectrum1, spectrum2)
         extrema.densify(10)

        @type max_gap_cents: float
        @param max_gap_cents: maximum gap allowed, in cents (100 cents is
            an equal-tempered semitone)
        @raise InvalidGapThreshold: if C{max_gap_cents} isn't positive,
            or if a gap gets too small to be split within float precision.
            The set is left unchanged if this is raised.

        """
        if not max_gap_cents > 0:
            raise InvalidGapThreshold("max_gap_cents must be positive, got %s" \
                                        % max_gap_cents)
        max_gap_ratio = cents.cents_to_float_ratio(max_gap_cents)

        # Fill a copy, so that a gap we can't split leaves us unchanged
        dense = self.clone()
        passes = 0
        # Keep adding ratios until all the gaps are small enough
        while True:
            added = 0
            for left, right in group_pairs(dense.get_ratios()):
                if float(right / left) > max_gap_ratio:
                    dense.add(_log_midpoint(left, right))
                    added += 1
            if added == 0:
                break
            passes += 1
            logger.debug("Densify pass %d added %d ratios" % (passes, added))
        self._ratios = dense._ratios
        return self

    def __repr__(self):
        return "<IntervalSet: %s>" % ", ".join(self.to_strings())

def _log_midpoint(left, right):
    """
    Geometric mean of the two ratios, as a fraction strictly between
    them.

    """
    mean = math.sqrt(float(left) * float(right))
    point = to_fraction(mean)
    if left < point < right:
        return point
    # The approximation landed on one of the ends: use the float's
    #  exact value instead
    point = Fraction(mean)
    if left < point < right:
        return point
    raise InvalidGapThreshold("the gap between %s and %s is too small to be "\
        "split" % (ratio_to_string(left), ratio_to_string(right)))
