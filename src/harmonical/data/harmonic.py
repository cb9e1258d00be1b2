"""A single partial of a spectrum.

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
from collections.abc import Mapping

from harmonical import settings
from harmonical.utils.base import clamp
from .ratios import to_fraction, ratio_to_string
from .errors import InvalidFrequency, InvalidAmplitude, InvalidPhase

TWO_PI = 2 * math.pi

def is_harmonic_record(value):
    """
    Checks whether a value looks like a serialized harmonic (see
    L{Harmonic.to_record}), rather than a ratio.

    """
    return isinstance(value, Mapping) and \
        "frequency" in value and \
        "amplitude" in value and \
        "phase" in value

def _check_frequency(frequency):
    frequency = to_fraction(frequency)
    if frequency <= 0:
        raise InvalidFrequency("frequency must be positive, got %s" % \
                                ratio_to_string(frequency))
    return frequency

def _check_amplitude(amplitude):
    # Written so that NaN fails too
    if not (0.0 <= amplitude <= 1.0):
        raise InvalidAmplitude("amplitude must be between 0 and 1, got %s" % \
                                amplitude)
    return amplitude

def _check_phase(phase):
    if not (0.0 <= phase < TWO_PI):
        raise InvalidPhase("phase must be in the range [0,2pi), got %s" % phase)
    return phase


class Harmonic(object):
    """
    A single partial in an arbitrary spectrum: a frequency, an
    amplitude and a phase. The name doesn't imply that the partial
    belongs to a harmonic series.

    The frequency is stored as an exact ratio (a C{Fraction}), so it may
    be given as anything L{to_fraction<harmonical.data.ratios.to_fraction>}
    accepts::
     Harmonic(440, 0.5, math.pi)
     Harmonic("440")            # amplitude 1, phase 0
     Harmonic("440 1/3")        # whole and fractional part
     Harmonic((107, 100))       # 107/100

    A serialized record (see L{to_record}) may be given instead::
     Harmonic({'frequency' : {'n' : 3, 'd' : 2}, 'amplitude' : 0.5, 'phase' : 0})

    Harmonics are mutable. Every way of setting a value checks it
    before storing it, so a failed update leaves the harmonic as it
    was:
     - frequency must be positive (L{InvalidFrequency});
     - amplitude must be in [0,1] (L{InvalidAmplitude});
     - phase must be in [0,2pi) (L{InvalidPhase}).

    The mutating methods return the harmonic itself, so calls can be
    chained.

    """
    def __init__(self, frequency, amplitude=None, phase=None):
        if is_harmonic_record(frequency):
            record = frequency
            frequency = record['frequency']
            amplitude = record['amplitude']
            phase = record['phase']
        if amplitude is None:
            amplitude = settings.HARMONIC.DEFAULT_AMPLITUDE
        if phase is None:
            phase = settings.HARMONIC.DEFAULT_PHASE

        self._frequency = _check_frequency(frequency)
        self._amplitude = _check_amplitude(amplitude)
        self._phase = _check_phase(phase)

    @staticmethod
    def from_record(record):
        """
        Inverse of L{to_record}.

        """
        return Harmonic(record['frequency'], record['amplitude'], record['phase'])

    def _get_frequency(self):
        return self._frequency
    def _set_frequency(self, value):
        self._frequency = _check_frequency(value)

    def _get_amplitude(self):
        return self._amplitude
    def _set_amplitude(self, value):
        self._amplitude = _check_amplitude(value)

    def _get_phase(self):
        return self._phase
    def _set_phase(self, value):
        self._phase = _check_phase(value)

    frequency = property(_get_frequency, _set_frequency)
    amplitude = property(_get_amplitude, _set_amplitude)
    phase = property(_get_phase, _set_phase)

    def _get_frequency_num(self):
        return float(self._frequency)
    frequency_num = property(_get_frequency_num,
                             doc="Frequency as a float")

    def _get_frequency_str(self):
        return ratio_to_string(self._frequency)
    frequency_str = property(_get_frequency_str,
                             doc="Frequency as a simplified fraction string, e.g. 3/2")

    def set_frequency(self, frequency):
        self.frequency = frequency
        return self

    def set_amplitude(self, amplitude):
        self.amplitude = amplitude
        return self

    def set_phase(self, phase):
        self.phase = phase
        return self

    def transpose(self, ratio):
        """
        Multiplies the frequency by a ratio, in place.

        @raise InvalidFrequency: if the ratio isn't positive

        """
        ratio = to_fraction(ratio)
        if ratio <= 0:
            raise InvalidFrequency("transposition ratio must be positive, "\
                "got %s" % ratio_to_string(ratio))
        self._frequency = self._frequency * ratio
        return self

    def to_transposed(self, ratio):
        """
        Like L{transpose}, but returns a transposed copy and leaves this
        harmonic alone.

        """
        return self.clone().transpose(ratio)

    def scale(self, factor):
        """
        Multiplies the amplitude by a factor. The result is clamped to
        [0,1] rather than raising an error.

        """
        self._amplitude = clamp(self._amplitude * factor, 0.0, 1.0)
        return self

    def clone(self):
        return Harmonic(self._frequency, self._amplitude, self._phase)

    def compare_frequency(self, other):
        """
        Three-way comparison of frequencies: -1, 0 or 1. This is the
        order used whenever harmonics are sorted.

        """
        if self._frequency < other._frequency:
            return -1
        elif self._frequency > other._frequency:
            return 1
        return 0

    def to_record(self):
        """
        Plain data representation of the harmonic, suitable for JSON
        output::
         {'frequency' : {'n' : 3, 'd' : 2}, 'amplitude' : 0.5, 'phase' : 0.0}

        The fraction is in lowest terms with a positive denominator.

        """
        return {
            'frequency' : {
                'n' : self._frequency.numerator,
                'd' : self._frequency.denominator,
            },
            'amplitude' : self._amplitude,
            'phase' : self._phase,
        }

    def __repr__(self):
        return "<Harmonic %s, amp=%s, phase=%s>" % \
                (self.frequency_str, self._amplitude, self._phase)
