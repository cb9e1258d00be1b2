"""Spectra: collections of partials with distinct frequencies.

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

import logging
from fractions import Fraction
from functools import cmp_to_key, reduce

from harmonical import settings
from .ratios import to_fraction, ratio_key, ratio_to_string, fraction_gcd
from .harmonic import Harmonic, is_harmonic_record
from .errors import InvalidFrequency

# Get the logger from the logging system
logger = logging.getLogger(settings.LOGGING.LOGGER_NAME)

_HARMONIC_ORDER = cmp_to_key(Harmonic.compare_frequency)

class Spectrum(object):
    """
    A spectrum, represented as a collection of L{Harmonic}s.

    There is never more than one harmonic at any frequency. Harmonics
    are stored under the canonical key of their frequency (see
    L{ratio_key<harmonical.data.ratios.ratio_key>}), so C{6/4} and
    C{3/2} are the same frequency. Adding a harmonic at a frequency
    that's already there replaces the old one.

    Harmonics can be added in several ways::
     s = Spectrum()
     s.add(Harmonic(3, 0.5, 0))
     s.add(2, 0.3, math.pi)
     s.add({'frequency' : '440', 'amplitude' : 0.2, 'phase' : math.pi/2})

    or the spectrum can be built from a list of records (see
    L{to_records})::
     s = Spectrum([
        {'frequency' : '110', 'amplitude' : 0.5, 'phase' : 0},
        {'frequency' : '220', 'amplitude' : 0.3, 'phase' : math.pi},
     ])

    A L{Harmonic} instance given to L{add} is stored as it is, not
    copied: the spectrum takes it over. Changing its frequency directly
    afterwards would leave it under the wrong key: use L{transpose} or
    L{transpose_harmonic} instead.

    The order in which harmonics are stored has no meaning. Everything
    that reads them out in order (L{get_harmonics}, iteration,
    L{to_records}) sorts them by ascending frequency.

    """
    def __init__(self, records=None):
        self._harmonics = {}

        if records is not None:
            for record in records:
                self._add_harmonic(Harmonic.from_record(record))

    @staticmethod
    def from_records(records):
        return Spectrum(records)

    def _add_harmonic(self, harmonic):
        self._harmonics[ratio_key(harmonic.frequency)] = harmonic
        return self

    @staticmethod
    def _key(harmonic_or_frequency):
        if isinstance(harmonic_or_frequency, Harmonic):
            return ratio_key(harmonic_or_frequency.frequency)
        return ratio_key(harmonic_or_frequency)

    def _get_size(self):
        return len(self._harmonics)
    size = property(_get_size, doc="Number of harmonics in the spectrum")

    def __len__(self):
        return len(self._harmonics)

    def __contains__(self, harmonic_or_frequency):
        return self.has(harmonic_or_frequency)

    def __iter__(self):
        return iter(self.get_harmonics())

    def add(self, harmonic, amplitude=None, phase=None):
        """
        Adds a harmonic, replacing any already at the same frequency.

        @param harmonic: a L{Harmonic}, a serialized harmonic record, or
            a frequency. If a frequency is given, the amplitude and phase
            are taken from the other arguments (defaulting to 1 and 0).

        """
        if isinstance(harmonic, Harmonic):
            return self._add_harmonic(harmonic)
        elif is_harmonic_record(harmonic):
            return self._add_harmonic(Harmonic.from_record(harmonic))
        else:
            return self._add_harmonic(Harmonic(harmonic, amplitude, phase))

    def get(self, harmonic_or_frequency):
        """
        Returns the harmonic at the given frequency, or None if there
        isn't one. The frequency may be given as a L{Harmonic}, in which
        case its frequency is looked up.

        """
        return self._harmonics.get(self._key(harmonic_or_frequency))

    def has(self, harmonic_or_frequency):
        return self._key(harmonic_or_frequency) in self._harmonics

    def remove(self, harmonic_or_frequency):
        """
        Removes the harmonic at the given frequency, if there is one.

        """
        self._harmonics.pop(self._key(harmonic_or_frequency), None)
        return self

    def is_empty(self):
        return len(self._harmonics) == 0

    def clear(self):
        self._harmonics.clear()
        return self

    def get_harmonics(self):
        """
        Returns a new list of the harmonics, sorted by ascending frequency.

        """
        return sorted(self._harmonics.values(), key=_HARMONIC_ORDER)

    def get_frequencies_as_numbers(self):
        """ Sorted frequencies as floats. """
        return [h.frequency_num for h in self.get_harmonics()]

    def get_lowest_harmonic(self):
        if not self._harmonics:
            return None
        return min(self._harmonics.values(), key=_HARMONIC_ORDER)

    def get_highest_harmonic(self):
        if not self._harmonics:
            return None
        return max(self._harmonics.values(), key=_HARMONIC_ORDER)

    def _move_harmonic(self, harmonic, ratio):
        # Works out the new key before touching anything, then takes the
        #  harmonic out from under its old key and puts it in under the new
        old_key = ratio_key(harmonic.frequency)
        new_key = ratio_key(harmonic.frequency * ratio)
        if old_key == new_key:
            return
        del self._harmonics[old_key]
        harmonic.transpose(ratio)
        if new_key in self._harmonics:
            logger.debug("Transposed harmonic replaced the existing harmonic "\
                "at %s" % harmonic.frequency_str)
        self._harmonics[new_key] = harmonic

    @staticmethod
    def _check_ratio(ratio):
        ratio = to_fraction(ratio)
        if ratio <= 0:
            raise InvalidFrequency("transposition ratio must be positive, "\
                "got %s" % ratio_to_string(ratio))
        return ratio

    def transpose_harmonic(self, harmonic_or_frequency, ratio):
        """
        Transposes just one harmonic, given by its frequency or as a
        L{Harmonic}, moving it to its new frequency. If there's already
        a harmonic at the new frequency, it gets replaced. Does nothing
        if there's no harmonic at the given frequency.

        @raise InvalidFrequency: if the ratio isn't positive

        """
        ratio = self._check_ratio(ratio)
        harmonic = self.get(harmonic_or_frequency)
        if harmonic is not None:
            self._move_harmonic(harmonic, ratio)
        return self

    def transpose(self, ratio):
        """
        Multiplies the frequency of every harmonic by the ratio, in place.

        Harmonics are moved to their new keys one at a time, so the
        order matters: a harmonic must never be moved onto the key of
        one that hasn't been moved yet. Multiplying by a ratio greater
        than 1 moves every frequency upwards, so we start from the
        highest frequency and work down: everything above a harmonic
        has already moved out of the way by the time we get to it. For
        ratios below 1, we start from the bottom.

        @raise InvalidFrequency: if the ratio isn't positive. The
            spectrum is left unchanged.

        """
        ratio = self._check_ratio(ratio)
        if ratio == 1:
            return self

        harmonics = self.get_harmonics()
        if ratio > 1:
            # Transposing up: start from the top
            harmonics.reverse()
        logger.debug("Transposing %d harmonics by %s" % \
                        (len(harmonics), ratio_to_string(ratio)))
        for harmonic in harmonics:
            self._move_harmonic(harmonic, ratio)
        return self

    def to_transposed(self, ratio):
        """
        Returns a transposed copy of the spectrum.

        """
        return self.clone().transpose(ratio)

    def scale_amplitudes(self, factor):
        """
        Scales the amplitude of every harmonic (see L{Harmonic.scale}).

        """
        for harmonic in self._harmonics.values():
            harmonic.scale(factor)
        return self

    def get_gcd(self):
        """
        The greatest common divisor of all the frequencies: the highest
        frequency of which every frequency is a whole multiple. None if
        the spectrum is empty.

        """
        if not self._harmonics:
            return None
        return reduce(fraction_gcd, [h.frequency for h in self.get_harmonics()])

    def get_period(self):
        """
        Period of the wave made by summing the harmonics, i.e. the
        reciprocal of the GCD of the frequencies. None if the spectrum is
        empty.

        @rtype: Fraction

        """
        gcd = self.get_gcd()
        if gcd is None:
            return None
        return Fraction(1) / gcd

    def clone(self):
        """
        Deep copy: each harmonic is copied too.

        """
        copy = Spectrum()
        for key, harmonic in self._harmonics.items():
            copy._harmonics[key] = harmonic.clone()
        return copy

    def to_records(self):
        """
        Serializes the spectrum as a list of harmonic records (see
        L{Harmonic.to_record}), in order of ascending frequency.

        """
        return [h.to_record() for h in self.get_harmonics()]

    @staticmethod
    def harmonic_series(count, fundamental):
        """
        Creates a harmonic spectrum: the fundamental and its multiples
        up to C{count} times the fundamental. The nth harmonic has
        amplitude 1/n.

        For example C{Spectrum.harmonic_series(4, 110)} has harmonics at
        110, 220, 330 and 440 Hz.

        """
        fundamental = to_fraction(fundamental)
        spectrum = Spectrum()
        for i in range(1, count+1):
            spectrum.add(fundamental * i, 1.0 / i)
        return spectrum

    harmonic = harmonic_series

    @staticmethod
    def from_frequencies(frequencies, amplitudes=None, phases=None):
        """
        Creates a spectrum from a list of frequencies, with amplitudes
        and phases given in corresponding lists. Where an amplitude or
        phase is missing, or None, it defaults to 1 or 0.

        """
        if amplitudes is None:
            amplitudes = []
        if phases is None:
            phases = []
        spectrum = Spectrum()
        for i, frequency in enumerate(frequencies):
            amplitude = amplitudes[i] if i < len(amplitudes) else None
            phase = phases[i] if i < len(phases) else None
            spectrum.add(frequency, amplitude, phase)
        return spectrum

    def __repr__(self):
        return "<Spectrum: %s>" % ", ".join(
                    h.frequency_str for h in self.get_harmonics())
