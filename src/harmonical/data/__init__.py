"""Data structures for the Harmonical.

Basic data types for exact tuning mathematics. Frequencies and ratios
are always stored as C{fractions.Fraction}s.

 - L{Harmonic}: a single partial (frequency, amplitude, phase).
 - L{Spectrum}: a collection of harmonics with distinct frequencies.
 - L{IntervalSet}: a collection of distinct ratios.

Ratios may be given in many forms (see L{ratios.to_fraction}). Two
values are the same frequency or ratio if and only if they're equal as
fractions.

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

from .errors import ValidationError, RatioError, InvalidFrequency, \
                    InvalidAmplitude, InvalidPhase, InvalidRange, \
                    InvalidDenominatorLimit, InvalidGapThreshold
from .ratios import to_fraction, ratio_key, ratio_to_string, fraction_gcd
from .harmonic import Harmonic
from .spectrum import Spectrum
from .intervals import IntervalSet
