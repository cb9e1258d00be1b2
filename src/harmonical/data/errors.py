"""Errors raised by the Harmonical data structures.

Every error here is a validation failure: it is raised immediately at
the call that received the bad value and nothing is changed by a call
that raises one. They all subclass L{ValidationError}, which is itself
a C{ValueError}, so callers can catch as broadly as they like.

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


class ValidationError(ValueError):
    pass

class RatioError(ValidationError):
    """
    A value could not be read as a ratio: badly formatted string, zero
    denominator, NaN, etc.

    """
    pass

class InvalidFrequency(ValidationError):
    """ Frequencies (and transposition ratios) must be strictly positive. """
    pass

class InvalidAmplitude(ValidationError):
    """ Amplitudes must lie in [0,1]. """
    pass

class InvalidPhase(ValidationError):
    """ Phases must lie in [0,2pi). """
    pass

class InvalidRange(ValidationError):
    """ The lower bound of a range was greater than the upper bound. """
    pass

class InvalidDenominatorLimit(ValidationError):
    pass

class InvalidGapThreshold(ValidationError):
    pass
