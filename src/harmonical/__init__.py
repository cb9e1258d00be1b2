"""
The Harmonical - exact-rational data structures for tuning mathematics.

Frequencies and frequency ratios are kept as reduced fractions rather
than floats, so that stacking and transposing intervals never
accumulates rounding error. The data model lives in
L{harmonical.data}: single partials (L{Harmonic}), deduplicated
collections of partials (L{Spectrum}) and deduplicated collections of
bare ratios (L{IntervalSet}).

Its name is that given by Alexander J. Ellis, in his translation of
Helmholtz's On the Sensations of Tone, to his specially tuned harmonium
that allowed him to experiment with just tuning systems.

"""

__version__ = '1.0'

__copyright__ = """\
Copyright (C) 2008-2013 Mark Granroth-Wilding.

Distributed and Licensed under the GNU General Public License, version 3,
which is included by reference.
"""

__license__ = "GNU General Public License, version 3"

# Maintainer, contributors, etc.
__maintainer__ = "Mark Granroth-Wilding"
__maintainer_email__ = "mark.granroth-wilding@ed.ac.uk"
__author__ = __maintainer__
__author_email__ = __maintainer_email__
