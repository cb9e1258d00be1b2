"""Unit tests for harmonical.utils.cents module

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

import unittest
from fractions import Fraction

import numpy

from harmonical.utils.cents import ratio_to_cents, cents_to_float_ratio, \
                        cents_to_ratio

class TestRatioToCents(unittest.TestCase):
    def test_single(self):
        self.assertEqual(ratio_to_cents(1), 0.0)
        self.assertEqual(ratio_to_cents(2), 1200.0)
        self.assertEqual(ratio_to_cents("1/2"), -1200.0)
        self.assertEqual(ratio_to_cents("3/2"), 702.0)
        self.assertEqual(ratio_to_cents((3, 2), places=3), 701.955)
        self.assertIsInstance(ratio_to_cents(4), float)

    def test_unrounded(self):
        self.assertAlmostEqual(ratio_to_cents("5/4", places=None), 386.3137, places=4)

    def test_sequence(self):
        cents = ratio_to_cents([1, "5/4", 2, 4], places=1)
        self.assertIsInstance(cents, numpy.ndarray)
        self.assertEqual(list(cents), [0.0, 386.3, 1200.0, 2400.0])


class TestCentsToRatio(unittest.TestCase):
    def test_float(self):
        self.assertEqual(cents_to_float_ratio(1200), 2.0)
        self.assertEqual(cents_to_float_ratio(0), 1.0)
        self.assertAlmostEqual(cents_to_float_ratio(700), 1.498307, places=6)
        ratios = cents_to_float_ratio([0, 1200, 2400])
        self.assertEqual(list(ratios), [1.0, 2.0, 4.0])

    def test_fraction(self):
        self.assertEqual(cents_to_ratio(1200), Fraction(2))
        self.assertEqual(cents_to_ratio(-1200), Fraction(1, 2))
        self.assertEqual(cents_to_ratio(700, places=2), Fraction(3, 2))
        self.assertEqual(cents_to_ratio([0, 2400]), [Fraction(1), Fraction(4)])

    def test_inverse(self):
        for cents in [100, 386.3137, 702, 1000]:
            back = ratio_to_cents(cents_to_ratio(cents), places=None)
            self.assertAlmostEqual(back, cents, places=4)


if __name__ == '__main__':
    unittest.main()
