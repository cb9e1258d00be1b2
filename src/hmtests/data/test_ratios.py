"""Unit tests for harmonical.data.ratios module

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
from decimal import Decimal
from fractions import Fraction

from harmonical import settings
from harmonical.data.ratios import to_fraction, parse_ratio_string, \
                        ratio_key, ratio_to_string, fraction_gcd, euclid
from harmonical.data.errors import RatioError, ValidationError

class TestParseRatioString(unittest.TestCase):
    """
    Tests for reading ratios from strings.

    """
    def test_create_string(self):
        """
        Test creating a ratio from each of the string representations.

        """
        self.assertEqual(parse_ratio_string("1 1/4"), Fraction(5, 4))
        self.assertEqual(parse_ratio_string("5"), Fraction(5))
        self.assertEqual(parse_ratio_string("5/4"), Fraction(5, 4))
        self.assertEqual(parse_ratio_string("1.25"), Fraction(5, 4))
        self.assertEqual(parse_ratio_string("  3/2 "), Fraction(3, 2))
        self.assertEqual(parse_ratio_string("440 1/3"), Fraction(1321, 3))

    def test_negative(self):
        """ A leading - negates the whole mixed number """
        self.assertEqual(parse_ratio_string("-5 4/5"), Fraction(-29, 5))
        self.assertEqual(parse_ratio_string("-1/4"), Fraction(-1, 4))

    def test_invalid(self):
        for invalid in ["", "1/1/1", "5 5", "4\\5", "a", "X", "1 2/3/4",
                        "1 2 3", "inf", "nan", "1.5/2"]:
            self.assertRaises(RatioError, parse_ratio_string, invalid)

    def test_zero_denominator(self):
        self.assertRaises(RatioError, parse_ratio_string, "5/0")
        self.assertRaises(RatioError, parse_ratio_string, "1 1/0")

    def test_reparse_string(self):
        """
        Create some random fractions, get their canonical string and check
        this can be used to correctly reinstantiate the fraction.

        """
        from random import randint
        for i in range(50):
            f0 = Fraction(randint(1,100), randint(1,100))
            self.assertEqual(f0, parse_ratio_string(ratio_to_string(f0)))


class TestToFraction(unittest.TestCase):
    """
    Tests for L{harmonical.data.ratios.to_fraction}, which accepts all
    the different ratio inputs.

    """
    def test_int(self):
        self.assertEqual(to_fraction(9), Fraction(9))

    def test_fraction(self):
        f = Fraction(3, 2)
        self.assertIs(to_fraction(f), f)

    def test_simplify(self):
        self.assertEqual(to_fraction((18, 20)), Fraction(9, 10))
        self.assertEqual(to_fraction("18/20"), Fraction(9, 10))

    def test_float(self):
        """
        Floats are approximated, not converted exactly.

        """
        self.assertEqual(to_fraction(0.1), Fraction(1, 10))
        self.assertEqual(to_fraction(1.5), Fraction(3, 2))
        self.assertEqual(to_fraction(1.0/3.0), Fraction(1, 3))
        # Denominator is always kept within the limit
        approx = to_fraction(2 ** 0.5)
        self.assertLessEqual(approx.denominator, settings.RATIOS.MAX_DENOMINATOR)
        self.assertAlmostEqual(float(approx), 2 ** 0.5, places=12)

    def test_decimal(self):
        self.assertEqual(to_fraction(Decimal("1.125")), Fraction(9, 8))
        self.assertRaises(RatioError, to_fraction, Decimal("NaN"))

    def test_small_float(self):
        """
        Small floats keep their relative precision and never become 0.

        """
        self.assertEqual(to_fraction(1e-8), Fraction(1, 10**8))
        self.assertEqual(to_fraction(2e-8), Fraction(1, 5 * 10**7))
        self.assertEqual(to_fraction(-1e-8), Fraction(-1, 10**8))
        for value in [3e-8, 1.234e-12, 7e-300, 5e-324]:
            approx = to_fraction(value)
            self.assertGreater(approx, 0)
            self.assertAlmostEqual(float(approx) / value, 1.0, places=12)
        self.assertEqual(to_fraction(0.0), Fraction(0))

    def test_non_finite_float(self):
        self.assertRaises(RatioError, to_fraction, float("nan"))
        self.assertRaises(RatioError, to_fraction, float("inf"))

    def test_pair(self):
        self.assertEqual(to_fraction((107, 100)), Fraction(107, 100))
        self.assertEqual(to_fraction([3, -6]), Fraction(-1, 2))
        self.assertRaises(RatioError, to_fraction, (1, 0))
        self.assertRaises(RatioError, to_fraction, (1, 2, 3))
        self.assertRaises(RatioError, to_fraction, (1.5, 2))

    def test_mapping(self):
        self.assertEqual(to_fraction({'n' : 6, 'd' : 4}), Fraction(3, 2))
        self.assertEqual(to_fraction({'numerator' : 5, 'denominator' : 4}),
                         Fraction(5, 4))
        self.assertRaises(RatioError, to_fraction, {'x' : 1})

    def test_bad_types(self):
        self.assertRaises(TypeError, to_fraction, True)
        self.assertRaises(TypeError, to_fraction, None)
        self.assertRaises(TypeError, to_fraction, object())

    def test_ratio_error_is_validation_error(self):
        self.assertTrue(issubclass(RatioError, ValidationError))
        self.assertTrue(issubclass(RatioError, ValueError))


class TestCanonicalForms(unittest.TestCase):
    def test_key(self):
        """
        Equivalent inputs all get the same key.

        """
        for value in ["6/4", "3/2", "1 1/2", 1.5, (3, 2), (6, 4),
                      {'n' : 3, 'd' : 2}, Fraction(9, 6), Decimal("1.5")]:
            self.assertEqual(ratio_key(value), (3, 2))
        self.assertNotEqual(ratio_key("3/2"), ratio_key("4/3"))

    def test_string(self):
        self.assertEqual(ratio_to_string("6/4"), "3/2")
        self.assertEqual(ratio_to_string(4), "4")
        self.assertEqual(ratio_to_string((10, 5)), "2")

    def test_euclid(self):
        self.assertEqual(euclid(12, 18), 6)
        self.assertEqual(euclid(7, 5), 1)
        self.assertEqual(euclid(0, 5), 5)

    def test_gcd(self):
        self.assertEqual(fraction_gcd(100, 200), Fraction(100))
        self.assertEqual(fraction_gcd(Fraction(3, 2), Fraction(5, 4)),
                         Fraction(1, 4))
        self.assertEqual(fraction_gcd("1/2", "1/3"), Fraction(1, 6))
        self.assertEqual(fraction_gcd(5, 5), Fraction(5))


if __name__ == '__main__':
    unittest.main()
