"""Unit tests for harmonical.utils.base module

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

from harmonical.utils.base import group_pairs, clamp

class TestGroupPairs(unittest.TestCase):
    def test_pairs(self):
        self.assertEqual(list(group_pairs([1, 2, 3, 4])),
                         [(1, 2), (2, 3), (3, 4)])

    def test_short(self):
        self.assertEqual(list(group_pairs([])), [])
        self.assertEqual(list(group_pairs([1])), [])

    def test_iterator(self):
        """ Works on any iterable, not just lists """
        self.assertEqual(list(group_pairs(iter("abc"))), [("a", "b"), ("b", "c")])


class TestClamp(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp(0.5), 0.5)
        self.assertEqual(clamp(1.5), 1.0)
        self.assertEqual(clamp(-2), 0.0)
        self.assertEqual(clamp(7, 2, 5), 5)


if __name__ == '__main__':
    unittest.main()
