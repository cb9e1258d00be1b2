"""Generic utilities used all over the place.

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

def group_pairs(inlist):
    """
    Generates each adjacent pair of items in the list: (0,1), (1,2),
    etc. Generates nothing if there are fewer than two items.

    """
    inlist = iter(inlist)
    try:
        last = next(inlist)
    except StopIteration:
        return
    for el in inlist:
        yield (last, el)
        last = el

def clamp(value, lower=0.0, upper=1.0):
    return max(lower, min(upper, value))
