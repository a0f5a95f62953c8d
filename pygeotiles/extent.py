# =================================================================
#
# Authors: pygeotiles contributors
#
# Copyright (c) 2026 pygeotiles contributors
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use,
# copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,
# WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
# =================================================================

"""Extent arithmetic over [minx, miny, maxx, maxy] lists"""

import math
from typing import List, Optional


def create_infinite() -> List[float]:
    """
    :returns: `list` of the extent covering the whole plane, the identity
              of `get_intersection`
    """

    return [-math.inf, -math.inf, math.inf, math.inf]


def create_empty() -> List[float]:
    """
    :returns: `list` of the extent covering nothing
    """

    return [math.inf, math.inf, -math.inf, -math.inf]


def is_empty(extent: List[float]) -> bool:
    return extent[2] < extent[0] or extent[3] < extent[1]


def intersects(extent1: List[float], extent2: List[float]) -> bool:
    return (extent1[0] <= extent2[2] and extent1[2] >= extent2[0] and
            extent1[1] <= extent2[3] and extent1[3] >= extent2[1])


def get_intersection(extent1: List[float], extent2: List[float],
                     dest: Optional[List[float]] = None) -> List[float]:
    """
    Get the intersection of two extents

    :param extent1: first extent
    :param extent2: second extent
    :param dest: optional `list` to write the result into

    :returns: `list` of the intersection, empty if they do not intersect
    """

    if dest is None:
        dest = create_empty()

    if intersects(extent1, extent2):
        dest[:] = [
            max(extent1[0], extent2[0]),
            max(extent1[1], extent2[1]),
            min(extent1[2], extent2[2]),
            min(extent1[3], extent2[3])
        ]
    else:
        dest[:] = create_empty()

    return dest
