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

"""Media types recognized for map (raster) and vector tiles"""

MAP_MEDIA_TYPES = frozenset([
    'image/png',
    'image/jpeg',
    'image/gif',
    'image/webp'
])

VECTOR_MEDIA_TYPES = frozenset([
    'application/vnd.mapbox-vector-tile',
    'application/geo+json'
])


def is_map_media_type(media_type: str) -> bool:
    """
    :param media_type: MIME type of a tile link

    :returns: `bool` of whether the type is a recognized raster tile format
    """

    return media_type in MAP_MEDIA_TYPES


def is_vector_media_type(media_type: str) -> bool:
    """
    :param media_type: MIME type of a tile link

    :returns: `bool` of whether the type is a recognized vector tile format
    """

    return media_type in VECTOR_MEDIA_TYPES
