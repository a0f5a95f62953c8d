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

"""Exceptions raised while resolving a tileset"""


class TileSetGenericError(Exception):
    """Exception class where error messages can be defined in
    custom error subclasses, so callers can tell apart why a
    tileset could not be resolved.
    """

    default_msg = 'Unknown error'

    def __init__(self, msg=None, *args, user_msg=None) -> None:
        # if only a user_msg is provided, use it as msg
        if user_msg and not msg:
            msg = user_msg
        super().__init__(msg, *args)
        self.user_msg = user_msg

    @property
    def message(self):
        return self.user_msg if self.user_msg else self.default_msg


class UnsupportedCRSError(TileSetGenericError):
    """tile matrix set CRS cannot be resolved to a projection"""
    default_msg = 'Unsupported CRS'


class UnsupportedDataTypeError(TileSetGenericError):
    """tileset data type is neither map nor vector"""
    default_msg = 'Expected tileset data type to be "map" or "vector"'


class MissingLinkError(TileSetGenericError):
    """tileset lacks a link required to proceed"""
    default_msg = 'Required link not found'


class TileSetInvalidError(TileSetGenericError):
    """tileset or tile matrix set document cannot be read"""
    default_msg = 'Invalid tileset document'


class TileSetFetchError(TileSetGenericError):
    """network or decoding error while fetching a document"""
    default_msg = 'Document could not be fetched (check logs)'
