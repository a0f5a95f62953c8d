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

"""CRS resolution and the projection registry"""

import logging
from typing import Dict, Optional, Union

import pyproj
from pyproj.exceptions import CRSError

LOGGER = logging.getLogger(__name__)

DEFAULT_AXIS_ORIENTATION = 'enu'

_REGISTRY: Dict[str, 'Projection'] = {}


def get_crs(crs: Union[str, pyproj.CRS]) -> pyproj.CRS:
    """
    Get a `pyproj.CRS` instance from a CRS.

    :param crs: Uniform resource identifier of the coordinate
                reference system. In accordance with
                https://docs.ogc.org/pol/09-048r5.html#_naming_rule
                URIs can take either the form of a URL or a URN.
                Any other string is handed to pyproj as user input
                (e.g. `EPSG:3857`), `pyproj.CRS` objects pass through.
    :raises `CRSError`: Error raised if no CRS could be identified from the
        URI.

    :returns: `pyproj.CRS` instance matching the input URI.
    """

    if isinstance(crs, pyproj.CRS):
        return crs

    uri = str(crs)

    if not uri.startswith(('http://', 'https://', 'urn:')):
        try:
            return pyproj.CRS.from_user_input(uri)
        except CRSError:
            msg = f'CRS could not be identified from {uri!r}'
            LOGGER.debug(msg)
            raise CRSError(msg)

    # normalize the input `uri` to a URL first
    url = uri.replace(
        'urn:ogc:def:crs', 'http://www.opengis.net/def/crs'
    ).replace(':', '/')
    try:
        authority, code = url.rsplit('/', maxsplit=3)[1::2]
        crs = pyproj.CRS.from_authority(authority, code)
    except ValueError:
        msg = (
            f'CRS could not be identified from URI {uri!r}. CRS URIs must '
            'follow one of two formats: '
            '"http://www.opengis.net/def/crs/{authority}/{version}/{code}" or '
            '"urn:ogc:def:crs:{authority}:{version}:{code}" '
            '(see https://docs.opengeospatial.org/is/18-058r1/18-058r1.html#crs-overview).'  # noqa
        )
        LOGGER.debug(msg)
        raise CRSError(msg)
    except CRSError:
        msg = f'CRS could not be identified from URI {uri!r}'
        LOGGER.debug(msg)
        raise CRSError(msg)

    return crs


class Projection:
    """A CRS registered under the identifier it was looked up by"""

    def __init__(self, code: str, crs: pyproj.CRS):
        """
        Initialize object

        :param code: identifier of the projection (URI, URN or code)
        :param crs: `pyproj.CRS` of the projection

        :returns: pygeotiles.crs.Projection
        """

        self.code = code
        self.crs = crs

    def __repr__(self):
        return f'<Projection> {self.code}'

    def __eq__(self, other):
        if not isinstance(other, Projection):
            return NotImplemented
        return self.crs == other.crs

    def __hash__(self):
        return hash(self.crs.to_wkt())

    def axis_orientation(self) -> str:
        """
        Axis orientation code, one letter per axis direction

        :returns: `str` such as 'enu' (easting first) or 'neu'
        """

        directions = [axis.direction for axis in self.crs.axis_info]
        if not directions:
            return DEFAULT_AXIS_ORIENTATION

        return ''.join(direction[0].lower() for direction in directions)

    @property
    def units(self) -> Optional[str]:
        if not self.crs.axis_info:
            return None
        return self.crs.axis_info[0].unit_name


def add_projection(projection: Projection) -> None:
    """
    Register a projection under its code

    :param projection: `Projection` to register

    :returns: None
    """

    LOGGER.debug(f'Registering projection {projection.code}')
    _REGISTRY[projection.code] = projection


def get_projection(
    identifier: Union[str, pyproj.CRS, Projection]
) -> Optional[Projection]:
    """
    Look up a projection

    :param identifier: projection code, CRS URI/URN, `pyproj.CRS`
                       or `Projection`

    :returns: `Projection`, or `None` if the CRS is unknown
    """

    if isinstance(identifier, Projection):
        return identifier

    if isinstance(identifier, pyproj.CRS):
        return Projection(identifier.srs, identifier)

    if identifier in _REGISTRY:
        return _REGISTRY[identifier]

    try:
        crs = get_crs(identifier)
    except CRSError as err:
        LOGGER.debug(err)
        return None

    projection = Projection(identifier, crs)
    add_projection(projection)

    return projection
