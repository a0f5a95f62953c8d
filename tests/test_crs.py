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

from contextlib import nullcontext as does_not_raise

import pyproj
from pyproj.exceptions import CRSError
import pytest

from pygeotiles import crs


@pytest.mark.parametrize('uri, expected_raise, expected', [
    pytest.param('http://www.opengis.net/not/a/valid/crs/uri', pytest.raises(CRSError), None),  # noqa
    pytest.param('http://www.opengis.net/def/crs/EPSG/0/0', pytest.raises(CRSError), None),  # noqa
    pytest.param('http://www.opengis.net/def/crs/OGC/1.3/CRS84', does_not_raise(), 'OGC:CRS84'),  # noqa
    pytest.param('http://www.opengis.net/def/crs/EPSG/0/3857', does_not_raise(), 'EPSG:3857'),  # noqa
    pytest.param('http://www.opengis.net/def/crs/EPSG/0/4326', does_not_raise(), 'EPSG:4326'),  # noqa
    pytest.param('urn:ogc:def:crs:not:a:valid:crs:urn', pytest.raises(CRSError), None),  # noqa
    pytest.param('urn:ogc:def:crs:OGC::CRS84', does_not_raise(), 'OGC:CRS84'),
    pytest.param('urn:ogc:def:crs:EPSG::3857', does_not_raise(), 'EPSG:3857'),
    pytest.param('urn:ogc:def:crs:epsg:0:4326', does_not_raise(), 'EPSG:4326'),  # noqa
    pytest.param('EPSG:3857', does_not_raise(), 'EPSG:3857'),
    pytest.param('EPSG:0', pytest.raises(CRSError), None),
])
def test_get_crs(uri, expected_raise, expected):
    with expected_raise:
        crs_ = crs.get_crs(uri)
        assert crs_.srs.upper() == expected


def test_get_crs_passthrough():
    crs_ = pyproj.CRS.from_epsg(3857)

    assert crs.get_crs(crs_) is crs_


@pytest.mark.parametrize('identifier, orientation', [
    ('http://www.opengis.net/def/crs/EPSG/0/3857', 'en'),
    ('http://www.opengis.net/def/crs/OGC/1.3/CRS84', 'en'),
    ('http://www.opengis.net/def/crs/EPSG/0/4326', 'ne'),
    ('EPSG:4979', 'neu')
])
def test_projection_axis_orientation(identifier, orientation):
    projection = crs.get_projection(identifier)

    assert projection.axis_orientation() == orientation


def test_get_projection():
    projection = crs.get_projection(
        'http://www.opengis.net/def/crs/EPSG/0/3857')

    assert projection.code == 'http://www.opengis.net/def/crs/EPSG/0/3857'
    assert projection.units == 'metre'
    assert repr(projection) == \
        '<Projection> http://www.opengis.net/def/crs/EPSG/0/3857'

    # registered on first lookup
    assert crs.get_projection(
        'http://www.opengis.net/def/crs/EPSG/0/3857') is projection

    assert crs.get_projection(projection) is projection
    assert crs.get_projection('urn:ogc:def:crs:EPSG::3857') == projection
    assert crs.get_projection(pyproj.CRS.from_epsg(3857)) == projection
    assert crs.get_projection('EPSG:4326') != projection


def test_get_projection_unknown():
    assert crs.get_projection('http://www.opengis.net/def/crs/EPSG/0/0') \
        is None
    assert crs.get_projection('not a crs') is None


def test_add_projection():
    projection = crs.Projection('my-grid', pyproj.CRS.from_epsg(2056))
    crs.add_projection(projection)

    assert crs.get_projection('my-grid') is projection
    assert projection.axis_orientation() == 'en'
