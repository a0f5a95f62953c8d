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

import pytest

from pygeotiles.tilematrixset import SourceInfo

from tests.util import TILESET_URL, load_json


@pytest.fixture()
def web_mercator_quad():
    return load_json('WebMercatorQuad.json')


@pytest.fixture()
def world_crs84_quad():
    return load_json('WorldCRS84Quad.json')


@pytest.fixture()
def world_epsg4326_quad():
    return load_json('WorldEPSG4326Quad.json')


@pytest.fixture()
def bottom_left_quad():
    return load_json('BottomLeftQuad.json')


@pytest.fixture()
def tileset_map():
    return load_json('tileset-map.json')


@pytest.fixture()
def tileset_vector():
    return load_json('tileset-vector.json')


@pytest.fixture()
def tileset_limits():
    return load_json('tileset-limits.json')


@pytest.fixture()
def source_info():
    return SourceInfo(url=TILESET_URL)
