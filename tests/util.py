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

import json
import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)

THISDIR = Path(__file__).parent.resolve()

TILESET_URL = \
    'https://maps.example.org/ogcapi/collections/countries/tiles/WebMercatorQuad'  # noqa
WEBMERCATORQUAD_URL = \
    'https://maps.example.org/ogcapi/tileMatrixSets/WebMercatorQuad'


def get_test_file_path(filename: str) -> str:
    """helper function to open test file safely"""

    return str(THISDIR / filename)


def load_json(filename: str) -> dict:
    """helper function to read a JSON document of tests/data"""

    with open(get_test_file_path(f'data/{filename}'), encoding='utf8') as fh:
        return json.load(fh)


class FakeFetch:
    """
    Stands in for `pygeotiles.fetch.get_json_async`, serving documents
    from a dict of URL to document and recording the requested URLs
    """

    def __init__(self, documents: dict):
        self.documents = documents
        self.requested = []

    async def __call__(self, url: str) -> dict:
        self.requested.append(url)
        try:
            return self.documents[url]
        except KeyError:
            raise AssertionError(f'Unexpected request to {url}')
