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

from unittest import mock

import pytest
import requests

from pygeotiles.error import TileSetFetchError
from pygeotiles.fetch import get_fetch_settings, get_json, get_json_async
from pygeotiles.models.config import FetchSettings

URL = 'https://maps.example.org/ogcapi/tileMatrixSets/WebMercatorQuad'


@pytest.fixture()
def session():
    with mock.patch('pygeotiles.fetch.requests.Session') as mock_session:
        session_ = mock_session.return_value.__enter__.return_value
        session_.headers = {}
        yield session_


def test_get_json(session):
    session.get.return_value.json.return_value = {'id': 'WebMercatorQuad'}

    settings = FetchSettings(timeout=5, headers={'X-API-Key': 'secret'},
                             verify=False)

    assert get_json(URL, settings) == {'id': 'WebMercatorQuad'}

    session.get.assert_called_once_with(URL, timeout=5, verify=False)
    session.get.return_value.raise_for_status.assert_called_once()
    assert session.headers == {
        'Accept': 'application/json',
        'X-API-Key': 'secret'
    }


def test_get_json_default_settings(session, monkeypatch):
    monkeypatch.delenv('PYGEOTILES_CONFIG', raising=False)
    session.get.return_value.json.return_value = {}

    get_json(URL)

    session.get.assert_called_once_with(URL, timeout=30, verify=True)


def test_get_json_http_error(session):
    session.get.return_value.raise_for_status.side_effect = \
        requests.exceptions.HTTPError('404 Client Error: Not Found')

    with pytest.raises(TileSetFetchError) as err:
        get_json(URL)

    assert '404 Client Error' in str(err.value)


def test_get_json_connection_error(session):
    session.get.side_effect = requests.exceptions.ConnectionError('refused')

    with pytest.raises(TileSetFetchError):
        get_json(URL)


def test_get_json_invalid_json(session):
    session.get.return_value.json.side_effect = ValueError('Expecting value')

    with pytest.raises(TileSetFetchError) as err:
        get_json(URL)

    assert str(err.value).startswith(f'Invalid JSON from {URL}')


@pytest.mark.asyncio
async def test_get_json_async(session):
    session.get.return_value.json.return_value = {'dataType': 'vector'}

    assert await get_json_async(URL) == {'dataType': 'vector'}


def test_get_fetch_settings(monkeypatch, tmp_path):
    config_file = tmp_path / 'pygeotiles.yml'
    config_file.write_text(
        'logging:\n'
        '    level: INFO\n'
        'fetch:\n'
        '    timeout: 2\n'
        '    retries: 3\n'
    )
    monkeypatch.setenv('PYGEOTILES_CONFIG', str(config_file))

    settings = get_fetch_settings()

    assert settings.timeout == 2
    assert settings.verify is True
    assert settings.request_headers == {'Accept': 'application/json'}
