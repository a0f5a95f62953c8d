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

"""Retrieval of tileset and tile matrix set documents"""

import asyncio
import logging
from typing import Optional

import requests

from pygeotiles.config import get_config
from pygeotiles.error import TileSetFetchError
from pygeotiles.models.config import FetchSettings

LOGGER = logging.getLogger(__name__)


def get_fetch_settings() -> FetchSettings:
    """
    :returns: `FetchSettings` from the `fetch` configuration section
    """

    return FetchSettings.create(**get_config().get('fetch', {}))


def get_json(url: str, settings: Optional[FetchSettings] = None) -> dict:
    """
    Fetch and decode a JSON document

    :param url: URL of the document
    :param settings: `FetchSettings` (default from configuration)

    :raises `TileSetFetchError`: if the request fails, the server answers
        with an error status or the response is not JSON

    :returns: `dict` of JSON document
    """

    if settings is None:
        settings = get_fetch_settings()

    LOGGER.debug(f'Fetching {url}')

    try:
        with requests.Session() as session:
            session.headers.update(settings.request_headers)
            response = session.get(url, timeout=settings.timeout,
                                   verify=settings.verify)
            response.raise_for_status()
            return response.json()
    except requests.exceptions.RequestException as err:
        msg = f'Error fetching {url}: {err}'
        LOGGER.error(msg)
        raise TileSetFetchError(msg)
    except ValueError as err:
        msg = f'Invalid JSON from {url}: {err}'
        LOGGER.error(msg)
        raise TileSetFetchError(msg)


async def get_json_async(url: str,
                         settings: Optional[FetchSettings] = None) -> dict:
    """
    Fetch and decode a JSON document without blocking the event loop

    :param url: URL of the document
    :param settings: `FetchSettings` (default from configuration)

    :returns: `dict` of JSON document
    """

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, get_json, url, settings)
