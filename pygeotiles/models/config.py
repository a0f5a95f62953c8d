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

from typing import Dict

from pydantic import BaseModel, Field


class FetchSettings(BaseModel):
    """ Pydantic model for how tileset documents are requested. """
    timeout: float = Field(
        30,
        gt=0,
        description="Seconds to wait for the server before giving up "
                    "on a tileset or tile matrix set document."
    )
    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra HTTP request headers, e.g. an API key. "
                    "An 'Accept: application/json' header is always sent."
    )
    verify: bool = Field(
        True,
        description="If False, TLS certificates are not verified."
    )

    @staticmethod
    def create(**fetch_config) -> 'FetchSettings':
        """ Returns a new FetchSettings instance from the `fetch`
        configuration section, ignoring unknown keys. """
        obj = {
            k: v for k, v in fetch_config.items()
            if k in FetchSettings.model_fields
        }
        return FetchSettings.model_validate(obj)

    @property
    def request_headers(self) -> dict:
        """ Gets the headers to send with every document request. """
        headers = {'Accept': 'application/json'}
        headers.update(self.headers)
        return headers
