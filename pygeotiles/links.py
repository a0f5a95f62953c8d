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

"""Selection of tile URL templates from tileset links"""

import logging
from typing import Iterable, List, Optional, Union
from urllib.parse import parse_qsl, quote, unquote, urlencode, urlsplit

from pygeotiles.error import MissingLinkError
from pygeotiles.mediatype import is_map_media_type, is_vector_media_type
from pygeotiles.models.tileset import LinkType

LOGGER = logging.getLogger(__name__)

# characters left alone by JavaScript's encodeURIComponent, besides
# the ones urllib.parse.quote never escapes
COMPONENT_SAFE_CHARS = "!'()*"

# link ranks, lower wins; within a rank the first link wins
RANK_PREFERRED = 0
RANK_KNOWN = 1
RANK_SUPPORTED = 2
RANK_LOOSE = 3


def append_collections_query_param(tile_url_template: str,
                                   collections: List[str]) -> str:
    """
    Append a `collections` query parameter to a tile URL template

    Per conformance class
    http://www.opengis.net/spec/ogcapi-tiles-1/1.0/conf/collections-selection
    commas within a collection identifier are percent-encoded while
    the commas separating identifiers are not.

    :param tile_url_template: tile URL template (may be relative)
    :param collections: collection identifiers to select

    :returns: `str` of tile URL template with the collections appended
    """

    if not collections:
        return tile_url_template

    if isinstance(collections, str):
        collections = [collections]

    url = urlsplit(tile_url_template)

    if 'collections' in url.path.split('/'):
        LOGGER.error('The "collections" query parameter cannot be added '
                     'to collection endpoints')
        return tile_url_template

    encoded_collections = ','.join(
        quote(c, safe=COMPONENT_SAFE_CHARS) for c in collections)

    params = parse_qsl(url.query, keep_blank_values=True)
    params.append(('collections', encoded_collections))

    base_url = tile_url_template.split('?')[0]
    query_params = unquote(urlencode(params))

    return f'{base_url}?{query_params}'


def _as_link(link: Union[LinkType, dict]) -> LinkType:
    if isinstance(link, LinkType):
        return link
    return LinkType.model_validate(link)


def _best_ranked(ranked: dict) -> str:
    """
    Pick the href of the lowest rank found

    :param ranked: `dict` of rank to href

    :returns: `str` of href
    """

    if not ranked:
        msg = 'Could not find "item" link'
        LOGGER.error(msg)
        raise MissingLinkError(msg)

    return ranked[min(ranked)]


def get_map_tile_url_template(links: Iterable[Union[LinkType, dict]],
                              media_type: Optional[str] = None,
                              collections: Optional[List[str]] = None
                              ) -> str:
    """
    Select the URL template of map (raster) tiles

    Among `item` links, in order of preference: the preferred media
    type, a recognized raster media type, any `image/*` media type.

    :param links: tileset links
    :param media_type: preferred media type
    :param collections: collections to append as query parameter

    :returns: `str` of tile URL template
    """

    ranked = {}

    for link in map(_as_link, links):
        link_type = link.type_
        if link.rel != 'item' or not link_type:
            continue

        if media_type and link_type == media_type:
            ranked.setdefault(RANK_PREFERRED, link.href)
        elif is_map_media_type(link_type):
            ranked.setdefault(RANK_KNOWN, link.href)
        elif link_type.startswith('image/'):
            ranked.setdefault(RANK_LOOSE, link.href)

    tile_url_template = _best_ranked(ranked)
    LOGGER.debug(f'Map tile URL template: {tile_url_template}')

    if collections:
        tile_url_template = append_collections_query_param(
            tile_url_template, collections)

    return tile_url_template


def get_vector_tile_url_template(
        links: Iterable[Union[LinkType, dict]],
        media_type: Optional[str] = None,
        supported_media_types: Optional[List[str]] = None,
        collections: Optional[List[str]] = None) -> str:
    """
    Select the URL template of vector tiles

    In order of preference: an `item` link of the preferred media type,
    an `item` link of a recognized vector media type, the first of the
    supported media types offered by any link.

    :param links: tileset links
    :param media_type: preferred media type
    :param supported_media_types: media types the tile parser can read,
                                  most preferred first
    :param collections: collections to append as query parameter

    :returns: `str` of tile URL template
    """

    ranked = {}
    # lookup of URL by media type, across all link relations
    href_lookup = {}

    for link in map(_as_link, links):
        link_type = link.type_
        if not link_type:
            continue

        href_lookup[link_type] = link.href

        if link.rel != 'item':
            continue

        if media_type and link_type == media_type:
            ranked.setdefault(RANK_PREFERRED, link.href)
        elif is_vector_media_type(link_type):
            ranked.setdefault(RANK_KNOWN, link.href)

    for supported_media_type in supported_media_types or []:
        if href_lookup.get(supported_media_type):
            ranked[RANK_SUPPORTED] = href_lookup[supported_media_type]
            break

    tile_url_template = _best_ranked(ranked)
    LOGGER.debug(f'Vector tile URL template: {tile_url_template}')

    if collections:
        tile_url_template = append_collections_query_param(
            tile_url_template, collections)

    return tile_url_template
