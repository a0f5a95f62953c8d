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

"""Resolution of OGC API tilesets into a tile grid and tile URLs"""

import asyncio
import logging
import math
from typing import Awaitable, Callable, Optional, Union

import click
from pydantic import ValidationError

from pygeotiles.config import get_config
from pygeotiles.error import (MissingLinkError, TileSetGenericError,
                              TileSetInvalidError, UnsupportedDataTypeError)
from pygeotiles.fetch import get_json_async
from pygeotiles.links import (get_map_tile_url_template,
                              get_vector_tile_url_template)
from pygeotiles.log import setup_logger
from pygeotiles.models.tileset import DataTypeEnum, TileSetMetadata
from pygeotiles.tilematrixset import (SourceInfo, TileSetInfo,
                                      parse_tile_matrix_set)
from pygeotiles.util import is_url, resolve_url, to_json

LOGGER = logging.getLogger(__name__)

TILING_SCHEME_REL = 'http://www.opengis.net/def/rel/ogc/1.0/tiling-scheme'

FetchJSON = Callable[[str], Awaitable[dict]]

__all__ = ['SourceInfo', 'TileSetInfo', 'TILING_SCHEME_REL',
           'get_tileset_info', 'parse_tileset_metadata']


def get_tile_url_template(source_info: SourceInfo,
                          tileset: TileSetMetadata) -> str:
    """
    Select the tile URL template matching the tileset data type

    :param source_info: `SourceInfo`
    :param tileset: `TileSetMetadata`

    :raises `UnsupportedDataTypeError`: if the data type is neither
        map nor vector

    :returns: `str` of tile URL template
    """

    if tileset.dataType == DataTypeEnum.MAP.value:
        return get_map_tile_url_template(
            tileset.links, source_info.media_type, source_info.collections)

    if tileset.dataType == DataTypeEnum.VECTOR.value:
        return get_vector_tile_url_template(
            tileset.links, source_info.media_type,
            source_info.supported_media_types, source_info.collections)

    msg = UnsupportedDataTypeError.default_msg
    LOGGER.error(f'{msg}, got {tileset.dataType!r}')
    raise UnsupportedDataTypeError(msg)


async def parse_tileset_metadata(
    source_info: SourceInfo, tileset: Union[TileSetMetadata, dict],
    fetch_json: Optional[FetchJSON] = None
) -> TileSetInfo:
    """
    Resolve a tileset document

    The tile matrix set is taken from the document when inlined, or
    else fetched from its tiling scheme link.

    :param source_info: `SourceInfo`
    :param tileset: tileset document
    :param fetch_json: coroutine function fetching a JSON document by URL
                       (default `pygeotiles.fetch.get_json_async`)

    :returns: `TileSetInfo`
    """

    if fetch_json is None:
        fetch_json = get_json_async

    if not isinstance(tileset, TileSetMetadata):
        try:
            tileset = TileSetMetadata.model_validate(tileset)
        except ValidationError as err:
            msg = f'Invalid tileset {source_info.url}: {err}'
            LOGGER.error(msg)
            raise TileSetInvalidError(msg)

    tile_url_template = get_tile_url_template(source_info, tileset)

    if tileset.tileMatrixSet is not None:
        LOGGER.debug('Using inline tile matrix set')
        return parse_tile_matrix_set(source_info, tileset.tileMatrixSet,
                                     tile_url_template,
                                     tileset.tileMatrixSetLimits)

    tiling_scheme = next((link for link in tileset.links
                          if link.rel == TILING_SCHEME_REL), None)

    if tiling_scheme is None:
        msg = ('Expected tileset to have a tiling scheme link '
               'or a tileMatrixSet')
        LOGGER.error(msg)
        raise MissingLinkError(msg)

    tile_matrix_set_url = resolve_url(source_info.url, tiling_scheme.href)
    LOGGER.debug(f'Fetching tile matrix set {tile_matrix_set_url}')
    tile_matrix_set = await fetch_json(tile_matrix_set_url)

    return parse_tile_matrix_set(source_info, tile_matrix_set,
                                 tile_url_template,
                                 tileset.tileMatrixSetLimits)


async def get_tileset_info(source_info: SourceInfo,
                           fetch_json: Optional[FetchJSON] = None
                           ) -> TileSetInfo:
    """
    Fetch and resolve the tileset at `source_info.url`

    :param source_info: `SourceInfo`
    :param fetch_json: coroutine function fetching a JSON document by URL
                       (default `pygeotiles.fetch.get_json_async`)

    :returns: `TileSetInfo`
    """

    if fetch_json is None:
        fetch_json = get_json_async

    tileset = await fetch_json(source_info.url)

    return await parse_tileset_metadata(source_info, tileset, fetch_json)


def describe_tileset_info(tileset_info: TileSetInfo) -> dict:
    """
    Summarize a resolved tileset

    :param tileset_info: `TileSetInfo`

    :returns: `dict` of URL template, projection and tile grid levels
    """

    grid = tileset_info.grid
    extent = grid.get_extent()
    if extent is not None and not all(math.isfinite(v) for v in extent):
        extent = None

    levels = []
    for z in range(grid.get_min_zoom(), grid.get_max_zoom() + 1):
        tile_range = grid.get_full_tile_range(z)
        if tile_range is None:
            first_tile = None
        else:
            first_tile = tileset_info.url_function(
                (z, tile_range.min_x, tile_range.min_y))

        levels.append({
            'z': z,
            'tileMatrix': tileset_info.url_function.matrix_ids[z],
            'resolution': grid.get_resolution(z),
            'origin': grid.get_origin(z),
            'size': grid.get_size(z),
            'tileSize': grid.get_tile_size(z),
            'tileRange': tile_range._asdict() if tile_range else None,
            'firstTile': first_tile
        })

    return {
        'urlTemplate': tileset_info.url_template,
        'projection': tileset_info.projection.code,
        'axisOrientation': tileset_info.projection.axis_orientation(),
        'extent': extent,
        'levels': levels
    }


@click.group()
def tileset():
    """Tileset resolution"""
    pass


@click.command()
@click.pass_context
@click.argument('url')
@click.option('--media-type', '-m', help='preferred tile media type')
@click.option('--supported-media-type', '-s', 'supported_media_types',
              multiple=True, help='media type the client can read '
              '(repeatable, most preferred first)')
@click.option('--collection', '-c', 'collections', multiple=True,
              help='collection to select (repeatable)')
@click.option('--projection', '-p', help='projection overriding the '
              'tile matrix set CRS')
@click.option('--pretty', is_flag=True, help='indent JSON output')
def info(ctx, url, media_type, supported_media_types, collections,
         projection, pretty):
    """Resolve a tileset and print its tile grid"""

    setup_logger(get_config()['logging'])

    if not is_url(url):
        raise click.ClickException(f'Not an absolute URL: {url}')

    source_info = SourceInfo(
        url=url,
        media_type=media_type,
        supported_media_types=list(supported_media_types) or None,
        projection=projection,
        collections=list(collections) or None
    )

    try:
        tileset_info = asyncio.run(get_tileset_info(source_info))
    except TileSetGenericError as err:
        raise click.ClickException(str(err))

    click.echo(to_json(describe_tileset_info(tileset_info), pretty=pretty))


tileset.add_command(info)
