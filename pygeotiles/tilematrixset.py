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

"""Tile matrix set parsing into a tile grid and a tile URL function"""

from dataclasses import dataclass, field
import json
import logging
import re
from types import MappingProxyType
from typing import (Any, Callable, Dict, List, Mapping, NamedTuple,
                    Optional, Sequence, Tuple, Union)

from pydantic import BaseModel, ValidationError
import pyproj

from pygeotiles.crs import Projection, get_projection
from pygeotiles.error import TileSetInvalidError, UnsupportedCRSError
from pygeotiles.extent import create_infinite, get_intersection, is_empty
from pygeotiles.models.tileset import (
    CrsUriType, TileMatrixLimitsType, TileMatrixSetType, TileMatrixType)
from pygeotiles.tilegrid import TileGrid
from pygeotiles.util import resolve_url

LOGGER = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r'\{(\w+?)\}')

EASTING_AXIS = re.compile(r'E|X|Lon', re.IGNORECASE)
NORTHING_AXIS = re.compile(r'N|Y|Lat', re.IGNORECASE)


class TileAddress(NamedTuple):
    """Tile as addressed on the server, rows counted from the origin"""
    tile_matrix: str
    tile_col: int
    tile_row: int


TILE_PLACEHOLDERS: Mapping[str, Callable[[TileAddress], Any]] = \
    MappingProxyType({
        'tileMatrix': lambda tile: tile.tile_matrix,
        'tileCol': lambda tile: tile.tile_col,
        'tileRow': lambda tile: tile.tile_row,
        'z': lambda tile: tile.tile_matrix,
        'x': lambda tile: tile.tile_col,
        'y': lambda tile: tile.tile_row
    })


@dataclass(frozen=True)
class SourceInfo:
    """What the caller knows and wants from a tileset"""
    # tileset document URL, also the base of relative tile URLs
    url: str
    # preferred tile media type
    media_type: Optional[str] = None
    # media types the tile parser can read, most preferred first
    supported_media_types: Optional[List[str]] = None
    # overrides the tile matrix set CRS
    projection: Optional[Union[str, Projection, pyproj.CRS]] = None
    # static values for URL template placeholders
    context: Optional[Dict[str, Any]] = None
    # collections to select with the `collections` query parameter
    collections: Optional[List[str]] = None


@dataclass(frozen=True, eq=False)
class TileUrlFunction:
    """
    Tile coordinate to tile URL

    Owns everything needed to build tile URLs; calling it with a
    (z, x, y) tile coordinate returns the URL of that tile, or `None`
    when there is no such tile.
    """

    template: str
    base_url: str
    matrix_ids: Tuple[str, ...]
    matrices: Mapping[str, TileMatrixType]
    limits: Optional[Mapping[str, TileMatrixLimitsType]] = None
    context: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        unknown = sorted(set(PLACEHOLDER.findall(self.template))
                         - set(TILE_PLACEHOLDERS) - set(self.context))
        if unknown:
            LOGGER.warning(f'Placeholders {unknown} of {self.template} '
                           'have no value and will be left empty')

    def __call__(self, tile_coord: Optional[Sequence[int]],
                 pixel_ratio: Optional[float] = None,
                 projection: Optional[Projection] = None) -> Optional[str]:
        return get_tile_url(self, tile_coord)


@dataclass(frozen=True)
class TileSetInfo:
    """Everything needed to request the tiles of a tileset"""
    grid: TileGrid
    projection: Projection
    url_template: str
    url_function: TileUrlFunction


def _as_model(model: type, value: Union[BaseModel, dict]) -> BaseModel:
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(value)
    except ValidationError as err:
        msg = f'Invalid {model.__name__}: {err}'
        LOGGER.error(msg)
        raise TileSetInvalidError(msg)


def _crs_to_json(crs: Union[str, CrsUriType, dict]) -> str:
    if isinstance(crs, BaseModel):
        crs = crs.model_dump()
    return json.dumps(crs)


def expand_template(template: str, tile: TileAddress,
                    context: Optional[Mapping[str, Any]] = None) -> str:
    """
    Substitute the `{name}` placeholders of a tile URL template

    Tile placeholders are `tileMatrix`, `tileCol`, `tileRow` and their
    aliases `z`, `x`, `y`. Context values take precedence over them;
    any other placeholder is replaced by an empty string.

    :param template: tile URL template
    :param tile: `TileAddress` of the tile
    :param context: static placeholder values

    :returns: `str` of expanded URL
    """

    values = {name: accessor(tile)
              for name, accessor in TILE_PLACEHOLDERS.items()}
    values.update(context or {})

    def substitute(match):
        value = values.get(match.group(1))
        return '' if value is None else str(value)

    return PLACEHOLDER.sub(substitute, template)


def get_tile_url(url_function: TileUrlFunction,
                 tile_coord: Optional[Sequence[int]]) -> Optional[str]:
    """
    Build the URL of a tile

    :param url_function: `TileUrlFunction` holding the tile matrix set
    :param tile_coord: (z, x, y) tile coordinate, rows growing downward

    :returns: `str` of absolute tile URL, or `None` for no tile
    """

    if tile_coord is None:
        return None

    z, col, row = tile_coord

    if not 0 <= z < len(url_function.matrix_ids):
        return None

    matrix_id = url_function.matrix_ids[z]
    matrix = url_function.matrices[matrix_id]

    tile_row = -row - 1 if matrix.upside_down else row

    if url_function.limits is not None:
        limit = url_function.limits.get(matrix_id)
        if limit is None or not limit.contains(col, tile_row):
            return None

    url = expand_template(url_function.template,
                          TileAddress(matrix_id, col, tile_row),
                          url_function.context)

    return resolve_url(url_function.base_url, url)


def get_tile_matrix_set_projection(
    source_info: SourceInfo, tile_matrix_set: TileMatrixSetType
) -> Projection:
    """
    Resolve the projection of a tile matrix set

    :param source_info: `SourceInfo`, whose projection wins if set
    :param tile_matrix_set: `TileMatrixSetType`

    :raises `UnsupportedCRSError`: if the CRS is not a URI or cannot
        be resolved

    :returns: `Projection`
    """

    if source_info.projection is not None:
        projection = get_projection(source_info.projection)
        if projection is None:
            msg = f'Unsupported projection: {source_info.projection!r}'
            LOGGER.error(msg)
            raise UnsupportedCRSError(msg)
        return projection

    crs = tile_matrix_set.crs
    projection = None

    if isinstance(crs, str):
        projection = get_projection(crs)
    elif isinstance(crs, CrsUriType):
        projection = get_projection(crs.uri)

    if projection is None:
        msg = f'Unsupported CRS: {_crs_to_json(crs)}'
        LOGGER.error(msg)
        raise UnsupportedCRSError(msg)

    return projection


def normalize_axis_name(name: str) -> str:
    """
    :param name: axis abbreviation such as `Lon`, `Lat`, `E`, `N`, `X`, `Y`

    :returns: `str` starting with `e` for easting or `n` for northing axes
    """

    name = EASTING_AXIS.sub('e', name, count=1)
    return NORTHING_AXIS.sub('n', name, count=1)


def get_axis_orientation(tile_matrix_set: TileMatrixSetType,
                         projection: Projection) -> str:
    """
    :param tile_matrix_set: `TileMatrixSetType`
    :param projection: `Projection` of the tile matrix set

    :returns: `str` axis orientation, e.g. `en` or `ne`
    """

    if tile_matrix_set.orderedAxes:
        return ''.join(normalize_axis_name(axis)
                       for axis in tile_matrix_set.orderedAxes[:2])

    return projection.axis_orientation()


def get_limited_extent(origin: Sequence[float], matrix: TileMatrixType,
                       limit: TileMatrixLimitsType) -> List[float]:
    """
    Map unit extent of the tiles within a tile matrix limit

    :param origin: (x, y) origin of the tile matrix, easting first
    :param matrix: `TileMatrixType`
    :param limit: `TileMatrixLimitsType` of the matrix

    :returns: `list` of [minx, miny, maxx, maxy]
    """

    tile_map_width = matrix.cellSize * matrix.tileWidth
    min_x = origin[0] + limit.minTileCol * tile_map_width
    max_x = origin[0] + (limit.maxTileCol + 1) * tile_map_width

    tile_map_height = matrix.cellSize * matrix.tileHeight

    if matrix.upside_down:
        min_y = origin[1] + limit.minTileRow * tile_map_height
        max_y = origin[1] + (limit.maxTileRow + 1) * tile_map_height
    else:
        min_y = origin[1] - (limit.maxTileRow + 1) * tile_map_height
        max_y = origin[1] - limit.minTileRow * tile_map_height

    return [min_x, min_y, max_x, max_y]


def parse_tile_matrix_set(
    source_info: SourceInfo,
    tile_matrix_set: Union[TileMatrixSetType, dict],
    tile_url_template: str,
    tile_matrix_set_limits: Optional[
        Sequence[Union[TileMatrixLimitsType, dict]]] = None
) -> TileSetInfo:
    """
    Build the tile grid and tile URL function of a tile matrix set

    When limits are given, only the limited tile matrices make up the
    grid, in the order of the limits, and the grid extent is the
    intersection of the limited extents.

    :param source_info: `SourceInfo`
    :param tile_matrix_set: tile matrix set definition
    :param tile_url_template: tile URL template
    :param tile_matrix_set_limits: per tile matrix row/column limits

    :returns: `TileSetInfo`
    """

    tile_matrix_set = _as_model(TileMatrixSetType, tile_matrix_set)

    projection = get_tile_matrix_set_projection(source_info, tile_matrix_set)
    axis_orientation = get_axis_orientation(tile_matrix_set, projection)
    backwards = not axis_orientation.startswith('en')

    LOGGER.debug(f'Tile matrix set {tile_matrix_set.id} in {projection} '
                 f'with axis orientation {axis_orientation}')

    matrix_lookup = {matrix.id: matrix
                     for matrix in tile_matrix_set.tileMatrices}

    limit_lookup = None

    if tile_matrix_set_limits:
        limit_lookup = {}
        for limit in tile_matrix_set_limits:
            limit = _as_model(TileMatrixLimitsType, limit)
            if limit.tileMatrix not in matrix_lookup:
                LOGGER.warning(f'Ignoring limits of unknown tile matrix '
                               f'{limit.tileMatrix}')
                continue
            if limit.tileMatrix in limit_lookup:
                LOGGER.warning(f'Ignoring repeated limits of tile matrix '
                               f'{limit.tileMatrix}')
                continue
            limit_lookup[limit.tileMatrix] = limit
        matrix_ids = list(limit_lookup)
    else:
        matrix_ids = list(matrix_lookup)

    if not matrix_ids:
        msg = f'No tile matrix found in tile matrix set {tile_matrix_set.id}'
        LOGGER.error(msg)
        raise TileSetInvalidError(msg)

    origins = []
    resolutions = []
    sizes = []
    tile_sizes = []
    extent = create_infinite()

    for matrix_id in matrix_ids:
        matrix = matrix_lookup[matrix_id]

        origin = matrix.pointOfOrigin
        if backwards:
            origin = [origin[1], origin[0]]
        else:
            origin = [origin[0], origin[1]]

        origins.append(origin)
        resolutions.append(matrix.cellSize)
        # bottom-left rows sit above the origin
        height = matrix.matrixHeight
        if matrix.upside_down:
            height = -height
        sizes.append([matrix.matrixWidth, height])
        tile_sizes.append([matrix.tileWidth, matrix.tileHeight])

        if limit_lookup is not None:
            extent = get_intersection(
                extent,
                get_limited_extent(origin, matrix, limit_lookup[matrix_id]))

    if limit_lookup is not None and is_empty(extent):
        LOGGER.warning('Tile matrix set limits do not overlap')

    tile_grid = TileGrid(
        origins=origins,
        resolutions=resolutions,
        sizes=sizes,
        tile_sizes=tile_sizes,
        extent=extent if limit_lookup is not None else None
    )

    url_function = TileUrlFunction(
        template=tile_url_template,
        base_url=source_info.url,
        matrix_ids=tuple(matrix_ids),
        matrices=MappingProxyType(matrix_lookup),
        limits=(MappingProxyType(limit_lookup)
                if limit_lookup is not None else None),
        context=MappingProxyType(dict(source_info.context or {}))
    )

    return TileSetInfo(
        grid=tile_grid,
        projection=projection,
        url_template=tile_url_template,
        url_function=url_function
    )
