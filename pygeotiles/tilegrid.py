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

"""Regular tile grid addressed by (level, column, row)"""

import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

from pygeotiles.extent import is_empty

LOGGER = logging.getLogger(__name__)

# decimals kept when turning map coordinates into tile indices,
# so tile edges computed from the grid itself map onto whole tiles
INDEX_PRECISION = 8


class TileRange(NamedTuple):
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def contains_xy(self, x: int, y: int) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def intersection(self, other: 'TileRange') -> Optional['TileRange']:
        range_ = TileRange(max(self.min_x, other.min_x),
                           min(self.max_x, other.max_x),
                           max(self.min_y, other.min_y),
                           min(self.max_y, other.max_y))
        if range_.min_x > range_.max_x or range_.min_y > range_.max_y:
            return None
        return range_


class TileGrid:
    """
    Tile grid with one origin, resolution, size and tile size per level

    Levels are indexed 0..N-1. Columns grow to the right of a level's
    origin and rows grow downward from it, so tiles above the origin
    have negative rows.
    """

    def __init__(self, origins: Sequence[Sequence[float]],
                 resolutions: Sequence[float],
                 sizes: Optional[Sequence[Sequence[int]]] = None,
                 tile_sizes: Optional[Sequence[Sequence[int]]] = None,
                 extent: Optional[Sequence[float]] = None):
        """
        Initialize object

        :param origins: (x, y) origin of each level
        :param resolutions: map units per pixel of each level
        :param sizes: (columns, rows) of each level; a negative row count
                      places the rows above the origin
        :param tile_sizes: (width, height) in pixels of each level's tiles
                           (default 256x256)
        :param extent: [minx, miny, maxx, maxy] bounding the whole grid

        :returns: pygeotiles.tilegrid.TileGrid
        """

        if not resolutions:
            raise ValueError('A tile grid needs at least one level')

        levels = len(resolutions)

        if tile_sizes is None:
            tile_sizes = [(256, 256)] * levels

        for name, values in (('origins', origins), ('sizes', sizes),
                             ('tile_sizes', tile_sizes)):
            if values is not None and len(values) != levels:
                raise ValueError(
                    f'Expected {levels} {name}, got {len(values)}')

        self._origins = [(float(o[0]), float(o[1])) for o in origins]
        self._resolutions = [float(r) for r in resolutions]
        self._sizes = None
        if sizes is not None:
            self._sizes = [(int(s[0]), int(s[1])) for s in sizes]
        self._tile_sizes = [(int(t[0]), int(t[1])) for t in tile_sizes]
        self._extent = list(extent) if extent is not None else None

    def __repr__(self):
        return f'<TileGrid> {len(self._resolutions)} levels'

    def get_min_zoom(self) -> int:
        return 0

    def get_max_zoom(self) -> int:
        return len(self._resolutions) - 1

    def get_origin(self, z: int) -> Tuple[float, float]:
        return self._origins[z]

    def get_resolution(self, z: int) -> float:
        return self._resolutions[z]

    def get_resolutions(self) -> List[float]:
        return list(self._resolutions)

    def get_size(self, z: int) -> Optional[Tuple[int, int]]:
        if self._sizes is None:
            return None
        return self._sizes[z]

    def get_tile_size(self, z: int) -> Tuple[int, int]:
        return self._tile_sizes[z]

    def get_extent(self) -> Optional[List[float]]:
        if self._extent is None:
            return None
        return list(self._extent)

    def get_z_for_resolution(self, resolution: float) -> int:
        """
        :param resolution: map units per pixel

        :returns: `int` of the level whose resolution is nearest
        """

        return min(range(len(self._resolutions)),
                   key=lambda z: abs(self._resolutions[z] - resolution))

    def _tile_map_size(self, z: int) -> Tuple[float, float]:
        resolution = self._resolutions[z]
        tile_width, tile_height = self._tile_sizes[z]
        return resolution * tile_width, resolution * tile_height

    def get_tile_coord_extent(self, tile_coord: Sequence[int]) -> List[float]:
        """
        :param tile_coord: (z, x, y) tile coordinate

        :returns: `list` of the tile's [minx, miny, maxx, maxy]
        """

        z, x, y = tile_coord
        origin_x, origin_y = self._origins[z]
        tile_map_width, tile_map_height = self._tile_map_size(z)

        min_x = origin_x + x * tile_map_width
        max_y = origin_y - y * tile_map_height

        return [min_x, max_y - tile_map_height,
                min_x + tile_map_width, max_y]

    def get_tile_coord_for_xy_and_z(self, x: float, y: float,
                                    z: int) -> Tuple[int, int, int]:
        """
        :param x: map x coordinate
        :param y: map y coordinate
        :param z: level

        :returns: `tuple` (z, x, y) of the tile containing the point
        """

        origin_x, origin_y = self._origins[z]
        tile_map_width, tile_map_height = self._tile_map_size(z)

        col = math.floor(round((x - origin_x) / tile_map_width,
                               INDEX_PRECISION))
        row = math.floor(round((origin_y - y) / tile_map_height,
                               INDEX_PRECISION))

        return z, col, row

    def get_tile_range_for_extent_and_z(self, extent: Sequence[float],
                                        z: int) -> TileRange:
        """
        :param extent: [minx, miny, maxx, maxy] in map units
        :param z: level

        :returns: `TileRange` of the tiles intersecting the extent
        """

        origin_x, origin_y = self._origins[z]
        tile_map_width, tile_map_height = self._tile_map_size(z)

        def index(value, size, rounding):
            return rounding(round(value / size, INDEX_PRECISION))

        return TileRange(
            index(extent[0] - origin_x, tile_map_width, math.floor),
            index(extent[2] - origin_x, tile_map_width, math.ceil) - 1,
            index(origin_y - extent[3], tile_map_height, math.floor),
            index(origin_y - extent[1], tile_map_height, math.ceil) - 1
        )

    def get_full_tile_range(self, z: int) -> Optional[TileRange]:
        """
        :param z: level

        :returns: `TileRange` of all tiles of the level, limited by the
                  grid extent, or `None` if neither sizes nor extent
                  bound the level
        """

        full_range = None

        if self._sizes is not None:
            width, height = self._sizes[z]
            full_range = TileRange(min(0, width), max(width - 1, -1),
                                   min(0, height), max(height - 1, -1))

        if self._extent is not None:
            if is_empty(self._extent):
                return None
            if not all(math.isfinite(v) for v in self._extent):
                return full_range
            extent_range = self.get_tile_range_for_extent_and_z(
                self._extent, z)
            if full_range is None:
                return extent_range
            return full_range.intersection(extent_range)

        return full_range
