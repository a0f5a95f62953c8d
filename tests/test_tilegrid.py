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

import math

import pytest

from pygeotiles.extent import create_empty, create_infinite
from pygeotiles.tilegrid import TileGrid, TileRange

ORIGIN = 20037508.3427892
RESOLUTIONS = [156543.033928041, 78271.5169640204, 39135.7584820102]


@pytest.fixture()
def grid():
    return TileGrid(
        origins=[(-ORIGIN, ORIGIN)] * 3,
        resolutions=RESOLUTIONS,
        sizes=[(1, 1), (2, 2), (4, 4)],
        tile_sizes=[(256, 256)] * 3
    )


def test_tile_grid(grid):
    assert repr(grid) == '<TileGrid> 3 levels'
    assert grid.get_min_zoom() == 0
    assert grid.get_max_zoom() == 2
    assert grid.get_resolutions() == RESOLUTIONS
    assert grid.get_resolution(1) == RESOLUTIONS[1]
    assert grid.get_origin(2) == (-ORIGIN, ORIGIN)
    assert grid.get_size(2) == (4, 4)
    assert grid.get_tile_size(0) == (256, 256)
    assert grid.get_extent() is None


def test_tile_grid_defaults():
    grid = TileGrid(origins=[(0, 0)], resolutions=[1])

    assert grid.get_tile_size(0) == (256, 256)
    assert grid.get_size(0) is None
    assert grid.get_full_tile_range(0) is None


def test_tile_grid_invalid():
    with pytest.raises(ValueError):
        TileGrid(origins=[], resolutions=[])

    with pytest.raises(ValueError):
        TileGrid(origins=[(0, 0)], resolutions=[2, 1])

    with pytest.raises(ValueError):
        TileGrid(origins=[(0, 0)] * 2, resolutions=[2, 1], sizes=[(1, 1)])


def test_get_z_for_resolution(grid):
    assert grid.get_z_for_resolution(156543) == 0
    assert grid.get_z_for_resolution(50000) == 2
    assert grid.get_z_for_resolution(60000) == 1
    assert grid.get_z_for_resolution(1) == 2


def test_get_tile_coord_extent(grid):
    assert grid.get_tile_coord_extent((0, 0, 0)) == pytest.approx(
        [-ORIGIN, -ORIGIN, ORIGIN, ORIGIN])
    assert grid.get_tile_coord_extent((1, 1, 0)) == pytest.approx(
        [0, 0, ORIGIN, ORIGIN], abs=1e-6)
    # rows above the origin are negative
    assert grid.get_tile_coord_extent((1, 0, -1)) == pytest.approx(
        [-ORIGIN, ORIGIN, 0, 2 * ORIGIN], abs=1e-6)


def test_get_tile_coord_for_xy_and_z(grid):
    assert grid.get_tile_coord_for_xy_and_z(0, 0, 0) == (0, 0, 0)
    assert grid.get_tile_coord_for_xy_and_z(1, 1, 1) == (1, 1, 0)
    assert grid.get_tile_coord_for_xy_and_z(-1, -1, 1) == (1, 0, 1)
    assert grid.get_tile_coord_for_xy_and_z(-1, -1, 2) == (2, 1, 2)

    # tile edges belong to the tile right/below of them
    min_x, min_y, max_x, max_y = grid.get_tile_coord_extent((2, 1, 2))
    assert grid.get_tile_coord_for_xy_and_z(min_x, max_y, 2) == (2, 1, 2)


def test_get_tile_range_for_extent_and_z(grid):
    assert grid.get_tile_range_for_extent_and_z(
        [-ORIGIN, -ORIGIN, ORIGIN, ORIGIN], 2) == TileRange(0, 3, 0, 3)

    extent = grid.get_tile_coord_extent((2, 1, 2))
    assert grid.get_tile_range_for_extent_and_z(extent, 2) == \
        TileRange(1, 1, 2, 2)


def test_get_full_tile_range(grid):
    assert grid.get_full_tile_range(0) == TileRange(0, 0, 0, 0)
    assert grid.get_full_tile_range(2) == TileRange(0, 3, 0, 3)


def test_get_full_tile_range_extent():
    grid = TileGrid(
        origins=[(-ORIGIN, ORIGIN)] * 2,
        resolutions=RESOLUTIONS[1:],
        sizes=[(2, 2), (4, 4)],
        extent=[0, 0, ORIGIN, ORIGIN]
    )

    assert grid.get_full_tile_range(0) == TileRange(1, 1, 0, 0)
    assert grid.get_full_tile_range(1) == TileRange(2, 3, 0, 1)

    grid = TileGrid(origins=[(-ORIGIN, ORIGIN)],
                    resolutions=RESOLUTIONS[2:],
                    extent=[0, 0, ORIGIN, ORIGIN])

    assert grid.get_full_tile_range(0) == TileRange(2, 3, 0, 1)


def test_get_full_tile_range_unbounded_extent():
    grid = TileGrid(origins=[(-ORIGIN, ORIGIN)], resolutions=RESOLUTIONS[:1],
                    sizes=[(1, 1)], extent=create_infinite())

    assert grid.get_full_tile_range(0) == TileRange(0, 0, 0, 0)

    grid = TileGrid(origins=[(-ORIGIN, ORIGIN)], resolutions=RESOLUTIONS[:1],
                    sizes=[(1, 1)], extent=create_empty())

    assert grid.get_full_tile_range(0) is None


def test_get_full_tile_range_negative_height():
    grid = TileGrid(origins=[(-ORIGIN, -ORIGIN)],
                    resolutions=RESOLUTIONS[1:2],
                    sizes=[(2, -2)])

    assert grid.get_full_tile_range(0) == TileRange(0, 1, -2, -1)


def test_tile_range():
    tile_range = TileRange(0, 3, 0, 1)

    assert tile_range.contains_xy(3, 1)
    assert not tile_range.contains_xy(4, 1)
    assert tile_range.intersection(TileRange(2, 5, 1, 5)) == \
        TileRange(2, 3, 1, 1)
    assert tile_range.intersection(TileRange(4, 5, 0, 1)) is None
    assert math.isfinite(tile_range.max_x)
