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

"""Models of the OGC API - Tiles documents read by pygeotiles"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pygeotiles.models.validators import (
    identifier_to_str, point_has_two_coordinates)


class DataTypeEnum(str, Enum):
    MAP = "map"
    VECTOR = "vector"


class CornerOfOriginEnum(str, Enum):
    TOPLEFT = "topLeft"
    BOTTOMLEFT = "bottomLeft"


class LinkType(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    href: str
    rel: Optional[str] = None
    type_: Optional[str] = Field(None, alias='type')
    hreflang: Optional[str] = None
    title: Optional[str] = None
    templated: Optional[bool] = None
    length: Optional[int] = None


class CrsUriType(BaseModel):
    # Reference to one coordinate reference system (CRS)
    uri: str


# Tile Matrix Set Sub Types
class TileMatrixType(BaseModel):
    # Identifier selecting one of the scales, joined with the limits
    id: str
    title: Optional[str] = None
    scaleDenominator: Optional[float] = None
    # Map units per pixel
    cellSize: float
    cornerOfOrigin: CornerOfOriginEnum = CornerOfOriginEnum.TOPLEFT
    # Position in CRS coordinates of the corner of origin, in the
    # axis order of the tile matrix set
    pointOfOrigin: List[float]
    matrixWidth: int
    matrixHeight: int
    tileWidth: int
    tileHeight: int

    id_validator = field_validator('id', mode='before')(identifier_to_str)
    point_validator = field_validator('pointOfOrigin')(
        point_has_two_coordinates)

    @property
    def upside_down(self) -> bool:
        """ Whether rows grow upward from the point of origin. """
        return self.cornerOfOrigin == CornerOfOriginEnum.BOTTOMLEFT


class TileMatrixLimitsType(BaseModel):
    tileMatrix: str
    minTileRow: int
    maxTileRow: int
    minTileCol: int
    maxTileCol: int

    id_validator = field_validator('tileMatrix', mode='before')(
        identifier_to_str)

    def contains(self, col: int, row: int) -> bool:
        """ Whether a tile column/row is within the limits. """
        return (self.minTileCol <= col <= self.maxTileCol and
                self.minTileRow <= row <= self.maxTileRow)


class TileMatrixSetType(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    uri: Optional[str] = None
    # Either a URI, an object carrying a URI, or a WKT /
    # referenceSystem object (kept as a plain dict)
    crs: Union[str, CrsUriType, Dict[str, Any]] = Field(
        union_mode='left_to_right')
    orderedAxes: Optional[List[str]] = None
    wellKnownScaleSet: Optional[str] = None
    tileMatrices: List[TileMatrixType]

    id_validator = field_validator('id', mode='before')(identifier_to_str)


class TileSetMetadata(BaseModel):
    # A title for this tileset
    title: Optional[str] = None
    # Brief narrative description of this tile set
    description: Optional[str] = None
    # keywords about this tileset
    keywords: Optional[List[str]] = None
    # Media types available for the tiles
    mediaTypes: Optional[List[str]] = None
    # Type of data represented in the tileset, kept verbatim so
    # unknown values can be reported by name
    dataType: Optional[str] = None
    # Limits for the TileRow and TileCol values for each TileMatrix in the
    # tileMatrixSet. If missing, there are no limits other that the ones
    # imposed by the TileMatrixSet. If present the TileMatrices listed are
    # limited and the rest not available at all
    tileMatrixSetLimits: Optional[List[TileMatrixLimitsType]] = None
    # Coordinate Reference System (CRS)
    crs: Optional[Union[str, CrsUriType, Dict[str, Any]]] = Field(
        None, union_mode='left_to_right')
    # Inline tile matrix set definition
    tileMatrixSet: Optional[TileMatrixSetType] = None
    # Reference to a Tile Matrix Set on an official source
    tileMatrixSetURI: Optional[str] = None
    # Links to related resources.
    links: List[LinkType] = Field(default_factory=list)

    @field_validator('dataType', mode='before')
    @classmethod
    def data_type_value(cls, value):
        if isinstance(value, Enum):
            return value.value
        return value
