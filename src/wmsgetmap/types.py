"""
Value types describing the tiles that WMS GetMap URLs are built for.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


WMS_VERSION_1_1_1 = "1.1.1"
WMS_VERSION_1_3_0 = "1.3.0"


class CRS(str, Enum):
    """Common Coordinate Reference Systems."""
    EPSG_4326 = "EPSG:4326"
    CRS_84 = "CRS:84"
    EPSG_3857 = "EPSG:3857"


class ImageFormat(str, Enum):
    """Common GetMap image formats."""
    PNG = "image/png"
    JPEG = "image/jpeg"
    GIF = "image/gif"
    TIFF = "image/tiff"


class Sector(BaseModel):
    """Geographic bounding box in degrees."""
    min_latitude: float = Field(..., ge=-90.0, le=90.0, description="Southern edge")
    max_latitude: float = Field(..., ge=-90.0, le=90.0, description="Northern edge")
    min_longitude: float = Field(..., ge=-180.0, le=180.0, description="Western edge")
    max_longitude: float = Field(..., ge=-180.0, le=180.0, description="Eastern edge")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_bounds(self):
        """Validate that min bounds do not exceed max bounds."""
        if self.min_latitude > self.max_latitude:
            raise ValueError('min_latitude must not exceed max_latitude')
        if self.min_longitude > self.max_longitude:
            raise ValueError('min_longitude must not exceed max_longitude')
        return self

    @classmethod
    def from_degrees(
        cls,
        min_latitude: float,
        max_latitude: float,
        min_longitude: float,
        max_longitude: float,
    ) -> "Sector":
        """Create a Sector from its four bounds."""
        return cls(
            min_latitude=min_latitude,
            max_latitude=max_latitude,
            min_longitude=min_longitude,
            max_longitude=max_longitude,
        )

    @property
    def delta_latitude(self) -> float:
        return self.max_latitude - self.min_latitude

    @property
    def delta_longitude(self) -> float:
        return self.max_longitude - self.min_longitude


class Level(BaseModel):
    """Resolution level of a tile pyramid."""
    tile_width: int = Field(..., gt=0, description="Tile width in pixels")
    tile_height: int = Field(..., gt=0, description="Tile height in pixels")
    level_number: int = Field(default=0, ge=0, description="Position in the pyramid")

    model_config = ConfigDict(frozen=True)


class Tile(BaseModel):
    """A unit of imagery covering one sector at one level."""
    sector: Sector
    level: Level
    row: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)
