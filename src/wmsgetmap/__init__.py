"""wmsgetmap - request URLs for the OGC WMS GetMap operation."""

from ._version import __version__

from .config import WmsLayerConfig, contains_ignore_case
from .errors import InvalidArgumentError, InvalidConfigurationError, WmsGetMapError
from .ogc import WmsGetMapUrlFactory, format_bbox, query_delimiter
from .types import (
    CRS,
    ImageFormat,
    Level,
    Sector,
    Tile,
    WMS_VERSION_1_1_1,
    WMS_VERSION_1_3_0,
)
from .typing import TileUrlFactory

__all__ = [
    "__version__",
    "WmsLayerConfig",
    "contains_ignore_case",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    "WmsGetMapError",
    "WmsGetMapUrlFactory",
    "format_bbox",
    "query_delimiter",
    "CRS",
    "ImageFormat",
    "Level",
    "Sector",
    "Tile",
    "WMS_VERSION_1_1_1",
    "WMS_VERSION_1_3_0",
    "TileUrlFactory",
]
