"""
WMS (Web Map Service) GetMap URL construction.
"""

from enum import Enum
import logging
from typing import Any, Optional, Union

from ..config import SERVICE_MARKER, WmsLayerConfig, contains_ignore_case
from ..errors import InvalidArgumentError, InvalidConfigurationError
from ..types import CRS, ImageFormat, Sector, Tile, WMS_VERSION_1_3_0
from ..typing import ConfigRecord, NameList, QueryParts

__all__ = [
    "WmsGetMapUrlFactory",
    "contains_ignore_case",
    "format_bbox",
    "query_delimiter",
]

logger = logging.getLogger(__name__)


def query_delimiter(service_address: str) -> str:
    """
    Return the text that separates ``service_address`` from the first new parameter.

    Args:
        service_address: Base endpoint, possibly with a query string

    Returns:
        ``"?"`` when the address has no query, ``"&"`` when it has parameters
        not already terminated by ``&``, otherwise an empty string
    """
    if "?" not in service_address:
        return "?"
    if service_address.endswith("?"):
        return ""
    if service_address.rfind("&") != len(service_address) - 1:
        return "&"
    return ""


def format_bbox(sector: Sector, version: str, coordinate_system: str) -> str:
    """
    Render the BBOX value for ``sector``.

    WMS 1.3.0 honours the axis order of the CRS: ``CRS:84`` is longitude first,
    EPSG geographic systems are latitude first. Earlier versions always use
    longitude, latitude.
    """
    lon_lat = (sector.min_longitude, sector.min_latitude, sector.max_longitude, sector.max_latitude)
    if version == WMS_VERSION_1_3_0 and coordinate_system != CRS.CRS_84.value:
        bounds = (sector.min_latitude, sector.min_longitude, sector.max_latitude, sector.max_longitude)
    else:
        bounds = lon_lat
    return ",".join(str(float(value)) for value in bounds)


class WmsGetMapUrlFactory:
    """Builds WMS GetMap request URLs for tiles."""

    def __init__(
        self,
        service_address: str,
        version: str,
        layer_names: NameList,
        style_names: Optional[NameList] = None,
    ) -> None:
        self._config = WmsLayerConfig.create(
            "WmsGetMapUrlFactory.__init__",
            service_address=service_address,
            version=version,
            layer_names=layer_names,
            style_names=style_names,
        )

    @classmethod
    def from_config(
        cls, config: Union[WmsLayerConfig, ConfigRecord]
    ) -> "WmsGetMapUrlFactory":
        """
        Create a factory from a configuration record.

        Args:
            config: A ``WmsLayerConfig`` or a mapping with the same keys

        Returns:
            URL factory using ``config``

        Raises:
            InvalidConfigurationError: If the record is missing or any required value is missing
        """
        if config is None:
            raise InvalidConfigurationError("WmsGetMapUrlFactory.from_config: missing config")

        if not isinstance(config, WmsLayerConfig):
            config = WmsLayerConfig.create("WmsGetMapUrlFactory.from_config", **dict(config))

        factory = cls.__new__(cls)
        factory._config = config
        return factory

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    @property
    def config(self) -> WmsLayerConfig:
        """The configuration snapshot used by the next ``build_url`` call."""
        return self._config

    @config.setter
    def config(self, config: WmsLayerConfig) -> None:
        if not isinstance(config, WmsLayerConfig):
            raise InvalidConfigurationError("WmsGetMapUrlFactory.config: missing config")
        self._config = config
        logger.debug("WmsGetMapUrlFactory.config: replaced configuration for %s", config.service_address)

    def _update(self, operation: str, **updates: Any) -> None:
        self._config = self._config.with_changes(f"WmsGetMapUrlFactory.{operation}", **updates)

    @property
    def service_address(self) -> str:
        return self._config.service_address

    @service_address.setter
    def service_address(self, value: str) -> None:
        self._update("service_address", service_address=value)

    @property
    def version(self) -> str:
        return self._config.version

    @version.setter
    def version(self, value: str) -> None:
        self._update("version", version=value)

    @property
    def layer_names(self) -> str:
        return self._config.layer_names

    @layer_names.setter
    def layer_names(self, value: NameList) -> None:
        self._update("layer_names", layer_names=value)

    @property
    def style_names(self) -> Optional[str]:
        return self._config.style_names

    @style_names.setter
    def style_names(self, value: Optional[NameList]) -> None:
        self._update("style_names", style_names=value)

    @property
    def coordinate_system(self) -> str:
        return self._config.coordinate_system

    @coordinate_system.setter
    def coordinate_system(self, value: Union[str, CRS]) -> None:
        self._update("coordinate_system", coordinate_system=value)

    @property
    def transparent(self) -> bool:
        return self._config.transparent

    @transparent.setter
    def transparent(self, value: Optional[bool]) -> None:
        self._update("transparent", transparent=value)

    @property
    def time_string(self) -> Optional[str]:
        return self._config.time_string

    @time_string.setter
    def time_string(self, value: Optional[str]) -> None:
        self._update("time_string", time_string=value)

    # ------------------------------------------------------------------
    # URL construction
    # ------------------------------------------------------------------
    def build_url(self, tile: Tile, image_format: Union[str, ImageFormat]) -> str:
        """
        Build the GetMap URL for a tile.

        Args:
            tile: Tile whose sector and level size the request covers
            image_format: MIME type of the requested image

        Returns:
            Complete GetMap request URL

        Raises:
            InvalidArgumentError: If the tile or the image format is missing
        """
        if tile is None:
            raise InvalidArgumentError("WmsGetMapUrlFactory.build_url: missing tile")

        if image_format is None:
            raise InvalidArgumentError("WmsGetMapUrlFactory.build_url: missing format")

        if isinstance(image_format, Enum):
            image_format = image_format.value

        config = self._config

        params: QueryParts = []
        if not config.declares_wms_service:
            params.append(SERVICE_MARKER)

        params.append(f"VERSION={config.version}")
        params.append("REQUEST=GetMap")
        params.append(f"LAYERS={config.layer_names}")
        params.append(f"STYLES={config.style_names or ''}")

        crs_key = "CRS" if config.uses_crs_parameter else "SRS"
        params.append(f"{crs_key}={config.coordinate_system}")
        params.append(f"BBOX={format_bbox(tile.sector, config.version, config.coordinate_system)}")

        params.append(f"WIDTH={tile.level.tile_width}")
        params.append(f"HEIGHT={tile.level.tile_height}")
        params.append(f"FORMAT={image_format}")
        params.append(f"TRANSPARENT={'TRUE' if config.transparent else 'FALSE'}")

        if config.time_string is not None:
            params.append(f"TIME={config.time_string}")

        url = config.service_address + query_delimiter(config.service_address) + "&".join(params)
        logger.debug("Built WMS GetMap URL: %s", url)
        return url
