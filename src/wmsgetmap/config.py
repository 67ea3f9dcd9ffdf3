"""Configuration record for WMS GetMap URL factories."""

from __future__ import annotations

from enum import Enum
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidConfigurationError
from .types import CRS, WMS_VERSION_1_3_0

logger = logging.getLogger(__name__)

SERVICE_MARKER = "SERVICE=WMS"


def contains_ignore_case(text: str, token: str) -> bool:
    """Return True when ``token`` occurs in ``text`` ignoring case."""

    return token.casefold() in text.casefold()


class WmsLayerConfig(BaseModel):
    """Immutable description of a WMS layer and how to request it."""

    service_address: str = Field(
        ..., min_length=1, description="Base endpoint, may already carry a query string"
    )
    version: str = Field(..., min_length=1, description="WMS protocol version")
    layer_names: str = Field(
        ..., min_length=1, description="Comma-separated list of layer names"
    )
    style_names: Optional[str] = Field(
        None, description="Comma-separated list of style names, None for the default style"
    )
    coordinate_system: str = Field(
        default=CRS.EPSG_4326.value,
        min_length=1,
        description="Coordinate reference system identifier",
    )
    transparent: bool = Field(default=True, description="Request a transparent background")
    time_string: Optional[str] = Field(None, description="Value of the TIME parameter")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("layer_names", "style_names", mode="before")
    @classmethod
    def join_names(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ",".join(str(name) for name in value)
        return value

    @field_validator("coordinate_system", mode="before")
    @classmethod
    def crs_value(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("transparent", mode="before")
    @classmethod
    def default_transparency(cls, value: Any) -> Any:
        return True if value is None else value

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def create(cls, operation: str = "WmsLayerConfig.create", **values: Any) -> "WmsLayerConfig":
        """
        Validate ``values`` into a new record.

        Args:
            operation: Name reported in the error message on failure
            **values: Field values

        Returns:
            Validated configuration record

        Raises:
            InvalidConfigurationError: If a required value is missing or empty
        """
        try:
            return cls(**values)
        except ValidationError as exc:
            raise InvalidConfigurationError(_describe(operation, exc), cause=exc) from exc

    @classmethod
    def from_url(cls, url: str, layer_names: Any, **kwargs: Any) -> "WmsLayerConfig":
        """Create a record for ``url``, requesting WMS 1.3.0 unless ``version`` is given."""

        kwargs.setdefault("version", WMS_VERSION_1_3_0)
        return cls.create("WmsLayerConfig.from_url", service_address=url, layer_names=layer_names, **kwargs)

    def with_changes(self, operation: str = "WmsLayerConfig.with_changes", **updates: Any) -> "WmsLayerConfig":
        """Return a validated copy with ``updates`` applied, leaving this record untouched."""

        values = self.model_dump()
        values.update(updates)
        changed = type(self).create(operation, **values)
        logger.debug("%s: updated %s", operation, ", ".join(sorted(updates)))
        return changed

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def declares_wms_service(self) -> bool:
        """Whether the service address already carries ``SERVICE=WMS``."""

        return contains_ignore_case(self.service_address, SERVICE_MARKER)

    @property
    def uses_crs_parameter(self) -> bool:
        """WMS 1.3.0 names the coordinate system ``CRS``, earlier versions ``SRS``."""

        return self.version == WMS_VERSION_1_3_0


def _describe(operation: str, exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return f"{operation}: invalid configuration"

    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "configuration"
    label = field.replace("_", " ")
    kind = first.get("type", "")
    if kind == "extra_forbidden":
        return f"{operation}: invalid {label} (unknown field)"
    if kind in ("missing", "string_type", "string_too_short", "none_required") or first.get("input") is None:
        return f"{operation}: missing {label}"
    return f"{operation}: invalid {label} ({first.get('msg')})"
