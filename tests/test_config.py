"""Tests for the WMS layer configuration record."""

import pytest
from pydantic import ValidationError

from wmsgetmap.config import WmsLayerConfig, contains_ignore_case
from wmsgetmap.errors import InvalidConfigurationError, WmsGetMapError
from wmsgetmap.types import CRS


class TestWmsLayerConfig:
    """Test WmsLayerConfig validation and helpers."""

    def test_defaults(self):
        config = WmsLayerConfig(service_address="http://example.com/wms", version="1.1.1", layer_names="world")

        assert config.style_names is None
        assert config.coordinate_system == "EPSG:4326"
        assert config.transparent is True
        assert config.time_string is None

    def test_names_from_sequences(self):
        config = WmsLayerConfig(
            service_address="http://example.com/wms",
            version="1.3.0",
            layer_names=["roads", "rivers"],
            style_names=("default", "blue"),
        )

        assert config.layer_names == "roads,rivers"
        assert config.style_names == "default,blue"

    def test_crs_enum_stored_as_value(self):
        config = WmsLayerConfig(
            service_address="http://example.com/wms",
            version="1.3.0",
            layer_names="world",
            coordinate_system=CRS.CRS_84,
        )

        assert config.coordinate_system == "CRS:84"
        assert type(config.coordinate_system) is str

    def test_unknown_crs_passes_through(self):
        config = WmsLayerConfig(
            service_address="http://example.com/wms",
            version="1.3.0",
            layer_names="world",
            coordinate_system="EPSG:32633",
        )

        assert config.coordinate_system == "EPSG:32633"

    def test_transparent_none_restores_default(self):
        config = WmsLayerConfig(
            service_address="http://example.com/wms", version="1.3.0", layer_names="world", transparent=None
        )

        assert config.transparent is True

    def test_direct_construction_raises_validation_error(self):
        with pytest.raises(ValidationError):
            WmsLayerConfig(service_address="", version="1.3.0", layer_names="world")

    @pytest.mark.parametrize("field", ["service_address", "version", "layer_names", "coordinate_system"])
    @pytest.mark.parametrize("value", [None, ""])
    def test_create_rejects_missing_required_values(self, field, value):
        values = {
            "service_address": "http://example.com/wms",
            "version": "1.3.0",
            "layer_names": "world",
            field: value,
        }

        with pytest.raises(InvalidConfigurationError) as exc_info:
            WmsLayerConfig.create("Test.create", **values)

        message = str(exc_info.value)
        assert message.startswith("Test.create: missing")
        assert field.replace("_", " ") in message
        assert isinstance(exc_info.value.cause, ValidationError)
        assert isinstance(exc_info.value, WmsGetMapError)

    def test_create_reports_absent_field(self):
        with pytest.raises(InvalidConfigurationError, match="missing layer names"):
            WmsLayerConfig.create(service_address="http://example.com/wms", version="1.3.0")

    def test_from_url(self):
        config = WmsLayerConfig.from_url("http://example.com/wms", ["a", "b"])

        assert config.service_address == "http://example.com/wms"
        assert config.version == "1.3.0"
        assert config.layer_names == "a,b"

    def test_with_changes_returns_new_record(self, layer_config):
        changed = layer_config.with_changes(version="1.1.1", time_string="2020-01-01")

        assert changed.version == "1.1.1"
        assert changed.time_string == "2020-01-01"
        assert layer_config.version == "1.3.0"
        assert layer_config.time_string is None

    def test_unknown_keys_rejected(self, layer_config):
        with pytest.raises(ValidationError):
            WmsLayerConfig(service_address="http://x/wms", version="1.3.0", layer_names="world", coordinateSystem="CRS:84")

        with pytest.raises(InvalidConfigurationError, match="Owner.op: invalid timeString \\(unknown field\\)"):
            layer_config.with_changes("Owner.op", timeString="2020-01-01")

    def test_declares_wms_service_follows_copied_address(self, layer_config):
        assert layer_config.declares_wms_service is False

        copied = layer_config.model_copy(update={"service_address": "http://x/wms?service=wms"})

        assert copied.declares_wms_service is True
        assert layer_config.declares_wms_service is False

    def test_with_changes_validates(self, layer_config):
        with pytest.raises(InvalidConfigurationError, match="Owner.op: missing version"):
            layer_config.with_changes("Owner.op", version="")

    def test_record_is_frozen(self, layer_config):
        with pytest.raises(ValidationError):
            layer_config.version = "1.1.1"

    @pytest.mark.parametrize(
        "address, expected",
        [
            ("http://example.com/wms", False),
            ("http://example.com/wms?SERVICE=WMS", True),
            ("http://example.com/wms?service=wms&map=x", True),
            ("http://example.com/wms?Service=Wms", True),
            ("http://example.com/wms?SERVICE=WFS", False),
        ],
    )
    def test_declares_wms_service(self, address, expected):
        config = WmsLayerConfig(service_address=address, version="1.3.0", layer_names="world")

        assert config.declares_wms_service is expected

    def test_uses_crs_parameter(self, layer_config):
        assert layer_config.uses_crs_parameter is True
        assert layer_config.with_changes(version="1.1.1").uses_crs_parameter is False


@pytest.mark.unit
def test_contains_ignore_case():
    assert contains_ignore_case("http://x/wms?service=wms", "SERVICE=WMS")
    assert contains_ignore_case("SERVICE=WMS", "service=wms")
    assert not contains_ignore_case("http://x/wms", "SERVICE=WMS")
