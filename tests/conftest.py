"""
Shared test configuration, fixtures, and markers for wmsgetmap tests.
"""

import pytest

from wmsgetmap import Level, Sector, Tile, WmsGetMapUrlFactory, WmsLayerConfig


def pytest_configure(config):
    """Configure test markers."""
    config.addinivalue_line("markers", "property: marks property-based tests")
    config.addinivalue_line("markers", "unit: marks unit tests (fast, pure logic)")


@pytest.fixture
def sector():
    """Sector used by the end-to-end examples."""
    return Sector(min_latitude=10, max_latitude=20, min_longitude=30, max_longitude=40)


@pytest.fixture
def tile(sector):
    """256x256 tile covering ``sector``."""
    return Tile(sector=sector, level=Level(tile_width=256, tile_height=256))


@pytest.fixture
def layer_config():
    """WMS 1.3.0 configuration for a single layer."""
    return WmsLayerConfig(
        service_address="http://example.com/wms",
        version="1.3.0",
        layer_names="world",
        coordinate_system="EPSG:4326",
        transparent=True,
    )


@pytest.fixture
def factory(layer_config):
    """URL factory built from ``layer_config``."""
    return WmsGetMapUrlFactory.from_config(layer_config)
