"""Shared pytest fixtures for all test modules."""
import pytest

from mapcues.config import OverlayConfig
from mapcues.interfaces import GeoPoint
from mapcues.terrain.noise import NoiseField
from mapcues.viewport import ViewportController, ViewportState


# === Configuration Fixtures ===

@pytest.fixture
def default_config():
    """Stock overlay configuration."""
    return OverlayConfig()


@pytest.fixture
def uncapped_config():
    """Configuration without a building cap."""
    return OverlayConfig(max_buildings=None)


# === Viewport Fixtures ===

@pytest.fixture
def enabled_state():
    """3D mode on, 30 degree tilt facing east."""
    return ViewportState(enabled=True, building_height=20.0, tilt_deg=30.0, bearing_deg=90.0)


@pytest.fixture
def disabled_state():
    """3D mode off with non-trivial tilt/bearing."""
    return ViewportState(enabled=False, building_height=20.0, tilt_deg=45.0, bearing_deg=120.0)


@pytest.fixture
def controller():
    """Fresh controller with default state."""
    return ViewportController()


# === Geography Fixtures ===

@pytest.fixture
def paris():
    return GeoPoint(48.8566, 2.3522)


@pytest.fixture
def short_route():
    """Five points heading north-east from Paris."""
    return [GeoPoint(48.8566 + 0.01 * i, 2.3522 + 0.015 * i) for i in range(5)]


@pytest.fixture
def noise():
    return NoiseField()
