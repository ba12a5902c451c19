"""Tests for configuration module."""
import pytest
import tempfile

from mapcues.config import OverlayConfig


class TestOverlayConfig:
    """Tests for OverlayConfig dataclass."""

    def test_default_values(self):
        """Defaults should reproduce the fixed seeds and thresholds."""
        config = OverlayConfig()
        assert config.building_seed == 42
        assert config.relief_seed == 456
        assert config.marker_seed == 123
        assert config.building_min_zoom == 14.0
        assert config.buildings_per_zoom_level == 20
        assert config.shadow_length_factor == 0.3
        assert config.perspective_depth == -0.001

    def test_angle_steps(self):
        """Ridge lines every 72 degrees, markers every 24 degrees."""
        config = OverlayConfig()
        assert config.relief_angle_step_deg == pytest.approx(72.0)
        assert config.marker_angle_step_deg == pytest.approx(24.0)

    def test_yaml_roundtrip(self):
        """Config should survive YAML serialize/deserialize."""
        config = OverlayConfig(building_seed=7, max_buildings=None, marker_count=12)

        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as f:
            config.to_yaml(f.name)
            loaded = OverlayConfig.from_yaml(f.name)

        assert loaded == config
        assert loaded.max_buildings is None

    def test_yaml_partial(self, tmp_path):
        """Missing keys should fall back to defaults."""
        path = tmp_path / "overlay.yaml"
        path.write_text("building_seed: 99\n")
        loaded = OverlayConfig.from_yaml(path)
        assert loaded.building_seed == 99
        assert loaded.relief_seed == 456

    def test_validation_valid(self):
        """Valid config should return no errors."""
        assert OverlayConfig().validate() == []

    def test_validation_negative_cap(self):
        """Negative building cap should trigger error."""
        errors = OverlayConfig(max_buildings=-1).validate()
        assert any("max_buildings" in e for e in errors)

    def test_validation_bad_radius(self):
        """Non-positive earth radius should trigger error."""
        errors = OverlayConfig(earth_radius_m=0).validate()
        assert any("radius" in e for e in errors)
