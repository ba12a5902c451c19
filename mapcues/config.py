"""Overlay generation configuration management."""
from dataclasses import dataclass
from typing import List, Optional, Union
from pathlib import Path
import yaml


@dataclass
class OverlayConfig:
    """Tunable constants for the synthetic 3D map overlay.

    Attributes:
        building_seed: Seed for building jitter/height draws
        relief_seed: Seed for ridge line angle variation
        marker_seed: Seed for elevation marker ring distances
        building_min_zoom: Zoom below which no buildings are produced
        buildings_per_zoom_level: Buildings added per zoom level above the minimum
        max_buildings: Hard cap on buildings per call (None disables the cap)
        building_spread_deg: Jitter spread around the center, divided by zoom
        building_min_height_m: Height added to every random building height
        shadow_length_factor: Shadow length per meter of building height
        perspective_depth: Homogeneous perspective entry of the transform
        marker_min_zoom: Zoom below which no elevation markers are produced
        marker_count: Number of elevation markers on the ring
        relief_line_count: Number of ridge lines
        relief_points_per_line: Points per ridge line
        earth_radius_m: Sphere radius for great-circle distances
    """

    # Seeds
    building_seed: int = 42
    relief_seed: int = 456
    marker_seed: int = 123

    # Buildings
    building_min_zoom: float = 14.0
    buildings_per_zoom_level: int = 20
    max_buildings: Optional[int] = 400
    building_spread_deg: float = 0.01
    building_min_height_m: float = 5.0

    # Shading / camera
    shadow_length_factor: float = 0.3
    perspective_depth: float = -0.001

    # Relief
    marker_min_zoom: float = 10.0
    marker_count: int = 15
    relief_line_count: int = 5
    relief_points_per_line: int = 10

    # Geodesy
    earth_radius_m: float = 6378137.0  # WGS84 equatorial radius

    @property
    def relief_angle_step_deg(self) -> float:
        """Angular spacing between ridge lines."""
        return 360.0 / self.relief_line_count

    @property
    def marker_angle_step_deg(self) -> float:
        """Angular spacing between elevation markers."""
        return 360.0 / self.marker_count

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "OverlayConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        from dataclasses import asdict
        with open(path, 'w') as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    def validate(self) -> List[str]:
        """Validate configuration parameters.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not (0 <= self.building_min_zoom <= 30):
            errors.append("building_min_zoom must be 0-30")

        if self.buildings_per_zoom_level < 0:
            errors.append("buildings_per_zoom_level must be non-negative")

        if self.max_buildings is not None and self.max_buildings < 0:
            errors.append("max_buildings must be non-negative or None")

        if self.building_spread_deg <= 0:
            errors.append("building_spread_deg must be positive")

        if self.building_min_height_m <= 0:
            errors.append("building_min_height_m must be positive")

        if self.shadow_length_factor < 0:
            errors.append("shadow_length_factor must be non-negative")

        if self.marker_count <= 0:
            errors.append("marker_count must be positive")

        if self.relief_line_count <= 0 or self.relief_points_per_line <= 0:
            errors.append("relief line and point counts must be positive")

        if self.earth_radius_m <= 0:
            errors.append("earth_radius_m must be positive")

        return errors
