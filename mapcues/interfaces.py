"""Shared value types passed between overlay, terrain and route modules."""
from dataclasses import dataclass, field
import math
from typing import Tuple


@dataclass(frozen=True)
class GeoPoint:
    """Geographic coordinate in decimal degrees."""
    latitude: float
    longitude: float

    def offset(self, dlat: float, dlng: float) -> "GeoPoint":
        """Return a new point shifted by the given degree deltas."""
        return GeoPoint(self.latitude + dlat, self.longitude + dlng)


@dataclass(frozen=True)
class Vector2:
    """Screen-space displacement."""
    dx: float
    dy: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)


@dataclass(frozen=True)
class BuildingDescriptor:
    """Synthetic building for one render pass.

    Attributes:
        position: Footprint anchor
        height: Simulated height in meters (> 0)
        shadow_offset: Displacement of the cast shadow
    """
    position: GeoPoint
    height: float
    shadow_offset: Vector2 = field(default_factory=lambda: Vector2(0.0, 0.0))


@dataclass(frozen=True)
class ReliefLine:
    """Ordered points forming one synthetic ridge line."""
    points: Tuple[GeoPoint, ...]

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class ElevationMarker:
    """Labelled spot height placed around the viewport center."""
    position: GeoPoint
    elevation_m: float

    @property
    def label(self) -> str:
        return f"{int(self.elevation_m)}m"


@dataclass(frozen=True)
class ElevationSample:
    """Elevation at one route point."""
    position: GeoPoint
    elevation_m: float


@dataclass(frozen=True)
class SlopeSegment:
    """Grade between two consecutive route points."""
    start: GeoPoint
    end: GeoPoint
    grade_percent: float


@dataclass(frozen=True)
class ContourLevel:
    """Grid points lying near one contour elevation."""
    elevation_m: float
    points: Tuple[GeoPoint, ...]


@dataclass(frozen=True)
class ProfileSummary:
    """Aggregate climb/descent figures for an elevation chart.

    Attributes:
        min_elevation_m: Lowest sample
        max_elevation_m: Highest sample
        total_ascent_m: Sum of positive elevation deltas
        total_descent_m: Sum of negative elevation deltas (as a positive number)
        distance_m: Great-circle length of the route
        max_grade_percent: Largest absolute segment grade
    """
    min_elevation_m: float = 0.0
    max_elevation_m: float = 0.0
    total_ascent_m: float = 0.0
    total_descent_m: float = 0.0
    distance_m: float = 0.0
    max_grade_percent: float = 0.0
