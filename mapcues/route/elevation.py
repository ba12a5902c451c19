"""
Route Elevation Profile

Elevation samples and grades along a route, computed from the synthetic
noise field and great-circle distances. Independent of viewport state.
"""
import logging
from typing import List, Optional, Sequence
import numpy as np

from ..config import OverlayConfig
from ..geodesy import cumulative_distance_m, haversine_m
from ..interfaces import ElevationSample, GeoPoint, ProfileSummary, SlopeSegment
from ..terrain.noise import NoiseField

logger = logging.getLogger(__name__)


class ElevationProfileService:
    """Derives elevation and slope information along a route."""

    def __init__(
        self,
        noise: Optional[NoiseField] = None,
        config: Optional[OverlayConfig] = None
    ):
        self.noise = noise or NoiseField()
        self.config = config or OverlayConfig()

    def distance_m(self, a: GeoPoint, b: GeoPoint) -> float:
        return haversine_m(a, b, self.config.earth_radius_m)

    def profile(self, route: Sequence[GeoPoint]) -> List[ElevationSample]:
        """Elevation at every route point, in route order."""
        return [ElevationSample(position=p, elevation_m=self.noise.elevation(p)) for p in route]

    def slope(self, a: GeoPoint, b: GeoPoint) -> float:
        """Grade from a to b in percent.

        Coincident points have zero horizontal distance and a defined
        grade of 0.
        """
        horizontal = self.distance_m(a, b)
        if horizontal == 0:
            return 0.0

        rise = self.noise.elevation(b) - self.noise.elevation(a)
        return rise / horizontal * 100.0

    def slope_segments(self, route: Sequence[GeoPoint]) -> List[SlopeSegment]:
        """Grade of every consecutive pair of route points."""
        return [
            SlopeSegment(start=a, end=b, grade_percent=self.slope(a, b))
            for a, b in zip(route[:-1], route[1:])
        ]

    def summarize(self, route: Sequence[GeoPoint]) -> ProfileSummary:
        """Climb/descent totals and extremes for a route.

        Args:
            route: Ordered route points

        Returns:
            ProfileSummary (all zeros for an empty route)
        """
        if len(route) == 0:
            return ProfileSummary()

        elevations = np.array([s.elevation_m for s in self.profile(route)])
        deltas = np.diff(elevations)
        distances = cumulative_distance_m(route, self.config.earth_radius_m)
        grades = [abs(s.grade_percent) for s in self.slope_segments(route)]

        summary = ProfileSummary(
            min_elevation_m=float(np.min(elevations)),
            max_elevation_m=float(np.max(elevations)),
            total_ascent_m=float(np.sum(deltas[deltas > 0])),
            total_descent_m=float(-np.sum(deltas[deltas < 0])),
            distance_m=float(distances[-1]),
            max_grade_percent=max(grades, default=0.0),
        )
        logger.debug("Profile summary for %d points: %s", len(route), summary)
        return summary
