"""
Relief Cues

Ridge polylines and ring-placed spot heights drawn around the viewport
center. Both use their own fixed seeds so they stay stable across renders.
"""
import logging
import math
from typing import List, Optional
import numpy as np

from ..config import OverlayConfig
from ..interfaces import ElevationMarker, GeoPoint, ReliefLine
from ..terrain.noise import NoiseField
from ..viewport import ViewportState

logger = logging.getLogger(__name__)

# Ridge line geometry (degrees)
RIDGE_START_DISTANCE = 0.002
RIDGE_POINT_SPACING = 0.001
RIDGE_ANGLE_JITTER_DEG = 20.0

# Marker ring geometry (degrees)
MARKER_MIN_DISTANCE = 0.005
MARKER_DISTANCE_SPAN = 0.01


def _polar_offset(center: GeoPoint, distance: float, angle_deg: float) -> GeoPoint:
    angle = math.radians(angle_deg)
    return center.offset(distance * math.cos(angle), distance * math.sin(angle))


def generate_relief_lines(
    center: GeoPoint,
    state: ViewportState,
    config: Optional[OverlayConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> List[ReliefLine]:
    """Generate ridge lines radiating from the center.

    Line i starts at angle i * (360 / n_lines); every point along it gets
    a random angular jitter of up to +/-10 degrees.

    Args:
        center: Viewport center
        state: Current view settings
        config: Overlay configuration
        rng: Random generator (fresh from config.relief_seed when omitted)

    Returns:
        List of ReliefLine (empty when 3D mode is off)
    """
    if not state.enabled:
        return []

    config = config or OverlayConfig()
    rng = rng if rng is not None else np.random.default_rng(config.relief_seed)

    lines = []
    for i in range(config.relief_line_count):
        base_angle = i * config.relief_angle_step_deg
        points = []
        for j in range(config.relief_points_per_line):
            distance = RIDGE_START_DISTANCE + j * RIDGE_POINT_SPACING
            angle = base_angle + (rng.random() - 0.5) * RIDGE_ANGLE_JITTER_DEG
            points.append(_polar_offset(center, distance, angle))
        lines.append(ReliefLine(points=tuple(points)))

    return lines


def generate_elevation_markers(
    center: GeoPoint,
    zoom: float,
    state: ViewportState,
    noise: Optional[NoiseField] = None,
    config: Optional[OverlayConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> List[ElevationMarker]:
    """Place labelled spot heights on a ring around the center.

    Args:
        center: Viewport center
        zoom: Map zoom level
        state: Current view settings
        noise: Elevation source for the labels
        config: Overlay configuration
        rng: Random generator (fresh from config.marker_seed when omitted)

    Returns:
        List of ElevationMarker (empty when 3D mode is off or zoomed out)
    """
    config = config or OverlayConfig()
    if not state.enabled or zoom < config.marker_min_zoom:
        return []

    noise = noise or NoiseField()
    rng = rng if rng is not None else np.random.default_rng(config.marker_seed)

    markers = []
    for i in range(config.marker_count):
        distance = MARKER_MIN_DISTANCE + rng.random() * MARKER_DISTANCE_SPAN
        position = _polar_offset(center, distance, i * config.marker_angle_step_deg)
        markers.append(ElevationMarker(position=position, elevation_m=noise.elevation(position)))

    logger.debug("Generated %d elevation markers", len(markers))
    return markers
