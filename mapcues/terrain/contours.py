"""
Synthetic Contour Bands

Samples the noise field on a regular lat/lon grid around a center and
groups grid points into elevation bands, giving the renderer contour-like
dot clouds.
"""
import logging
import math
from typing import List, Optional, Tuple
import numpy as np

from ..interfaces import ContourLevel, GeoPoint
from ..viewport import ViewportState
from .noise import NoiseField

logger = logging.getLogger(__name__)

KM_PER_DEGREE_LAT = 111.32


def sample_grid(
    center: GeoPoint,
    radius_km: float,
    grid_size: int = 20
) -> Tuple[np.ndarray, np.ndarray]:
    """Build a square lat/lon grid spanning radius_km around center.

    Returns:
        Tuple of (lat_grid, lon_grid), each [grid_size, grid_size]
    """
    offsets = (np.arange(grid_size) - grid_size / 2) / grid_size
    lat_step = radius_km / KM_PER_DEGREE_LAT
    lon_step = radius_km / (KM_PER_DEGREE_LAT * math.cos(math.radians(center.latitude)))

    lats = center.latitude + offsets * lat_step
    lons = center.longitude + offsets * lon_step
    lat_grid, lon_grid = np.meshgrid(lats, lons, indexing='ij')
    return lat_grid, lon_grid


def generate_contour_levels(
    center: GeoPoint,
    radius_km: float,
    state: ViewportState,
    noise: Optional[NoiseField] = None,
    interval_m: float = 50.0,
    grid_size: int = 20,
    n_levels: int = 10
) -> List[ContourLevel]:
    """Group grid points into contour bands.

    Band k sits at grid_min + k * interval_m and keeps every grid point
    within interval_m / 2 of it. Empty bands are dropped.

    Args:
        center: Grid center
        radius_km: Grid span in kilometers
        state: Current view settings (nothing is produced when 3D is off)
        noise: Elevation source
        interval_m: Elevation step between bands
        grid_size: Samples per grid side
        n_levels: Number of bands to try

    Returns:
        List of ContourLevel ordered by elevation
    """
    if not state.enabled or grid_size <= 0:
        return []

    noise = noise or NoiseField()
    lat_grid, lon_grid = sample_grid(center, radius_km, grid_size)
    heights = noise.elevation_grid(lat_grid, lon_grid)
    base = float(np.min(heights))

    levels = []
    for k in range(n_levels):
        level_m = base + k * interval_m
        mask = np.abs(heights - level_m) < interval_m / 2
        if not np.any(mask):
            continue
        points = tuple(
            GeoPoint(float(lat), float(lon))
            for lat, lon in zip(lat_grid[mask], lon_grid[mask])
        )
        levels.append(ContourLevel(elevation_m=level_m, points=points))

    logger.debug("Generated %d contour levels around %s", len(levels), center)
    return levels
