"""Great-circle distance helpers."""
import math
from typing import Sequence
import numpy as np

from .interfaces import GeoPoint

EARTH_RADIUS_M = 6378137.0


def haversine_m(a: GeoPoint, b: GeoPoint, radius_m: float = EARTH_RADIUS_M) -> float:
    """Great-circle distance between two points.

    Args:
        a: Start point
        b: End point
        radius_m: Sphere radius

    Returns:
        Distance in meters (0 for coincident points)
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = lat2 - lat1
    dlon = math.radians(b.longitude - a.longitude)

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h slightly above 1 for antipodal points
    h = min(1.0, h)
    return 2 * radius_m * math.asin(math.sqrt(h))


def cumulative_distance_m(
    route: Sequence[GeoPoint],
    radius_m: float = EARTH_RADIUS_M
) -> np.ndarray:
    """Distance along the route at each point (starts at 0).

    Args:
        route: Ordered route points
        radius_m: Sphere radius

    Returns:
        Array of shape (len(route),)
    """
    if len(route) == 0:
        return np.zeros(0)

    steps = [haversine_m(route[i], route[i + 1], radius_m) for i in range(len(route) - 1)]
    return np.concatenate([[0.0], np.cumsum(steps)])
