"""
Synthetic Elevation Noise

Deterministic pseudo-elevation standing in for real DEM data. Elevation is
a sum of sinusoidal octaves of decreasing amplitude and increasing
frequency over scaled longitude/latitude, clamped at sea level.
"""
import math
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from ..interfaces import GeoPoint


@dataclass(frozen=True)
class NoiseParams:
    """Parameters for the sinusoidal elevation field."""
    # Degrees -> noise units
    coordinate_scale: float = 1000.0

    # (frequency, relative amplitude) per octave
    octaves: Tuple[Tuple[float, float], ...] = (
        (0.01, 1.0),
        (0.02, 0.5),
        (0.05, 0.25),
    )

    # Output scaling
    amplitude_m: float = 500.0
    base_m: float = 300.0


class NoiseField:
    """Pure coordinate -> elevation function.

    No hidden state: the same coordinate always yields the same value.
    """

    def __init__(self, params: NoiseParams = NoiseParams()):
        self.params = params

    def elevation(self, point: GeoPoint) -> float:
        """Elevation in meters (>= 0) at a single point."""
        p = self.params
        x = point.longitude * p.coordinate_scale
        y = point.latitude * p.coordinate_scale

        total = 0.0
        for frequency, weight in p.octaves:
            total += math.sin(x * frequency) * math.cos(y * frequency) * weight

        return max(0.0, total * p.amplitude_m + p.base_m)

    def elevation_grid(self, latitude: np.ndarray, longitude: np.ndarray) -> np.ndarray:
        """Vectorized elevation over broadcastable coordinate arrays.

        Args:
            latitude: Latitudes in degrees
            longitude: Longitudes in degrees

        Returns:
            Elevation array with the broadcast shape of the inputs
        """
        p = self.params
        x = np.asarray(longitude, dtype=np.float64) * p.coordinate_scale
        y = np.asarray(latitude, dtype=np.float64) * p.coordinate_scale

        total = np.zeros(np.broadcast(x, y).shape)
        for frequency, weight in p.octaves:
            total += np.sin(x * frequency) * np.cos(y * frequency) * weight

        return np.maximum(0.0, total * p.amplitude_m + p.base_m)

    def __call__(self, point: GeoPoint) -> float:
        return self.elevation(point)
