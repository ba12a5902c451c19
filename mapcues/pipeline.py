"""Single render pass producing every overlay output for a viewport."""
from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from .config import OverlayConfig
from .interfaces import BuildingDescriptor, ElevationMarker, GeoPoint, ReliefLine
from .overlay.buildings import BuildingGenerator
from .overlay.perspective import perspective_transform
from .overlay.relief import generate_elevation_markers, generate_relief_lines
from .terrain.noise import NoiseField
from .viewport import ViewportState


@dataclass(eq=False)
class OverlayFrame:
    """Everything the renderer composites for one refresh."""
    buildings: List[BuildingDescriptor]
    relief_lines: List[ReliefLine]
    elevation_markers: List[ElevationMarker]
    transform: np.ndarray

    @property
    def is_empty(self) -> bool:
        return not (self.buildings or self.relief_lines or self.elevation_markers)

    def __eq__(self, other):
        if not isinstance(other, OverlayFrame):
            return NotImplemented
        return (
            self.buildings == other.buildings
            and self.relief_lines == other.relief_lines
            and self.elevation_markers == other.elevation_markers
            and np.array_equal(self.transform, other.transform)
        )


def render_overlay(
    center: GeoPoint,
    zoom: float,
    state: ViewportState,
    config: Optional[OverlayConfig] = None,
    noise: Optional[NoiseField] = None
) -> OverlayFrame:
    """
    Produce the overlay for one viewport refresh.

    Deterministic in (center, zoom, state, config), so callers may cache
    frames by that key.

    Args:
        center: Viewport center
        zoom: Map zoom level
        state: Current view settings
        config: Overlay configuration
        noise: Elevation source for spot heights

    Returns:
        OverlayFrame
    """
    config = config or OverlayConfig()

    return OverlayFrame(
        buildings=BuildingGenerator(config).generate(center, zoom, state),
        relief_lines=generate_relief_lines(center, state, config),
        elevation_markers=generate_elevation_markers(center, zoom, state, noise, config),
        transform=perspective_transform(state, config.perspective_depth),
    )
