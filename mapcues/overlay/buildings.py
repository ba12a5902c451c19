"""
Synthetic Building Generation

Scatters a bounded set of building descriptors around the viewport center.
The generator is reseeded from a fixed seed on every call, so repeated
renders of the same view produce the same jitter pattern.
"""
import logging
import math
from typing import List, Optional
import numpy as np

from ..config import OverlayConfig
from ..interfaces import BuildingDescriptor, GeoPoint
from ..viewport import ViewportState
from .shadow import shadow_offset

logger = logging.getLogger(__name__)


def building_count(zoom: float, config: OverlayConfig) -> int:
    """Number of buildings for a zoom level.

    floor((zoom - min_zoom) * per_level), capped at config.max_buildings.
    """
    if not math.isfinite(zoom) or zoom < config.building_min_zoom:
        return 0

    # Round first so e.g. 14.35 does not floor to 6.999...
    raw = round((zoom - config.building_min_zoom) * config.buildings_per_zoom_level, 9)
    count = math.floor(raw)

    if config.max_buildings is not None and count > config.max_buildings:
        logger.warning(
            "Building count %d at zoom %.2f exceeds cap, truncating to %d",
            count, zoom, config.max_buildings
        )
        count = config.max_buildings

    return count


class BuildingGenerator:
    """Produces building descriptors for the current viewport."""

    def __init__(self, config: Optional[OverlayConfig] = None):
        self.config = config or OverlayConfig()

    def new_rng(self) -> np.random.Generator:
        """Fresh generator seeded from config.building_seed."""
        return np.random.default_rng(self.config.building_seed)

    def generate(
        self,
        center: GeoPoint,
        zoom: float,
        state: ViewportState,
        rng: Optional[np.random.Generator] = None
    ) -> List[BuildingDescriptor]:
        """Generate buildings around a viewport center.

        Args:
            center: Viewport center
            zoom: Map zoom level
            state: Current view settings
            rng: Random generator (a fresh fixed-seed one when omitted)

        Returns:
            List of BuildingDescriptor, empty when 3D mode is off or the
            zoom is below the building threshold
        """
        if not state.enabled:
            return []

        n_buildings = building_count(zoom, self.config)
        if n_buildings == 0:
            return []

        rng = rng if rng is not None else self.new_rng()

        # One row per building: lat jitter, lng jitter, height
        draws = rng.random((n_buildings, 3))
        spread = self.config.building_spread_deg / zoom
        lat_offsets = (draws[:, 0] - 0.5) * spread
        lng_offsets = (draws[:, 1] - 0.5) * spread
        heights = draws[:, 2] * state.building_height + self.config.building_min_height_m

        buildings = []
        for dlat, dlng, height in zip(lat_offsets, lng_offsets, heights):
            height = float(height)
            buildings.append(BuildingDescriptor(
                position=center.offset(float(dlat), float(dlng)),
                height=height,
                shadow_offset=shadow_offset(
                    height, state, self.config.shadow_length_factor
                )
            ))

        logger.debug("Generated %d buildings at zoom %.2f", len(buildings), zoom)
        return buildings
