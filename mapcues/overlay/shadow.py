"""Cast-shadow displacement for simulated buildings."""
import math

from ..interfaces import Vector2
from ..viewport import ViewportState

DEFAULT_LENGTH_FACTOR = 0.3


def shadow_offset(
    height: float,
    state: ViewportState,
    length_factor: float = DEFAULT_LENGTH_FACTOR
) -> Vector2:
    """Compute the shadow displacement of a building silhouette.

    Length grows with height and with tilt (sin is increasing on [0, 60]);
    direction follows the bearing. A top-down view (tilt 0) casts no shadow.

    Args:
        height: Building height in meters
        state: Current view settings
        length_factor: Shadow length per meter of height at 90 degrees tilt

    Returns:
        Vector2 (dx, dy)
    """
    length = height * length_factor * math.sin(math.radians(state.tilt_deg))
    bearing_rad = math.radians(state.bearing_deg)
    return Vector2(length * math.cos(bearing_rad), length * math.sin(bearing_rad))
