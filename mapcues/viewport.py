"""
Viewport 3D State

Holds the camera-like settings (3D toggle, tilt, bearing, building height
baseline) read by the building, shadow and perspective modules. A single
ViewportController owns the current state and notifies listeners
synchronously after every change.
"""
import logging
import math
from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, List, Mapping, Optional

logger = logging.getLogger(__name__)

# Ranges
MIN_TILT_DEG = 0.0
MAX_TILT_DEG = 60.0
MIN_BUILDING_HEIGHT_M = 5.0
MAX_BUILDING_HEIGHT_M = 50.0

# Defaults used for a fresh state and for missing snapshot keys
DEFAULT_BUILDING_HEIGHT_M = 15.0

# Snapshot keys
SNAPSHOT_ENABLED = 'enabled'
SNAPSHOT_BUILDING_HEIGHT = 'buildingHeight'
SNAPSHOT_TILT = 'tiltAngle'
SNAPSHOT_BEARING = 'bearing'


def clamp_tilt(angle: float) -> float:
    """Clamp tilt to [0, 60] degrees (non-finite input maps to 0)."""
    if not math.isfinite(angle):
        return MIN_TILT_DEG
    return max(MIN_TILT_DEG, min(MAX_TILT_DEG, float(angle)))


def normalize_bearing(bearing: float) -> float:
    """Wrap bearing into [0, 360) (non-finite input maps to 0)."""
    if not math.isfinite(bearing):
        return 0.0
    wrapped = float(bearing) % 360.0
    # Tiny negative inputs round up to exactly 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


def clamp_building_height(height: float) -> float:
    """Clamp building height baseline to [5, 50] meters (non-finite input maps to the default)."""
    if not math.isfinite(height):
        return DEFAULT_BUILDING_HEIGHT_M
    return max(MIN_BUILDING_HEIGHT_M, min(MAX_BUILDING_HEIGHT_M, float(height)))


@dataclass(frozen=True)
class ViewportState:
    """Immutable snapshot of the 3D view settings.

    Values are clamped/normalized on construction, so every instance
    satisfies the tilt, bearing and height ranges.

    Attributes:
        enabled: Whether 3D cues are drawn
        building_height: Random building height span in meters [5, 50]
        tilt_deg: Simulated camera pitch [0, 60]
        bearing_deg: Simulated map rotation [0, 360)
    """
    enabled: bool = False
    building_height: float = DEFAULT_BUILDING_HEIGHT_M
    tilt_deg: float = 0.0
    bearing_deg: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'enabled', bool(self.enabled))
        object.__setattr__(self, 'building_height',
                           clamp_building_height(self.building_height))
        object.__setattr__(self, 'tilt_deg', clamp_tilt(self.tilt_deg))
        object.__setattr__(self, 'bearing_deg', normalize_bearing(self.bearing_deg))


def to_snapshot(state: ViewportState) -> Dict[str, Any]:
    """Convert state to the persisted snapshot mapping."""
    return {
        SNAPSHOT_ENABLED: state.enabled,
        SNAPSHOT_BUILDING_HEIGHT: state.building_height,
        SNAPSHOT_TILT: state.tilt_deg,
        SNAPSHOT_BEARING: state.bearing_deg,
    }


def _snapshot_number(snapshot: Mapping[str, Any], key: str, default: float) -> float:
    value = snapshot.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Snapshot field '{key}' must be a number, got {value!r}")
    # Setters ignore non-finite input; restoring does the same
    if not math.isfinite(value):
        return default
    return float(value)


def from_snapshot(snapshot: Mapping[str, Any]) -> ViewportState:
    """Restore state from a snapshot mapping.

    Missing keys fall back to defaults; present values go through the same
    clamping/normalization as the live setters.

    Raises:
        ValueError: If a present value has the wrong type
    """
    enabled = snapshot.get(SNAPSHOT_ENABLED)
    if enabled is None:
        enabled = False
    elif not isinstance(enabled, bool):
        raise ValueError(f"Snapshot field '{SNAPSHOT_ENABLED}' must be a bool, got {enabled!r}")

    return ViewportState(
        enabled=enabled,
        building_height=_snapshot_number(
            snapshot, SNAPSHOT_BUILDING_HEIGHT, DEFAULT_BUILDING_HEIGHT_M),
        tilt_deg=_snapshot_number(snapshot, SNAPSHOT_TILT, 0.0),
        bearing_deg=_snapshot_number(snapshot, SNAPSHOT_BEARING, 0.0),
    )


StateListener = Callable[[ViewportState], None]


class ViewportController:
    """Single owner of the mutable view settings.

    Setters never reject input: out-of-range values are clamped or wrapped,
    and non-finite values are ignored. Not thread-safe; callers on several
    threads must serialize writes themselves.
    """

    def __init__(self, state: Optional[ViewportState] = None):
        self._state = state if state is not None else ViewportState()
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> ViewportState:
        return self._state

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback invoked with the new state after each change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        """Unregister a callback (no-op if it was never registered)."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _update(self, **changes) -> ViewportState:
        self._state = replace(self._state, **changes)
        logger.debug("Viewport state changed: %s", self._state)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def toggle_3d(self) -> ViewportState:
        """Flip 3D mode on/off."""
        return self._update(enabled=not self._state.enabled)

    def set_tilt(self, angle: float) -> ViewportState:
        """Set view pitch, clamped to [0, 60] degrees."""
        if not math.isfinite(angle):
            return self._state
        return self._update(tilt_deg=angle)

    def set_bearing(self, bearing: float) -> ViewportState:
        """Set map rotation, wrapped into [0, 360)."""
        if not math.isfinite(bearing):
            return self._state
        return self._update(bearing_deg=bearing)

    def set_building_height(self, height: float) -> ViewportState:
        """Set building height baseline, clamped to [5, 50] meters."""
        if not math.isfinite(height):
            return self._state
        return self._update(building_height=height)

    def reset(self) -> ViewportState:
        """Return to default settings."""
        return self._update(**asdict(ViewportState()))

    def to_snapshot(self) -> Dict[str, Any]:
        """Persisted snapshot of the current state."""
        return to_snapshot(self._state)

    def restore(self, snapshot: Mapping[str, Any]) -> ViewportState:
        """Replace the current state with a restored snapshot and notify."""
        return self._update(**asdict(from_snapshot(snapshot)))

