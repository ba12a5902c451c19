"""Synthetic 3D map cues and route elevation estimates."""
from .config import OverlayConfig
from .interfaces import (
    GeoPoint,
    Vector2,
    BuildingDescriptor,
    ReliefLine,
    ElevationMarker,
    ElevationSample,
    SlopeSegment,
    ContourLevel,
    ProfileSummary,
)
from .viewport import ViewportState, ViewportController, to_snapshot, from_snapshot
from .pipeline import OverlayFrame, render_overlay

__all__ = [
    "OverlayConfig",
    "GeoPoint",
    "Vector2",
    "BuildingDescriptor",
    "ReliefLine",
    "ElevationMarker",
    "ElevationSample",
    "SlopeSegment",
    "ContourLevel",
    "ProfileSummary",
    "ViewportState",
    "ViewportController",
    "to_snapshot",
    "from_snapshot",
    "OverlayFrame",
    "render_overlay",
]
