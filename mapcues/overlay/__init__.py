"""Renderer-facing 3D cues: buildings, shadows, relief and perspective."""
from .buildings import BuildingGenerator, building_count
from .shadow import shadow_offset
from .perspective import perspective_transform, project_point
from .relief import generate_relief_lines, generate_elevation_markers

__all__ = [
    'BuildingGenerator',
    'building_count',
    'shadow_offset',
    'perspective_transform',
    'project_point',
    'generate_relief_lines',
    'generate_elevation_markers',
]
