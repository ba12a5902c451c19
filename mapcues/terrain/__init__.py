"""Synthetic terrain: elevation noise and contour bands."""
from .noise import NoiseParams, NoiseField
from .contours import sample_grid, generate_contour_levels

__all__ = [
    'NoiseParams',
    'NoiseField',
    'sample_grid',
    'generate_contour_levels',
]
