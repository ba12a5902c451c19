"""Route elevation profiles and slope grades."""
from .elevation import ElevationProfileService

__all__ = ['ElevationProfileService']
