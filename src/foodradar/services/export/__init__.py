"""Export services."""

from .geojson import build_map_overlay, radius_circle

__all__ = ["build_map_overlay", "radius_circle"]
