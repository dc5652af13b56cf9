"""Route group exports."""

from . import campaigns, health, overlays, routes

__all__ = ["campaigns", "routes", "overlays", "health"]
