"""GeoJSON map overlay for the campaign map screen."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from shapely.geometry import Point, Polygon, mapping

from ...models.domain import CampaignRecord, GeoPoint
from ..geospatial import destination_point, validate_point
from ..proximity import rank_campaigns

CIRCLE_SEGMENTS = 64

# Marker colours per campaign type, matching the mobile app palette.
TYPE_COLORS = {
    "infaq": "#FF6B8B",
    "sumbangan": "#4CAF50",
    "other": "#9C27B0",
}


def radius_circle(center: GeoPoint, radius_km: float, segments: int = CIRCLE_SEGMENTS) -> Polygon:
    """Approximate the circle of `radius_km` around `center` as a closed polygon.

    Coordinates are (lon, lat) as GeoJSON expects.
    """
    validate_point(center, "center")
    if radius_km <= 0:
        raise ValueError("radius_km must be > 0")
    if segments < 3:
        raise ValueError("segments must be >= 3")

    ring = []
    for step in range(segments):
        vertex = destination_point(center, 360.0 * step / segments, radius_km)
        ring.append((vertex.longitude, vertex.latitude))
    return Polygon(ring)


def build_map_overlay(
    origin: GeoPoint,
    campaigns: Iterable[CampaignRecord],
    radius_km: float,
) -> Dict[str, Any]:
    """Build a FeatureCollection with campaign markers and the user's radius circle."""
    features: List[Dict[str, Any]] = []

    for ranked in rank_campaigns(origin, campaigns):
        campaign = ranked.campaign
        features.append({
            "type": "Feature",
            "id": campaign.id,
            "geometry": mapping(Point(campaign.location.longitude, campaign.location.latitude)),
            "properties": {
                "kind": "campaign",
                "title": campaign.title,
                "address": campaign.address,
                "type": campaign.type.value,
                "color": TYPE_COLORS[campaign.type.value],
                "distance_km": round(ranked.distance_km, 3),
                "within_radius": ranked.distance_km <= radius_km,
            },
        })

    if radius_km > 0:
        features.append({
            "type": "Feature",
            "id": "radius",
            "geometry": mapping(radius_circle(origin, radius_km)),
            "properties": {
                "kind": "radius",
                "radius_km": radius_km,
                "center": [origin.longitude, origin.latitude],
            },
        })

    return {"type": "FeatureCollection", "features": features}
