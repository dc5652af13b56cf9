"""Geospatial helper functions."""

from __future__ import annotations

import math

from ..errors import InvalidArgumentError
from ..models.domain import GeoPoint

EARTH_RADIUS_KM = 6371.0


def is_valid_point(point: GeoPoint | None) -> bool:
    """Return True if the point has finite coordinates within WGS84 bounds."""

    if point is None:
        return False
    try:
        lat = float(point.latitude)
        lon = float(point.longitude)
    except (TypeError, ValueError, AttributeError):
        return False
    if not (math.isfinite(lat) and math.isfinite(lon)):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def validate_point(point: GeoPoint | None, name: str = "point") -> GeoPoint:
    if not is_valid_point(point):
        raise InvalidArgumentError(
            f"{name} must have latitude in [-90, 90] and longitude in [-180, 180], got {point!r}"
        )
    return point


def haversine_km(start: GeoPoint, end: GeoPoint) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    validate_point(start, "start")
    validate_point(end, "end")

    phi1, phi2 = math.radians(start.latitude), math.radians(end.latitude)
    d_phi = math.radians(end.latitude - start.latitude)
    d_lambda = math.radians(end.longitude - start.longitude)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push `a` just past 1 for antipodal points.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def destination_point(origin: GeoPoint, bearing_deg: float, distance_km: float) -> GeoPoint:
    """Point reached by travelling `distance_km` from `origin` along an initial bearing."""

    validate_point(origin, "origin")
    angular = distance_km / EARTH_RADIUS_KM
    theta = math.radians(bearing_deg)
    phi1 = math.radians(origin.latitude)
    lambda1 = math.radians(origin.longitude)

    phi2 = math.asin(
        math.sin(phi1) * math.cos(angular) + math.cos(phi1) * math.sin(angular) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(angular) * math.cos(phi1),
        math.cos(angular) - math.sin(phi1) * math.sin(phi2),
    )
    longitude = (math.degrees(lambda2) + 540) % 360 - 180
    return GeoPoint(latitude=math.degrees(phi2), longitude=longitude)
