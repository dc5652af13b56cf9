"""Proximity filtering and route estimates over campaign records."""

from __future__ import annotations

from typing import Iterable, Optional

from ..models.domain import CampaignRecord, GeoPoint, RankedCampaign, RouteEstimate
from .geospatial import haversine_km, is_valid_point, validate_point
from .travel import DEFAULT_AVERAGE_SPEED_KMH, estimate_travel_time


def rank_campaigns(origin: GeoPoint, campaigns: Iterable[CampaignRecord]) -> list[RankedCampaign]:
    """Attach a distance to every campaign that has usable coordinates.

    Campaigns without a location, or with out-of-range coordinates, are skipped.
    Input order is preserved.
    """

    validate_point(origin, "origin")
    ranked: list[RankedCampaign] = []
    for campaign in campaigns:
        if not is_valid_point(campaign.location):
            continue
        ranked.append(RankedCampaign(campaign=campaign, distance_km=haversine_km(origin, campaign.location)))
    return ranked


def filter_nearby(
    origin: GeoPoint,
    campaigns: Iterable[CampaignRecord],
    radius_km: float,
    sort_by_distance: bool = False,
) -> list[RankedCampaign]:
    """Return campaigns within `radius_km` of `origin`.

    A negative radius matches nothing; a zero radius only matches campaigns
    located exactly at the origin. With `sort_by_distance` the result is
    ordered nearest first (stable for equal distances).
    """

    ranked = rank_campaigns(origin, campaigns)
    if radius_km < 0:
        return []
    nearby = [item for item in ranked if item.distance_km <= radius_km]
    if sort_by_distance:
        nearby.sort(key=lambda item: item.distance_km)
    return nearby


def nearest_campaign(origin: GeoPoint, campaigns: Iterable[CampaignRecord]) -> Optional[RankedCampaign]:
    ranked = rank_campaigns(origin, campaigns)
    if not ranked:
        return None
    return min(ranked, key=lambda item: item.distance_km)


def build_route_estimate(
    origin: GeoPoint,
    destination: GeoPoint,
    average_speed_kmh: float = DEFAULT_AVERAGE_SPEED_KMH,
) -> RouteEstimate:
    distance_km = haversine_km(origin, destination)
    return RouteEstimate(
        distance_km=distance_km,
        travel_time=estimate_travel_time(distance_km, average_speed_kmh),
        origin=origin,
        destination=destination,
    )
