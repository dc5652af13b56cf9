"""Route preview orchestration service."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

import httpx

from ...config import settings
from ...data.campaigns_repository import get_campaign, get_campaigns
from ...errors import InvalidArgumentError
from ...models.domain import GeoPoint, RoadRoute
from ...schemas.campaigns import RankedCampaignModel
from ...schemas.routing import (
    NearestCampaignResponse,
    RoadRouteModel,
    RouteEstimateModel,
    RoutePreviewResponse,
)
from ..campaigns.status import campaign_status
from ..geospatial import is_valid_point
from ..proximity import build_route_estimate, nearest_campaign
from ..travel import format_duration, round_minutes
from .osrm_client import OSRMClient

logger = logging.getLogger(__name__)


def _fetch_road_route(origin: GeoPoint, destination: GeoPoint) -> Optional[RoadRoute]:
    """Ask OSRM for a road route; any failure leaves the naive estimate in charge."""
    if not settings.osrm_base_url:
        return None
    try:
        return OSRMClient().route(origin, destination)
    except (ConnectionError, httpx.HTTPError, ValueError, KeyError, TypeError) as e:
        logger.warning(f"OSRM road route unavailable, using straight-line estimate: {e}")
        return None


def preview_route(
    origin: GeoPoint,
    campaign_id: str,
    average_speed_kmh: Optional[float] = None,
    include_road: bool = True,
) -> RoutePreviewResponse:
    campaign = get_campaign(campaign_id)
    if not is_valid_point(campaign.location):
        raise InvalidArgumentError(f"Campaign '{campaign_id}' has no usable location.")

    speed = settings.average_speed_kmh if average_speed_kmh is None else average_speed_kmh
    estimate = build_route_estimate(origin, campaign.location, speed)

    road = _fetch_road_route(origin, campaign.location) if include_road else None
    road_model = None
    if road is not None:
        road_model = RoadRouteModel.from_route(road, format_duration(round_minutes(road.duration_min)))

    return RoutePreviewResponse(
        campaign_id=campaign.id,
        estimate=RouteEstimateModel.from_estimate(estimate),
        road=road_model,
        metadata={
            "average_speed_kmh": speed,
            "road_source": "osrm" if road_model else None,
            "osrm_profile": settings.osrm_profile if road_model else None,
        },
    )


def preview_nearest(origin: GeoPoint, average_speed_kmh: Optional[float] = None) -> NearestCampaignResponse:
    nearest = nearest_campaign(origin, get_campaigns())
    if nearest is None:
        return NearestCampaignResponse()
    speed = settings.average_speed_kmh if average_speed_kmh is None else average_speed_kmh
    estimate = build_route_estimate(origin, nearest.campaign.location, speed)
    now = datetime.now(timezone.utc)
    return NearestCampaignResponse(
        nearest=RankedCampaignModel.from_ranked(nearest, campaign_status(nearest.campaign, now)),
        estimate=RouteEstimateModel.from_estimate(estimate),
    )
