"""Campaign orchestration service."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from ...config import settings
from ...data.campaigns_repository import get_campaigns
from ...models.domain import CampaignType, GeoPoint
from ...persistence.campaigns import campaign_to_row, save_campaign_to_database
from ...schemas.campaigns import (
    CampaignCreateRequest,
    CampaignListResponse,
    CampaignModel,
    GeoPointModel,
    NearbyCampaignsResponse,
    RankedCampaignModel,
)
from ..proximity import filter_nearby
from .status import campaign_status

logger = logging.getLogger(__name__)


def list_campaigns(now: Optional[datetime] = None) -> CampaignListResponse:
    current = now or datetime.now(timezone.utc)
    items = [CampaignModel.from_record(record, campaign_status(record, current)) for record in get_campaigns()]
    return CampaignListResponse(
        items=items,
        total=len(items),
        active=sum(1 for item in items if item.status == "active"),
    )


def find_nearby_campaigns(
    origin: GeoPoint,
    radius_km: Optional[float] = None,
    sort_by_distance: bool = False,
    now: Optional[datetime] = None,
) -> NearbyCampaignsResponse:
    radius = settings.nearby_radius_km if radius_km is None else radius_km
    current = now or datetime.now(timezone.utc)
    campaigns = get_campaigns()
    nearby = filter_nearby(origin, campaigns, radius, sort_by_distance=sort_by_distance)
    logger.info(f"{len(nearby)}/{len(campaigns)} campaigns within {radius} km of {origin.latitude},{origin.longitude}")
    return NearbyCampaignsResponse(
        origin=GeoPointModel.from_point(origin),
        radius_km=radius,
        sorted_by_distance=sort_by_distance,
        items=[RankedCampaignModel.from_ranked(item, campaign_status(item.campaign, current)) for item in nearby],
    )


def create_campaign(payload: CampaignCreateRequest) -> CampaignModel:
    row = campaign_to_row(
        title=payload.title,
        description=payload.description,
        address=payload.address,
        campaign_type=CampaignType.parse(payload.type),
        location=payload.location.to_point(),
        scheduled_date=payload.scheduled_date,
        ngo_name=payload.ngo_name,
    )
    record = save_campaign_to_database(row)
    return CampaignModel.from_record(record, campaign_status(record))
