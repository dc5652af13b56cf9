"""Campaign endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from ...errors import InvalidArgumentError, StoreNotConfiguredError
from ...models.domain import GeoPoint
from ...schemas.campaigns import (
    CampaignCreateRequest,
    CampaignListResponse,
    CampaignModel,
    NearbyCampaignsResponse,
)
from ...services.campaigns import create_campaign, find_nearby_campaigns, list_campaigns

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("", response_model=CampaignListResponse, status_code=status.HTTP_200_OK)
def get_campaigns() -> CampaignListResponse:
    return list_campaigns()


@router.post("", response_model=CampaignModel, status_code=status.HTTP_201_CREATED)
def post_campaign(payload: CampaignCreateRequest) -> CampaignModel:
    try:
        return create_campaign(payload)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except StoreNotConfiguredError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error creating campaign: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create campaign: {str(exc)}",
        ) from exc


@router.get("/nearby", response_model=NearbyCampaignsResponse, status_code=status.HTTP_200_OK)
def get_nearby_campaigns(
    lat: float = Query(..., description="User latitude"),
    lng: float = Query(..., description="User longitude"),
    radius_km: float | None = Query(default=None, description="Search radius; defaults to the nearby radius setting"),
    sort: bool = Query(default=False, description="Order results nearest first"),
) -> NearbyCampaignsResponse:
    try:
        return find_nearby_campaigns(GeoPoint(latitude=lat, longitude=lng), radius_km, sort_by_distance=sort)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
