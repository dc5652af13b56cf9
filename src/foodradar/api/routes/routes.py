"""Route preview endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from ...errors import CampaignNotFoundError, InvalidArgumentError
from ...models.domain import GeoPoint
from ...schemas.routing import NearestCampaignResponse, RoutePreviewResponse
from ...services.routing.service import preview_nearest, preview_route

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("/preview", response_model=RoutePreviewResponse, status_code=status.HTTP_200_OK)
def get_route_preview(
    lat: float = Query(..., description="User latitude"),
    lng: float = Query(..., description="User longitude"),
    campaign_id: str = Query(..., description="Target campaign"),
    speed_kmh: float | None = Query(default=None, description="Average speed override"),
    road: bool = Query(default=True, description="Ask OSRM for a road route when configured"),
) -> RoutePreviewResponse:
    try:
        return preview_route(
            GeoPoint(latitude=lat, longitude=lng),
            campaign_id,
            average_speed_kmh=speed_kmh,
            include_road=road,
        )
    except CampaignNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/nearest", response_model=NearestCampaignResponse, status_code=status.HTTP_200_OK)
def get_nearest_campaign(
    lat: float = Query(..., description="User latitude"),
    lng: float = Query(..., description="User longitude"),
    speed_kmh: float | None = Query(default=None, description="Average speed override"),
) -> NearestCampaignResponse:
    try:
        return preview_nearest(GeoPoint(latitude=lat, longitude=lng), average_speed_kmh=speed_kmh)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
