"""Map overlay endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from ...config import settings
from ...data.campaigns_repository import get_campaigns
from ...errors import InvalidArgumentError
from ...models.domain import GeoPoint
from ...services.export import build_map_overlay

router = APIRouter(prefix="/map", tags=["map"])


@router.get("/overlay", status_code=status.HTTP_200_OK)
def get_map_overlay(
    lat: float = Query(..., description="User latitude"),
    lng: float = Query(..., description="User longitude"),
    radius_km: float | None = Query(default=None, description="Circle radius; defaults to the map radius setting"),
) -> dict:
    """GeoJSON FeatureCollection of campaign markers and the radius circle around the user."""
    radius = settings.map_radius_km if radius_km is None else radius_km
    try:
        return build_map_overlay(GeoPoint(latitude=lat, longitude=lng), get_campaigns(), radius)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
