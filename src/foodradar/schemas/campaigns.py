"""Campaign request/response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..models.domain import CampaignRecord, GeoPoint, RankedCampaign


class GeoPointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @classmethod
    def from_point(cls, point: GeoPoint) -> "GeoPointModel":
        return cls(latitude=point.latitude, longitude=point.longitude)

    def to_point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class CampaignModel(BaseModel):
    id: str
    title: str
    address: str
    type: Literal["infaq", "sumbangan", "other"]
    description: Optional[str] = None
    ngo_name: Optional[str] = None
    # Store rows can carry coordinates outside WGS84 bounds, so no range check here.
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    scheduled_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    status: Literal["active", "expired"]

    @classmethod
    def from_record(cls, record: CampaignRecord, status: str) -> "CampaignModel":
        return cls(
            id=record.id,
            title=record.title,
            address=record.address,
            type=record.type.value,
            description=record.description,
            ngo_name=record.ngo_name,
            latitude=record.location.latitude if record.location else None,
            longitude=record.location.longitude if record.location else None,
            scheduled_date=record.scheduled_date,
            created_at=record.created_at,
            status=status,
        )


class CampaignListResponse(BaseModel):
    items: List[CampaignModel]
    total: int
    active: int


class CampaignCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    type: Literal["infaq", "sumbangan"]
    location: GeoPointModel
    scheduled_date: datetime
    ngo_name: Optional[str] = Field(default=None, description="Name of the NGO running the campaign.")


class RankedCampaignModel(BaseModel):
    campaign: CampaignModel
    distance_km: float

    @classmethod
    def from_ranked(cls, ranked: RankedCampaign, status: str) -> "RankedCampaignModel":
        return cls(
            campaign=CampaignModel.from_record(ranked.campaign, status),
            distance_km=round(ranked.distance_km, 3),
        )


class NearbyCampaignsResponse(BaseModel):
    origin: GeoPointModel
    radius_km: float
    sorted_by_distance: bool
    items: List[RankedCampaignModel]
