"""Domain models for campaign records and geo computations."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


class CampaignType(str, Enum):
    INFAQ = "infaq"
    SUMBANGAN = "sumbangan"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> "CampaignType":
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.OTHER


@dataclass(slots=True)
class CampaignRecord:
    """A food-distribution campaign as stored by the NGO workflow."""

    id: str
    title: str
    address: str
    type: CampaignType
    location: Optional[GeoPoint]
    scheduled_date: Optional[datetime] = None
    description: Optional[str] = None
    ngo_name: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(slots=True)
class RankedCampaign:
    campaign: CampaignRecord
    distance_km: float


@dataclass(slots=True)
class RouteEstimate:
    distance_km: float
    travel_time: str
    origin: GeoPoint
    destination: GeoPoint


@dataclass(slots=True)
class RoadRoute:
    """Road route returned by the routing service."""

    distance_km: float
    duration_min: float
    path: list[GeoPoint] = field(default_factory=list)
