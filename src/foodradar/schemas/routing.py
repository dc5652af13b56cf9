"""Route preview schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from ..models.domain import RoadRoute, RouteEstimate
from .campaigns import GeoPointModel, RankedCampaignModel


class RouteEstimateModel(BaseModel):
    distance_km: float
    travel_time: str
    origin: GeoPointModel
    destination: GeoPointModel

    @classmethod
    def from_estimate(cls, estimate: RouteEstimate) -> "RouteEstimateModel":
        return cls(
            distance_km=round(estimate.distance_km, 3),
            travel_time=estimate.travel_time,
            origin=GeoPointModel.from_point(estimate.origin),
            destination=GeoPointModel.from_point(estimate.destination),
        )


class RoadRouteModel(BaseModel):
    distance_km: float
    duration_min: float
    travel_time: str
    path: List[GeoPointModel]

    @classmethod
    def from_route(cls, route: RoadRoute, travel_time: str) -> "RoadRouteModel":
        return cls(
            distance_km=round(route.distance_km, 3),
            duration_min=round(route.duration_min, 1),
            travel_time=travel_time,
            path=[GeoPointModel.from_point(point) for point in route.path],
        )


class RoutePreviewResponse(BaseModel):
    campaign_id: str
    estimate: RouteEstimateModel
    road: Optional[RoadRouteModel] = None
    metadata: dict


class NearestCampaignResponse(BaseModel):
    nearest: Optional[RankedCampaignModel] = None
    estimate: Optional[RouteEstimateModel] = None
