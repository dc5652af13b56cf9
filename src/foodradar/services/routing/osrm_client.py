"""HTTP client for interacting with OSRM services."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ...config import settings
from ...models.domain import GeoPoint, RoadRoute

logger = logging.getLogger(__name__)

# Two points in central Kuala Lumpur, used for the route health check.
HEALTH_CHECK_COORDINATES = "101.686900,3.139000;101.711500,3.157800"


class OSRMClient:
    def __init__(
        self,
        base_url: str | None = None,
        profile: str | None = None,
        timeout: float = 10.0,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.osrm_base_url or "").rstrip("/")
        if not self.base_url:
            raise ValueError("OSRM base URL is not configured.")
        self.profile = profile or settings.osrm_profile
        self.max_retries = max_retries if max_retries is not None else settings.osrm_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.osrm_backoff_seconds
        self.timeout = timeout
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=5.0),
            transport=self._transport,
        )

    def _get_json(self, url: str, params: dict[str, str]) -> dict[str, Any]:
        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=params)
                    response.raise_for_status()
                    data = response.json()
                    if not isinstance(data, dict):
                        raise ValueError("OSRM returned a non-object response.")
                    if data.get("code") != "Ok":
                        error_msg = data.get("message", "Unknown OSRM route error")
                        raise ValueError(f"OSRM route request failed: {error_msg}")
                    return data
                except httpx.HTTPStatusError:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise
                    time.sleep(self.backoff_seconds * attempt)
                except httpx.TimeoutException as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"OSRM route request timed out after {self.max_retries} retries: {e}")
                        raise
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"OSRM route timeout, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries})")
                    time.sleep(wait_time)
                except (httpx.NetworkError, OSError) as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise ConnectionError(
                            f"Failed to connect to OSRM service at {self.base_url}: {e}"
                        ) from e
                    wait_time = self.backoff_seconds * (2 ** (attempt - 1))
                    logger.debug(f"OSRM network error, retrying in {wait_time:.1f}s (attempt {attempt}/{self.max_retries}): {e}")
                    time.sleep(wait_time)
        finally:
            client.close()

    def route(self, origin: GeoPoint, destination: GeoPoint) -> RoadRoute:
        """Get the road route between two points.

        Returns the road distance, the duration and the decoded path that follows streets.
        """
        coordinate_str = ";".join(
            f"{point.longitude},{point.latitude}" for point in (origin, destination)
        )
        params = {
            "overview": "full",
            "geometries": "polyline",
            "steps": "false",
        }
        url = f"{self.base_url}/route/v1/{self.profile}/{coordinate_str}"
        data = self._get_json(url, params)

        routes = data.get("routes") or []
        if not routes:
            raise ValueError("OSRM returned no routes.")
        best = routes[0]
        try:
            distance_m = float(best["distance"])
            duration_s = float(best["duration"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"OSRM route is missing distance or duration: {e}") from e
        path = [
            GeoPoint(latitude=lat, longitude=lon)
            for lat, lon in decode_polyline(best.get("geometry") or "")
        ]
        return RoadRoute(
            distance_km=distance_m / 1000.0,
            duration_min=duration_s / 60.0,
            path=path,
        )


def decode_polyline(polyline: str) -> list[tuple[float, float]]:
    """Decode Google polyline string to list of (lat, lon) coordinates.

    OSRM uses Google's polyline encoding format for route geometry.
    Raises ValueError when the string ends in the middle of a value.
    """
    coordinates = []
    index = 0
    lat = 0
    lon = 0

    while index < len(polyline):
        deltas = []
        for _ in range(2):
            shift = 0
            result = 0
            while True:
                if index >= len(polyline):
                    raise ValueError("Truncated polyline geometry.")
                b = ord(polyline[index]) - 63
                index += 1
                result |= (b & 0x1f) << shift
                shift += 5
                if b < 0x20:
                    break
            deltas.append(~(result >> 1) if (result & 1) else (result >> 1))
        lat += deltas[0]
        lon += deltas[1]
        coordinates.append((lat / 1e5, lon / 1e5))

    return coordinates


def check_health(base_url: str | None = None, transport: httpx.BaseTransport | None = None) -> bool:
    """Check OSRM service health with a minimal route request.

    Public OSRM endpoints may not have a /health endpoint.
    """
    base = base_url or settings.osrm_base_url
    if not base:
        return False
    url = f"{base.rstrip('/')}/route/v1/{settings.osrm_profile}/{HEALTH_CHECK_COORDINATES}"
    try:
        with httpx.Client(timeout=5.0, transport=transport) as client:
            response = client.get(url, params={"overview": "false"})
            response.raise_for_status()
            payload = response.json()
            return isinstance(payload, dict) and payload.get("code") == "Ok"
    except (httpx.HTTPError, ValueError):
        return False
