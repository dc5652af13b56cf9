"""Naive travel-time estimates at a constant average speed."""

from __future__ import annotations

import math

from ..errors import InvalidArgumentError

DEFAULT_AVERAGE_SPEED_KMH = 30.0


def round_minutes(minutes: float) -> int:
    """Round a duration to whole minutes, halves going up."""
    if not math.isfinite(minutes) or minutes < 0:
        raise InvalidArgumentError(f"travel time must be a finite, non-negative number of minutes, got {minutes}")
    return int(math.floor(minutes + 0.5))


def estimate_travel_minutes(distance_km: float, average_speed_kmh: float = DEFAULT_AVERAGE_SPEED_KMH) -> int:
    if not math.isfinite(distance_km) or distance_km < 0:
        raise InvalidArgumentError(f"distance_km must be >= 0, got {distance_km}")
    if not math.isfinite(average_speed_kmh) or average_speed_kmh <= 0:
        raise InvalidArgumentError(f"average_speed_kmh must be > 0, got {average_speed_kmh}")
    # A tiny positive speed can still overflow the quotient to inf.
    return round_minutes(distance_km / average_speed_kmh * 60)


def format_duration(minutes: int) -> str:
    """Render whole minutes as ``"<m> min"`` or ``"<h> h <m> min"``."""

    if minutes < 0:
        raise InvalidArgumentError(f"minutes must be >= 0, got {minutes}")
    if minutes < 60:
        return f"{minutes} min"
    hours, remainder = divmod(minutes, 60)
    return f"{hours} h {remainder} min"


def estimate_travel_time(distance_km: float, average_speed_kmh: float = DEFAULT_AVERAGE_SPEED_KMH) -> str:
    """Human-readable travel time for `distance_km` at `average_speed_kmh`.

    This is an order-of-magnitude estimate for city traffic, not a routing ETA.
    Raises InvalidArgumentError for a negative distance or a non-positive speed.
    """

    return format_duration(estimate_travel_minutes(distance_km, average_speed_kmh))
