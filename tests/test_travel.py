import pytest

from foodradar.errors import InvalidArgumentError
from foodradar.services.travel import (
    estimate_travel_minutes,
    estimate_travel_time,
    format_duration,
    round_minutes,
)


@pytest.mark.parametrize(
    "distance_km, speed, expected",
    [
        (15, 30, "30 min"),
        (30, 30, "1 h 0 min"),
        (0, 30, "0 min"),
        (45, 30, "1 h 30 min"),
        (0.1, 30, "0 min"),
        (0.9, 30, "2 min"),
    ],
)
def test_estimate_travel_time(distance_km, speed, expected) -> None:
    assert estimate_travel_time(distance_km, speed) == expected


def test_default_speed_is_city_traffic() -> None:
    assert estimate_travel_time(10) == "20 min"
    assert estimate_travel_minutes(10) == 20


def test_negative_distance_raises() -> None:
    with pytest.raises(InvalidArgumentError):
        estimate_travel_time(-1, 30)


@pytest.mark.parametrize("speed", [0, -5])
def test_non_positive_speed_raises(speed) -> None:
    with pytest.raises(InvalidArgumentError):
        estimate_travel_time(10, speed)


def test_format_duration_hours() -> None:
    assert format_duration(59) == "59 min"
    assert format_duration(125) == "2 h 5 min"


def test_tiny_speed_that_overflows_raises() -> None:
    with pytest.raises(InvalidArgumentError):
        estimate_travel_time(10, 1e-320)


def test_round_minutes_rounds_halves_up() -> None:
    assert round_minutes(24.5) == 25
    assert round_minutes(24.49) == 24
    assert round_minutes(0.5) == 1
