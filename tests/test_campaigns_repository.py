from datetime import datetime, timezone
from pathlib import Path

import pytest

from conftest import SAMPLE_ROWS, FakeSupabase, write_campaigns_csv
from foodradar.data import campaigns_repository
from foodradar.errors import CampaignNotFoundError
from foodradar.models.domain import CampaignType, GeoPoint


def test_campaign_from_row_parses_fields() -> None:
    record = campaigns_repository.campaign_from_row(
        {
            "id": "abc",
            "title": " Bubur Lambuk ",
            "address": "Kampung Baru",
            "type": "Infaq",
            "latitude": "3.1831",
            "longitude": 101.6869,
            "scheduled_date": "2025-03-01T18:30:00Z",
            "ngo_name": "Pertubuhan Amal",
        }
    )

    assert record.title == "Bubur Lambuk"
    assert record.type is CampaignType.INFAQ
    assert record.location == GeoPoint(latitude=3.1831, longitude=101.6869)
    assert record.scheduled_date == datetime(2025, 3, 1, 18, 30, tzinfo=timezone.utc)
    assert record.description is None


def test_campaign_from_row_accepts_nested_location_and_unknown_type() -> None:
    record = campaigns_repository.campaign_from_row(
        {"id": "x", "type": "kenduri", "location": {"latitude": 1.5, "longitude": 103.7}}
    )

    assert record.type is CampaignType.OTHER
    assert record.location == GeoPoint(latitude=1.5, longitude=103.7)


def test_campaign_from_row_without_coordinates_has_no_location() -> None:
    record = campaigns_repository.campaign_from_row({"id": "x", "latitude": "", "longitude": "abc"})
    assert record.location is None


def test_campaign_from_row_requires_id() -> None:
    with pytest.raises(ValueError):
        campaigns_repository.campaign_from_row({"title": "No id"})


def test_naive_timestamps_are_treated_as_utc() -> None:
    parsed = campaigns_repository.parse_timestamp("2025-03-01T08:00:00")
    assert parsed.tzinfo == timezone.utc


def test_get_campaigns_falls_back_to_csv(campaigns_csv: Path) -> None:
    campaigns = campaigns_repository.get_campaigns()

    assert [c.id for c in campaigns] == [row["id"] for row in SAMPLE_ROWS]
    assert campaigns[3].location is None


def test_invalid_csv_rows_are_skipped(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(campaigns_repository, "get_supabase_client", lambda: None)
    path = write_campaigns_csv(
        tmp_path / "campaigns.csv",
        [
            {"id": "", "title": "missing id"},
            {"id": "bad-date", "scheduled_date": "next friday"},
            {"id": "ok", "latitude": "3.1", "longitude": "101.6"},
        ],
    )

    campaigns = campaigns_repository.get_campaigns(path)

    assert [c.id for c in campaigns] == ["ok"]


def test_get_campaigns_prefers_database(campaigns_csv: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    client = FakeSupabase(rows=[{"id": "db-1", "title": "From DB", "type": "sumbangan", "latitude": 3.14, "longitude": 101.69}])
    monkeypatch.setattr(campaigns_repository, "get_supabase_client", lambda: client)

    campaigns = campaigns_repository.get_campaigns()

    assert [c.id for c in campaigns] == ["db-1"]


def test_database_errors_fall_back_to_csv(campaigns_csv: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    client = FakeSupabase(error=RuntimeError("connection refused"))
    monkeypatch.setattr(campaigns_repository, "get_supabase_client", lambda: client)

    campaigns = campaigns_repository.get_campaigns()

    assert len(campaigns) == len(SAMPLE_ROWS)


def test_missing_sources_yield_no_campaigns(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(campaigns_repository, "get_supabase_client", lambda: None)
    assert campaigns_repository.get_campaigns(tmp_path / "absent.csv") == ()


def test_get_campaign_by_id(campaigns_csv: Path) -> None:
    assert campaigns_repository.get_campaign("c-far").title == "Sumbangan Gombak"
    with pytest.raises(CampaignNotFoundError):
        campaigns_repository.get_campaign("does-not-exist")


@pytest.mark.parametrize(
    "text, microsecond",
    [
        ("2026-10-19T08:00:00.12345+00:00", 123450),
        ("2026-10-19T08:00:00.1Z", 100000),
        ("2026-10-19T08:00:00.1234567+00:00", 123456),
    ],
)
def test_parse_timestamp_normalises_fractional_seconds(text: str, microsecond: int) -> None:
    parsed = campaigns_repository.parse_timestamp(text)
    assert parsed == datetime(2026, 10, 19, 8, 0, 0, microsecond, tzinfo=timezone.utc)


def test_empty_database_does_not_fall_back_to_csv(campaigns_csv: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    client = FakeSupabase(rows=[])
    monkeypatch.setattr(campaigns_repository, "get_supabase_client", lambda: client)

    assert campaigns_repository.get_campaigns() == ()


def test_malformed_database_rows_do_not_fall_back_to_csv(campaigns_csv: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    client = FakeSupabase(rows=[{"title": "no id"}, {"id": "bad", "scheduled_date": "soon"}])
    monkeypatch.setattr(campaigns_repository, "get_supabase_client", lambda: client)

    assert campaigns_repository.get_campaigns() == ()
