from datetime import datetime, timedelta, timezone

from foodradar.models.domain import CampaignRecord, CampaignType
from foodradar.services.campaigns import campaign_status

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def _campaign(scheduled_date: datetime | None) -> CampaignRecord:
    return CampaignRecord(
        id="c1",
        title="Campaign",
        address="Shah Alam",
        type=CampaignType.SUMBANGAN,
        location=None,
        scheduled_date=scheduled_date,
    )


def test_undated_campaign_is_active() -> None:
    assert campaign_status(_campaign(None), NOW) == "active"


def test_future_campaign_is_active() -> None:
    assert campaign_status(_campaign(NOW + timedelta(minutes=1)), NOW) == "active"


def test_past_campaign_is_expired() -> None:
    assert campaign_status(_campaign(NOW - timedelta(minutes=1)), NOW) == "expired"
    assert campaign_status(_campaign(NOW), NOW) == "expired"


def test_status_compares_full_timestamps_across_timezones() -> None:
    # 19:30 in Kuala Lumpur is 11:30 UTC, half an hour before NOW.
    malaysia = timezone(timedelta(hours=8))
    assert campaign_status(_campaign(datetime(2025, 3, 1, 19, 30, tzinfo=malaysia)), NOW) == "expired"
    assert campaign_status(_campaign(datetime(2025, 3, 1, 13, 0)), NOW) == "active"
