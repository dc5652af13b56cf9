"""Campaign lifecycle status derived from the scheduled date."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Optional

from ...models.domain import CampaignRecord

CampaignStatus = Literal["active", "expired"]


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def campaign_status(campaign: CampaignRecord, now: Optional[datetime] = None) -> CampaignStatus:
    """Campaigns without a date stay active; dated ones expire once the timestamp passes."""
    if campaign.scheduled_date is None:
        return "active"
    current = _as_utc(now or datetime.now(timezone.utc))
    return "active" if _as_utc(campaign.scheduled_date) > current else "expired"
