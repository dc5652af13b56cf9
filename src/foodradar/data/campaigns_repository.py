"""Campaign data loader with database-first approach, falling back to a CSV export."""

from __future__ import annotations

import csv
import logging
import re
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

from ..config import settings
from ..db.supabase import CAMPAIGNS_TABLE, get_supabase_client
from ..errors import CampaignNotFoundError
from ..models.domain import CampaignRecord, CampaignType, GeoPoint

logger = logging.getLogger(__name__)

# PostgREST trims trailing zeros from fractional seconds, e.g. "08:00:00.12345".
_FRACTION_PATTERN = re.compile(r"\.(\d+)")


def _coerce_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def _coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse store timestamps (ISO strings, dates or datetimes) into aware datetimes."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        text = _FRACTION_PATTERN.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_location(row: Mapping[str, Any]) -> Optional[GeoPoint]:
    nested = row.get("location")
    if isinstance(nested, Mapping):
        lat = _coerce_float(nested.get("latitude"))
        lon = _coerce_float(nested.get("longitude"))
    else:
        lat = _coerce_float(row.get("latitude"))
        lon = _coerce_float(row.get("longitude"))
    if lat is None or lon is None:
        return None
    # Range checks are left to the geo engine, which skips such records.
    return GeoPoint(latitude=lat, longitude=lon)


def campaign_from_row(row: Mapping[str, Any]) -> CampaignRecord:
    """Build a CampaignRecord from a database row or CSV row.

    Raises ValueError when the row has no identifier or an unparsable date.
    """
    campaign_id = _coerce_text(row.get("id"))
    if not campaign_id:
        raise ValueError("campaign row is missing 'id'")
    return CampaignRecord(
        id=campaign_id,
        title=_coerce_text(row.get("title")) or "",
        address=_coerce_text(row.get("address")) or "",
        type=CampaignType.parse(row.get("type")),
        location=_parse_location(row),
        scheduled_date=parse_timestamp(row.get("scheduled_date")),
        description=_coerce_text(row.get("description")),
        ngo_name=_coerce_text(row.get("ngo_name")),
        created_at=parse_timestamp(row.get("created_at")),
    )


def _records_from_rows(rows: list[Mapping[str, Any]], source: str) -> list[CampaignRecord]:
    campaigns: list[CampaignRecord] = []
    for row in rows:
        try:
            campaigns.append(campaign_from_row(row))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping invalid campaign row from {source}: {e}")
            continue
    return campaigns


def _load_campaigns_from_database() -> tuple[CampaignRecord, ...] | None:
    """Load campaigns from Supabase.

    Returns None only when the database is not configured or the query fails.
    An empty table is a real answer and yields an empty tuple.
    """
    supabase = get_supabase_client()
    if not supabase:
        return None

    try:
        response = supabase.table(CAMPAIGNS_TABLE).select("*").execute()
    except Exception as e:
        logger.debug(f"Database query failed, falling back to file: {e}")
        return None

    return tuple(_records_from_rows(response.data or [], "database"))


def _load_campaigns_from_file(source: Path | None = None) -> tuple[CampaignRecord, ...]:
    """Load campaigns from the CSV export."""
    csv_path = source or settings.campaigns_file
    if not csv_path.exists():
        raise FileNotFoundError(f"Campaign file not found: {csv_path}")

    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Campaign file '{csv_path}' is missing a header row.")
        return tuple(_records_from_rows(list(reader), str(csv_path)))


def get_campaigns(source: Path | None = None) -> tuple[CampaignRecord, ...]:
    """Get campaigns from the database, or from the CSV export when the database is unavailable.

    Campaigns are fetched fresh on every call.
    """
    db_campaigns = _load_campaigns_from_database()
    if db_campaigns is not None:
        return db_campaigns

    try:
        return _load_campaigns_from_file(source)
    except FileNotFoundError as e:
        logger.warning(f"No campaign source available: {e}")
        return tuple()


def get_campaign(campaign_id: str, source: Path | None = None) -> CampaignRecord:
    for campaign in get_campaigns(source):
        if campaign.id == campaign_id:
            return campaign
    raise CampaignNotFoundError(campaign_id)
