"""Campaign database persistence."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from ..data.campaigns_repository import campaign_from_row
from ..db.supabase import CAMPAIGNS_TABLE, get_supabase_client
from ..errors import InvalidArgumentError, StoreNotConfiguredError
from ..models.domain import CampaignRecord, CampaignType, GeoPoint
from ..services.geospatial import validate_point

logger = logging.getLogger(__name__)

CREATABLE_TYPES = (CampaignType.INFAQ, CampaignType.SUMBANGAN)


def campaign_to_row(
    *,
    title: str,
    description: str,
    address: str,
    campaign_type: CampaignType,
    location: GeoPoint,
    scheduled_date: datetime,
    ngo_name: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> dict[str, Any]:
    """Validate NGO input and convert it to a database record."""
    missing = [
        name
        for name, value in (("title", title), ("description", description), ("address", address))
        if not value or not value.strip()
    ]
    if missing:
        raise InvalidArgumentError(f"Missing required campaign fields: {', '.join(missing)}")
    if campaign_type not in CREATABLE_TYPES:
        raise InvalidArgumentError(
            f"Campaign type must be one of {', '.join(t.value for t in CREATABLE_TYPES)}"
        )
    validate_point(location, "location")
    if scheduled_date.tzinfo is None:
        scheduled_date = scheduled_date.replace(tzinfo=timezone.utc)

    return {
        "title": title.strip(),
        "description": description.strip(),
        "address": address.strip(),
        "type": campaign_type.value,
        "latitude": float(location.latitude),
        "longitude": float(location.longitude),
        "ngo_name": ngo_name.strip() if ngo_name else None,
        "scheduled_date": scheduled_date.isoformat(),
        "created_at": (created_at or datetime.now(timezone.utc)).isoformat(),
    }


def save_campaign_to_database(row: dict[str, Any]) -> CampaignRecord:
    """Insert a campaign row; the store assigns the identifier.

    Raises:
        StoreNotConfiguredError: if Supabase credentials are not configured.
    """
    supabase = get_supabase_client()
    if not supabase:
        raise StoreNotConfiguredError(
            "Campaign store not configured. Set FOODRADAR_SUPABASE_URL and FOODRADAR_SUPABASE_KEY."
        )

    response = supabase.table(CAMPAIGNS_TABLE).insert(row).execute()
    if not response.data:
        raise RuntimeError("Campaign insert returned no data.")
    record = campaign_from_row(response.data[0])
    logger.info(f"Created campaign {record.id} ({record.type.value}) at {record.address!r}")
    return record
