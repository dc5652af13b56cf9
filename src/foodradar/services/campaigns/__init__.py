"""Campaign service helpers."""

from .service import create_campaign, find_nearby_campaigns, list_campaigns
from .status import CampaignStatus, campaign_status

__all__ = [
    "CampaignStatus",
    "campaign_status",
    "list_campaigns",
    "find_nearby_campaigns",
    "create_campaign",
]
