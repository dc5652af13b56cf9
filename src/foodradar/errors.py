"""Exception types shared by the geo engine and the service layer."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised for malformed coordinates, negative distances or non-positive speeds."""


class CampaignNotFoundError(LookupError):
    def __init__(self, campaign_id: str) -> None:
        super().__init__(f"Campaign '{campaign_id}' not found.")
        self.campaign_id = campaign_id


class StoreNotConfiguredError(RuntimeError):
    """Raised when a write is attempted without a configured campaign store."""
