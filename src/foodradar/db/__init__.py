"""Database clients and utilities."""

from .supabase import CAMPAIGNS_TABLE, get_supabase_client

__all__ = ["CAMPAIGNS_TABLE", "get_supabase_client"]
