"""Supabase database connection management."""

from functools import lru_cache

from supabase import Client, create_client

from src.mockview.config import settings


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """
    Get Supabase client instance with anon key (singleton pattern).

    Use this for reads that should respect RLS policies.
    The feedback write path needs get_supabase_admin_client().

    Returns:
        Configured Supabase client with anon key
    """
    return create_client(settings.supabase_url, settings.supabase_anon_key)


@lru_cache(maxsize=1)
def get_supabase_admin_client() -> Client:
    """
    Get Supabase admin client with service role key (singleton pattern).

    This client bypasses Row-Level Security (RLS) policies. Only the server-side
    services use it; they are the sole writers of the feedback table.

    Returns:
        Configured Supabase client with service role key (bypasses RLS)
    """
    return create_client(settings.supabase_url, settings.supabase_service_role_key)
