"""Supabase client singleton.

Provides ``get_supabase()`` which returns a lazily-initialized, process-wide
Supabase client using credentials from ``settings``.  Each serverless
instance keeps one client for its lifetime.
"""

from supabase import Client, create_client

from posts_api.core.config import settings
from posts_api.core.errors import ConfigurationError

_client: Client | None = None


def get_supabase() -> Client:
    """Return the singleton Supabase client, creating it on first call.

    Raises ``ConfigurationError`` when the URL or key is blank.
    """
    global _client
    if _client is None:
        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise ConfigurationError("SUPABASE_URL and SUPABASE_KEY must be set")
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client


def reset_supabase() -> None:
    """Drop the cached client so the next call reconnects."""
    global _client
    _client = None
