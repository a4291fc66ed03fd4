"""Shared Supabase client.

One client per process backs both the record store in ``recruit.db.store``
and email/password auth in ``recruit.services.auth``.  It is created on
first use so importing the app never opens a connection.
"""

from supabase import Client, create_client

from recruit.core.config import settings

_client: Client | None = None


def get_supabase() -> Client:
    """Return the process client, built from ``SUPABASE_URL`` / ``SUPABASE_KEY``."""
    global _client
    if _client is None:
        _client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return _client
