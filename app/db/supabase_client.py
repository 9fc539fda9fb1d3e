from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client


@lru_cache(maxsize=None)
def get_supabase_client(url: str, key: str) -> Client:
    """
    Singleton-style client per (url, key).
    Created lazily so importing this module never needs credentials.
    Credentials come from Settings, which already reads .env.
    """
    return create_client(url, key)
