"""Supabase adapters.

Both adapters speak plain HTTP to a Supabase project: the auth adapter
verifies bearer tokens against GoTrue, the store runs PostgREST queries
with the caller's token so row-level security decides visibility.
"""

from src.infrastructure.supabase.auth_adapter import SupabaseAuthAdapter
from src.infrastructure.supabase.postgrest_store import (
    PostgrestTenantStore,
    SupabaseStoreFactory,
)

__all__ = [
    "PostgrestTenantStore",
    "SupabaseAuthAdapter",
    "SupabaseStoreFactory",
]
