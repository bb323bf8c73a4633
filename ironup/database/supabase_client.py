"""
Supabase clients shared by the store and the auth admin calls.

Both clients are created lazily and cached for the process lifetime.
"""

from typing import Optional

from supabase import create_client, Client
from ironup.config import settings
from ironup.config.settings import Settings


class SupabaseClient:
    _client: Optional[Client] = None
    _admin_client: Optional[Client] = None

    @classmethod
    def get_client(cls, app_settings: Settings = settings) -> Client:
        if cls._client is None:
            cls._client = create_client(app_settings.supabase_url, app_settings.supabase_key)
        return cls._client

    @classmethod
    def get_admin_client(cls, app_settings: Settings = settings) -> Optional[Client]:
        """Service-role client for auth admin calls, or None when no role key is configured.

        The anon client cannot delete auth users, so there is no fallback to it.
        """
        if not app_settings.supabase_service_role_key:
            return None
        if cls._admin_client is None:
            cls._admin_client = create_client(
                app_settings.supabase_url, app_settings.supabase_service_role_key
            )
        return cls._admin_client


def get_supabase() -> Client:
    return SupabaseClient.get_client()
