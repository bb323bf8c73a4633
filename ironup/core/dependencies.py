"""
Core dependencies for store access and route protection
"""

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from ironup.config import settings
from ironup.config.settings import Settings
from ironup.core.exceptions import AuthError
from ironup.database.store import ChallengeStore
from ironup.database.supabase_client import get_supabase
from ironup.modules.auth.service import AuthService
from supabase import Client
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return settings


def get_store(supabase: Client = Depends(get_supabase)) -> ChallengeStore:
    return ChallengeStore(supabase)


def get_auth_service(
    supabase: Client = Depends(get_supabase),
    store: ChallengeStore = Depends(get_store),
    app_settings: Settings = Depends(get_settings)
) -> AuthService:
    return AuthService(supabase, store, app_settings)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
    auth_service: AuthService = Depends(get_auth_service)
) -> Dict[str, Any]:
    """Verified claims from the bearer token"""
    if credentials is None:
        raise AuthError("Missing bearer token")
    return auth_service.get_current_user(credentials.credentials)


def get_current_username(user_data: Dict[str, Any] = Depends(get_current_user)) -> str:
    """Only the username is trusted from the token; everything else is read from the store."""
    return user_data["username"]
