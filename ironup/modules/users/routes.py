from fastapi import APIRouter, Depends
from ironup.config.settings import Settings
from ironup.core.dependencies import get_current_user, get_current_username, get_settings, get_store
from ironup.database.store import ChallengeStore
from ironup.database.supabase_client import SupabaseClient
from ironup.modules.groups.routes import get_group_service
from ironup.modules.groups.service import GroupService
from ironup.modules.users.schemas import ProfileResponse, DeleteAccountResponse
from ironup.modules.users.service import UserService
from typing import Dict

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(
    store: ChallengeStore = Depends(get_store),
    group_service: GroupService = Depends(get_group_service),
    app_settings: Settings = Depends(get_settings)
) -> UserService:
    return UserService(store, group_service, SupabaseClient.get_admin_client(app_settings))


@router.get("/me", response_model=ProfileResponse)
async def get_profile(
    username: str = Depends(get_current_username),
    service: UserService = Depends(get_user_service)
):
    """Username, avatar and coin balance of the authenticated user"""
    return service.get_profile(username)


@router.delete("/me", response_model=DeleteAccountResponse)
async def delete_account(
    current_user: Dict = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """Delete the authenticated user's account"""
    service.delete_account(current_user["username"], current_user.get("id"))
    return DeleteAccountResponse(username=current_user["username"])
