import logging
from typing import Optional

from supabase import Client

from ironup.core.exceptions import NotFoundError
from ironup.database.store import ChallengeStore
from ironup.modules.groups.service import GroupService
from ironup.modules.users.schemas import ProfileResponse

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        store: ChallengeStore,
        group_service: GroupService,
        admin_client: Optional[Client] = None,
    ):
        self.store = store
        self.group_service = group_service
        self.admin_client = admin_client

    def get_profile(self, username: str) -> ProfileResponse:
        """Public profile, read from the store rather than from token claims"""
        user = self.store.find_user(username)
        if user is None:
            raise NotFoundError("User not found")
        return ProfileResponse(username=user.username, avatar=user.avatar, coin=user.coin)

    def delete_account(self, username: str, auth_user_id: Optional[str] = None) -> bool:
        """Leave the current group (if any), then delete the user record and auth user"""
        user = self.store.find_user(username)
        if user is None:
            raise NotFoundError("User not found")
        if user.current_group:
            self.group_service.leave_group(username)

        deleted = self.store.delete_user(username)
        if auth_user_id and self.admin_client is not None:
            self.admin_client.auth.admin.delete_user(auth_user_id)
        elif auth_user_id:
            logger.warning(f"No service role client configured; auth user for {username} was kept")
        logger.info(f"Deleted account {username}")
        return deleted
