"""
Document store for users and challenge groups.

Every write is a single-row upsert or delete; nothing here spans two rows, so
callers that touch a user and a group do two independent writes.
"""

import logging
from typing import Optional

from supabase import Client

from ironup.modules.groups.models import GroupRecord
from ironup.modules.users.models import UserRecord

logger = logging.getLogger(__name__)

USERS_TABLE = "users"
GROUPS_TABLE = "challenge_groups"


class ChallengeStore:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _find_one(self, table: str, column: str, value: str) -> Optional[dict]:
        result = self.supabase.table(table)\
            .select("*")\
            .eq(column, value)\
            .limit(1)\
            .execute()
        if not result.data:
            return None
        return result.data[0]

    def find_user(self, username: str) -> Optional[UserRecord]:
        row = self._find_one(USERS_TABLE, "username", username)
        return UserRecord(**row) if row else None

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        row = self._find_one(USERS_TABLE, "email", email)
        return UserRecord(**row) if row else None

    def find_group(self, group_id: str) -> Optional[GroupRecord]:
        row = self._find_one(GROUPS_TABLE, "group_id", group_id)
        return GroupRecord(**row) if row else None

    def save_user(self, user: UserRecord) -> UserRecord:
        self.supabase.table(USERS_TABLE)\
            .upsert(user.model_dump(mode="json"), on_conflict="username")\
            .execute()
        return user

    def save_group(self, group: GroupRecord) -> GroupRecord:
        self.supabase.table(GROUPS_TABLE)\
            .upsert(group.model_dump(mode="json"), on_conflict="group_id")\
            .execute()
        return group

    def delete_user(self, username: str) -> bool:
        result = self.supabase.table(USERS_TABLE)\
            .delete()\
            .eq("username", username)\
            .execute()
        return len(result.data or []) > 0

    def delete_group(self, group_id: str) -> bool:
        result = self.supabase.table(GROUPS_TABLE)\
            .delete()\
            .eq("group_id", group_id)\
            .execute()
        return len(result.data or []) > 0

    def ping(self) -> bool:
        """Readiness probe: a cheap read against the users table."""
        try:
            self.supabase.table(USERS_TABLE).select("username").limit(1).execute()
            return True
        except Exception as e:
            logger.error(f"Store ping failed: {e}")
            return False
