import logging
import uuid
from datetime import date
from typing import Callable, List, Optional

from ironup.config.settings import Settings
from ironup.core.exceptions import ConflictError, NotFoundError, ValidationError
from ironup.database.store import ChallengeStore
from ironup.modules.groups.models import Exercise, GroupRecord
from ironup.modules.groups.schemas import LeaveGroupResponse
from ironup.modules.groups.window import format_challenge_date
from ironup.modules.rewards.economy import reset_economy
from ironup.modules.users.models import UserRecord

logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 5


def load_current_group(store: ChallengeStore, user: UserRecord) -> Optional[GroupRecord]:
    """Return the user's group, clearing the pointer if the group is gone.

    Returns None both when the user has no group and when a stale reference
    was just repaired; callers that care compare user.current_group before.
    """
    if not user.current_group:
        return None
    group = store.find_group(user.current_group)
    if group is None:
        logger.warning(f"Clearing stale group reference {user.current_group} for {user.username}")
        user.current_group = None
        store.save_user(user)
    return group


def _require_int(name: str, value, minimum: int, maximum: Optional[int] = None) -> int:
    if value is None:
        raise ValidationError(f"{name} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer")
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f"between {minimum} and {maximum}" if maximum is not None else f"at least {minimum}"
        raise ValidationError(f"{name} must be {bounds}")
    return value


class GroupService:
    def __init__(
        self,
        store: ChallengeStore,
        settings: Settings,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.settings = settings
        self.today = today

    def _get_user(self, username: str) -> UserRecord:
        if not username:
            raise ValidationError("Username is required")
        user = self.store.find_user(username)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def _new_group_id(self) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            group_id = uuid.uuid4().hex[:self.settings.group_id_length]
            if self.store.find_group(group_id) is None:
                return group_id
        raise ConflictError("Could not allocate a unique group id")

    def create_group(
        self,
        username: str,
        exercise,
        days: int,
        starting_point: int,
        increment: int,
    ) -> str:
        """Create a challenge group with the caller as its only member"""
        if exercise is None:
            raise ValidationError("exercise is required")
        try:
            exercise = Exercise(exercise)
        except ValueError:
            allowed = ", ".join(e.value for e in Exercise)
            raise ValidationError(f"exercise must be one of: {allowed}")
        days = _require_int(
            "days", days, self.settings.min_challenge_days, self.settings.max_challenge_days
        )
        starting_point = _require_int("starting_point", starting_point, 1)
        increment = _require_int("increment", increment, 0)

        user = self._get_user(username)
        if user.current_group:
            raise ConflictError(
                "You are already in a group. Please leave your current group before creating a new one."
            )

        group = GroupRecord(
            group_id=self._new_group_id(),
            created_at=format_challenge_date(self.today()),
            exercise=exercise,
            days=days,
            starting_point=starting_point,
            increment=increment,
            members={username: 0},
        )
        self.store.save_group(group)
        user.current_group = group.group_id
        self.store.save_user(user)
        logger.info(f"{username} created group {group.group_id} ({exercise.value}, {days} days)")
        return group.group_id

    def join_group(self, group_id: str, username: str) -> List[str]:
        """Add the user to an existing group and return the roster"""
        if not group_id:
            raise ValidationError("Group ID is required")
        user = self._get_user(username)
        if user.current_group:
            raise ConflictError(
                "You are already in a group. Please leave your current group before joining another."
            )
        group = self.store.find_group(group_id)
        if group is None:
            raise NotFoundError("Group not found")

        group.members[username] = 0
        self.store.save_group(group)
        user.current_group = group_id
        self.store.save_user(user)
        logger.info(f"{username} joined group {group_id} ({len(group.members)} members)")
        return group.roster()

    def leave_group(self, username: str) -> LeaveGroupResponse:
        """Leave the current group, forfeiting coins and history"""
        if not username:
            raise ValidationError("Username is required")
        user = self.store.find_user(username)
        if user is None or not user.current_group:
            raise ConflictError("You are not in any group")

        group_id = user.current_group
        group = load_current_group(self.store, user)
        if group is None:
            return LeaveGroupResponse(
                status="stale_reference_cleared",
                group_deleted=False,
                message="Group not found, user status updated",
            )

        group.members.pop(username, None)
        reset_economy(user)
        group_deleted = not group.members
        if group_deleted:
            self.store.delete_group(group_id)
            logger.info(f"Group {group_id} deleted after its last member {username} left")
        else:
            self.store.save_group(group)
        user.current_group = None
        self.store.save_user(user)
        logger.info(f"{username} left group {group_id}")

        if group_deleted:
            message = "You have left the group and the group has been deleted because it was empty"
        else:
            message = "You have left the group successfully and your coins have been reset"
        return LeaveGroupResponse(status="left", group_deleted=group_deleted, message=message)
