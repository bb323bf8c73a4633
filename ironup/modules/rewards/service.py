import logging
from datetime import date
from typing import Callable, List

from ironup.config.settings import Settings
from ironup.core.exceptions import (
    AlreadyRedeemedError, ConflictError, NotFoundError, WindowClosedError
)
from ironup.database.store import ChallengeStore
from ironup.modules.groups.models import GroupRecord
from ironup.modules.groups.schemas import GroupStatusResponse, MemberView
from ironup.modules.groups.service import load_current_group
from ironup.modules.groups.window import (
    ChallengeWindow, format_challenge_date, parse_challenge_date
)
from ironup.modules.users.models import UserRecord

logger = logging.getLogger(__name__)


class RewardService:
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
        user = self.store.find_user(username)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def check_in(self, username: str, date_text: str) -> int:
        """Redeem the daily reward for date_text; returns the new balance"""
        user = self._get_user(username)
        if not user.current_group:
            raise ConflictError("User is not in any group")
        group = load_current_group(self.store, user)
        if group is None:
            raise NotFoundError("Group not found")

        window = ChallengeWindow.from_group(group.created_at, group.days)
        day = parse_challenge_date(date_text)
        if not window.is_within_challenge(day):
            logger.info(f"Rejected check-in {date_text} for {username}: group {group.group_id} ended")
            raise WindowClosedError(
                "Challenge period is over. You cannot receive cash after the challenge ends."
            )
        # Exact string match: "5/3/2025" and "05/03/2025" are different keys.
        if date_text in user.history:
            logger.info(f"Rejected check-in {date_text} for {username}: already redeemed")
            raise AlreadyRedeemedError("Operation already executed for this date")

        user.history.append(date_text)
        user.coin += self.settings.checkin_reward
        self.store.save_user(user)
        logger.info(f"{username} checked in for {date_text}, balance {user.coin}")
        return user.coin

    def _member_views(self, group: GroupRecord) -> List[MemberView]:
        views = []
        for username in group.roster():
            member = self.store.find_user(username)
            if member is None:
                logger.warning(f"Group {group.group_id} lists missing user {username}")
                continue
            views.append(MemberView(
                username=member.username,
                avatar=member.avatar,
                coin=member.coin,
                history=member.history,
            ))
        return views

    def group_status(self, username: str) -> GroupStatusResponse:
        """Caller's view of their current group, or an empty view if none.

        A stale group reference is cleared, then reported as NotFoundError.
        """
        user = self._get_user(username)
        if not user.current_group:
            return GroupStatusResponse(message="No group found")
        group = load_current_group(self.store, user)
        if group is None:
            raise NotFoundError("The group no longer exists")

        window = ChallengeWindow.from_group(group.created_at, group.days)
        return GroupStatusResponse(
            group_id=group.group_id,
            members=self._member_views(group),
            exercise=group.exercise,
            days_left=window.days_remaining(self.today()),
            starting_point=group.starting_point,
            increment=group.increment,
            total_days=group.days,
            start_date=format_challenge_date(window.start_date),
            end_date=format_challenge_date(window.end_date_inclusive),
            history=user.history,
        )
