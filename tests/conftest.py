from datetime import date
from typing import Dict, Optional

import pytest

from ironup.config.settings import Settings
from ironup.modules.groups.models import GroupRecord
from ironup.modules.groups.service import GroupService
from ironup.modules.rewards.service import RewardService
from ironup.modules.users.models import UserRecord
from ironup.modules.users.service import UserService


class InMemoryStore:
    """Same operations as ChallengeStore, backed by dicts.

    Records are copied on the way in and out so callers only see changes they
    explicitly saved, like with a real document store.
    """

    def __init__(self):
        self.users: Dict[str, UserRecord] = {}
        self.groups: Dict[str, GroupRecord] = {}

    def find_user(self, username: str) -> Optional[UserRecord]:
        user = self.users.get(username)
        return user.model_copy(deep=True) if user else None

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        for user in self.users.values():
            if user.email == email:
                return user.model_copy(deep=True)
        return None

    def find_group(self, group_id: str) -> Optional[GroupRecord]:
        group = self.groups.get(group_id)
        return group.model_copy(deep=True) if group else None

    def save_user(self, user: UserRecord) -> UserRecord:
        self.users[user.username] = user.model_copy(deep=True)
        return user

    def save_group(self, group: GroupRecord) -> GroupRecord:
        self.groups[group.group_id] = group.model_copy(deep=True)
        return group

    def delete_user(self, username: str) -> bool:
        return self.users.pop(username, None) is not None

    def delete_group(self, group_id: str) -> bool:
        return self.groups.pop(group_id, None) is not None

    def ping(self) -> bool:
        return True


class FakeClock:
    def __init__(self, today: date):
        self.current = today

    def __call__(self) -> date:
        return self.current


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, supabase_url="", supabase_key="", supabase_service_role_key=None)


@pytest.fixture
def store() -> InMemoryStore:
    store = InMemoryStore()
    for name in ("alice", "bob", "carol"):
        store.save_user(UserRecord(
            username=name,
            email=f"{name}@example.com",
            avatar=f"https://img.example.com/{name}.png",
        ))
    return store


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(date(2025, 1, 1))


@pytest.fixture
def group_service(store, test_settings, clock) -> GroupService:
    return GroupService(store, test_settings, today=clock)


@pytest.fixture
def reward_service(store, test_settings, clock) -> RewardService:
    return RewardService(store, test_settings, today=clock)


@pytest.fixture
def user_service(store, group_service) -> UserService:
    return UserService(store, group_service)


@pytest.fixture
def alice_group(group_service) -> str:
    """Group created by alice on 01/01/2025, 15 days of push ups."""
    return group_service.create_group("alice", "Push Ups", 15, 10, 2)
