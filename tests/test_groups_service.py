from datetime import date

import pytest

from ironup.core.exceptions import ConflictError, NotFoundError, ValidationError
from ironup.modules.groups.models import Exercise


class TestCreateGroup:
    def test_creator_is_only_member(self, group_service, store):
        group_id = group_service.create_group("alice", "Dips", 30, 5, 1)

        group = store.find_group(group_id)
        assert group.roster() == ["alice"]
        assert group.members == {"alice": 0}
        assert group.exercise == Exercise.DIPS
        assert group.days == 30
        assert group.starting_point == 5
        assert group.increment == 1
        assert store.find_user("alice").current_group == group_id

    def test_created_at_is_today_day_first(self, group_service, store, clock):
        clock.current = date(2025, 3, 5)
        group_id = group_service.create_group("alice", "Pull Ups", 15, 3, 1)
        assert store.find_group(group_id).created_at == "05/03/2025"

    def test_group_id_is_twelve_chars(self, group_service):
        group_id = group_service.create_group("alice", "Push Ups", 15, 10, 2)
        assert len(group_id) == 12

    def test_group_ids_are_unique(self, group_service, store):
        first = group_service.create_group("alice", "Push Ups", 15, 10, 2)
        second = group_service.create_group("bob", "Push Ups", 15, 10, 2)
        assert first != second
        assert set(store.groups) == {first, second}

    @pytest.mark.parametrize("days", [15, 90])
    def test_days_bounds_inclusive(self, group_service, days):
        assert group_service.create_group("alice", "Push Ups", days, 10, 2)

    @pytest.mark.parametrize("days", [14, 91, 0, None, "30"])
    def test_days_out_of_range(self, group_service, store, days):
        with pytest.raises(ValidationError):
            group_service.create_group("alice", "Push Ups", days, 10, 2)
        assert store.groups == {}
        assert store.find_user("alice").current_group is None

    @pytest.mark.parametrize("exercise", ["Squats", "push ups", "", None])
    def test_unknown_exercise(self, group_service, exercise):
        with pytest.raises(ValidationError):
            group_service.create_group("alice", exercise, 30, 10, 2)

    def test_missing_progression(self, group_service):
        with pytest.raises(ValidationError):
            group_service.create_group("alice", "Dips", 30, None, 2)
        with pytest.raises(ValidationError):
            group_service.create_group("alice", "Dips", 30, 0, 2)
        with pytest.raises(ValidationError):
            group_service.create_group("alice", "Dips", 30, 10, -1)

    def test_unknown_user(self, group_service, store):
        with pytest.raises(NotFoundError):
            group_service.create_group("mallory", "Dips", 30, 10, 2)
        assert store.groups == {}

    def test_already_in_group(self, group_service, store, alice_group):
        with pytest.raises(ConflictError):
            group_service.create_group("alice", "Dips", 30, 10, 2)
        assert list(store.groups) == [alice_group]


class TestJoinGroup:
    def test_join_returns_roster_in_join_order(self, group_service, store, alice_group):
        assert group_service.join_group(alice_group, "bob") == ["alice", "bob"]
        assert group_service.join_group(alice_group, "carol") == ["alice", "bob", "carol"]
        assert store.find_group(alice_group).members == {"alice": 0, "bob": 0, "carol": 0}
        assert store.find_user("carol").current_group == alice_group

    def test_unknown_group(self, group_service, store):
        with pytest.raises(NotFoundError):
            group_service.join_group("doesnotexist", "bob")
        assert store.find_user("bob").current_group is None

    def test_unknown_user(self, group_service, alice_group):
        with pytest.raises(NotFoundError):
            group_service.join_group(alice_group, "mallory")

    def test_rejoin_own_group_is_conflict(self, group_service, alice_group):
        with pytest.raises(ConflictError):
            group_service.join_group(alice_group, "alice")

    def test_join_other_group_while_member_is_conflict(self, group_service, store, alice_group):
        other = group_service.create_group("bob", "Dips", 20, 5, 1)
        with pytest.raises(ConflictError):
            group_service.join_group(other, "alice")
        assert store.find_group(other).roster() == ["bob"]

    def test_missing_group_id(self, group_service):
        with pytest.raises(ValidationError):
            group_service.join_group("", "bob")


class TestLeaveGroup:
    def test_leave_keeps_remaining_member(self, group_service, reward_service, store, alice_group):
        group_service.join_group(alice_group, "bob")
        reward_service.check_in("bob", "02/01/2025")

        outcome = group_service.leave_group("bob")

        assert outcome.status == "left"
        assert outcome.group_deleted is False
        assert store.find_group(alice_group).roster() == ["alice"]
        bob = store.find_user("bob")
        assert bob.current_group is None
        assert bob.coin == 0
        assert bob.history == []

    def test_leave_does_not_touch_other_members(self, group_service, reward_service, store, alice_group):
        group_service.join_group(alice_group, "bob")
        reward_service.check_in("alice", "01/01/2025")
        group_service.leave_group("bob")
        alice = store.find_user("alice")
        assert alice.coin == 500
        assert alice.history == ["01/01/2025"]

    def test_last_member_leaving_deletes_group(self, group_service, store, alice_group):
        outcome = group_service.leave_group("alice")

        assert outcome.status == "left"
        assert outcome.group_deleted is True
        assert store.find_group(alice_group) is None
        assert store.find_user("alice").current_group is None
        with pytest.raises(NotFoundError):
            group_service.join_group(alice_group, "bob")

    def test_stale_reference_cleared(self, group_service, reward_service, store, alice_group):
        reward_service.check_in("alice", "01/01/2025")
        store.delete_group(alice_group)

        outcome = group_service.leave_group("alice")

        assert outcome.status == "stale_reference_cleared"
        assert outcome.group_deleted is False
        alice = store.find_user("alice")
        assert alice.current_group is None
        assert alice.coin == 500
        assert alice.history == ["01/01/2025"]

    def test_not_in_group(self, group_service):
        with pytest.raises(ConflictError):
            group_service.leave_group("bob")

    def test_unknown_user(self, group_service):
        with pytest.raises(ConflictError):
            group_service.leave_group("mallory")

    def test_missing_username(self, group_service):
        with pytest.raises(ValidationError):
            group_service.leave_group("")

    def test_can_create_after_leaving(self, group_service, store, alice_group):
        group_service.leave_group("alice")
        new_group = group_service.create_group("alice", "Dips", 20, 5, 1)
        assert new_group != alice_group
        assert store.find_user("alice").current_group == new_group
