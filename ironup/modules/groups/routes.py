from fastapi import APIRouter, Depends
from ironup.config.settings import Settings
from ironup.core.dependencies import get_current_username, get_settings, get_store
from ironup.database.store import ChallengeStore
from ironup.modules.groups.schemas import (
    GroupCreate, GroupCreateResponse, JoinGroupResponse,
    LeaveGroupResponse, GroupStatusResponse
)
from ironup.modules.groups.service import GroupService
from ironup.modules.rewards.service import RewardService

router = APIRouter(prefix="/groups", tags=["groups"])


def get_group_service(
    store: ChallengeStore = Depends(get_store),
    app_settings: Settings = Depends(get_settings)
) -> GroupService:
    return GroupService(store, app_settings)


def get_reward_service(
    store: ChallengeStore = Depends(get_store),
    app_settings: Settings = Depends(get_settings)
) -> RewardService:
    return RewardService(store, app_settings)


@router.post("", response_model=GroupCreateResponse, status_code=201)
async def create_group(
    group_data: GroupCreate,
    username: str = Depends(get_current_username),
    service: GroupService = Depends(get_group_service)
):
    """Create a challenge group and join it"""
    group_id = service.create_group(
        username,
        group_data.exercise,
        group_data.days,
        group_data.starting_point,
        group_data.increment,
    )
    return GroupCreateResponse(group_id=group_id)


@router.get("/me", response_model=GroupStatusResponse)
async def get_my_group(
    username: str = Depends(get_current_username),
    service: RewardService = Depends(get_reward_service)
):
    """Current group with members, days left and the caller's check-ins"""
    return service.group_status(username)


@router.post("/leave", response_model=LeaveGroupResponse)
async def leave_group(
    username: str = Depends(get_current_username),
    service: GroupService = Depends(get_group_service)
):
    """Leave the current group; coins and check-in history are reset"""
    return service.leave_group(username)


@router.post("/{group_id}/join", response_model=JoinGroupResponse)
async def join_group(
    group_id: str,
    username: str = Depends(get_current_username),
    service: GroupService = Depends(get_group_service)
):
    """Join a group by id"""
    members = service.join_group(group_id, username)
    return JoinGroupResponse(group_id=group_id, members=members)
