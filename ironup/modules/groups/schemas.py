from pydantic import BaseModel, Field
from typing import Optional, List, Literal

from ironup.modules.groups.models import Exercise


class GroupCreate(BaseModel):
    exercise: Exercise
    days: int
    starting_point: int
    increment: int


class GroupCreateResponse(BaseModel):
    group_id: str
    message: str = "Group created and joined successfully"


class JoinGroupResponse(BaseModel):
    group_id: str
    members: List[str]
    message: str = "Joined group successfully"


class LeaveGroupResponse(BaseModel):
    status: Literal["left", "stale_reference_cleared"]
    group_deleted: bool = False
    message: str


class MemberView(BaseModel):
    username: str
    avatar: str
    coin: int
    history: List[str]


class GroupStatusResponse(BaseModel):
    group_id: Optional[str] = None
    message: Optional[str] = None
    members: List[MemberView] = Field(default_factory=list)
    exercise: Optional[Exercise] = None
    days_left: Optional[int] = None
    starting_point: Optional[int] = None
    increment: Optional[int] = None
    total_days: Optional[int] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    history: List[str] = Field(default_factory=list)
