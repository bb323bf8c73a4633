from fastapi import APIRouter, Depends
from ironup.core.dependencies import get_current_username
from ironup.modules.groups.routes import get_reward_service
from ironup.modules.rewards.schemas import CheckInRequest, CheckInResponse
from ironup.modules.rewards.service import RewardService

router = APIRouter(prefix="/rewards", tags=["rewards"])


@router.post("/check-in", response_model=CheckInResponse)
async def check_in(
    payload: CheckInRequest,
    username: str = Depends(get_current_username),
    service: RewardService = Depends(get_reward_service)
):
    """Redeem the daily reward for a date (DD/MM/YYYY), once per date"""
    coin = service.check_in(username, payload.date)
    return CheckInResponse(username=username, coin=coin, date=payload.date)
