from pydantic import BaseModel


class CheckInRequest(BaseModel):
    date: str  # DD/MM/YYYY


class CheckInResponse(BaseModel):
    username: str
    coin: int
    date: str
    message: str = "Check-in rewarded"
