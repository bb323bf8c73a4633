from pydantic import BaseModel


class ProfileResponse(BaseModel):
    username: str
    avatar: str
    coin: int


class DeleteAccountResponse(BaseModel):
    username: str
    message: str = "Account deleted successfully"
