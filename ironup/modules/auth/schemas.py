from pydantic import BaseModel, EmailStr
from typing import Optional


class LoginRequest(BaseModel):
    identifier: str  # username or email
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    username: str
    message: str = "Login successful"


class RegisterRequest(BaseModel):
    username: str
    email: EmailStr
    password: str
    avatar: Optional[str] = None


class RegisterResponse(BaseModel):
    username: str
    email: str
    message: str = "Registration successful"
