from fastapi import APIRouter, Depends
from ironup.modules.auth.schemas import (
    LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
)
from ironup.modules.auth.service import AuthService
from ironup.core.dependencies import get_auth_service, get_current_user
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    register_data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Register a new user"""
    return service.register(register_data)


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login with username or email and get access token"""
    return service.login(login_data)


@router.get("/me")
async def get_me(current_user: Dict = Depends(get_current_user)):
    """Verified token claims. Use /users/me for coin and avatar."""
    return current_user
