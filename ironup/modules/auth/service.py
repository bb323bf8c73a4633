import hashlib
import logging
import re
import time
from supabase import Client
from ironup.config.settings import Settings
from ironup.core.exceptions import AuthError, ConflictError, ValidationError
from ironup.database.store import ChallengeStore
from ironup.modules.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, RegisterResponse
from ironup.modules.users.models import UserRecord
from typing import Dict, Any

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# In-memory cache for get_current_user to reduce Supabase auth calls (e.g. many parallel requests with same token)
_AUTH_USER_CACHE: Dict[str, tuple] = {}
_AUTH_CACHE_TTL_SEC = 60
_AUTH_CACHE_MAX_SIZE = 500


def clear_auth_cache():
    _AUTH_USER_CACHE.clear()


class AuthService:
    def __init__(self, supabase: Client, store: ChallengeStore, settings: Settings):
        self.supabase = supabase
        self.store = store
        self.settings = settings

    def register(self, register_data: RegisterRequest) -> RegisterResponse:
        """Register a new user with Supabase Auth and create their profile row"""
        username = register_data.username.strip()
        if not username or not register_data.password:
            raise ValidationError("All fields are required")
        if self.store.find_user(username) or self.store.find_user_by_email(register_data.email):
            raise ConflictError("User already exists")

        try:
            auth_response = self.supabase.auth.sign_up({
                "email": register_data.email,
                "password": register_data.password,
                "options": {
                    "data": {"username": username}
                }
            })
        except Exception as e:
            error_message = str(e)
            if "already registered" in error_message.lower() or "already exists" in error_message.lower():
                raise ConflictError("User already exists")
            raise

        if not auth_response.user:
            raise ValidationError("Failed to register user")

        self.store.save_user(UserRecord(
            username=username,
            email=register_data.email,
            avatar=register_data.avatar or self.settings.default_avatar,
        ))
        logger.info(f"Registered user {username}")
        return RegisterResponse(username=username, email=register_data.email)

    def login(self, login_data: LoginRequest) -> TokenResponse:
        """Authenticate by username or email and return a session token"""
        identifier = login_data.identifier.strip()
        if not identifier or not login_data.password:
            raise ValidationError("All fields are required")

        if EMAIL_PATTERN.match(identifier):
            user = self.store.find_user_by_email(identifier)
        else:
            user = self.store.find_user(identifier)
        if user is None:
            raise AuthError("Invalid credentials")

        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": user.email,
                "password": login_data.password
            })
        except Exception as e:
            error_message = str(e)
            if "invalid" in error_message.lower() or "credentials" in error_message.lower():
                raise AuthError("Invalid credentials")
            raise

        if not auth_response.user or not auth_response.session:
            raise AuthError("Invalid credentials")

        return TokenResponse(
            access_token=auth_response.session.access_token,
            username=user.username,
        )

    def get_current_user(self, token: str) -> Dict[str, Any]:
        """Verify a session token. Uses short TTL cache to reduce auth API calls."""
        if not token:
            raise AuthError("Missing token")
        cache_key = hashlib.sha256(token.encode()).hexdigest()
        now = time.monotonic()
        if cache_key in _AUTH_USER_CACHE:
            claims, expiry = _AUTH_USER_CACHE[cache_key]
            if now < expiry:
                return claims
            del _AUTH_USER_CACHE[cache_key]

        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.info(f"Token verification failed: {e}")
            raise AuthError("Invalid or expired token")
        if not user_response or not user_response.user:
            raise AuthError("Invalid or expired token")

        user = user_response.user
        username = (user.user_metadata or {}).get("username")
        if not username:
            raise AuthError("Token carries no username")
        claims = {
            "id": user.id,
            "username": username,
            "email": user.email,
        }
        if len(_AUTH_USER_CACHE) < _AUTH_CACHE_MAX_SIZE:
            _AUTH_USER_CACHE[cache_key] = (claims, now + _AUTH_CACHE_TTL_SEC)
        return claims
