from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Used for account deletion in Supabase Auth

    # Challenge rules
    checkin_reward: int = 500
    min_challenge_days: int = 15
    max_challenge_days: int = 90
    group_id_length: int = 12
    default_avatar: str = "https://i.imgur.com/Mwskb9x.png"

    # App
    app_name: str = "ironup-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "https://ironup.netlify.app,http://localhost:5173,http://127.0.0.1:5173"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def missing_store_settings(self) -> List[str]:
        """Names of the settings required to reach the store that are unset."""
        return [name for name in ("supabase_url", "supabase_key") if not getattr(self, name)]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
