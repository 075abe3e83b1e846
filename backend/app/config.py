from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./bmi_tracker.db"

    # Google OAuth
    APP_URL: str = "http://localhost:3308"
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    GOOGLE_AUTH_URL: str = "https://accounts.google.com/o/oauth2/v2/auth"
    GOOGLE_TOKEN_URL: str = "https://oauth2.googleapis.com/token"
    GOOGLE_USERINFO_URL: str = "https://www.googleapis.com/oauth2/v2/userinfo"
    OAUTH_TIMEOUT_SECONDS: float = 10.0

    # Guest login
    GUEST_EMAIL_DOMAIN: str = "vitaltrack.local"

    # App Settings
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    APP_NAME: str = "VitalTrack"
    API_V1_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 3308

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def oauth_redirect_uri(self) -> str:
        return f"{self.APP_URL.rstrip('/')}/auth/callback"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
