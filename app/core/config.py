"""Application configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings."""

    # Database
    DATABASE_URL: str = "sqlite:///./survey.db"

    # JWT
    SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # CORS
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Submission rate limiting (limits notation, e.g. "5/minute")
    RATE_LIMIT_SUBMISSIONS: str = "5/minute"
    RATE_LIMIT_STRATEGY: str = "moving-window"
    RATE_LIMIT_STORAGE_URI: str = "memory://"

    # Validation strictness
    STRICT_OTHER_TEXT: bool = False
    ENFORCE_CONFIG_DATE_ORDER: bool = True

    # Survey defaults
    DEFAULT_SURVEY_TITLE: str = "Policy Awareness Survey"
    DEFAULT_SURVEY_DESCRIPTION: str = "Policy Awareness & Training Needs Survey"
    DEFAULT_SURVEY_DURATION_DAYS: int = 7
    DEFAULT_EXPECTED_RESPONSES: int = 100
    DEFAULT_SURVEY_PERIOD: str = "default"

    # Primary admin account (used by scripts/seed_data.py)
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "change-me-now"
    ADMIN_EMAIL: str = "admin@example.com"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


settings = Settings()
