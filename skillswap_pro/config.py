from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database (remote store)
    DATABASE_URL: str = "sqlite:///./skillswap_pro.db"

    # Remote store endpoint used by the client engine
    REMOTE_STORE_URL: str = "http://localhost:8000/api"
    SYNC_TIMEOUT_SECONDS: float = 10.0
    SYNC_IN_BACKGROUND: bool = True

    # Credential check: "plaintext" matches the legacy store, "bcrypt" hashes
    CREDENTIAL_SCHEME: str = "plaintext"

    # Smart match
    ANTHROPIC_API_KEY: Optional[str] = None
    RECOMMENDATION_MODEL: str = "claude-sonnet-4-5-20250929"
    RECOMMENDATION_LIMIT: int = 3

    # Application
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://0.0.0.0:8000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
        "http://localhost:5173",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
