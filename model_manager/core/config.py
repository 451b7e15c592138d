# model_manager/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # General
    ENV: str = "dev"
    APP_NAME: str = "Model Manager"

    # Storage / DB
    DB_URL: str = "sqlite:///./data/model-manager.db"
    DB_ECHO: bool = False
    DB_TIMEOUT_S: float = 5.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = ""
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "10 days"

    # Auth: caller identity is carried in the token claims
    JWT_SECRET: str = "dev-secret-please-change"
    JWT_ISSUER: str = "model-manager"
    JWT_AUDIENCE: str = "model-manager-users"
    JWT_EXPIRE_HOURS: int = 24

    # Listing
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

_settings: Settings | None = None

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
