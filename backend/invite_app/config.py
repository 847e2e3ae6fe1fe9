"""Application configuration via environment variables."""
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./data/invitations.db"
    SQLITE_BUSY_TIMEOUT: int = 30  # seconds a writer waits for the lock
    ADMIN_PASSWORD: str = ""
    SESSION_SECRET: str = ""
    ADMIN_COOKIE_MAX_AGE: int = 86400
    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    BACKUP_ENABLED: bool = False
    BACKUP_DIR: str = "./backups"
    BACKUP_INTERVAL_HOURS: int = 24
    BACKUP_KEEP: int = Field(7, ge=1)

    class Config:
        env_file = ".env"


settings = Settings()
