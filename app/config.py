# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import Optional


class Settings(BaseSettings):
    # ── Server ────────────────────────────────────────────────────────────
    PORT: int = 3000
    SERVICE_NAME: str = "parking-api"
    CORS_ORIGIN: str = "http://localhost:5173"   # Comma-separated for several origins

    # ── Rate limiting ─────────────────────────────────────────────────────
    RATE_LIMIT_WINDOW_MS: int = 60_000
    RATE_LIMIT_MAX: int = 100

    # ── Database ──────────────────────────────────────────────────────────
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "admin"
    DB_PASSWORD: str = "CHANGE_ME"
    DB_NAME: str = "parking_data"
    DATABASE_URL: Optional[str] = None   # Overrides the DB_* values when set

    # ── Data source ───────────────────────────────────────────────────────
    USE_MOCK_DATA: bool = False          # Serve generated spots instead of sensor rows

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None        # Defaults to <repo>/logs
    LOG_FILE: str = "api.log"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 10

    @property
    def database_url(self):
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGIN.split(",") if o.strip()]

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
