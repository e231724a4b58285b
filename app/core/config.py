"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Seven Days Challenge"
    debug: bool = False
    log_level: str = "INFO"

    # Database (async driver; Alembic converts to a sync one)
    database_url: str = "sqlite+aiosqlite:///./seven_days.db"

    # CORS: static frontend hosts
    cors_origins: list[str] = [
        "https://projectsevendays.netlify.app",
        "http://localhost:8000",
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5500",
    ]

    # Task catalog seeding on startup (only when the catalog is empty)
    seed_default_tasks: bool = True
    tasks_seed_file: str | None = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()


# Repository root (parent of app/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent
