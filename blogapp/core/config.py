"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Blog Demo"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite:///./blog_demo.db"

    # Encryption key for the session cookie is derived from this
    secret_key: str = "change-me-in-production-use-env"

    # Encrypted session cookie carrying the user id
    session_cookie_name: str = "user_id"
    session_cookie_max_age: int = 60 * 60 * 24 * 14  # 14 days

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()


# Package dir holding templates/ and static/
BASE_DIR = Path(__file__).resolve().parent.parent
