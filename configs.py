"""Application settings loaded from environment variables.

Defines all environment-driven configuration used by the app.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration model for the application."""

    # Catalog database (read-only component tables)
    DATABASE_URL: Optional[str] = None

    # LLM parameters
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    USE_OPEN_ROUTER: bool = False

    # Price scraping
    SCRAPER_TIMEOUT: float = 15.0
    SCRAPER_MAX_REDIRECTS: int = 5

    # Images
    IMAGE_DIR: str = "public/images"
    PUBLIC_BASE_URL: str = "http://localhost:3000"

    # API parameters
    APP_VERSION: str = "1.0.0"
    ROOT_PATH_BACKEND: str = ""
    ALLOWED_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
