from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (or a .env file).
    """
    APP_NAME: str = "Divine Shop Catalog"
    APP_VERSION: str = "1.0.0"

    # Any SQLAlchemy URL. "sqlite://" (in-memory) shares one connection and suits tests only
    DATABASE_URL: str = "sqlite:///./catalog.db"
    SEED_DATA: bool = True

    API_PREFIX: str = "/api"
    UI_PAGE_SIZE: int = 9

    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
