"""Application settings loaded from ``BOOKSTORE_*`` environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BOOKSTORE_", env_file=".env", extra="ignore")

    environment: str = Field("development", description="development, test, staging or production")
    log_level: str | None = Field(None, description="Overrides the level derived from the environment")
    log_dir: str | None = Field(None, description="Directory for rotating log files; console only when unset")

    reorder_quantity: int = Field(20, ge=1, description="Units placed by the auto-replenish rule")
    min_card_number_length: int = Field(13, ge=1)
    seed_catalog: bool = Field(True, description="Load the sample catalogue at start-up")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
