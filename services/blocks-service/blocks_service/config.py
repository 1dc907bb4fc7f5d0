from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    BLOCKS_DATABASE_URL: str = "sqlite+aiosqlite:///./blocks.db"
    DEBUG: bool = False
    ENVIRONMENT: str = "local"

    BLOCKS_REDIS_HOST: str = "redis"
    BLOCKS_REDIS_PORT: int = 6379
    BLOCKS_REDIS_DB: int = 0
    BLOCKS_REDIS_PASSWORD: str | None = None
    BLOCK_DETAIL_TTL_SECONDS: int = 15 * 60

    # Reject blocks that arrive without both a coach and an athlete
    REQUIRE_BLOCK_OWNERS: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
