"""Redis client utilities for blocks-service."""

from __future__ import annotations

import structlog
from redis.asyncio import Redis

from .config import get_settings

logger = structlog.get_logger(__name__)

redis_client: Redis | None = None


async def init_redis() -> None:
    global redis_client

    settings = get_settings()
    if not settings.BLOCKS_REDIS_HOST:
        logger.info("blocks_redis_disabled")
        return
    try:
        redis_client = Redis(
            host=settings.BLOCKS_REDIS_HOST,
            port=settings.BLOCKS_REDIS_PORT,
            db=settings.BLOCKS_REDIS_DB,
            password=settings.BLOCKS_REDIS_PASSWORD,
            encoding="utf-8",
            decode_responses=True,
            health_check_interval=30,
        )
        await redis_client.ping()
        logger.info(
            "blocks_redis_connected",
            host=settings.BLOCKS_REDIS_HOST,
            port=settings.BLOCKS_REDIS_PORT,
            db=settings.BLOCKS_REDIS_DB,
        )
    except Exception:
        logger.error("Failed to connect to blocks redis", exc_info=True)
        redis_client = None


async def get_redis() -> Redis | None:
    return redis_client


async def close_redis() -> None:
    global redis_client

    if redis_client is None:
        return

    try:
        await redis_client.aclose()
        logger.info("blocks_redis_closed")
    except Exception:
        logger.warning("Failed to close blocks redis connection", exc_info=True)
    finally:
        redis_client = None

