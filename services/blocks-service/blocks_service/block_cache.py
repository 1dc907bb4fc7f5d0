"""Redis cache for the nested block read view (``blocks:detail:{id}``)."""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from pydantic import ValidationError

from . import redis_client
from .config import get_settings
from .metrics import BLOCK_CACHE_ERRORS_TOTAL, BLOCK_CACHE_HITS_TOTAL, BLOCK_CACHE_MISSES_TOTAL
from .schemas.block import BlockResponse

logger = structlog.get_logger(__name__)


def block_detail_key(block_id: int) -> str:
    return f"blocks:detail:{block_id}"


async def get_cached_block(block_id: int) -> BlockResponse | None:
    redis = await redis_client.get_redis()
    if redis is None:
        return None
    key = block_detail_key(block_id)
    try:
        cached = await redis.get(key)
        if cached is None:
            BLOCK_CACHE_MISSES_TOTAL.inc()
            return None
        block = BlockResponse.model_validate_json(cached)
    except ValidationError:
        # stale shape from an older release; treat as a miss and let the next set overwrite it
        BLOCK_CACHE_MISSES_TOTAL.inc()
        logger.warning("block_cache_entry_invalid", key=key)
        return None
    except Exception:
        BLOCK_CACHE_ERRORS_TOTAL.inc()
        logger.warning("block_cache_get_failed", key=key, exc_info=True)
        return None
    BLOCK_CACHE_HITS_TOTAL.inc()
    return block


async def cache_block(block: BlockResponse) -> None:
    redis = await redis_client.get_redis()
    if redis is None:
        return
    key = block_detail_key(block.id)
    try:
        await redis.set(key, block.model_dump_json(), ex=get_settings().BLOCK_DETAIL_TTL_SECONDS)
    except Exception:
        BLOCK_CACHE_ERRORS_TOTAL.inc()
        logger.warning("block_cache_set_failed", key=key, exc_info=True)


async def invalidate_blocks(block_ids: Iterable[int]) -> None:
    redis = await redis_client.get_redis()
    if redis is None:
        return
    keys = sorted({block_detail_key(block_id) for block_id in block_ids})
    if not keys:
        return
    try:
        await redis.delete(*keys)
    except Exception:
        BLOCK_CACHE_ERRORS_TOTAL.inc()
        logger.warning("block_cache_invalidate_failed", keys=keys, exc_info=True)
