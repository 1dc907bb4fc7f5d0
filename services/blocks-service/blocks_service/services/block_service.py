from typing import Any

import structlog
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..block_cache import cache_block, get_cached_block, invalidate_blocks
from ..config import get_settings
from ..exceptions import (
    BlockNotFoundException,
    ExerciseNotFoundException,
    InvalidBlockSpecificationException,
    MissingBlockOwnerException,
)
from ..repositories.block_repository import BlockRepository
from ..schemas.block import BlockCreate, BlockResponse, BlockSummaryResponse
from .program_builder import ProgramBuilder
from .user_service import UserService

logger = structlog.get_logger(__name__)


def _describe_validation_error(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )


class BlockService:
    def __init__(self, db: AsyncSession, builder: ProgramBuilder | None = None):
        self.db = db
        self.builder = builder or ProgramBuilder()
        self.repository = BlockRepository()
        self.users = UserService(db)
        self.settings = get_settings()

    def _coerce_spec(self, spec: BlockCreate | dict[str, Any]) -> BlockCreate:
        if isinstance(spec, BlockCreate):
            return spec
        try:
            return BlockCreate.model_validate(spec)
        except ValidationError as exc:
            raise InvalidBlockSpecificationException(_describe_validation_error(exc)) from exc

    async def _check_owners(self, spec: BlockCreate) -> None:
        owner_ids = [spec.created_by_user_id, spec.assigned_to_user_id]
        if self.settings.REQUIRE_BLOCK_OWNERS and any(user_id is None for user_id in owner_ids):
            raise MissingBlockOwnerException()
        await self.users.ensure_users_exist(user_id for user_id in owner_ids if user_id is not None)

    async def create_block(self, spec: BlockCreate | dict[str, Any]) -> BlockResponse:
        spec = self._coerce_spec(spec)
        await self._check_owners(spec)

        block = self.builder.build(spec)
        try:
            self.repository.add_block(self.db, block)
            await self.db.commit()
        except IntegrityError as exc:
            await self.db.rollback()
            raise InvalidBlockSpecificationException(str(exc.orig)) from exc
        except Exception:
            await self.db.rollback()
            logger.exception("block_create_failed", weeks=len(spec.weeks))
            raise

        created = await self.repository.get_block_tree(self.db, block.id)
        return BlockResponse.model_validate(created)

    async def get_block(self, block_id: int) -> BlockResponse:
        cached = await get_cached_block(block_id)
        if cached is not None:
            return cached

        block = await self.repository.get_block_tree(self.db, block_id)
        if block is None:
            raise BlockNotFoundException(block_id)
        response = BlockResponse.model_validate(block)
        await cache_block(response)
        return response

    async def list_blocks(
        self,
        assigned_to_user_id: int | None = None,
        created_by_user_id: int | None = None,
    ) -> list[BlockSummaryResponse]:
        blocks = await self.repository.list_blocks(
            self.db,
            assigned_to_user_id=assigned_to_user_id,
            created_by_user_id=created_by_user_id,
        )
        return [BlockSummaryResponse.model_validate(block) for block in blocks]

    async def delete_block(self, block_id: int) -> None:
        block = await self.repository.get_block(self.db, block_id)
        if block is None:
            raise BlockNotFoundException(block_id)
        try:
            await self.db.delete(block)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("block_delete_failed", block_id=block_id)
            raise
        await invalidate_blocks([block_id])

    async def delete_exercise(self, exercise_id: int) -> None:
        exercise = await self.repository.get_exercise(self.db, exercise_id)
        if exercise is None:
            raise ExerciseNotFoundException(exercise_id)
        block_id = exercise.day.week.block_id
        try:
            await self.db.delete(exercise)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("exercise_delete_failed", exercise_id=exercise_id)
            raise
        await invalidate_blocks([block_id])
