from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models import Exercise, TrainingBlock, Week, WorkoutDay


def _block_tree_options():
    return (
        selectinload(TrainingBlock.weeks)
        .selectinload(Week.days)
        .selectinload(WorkoutDay.exercises)
        .selectinload(Exercise.prescribed_sets),
    )


class BlockRepository:
    @staticmethod
    def add_block(db: AsyncSession, block: TrainingBlock) -> None:
        # cascades carry the whole week/day/exercise/set graph into the session
        db.add(block)

    @staticmethod
    async def get_block(db: AsyncSession, block_id: int) -> TrainingBlock | None:
        return await db.get(TrainingBlock, block_id)

    @staticmethod
    async def get_block_tree(db: AsyncSession, block_id: int) -> TrainingBlock | None:
        # populate_existing drops collections left stale by deletes earlier in the session
        query = (
            select(TrainingBlock)
            .options(*_block_tree_options())
            .where(TrainingBlock.id == block_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    async def list_blocks(
        db: AsyncSession,
        assigned_to_user_id: int | None = None,
        created_by_user_id: int | None = None,
    ) -> list[TrainingBlock]:
        query = select(TrainingBlock)
        if assigned_to_user_id is not None:
            query = query.where(TrainingBlock.assigned_to_user_id == assigned_to_user_id)
        if created_by_user_id is not None:
            query = query.where(TrainingBlock.created_by_user_id == created_by_user_id)
        result = await db.execute(query.order_by(TrainingBlock.id))
        return list(result.scalars().all())

    @staticmethod
    async def get_exercise(db: AsyncSession, exercise_id: int) -> Exercise | None:
        query = (
            select(Exercise)
            .options(selectinload(Exercise.day).selectinload(WorkoutDay.week))
            .where(Exercise.id == exercise_id)
        )
        result = await db.execute(query)
        return result.scalars().first()
