from collections.abc import Iterable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models import ActualSet, Exercise, PrescribedSet, Week, WorkoutDay


class WorkoutRepository:
    @staticmethod
    async def find_day_by_coordinate(
        db: AsyncSession, block_id: int, week_number: int, day_number: int
    ) -> WorkoutDay | None:
        # week/day numbers are not unique; the earliest created day wins
        query = (
            select(WorkoutDay)
            .join(Week, WorkoutDay.week_id == Week.id)
            .options(selectinload(WorkoutDay.week))
            .where(
                Week.block_id == block_id,
                Week.week_number == week_number,
                WorkoutDay.day_number == day_number,
            )
            .order_by(WorkoutDay.id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()

    @staticmethod
    async def find_sets_by_coordinate(
        db: AsyncSession, block_id: int, week_number: int, day_number: int
    ) -> list[ActualSet]:
        # every day sharing the coordinate contributes, matching the progress grouping
        query = (
            select(ActualSet)
            .join(Exercise, ActualSet.exercise_id == Exercise.id)
            .join(WorkoutDay, Exercise.day_id == WorkoutDay.id)
            .join(Week, WorkoutDay.week_id == Week.id)
            .options(selectinload(ActualSet.exercise))
            .where(
                Week.block_id == block_id,
                Week.week_number == week_number,
                WorkoutDay.day_number == day_number,
            )
            .order_by(Exercise.order_in_workout, Exercise.id, ActualSet.set_number, ActualSet.id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def find_sets_by_block(db: AsyncSession, block_id: int) -> list[ActualSet]:
        query = (
            select(ActualSet)
            .join(Exercise, ActualSet.exercise_id == Exercise.id)
            .join(WorkoutDay, Exercise.day_id == WorkoutDay.id)
            .join(Week, WorkoutDay.week_id == Week.id)
            .options(selectinload(ActualSet.exercise).selectinload(Exercise.day).selectinload(WorkoutDay.week))
            .where(Week.block_id == block_id)
            .order_by(
                Week.week_number,
                WorkoutDay.day_number,
                Exercise.order_in_workout,
                Exercise.id,
                ActualSet.set_number,
                ActualSet.id,
            )
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def find_sets_by_exercise(db: AsyncSession, exercise_id: int) -> list[ActualSet]:
        query = (
            select(ActualSet)
            .where(ActualSet.exercise_id == exercise_id)
            .order_by(ActualSet.set_number, ActualSet.id)
        )
        result = await db.execute(query)
        return list(result.scalars().all())

    @staticmethod
    async def get_actual_set(db: AsyncSession, actual_set_id: int) -> ActualSet | None:
        return await db.get(ActualSet, actual_set_id)

    @staticmethod
    async def get_exercises(db: AsyncSession, exercise_ids: Iterable[int]) -> dict[int, Exercise]:
        ids = set(exercise_ids)
        if not ids:
            return {}
        result = await db.execute(select(Exercise).where(Exercise.id.in_(ids)))
        return {exercise.id: exercise for exercise in result.scalars().all()}

    @staticmethod
    async def get_prescribed_sets(db: AsyncSession, prescribed_set_ids: Iterable[int]) -> dict[int, PrescribedSet]:
        ids = set(prescribed_set_ids)
        if not ids:
            return {}
        result = await db.execute(select(PrescribedSet).where(PrescribedSet.id.in_(ids)))
        return {prescribed.id: prescribed for prescribed in result.scalars().all()}

    @staticmethod
    def add_sets(db: AsyncSession, actual_sets: list[ActualSet]) -> None:
        db.add_all(actual_sets)

    @staticmethod
    async def delete_sets(db: AsyncSession, actual_set_ids: list[int]) -> int:
        if not actual_set_ids:
            return 0
        result = await db.execute(delete(ActualSet).where(ActualSet.id.in_(actual_set_ids)))
        return result.rowcount
