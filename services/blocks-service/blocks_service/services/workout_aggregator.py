from collections.abc import Callable
from datetime import UTC, datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import (
    BlockNotFoundException,
    ExerciseDayMismatchException,
    ExerciseNotFoundException,
    PrescribedSetMismatchException,
    PrescribedSetNotFoundException,
    WorkoutDayNotFoundException,
)
from ..models import ActualSet, WorkoutDay
from ..repositories.block_repository import BlockRepository
from ..repositories.workout_repository import WorkoutRepository
from ..schemas.actual_set import ActualSetResponse
from ..schemas.workout import WorkoutExerciseLog, WorkoutExerciseResponse, WorkoutResponse
from .grouping import WorkoutKey, group_by_exercise, group_by_workout, latest_completed_at

logger = structlog.get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


def _set_sort_key(actual_set: ActualSet) -> tuple[int, int]:
    return actual_set.set_number, actual_set.id


def build_workout_view(key: WorkoutKey, actual_sets: list[ActualSet]) -> WorkoutResponse:
    """Nest one workout's flat set rows under their exercises."""
    by_exercise = group_by_exercise(actual_sets)
    ordered = sorted(
        by_exercise.values(),
        key=lambda group: (group[0].exercise.order_in_workout, group[0].exercise_id),
    )
    exercises = [
        WorkoutExerciseResponse(
            exercise_id=group[0].exercise_id,
            exercise_name=group[0].exercise.name,
            actual_sets=[ActualSetResponse.model_validate(s) for s in sorted(group, key=_set_sort_key)],
        )
        for group in ordered
    ]
    return WorkoutResponse(
        block_id=key.block_id,
        week_number=key.week_number,
        day_number=key.day_number,
        completed_at=latest_completed_at(actual_sets),
        exercises=exercises,
    )


class WorkoutAggregator:
    """Reads and writes the per-day workout view of a training block."""

    def __init__(self, db: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock
        self.repository = WorkoutRepository()
        self.blocks = BlockRepository()

    async def _resolve_day(self, block_id: int, week_number: int, day_number: int) -> WorkoutDay:
        day = await self.repository.find_day_by_coordinate(self.db, block_id, week_number, day_number)
        if day is None:
            raise WorkoutDayNotFoundException(block_id, week_number, day_number)
        return day

    async def _load_workout(self, block_id: int, week_number: int, day_number: int) -> WorkoutResponse:
        actual_sets = await self.repository.find_sets_by_coordinate(self.db, block_id, week_number, day_number)
        return build_workout_view(WorkoutKey(block_id, week_number, day_number), actual_sets)

    async def get_workout(self, block_id: int, week_number: int, day_number: int) -> WorkoutResponse:
        await self._resolve_day(block_id, week_number, day_number)
        return await self._load_workout(block_id, week_number, day_number)

    async def get_block_progress(self, block_id: int) -> list[WorkoutResponse]:
        if await self.blocks.get_block(self.db, block_id) is None:
            raise BlockNotFoundException(block_id)
        actual_sets = await self.repository.find_sets_by_block(self.db, block_id)
        grouped = group_by_workout(actual_sets)
        return [build_workout_view(key, grouped[key]) for key in sorted(grouped)]

    async def _validate_log(self, day: WorkoutDay, entries: list[WorkoutExerciseLog]) -> None:
        exercises = await self.repository.get_exercises(self.db, (entry.exercise_id for entry in entries))
        prescribed_ids = {
            logged.prescribed_set_id
            for entry in entries
            for logged in entry.actual_sets
            if logged.prescribed_set_id is not None
        }
        prescribed_sets = await self.repository.get_prescribed_sets(self.db, prescribed_ids)

        for entry in entries:
            exercise = exercises.get(entry.exercise_id)
            if exercise is None:
                raise ExerciseNotFoundException(entry.exercise_id)
            if exercise.day_id != day.id:
                raise ExerciseDayMismatchException(entry.exercise_id, day.id)
            for logged in entry.actual_sets:
                if logged.prescribed_set_id is None:
                    continue
                prescribed = prescribed_sets.get(logged.prescribed_set_id)
                if prescribed is None:
                    raise PrescribedSetNotFoundException(logged.prescribed_set_id)
                if prescribed.exercise_id != exercise.id:
                    raise PrescribedSetMismatchException(logged.prescribed_set_id, exercise.id)

    async def log_workout(
        self,
        block_id: int,
        week_number: int,
        day_number: int,
        exercises: list[WorkoutExerciseLog],
    ) -> WorkoutResponse:
        day = await self._resolve_day(block_id, week_number, day_number)
        await self._validate_log(day, exercises)

        completed_at = self.clock()
        actual_sets = [
            ActualSet(exercise_id=entry.exercise_id, completed_at=completed_at, **logged.model_dump())
            for entry in exercises
            for logged in entry.actual_sets
        ]
        try:
            self.repository.add_sets(self.db, actual_sets)
            await self.db.flush()
            workout = await self._load_workout(block_id, week_number, day_number)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("workout_log_failed", block_id=block_id, week_number=week_number, day_number=day_number)
            raise
        return workout

    async def delete_workout(self, block_id: int, week_number: int, day_number: int) -> int:
        await self._resolve_day(block_id, week_number, day_number)
        actual_sets = await self.repository.find_sets_by_coordinate(self.db, block_id, week_number, day_number)
        try:
            deleted = await self.repository.delete_sets(self.db, [s.id for s in actual_sets])
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception(
                "workout_delete_failed", block_id=block_id, week_number=week_number, day_number=day_number
            )
            raise
        return deleted
