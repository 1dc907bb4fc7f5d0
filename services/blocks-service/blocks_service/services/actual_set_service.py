from collections.abc import Callable
from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import (
    ActualSetNotFoundException,
    ExerciseNotFoundException,
    PrescribedSetMismatchException,
    PrescribedSetNotFoundException,
)
from ..models import ActualSet
from ..repositories.workout_repository import WorkoutRepository
from ..schemas.actual_set import ActualSetCreate, ActualSetUpdate
from .workout_aggregator import utcnow

logger = structlog.get_logger(__name__)


class ActualSetService:
    """Single-row access to logged sets, outside of a whole-workout log."""

    def __init__(self, db: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.db = db
        self.clock = clock
        self.repository = WorkoutRepository()

    async def _check_prescribed_set(self, prescribed_set_id: int, exercise_id: int) -> None:
        found = await self.repository.get_prescribed_sets(self.db, [prescribed_set_id])
        prescribed = found.get(prescribed_set_id)
        if prescribed is None:
            raise PrescribedSetNotFoundException(prescribed_set_id)
        if prescribed.exercise_id != exercise_id:
            raise PrescribedSetMismatchException(prescribed_set_id, exercise_id)

    async def list_for_exercise(self, exercise_id: int) -> list[ActualSet]:
        exercises = await self.repository.get_exercises(self.db, [exercise_id])
        if exercise_id not in exercises:
            raise ExerciseNotFoundException(exercise_id)
        return await self.repository.find_sets_by_exercise(self.db, exercise_id)

    async def get_actual_set(self, actual_set_id: int) -> ActualSet:
        actual_set = await self.repository.get_actual_set(self.db, actual_set_id)
        if actual_set is None:
            raise ActualSetNotFoundException(actual_set_id)
        return actual_set

    async def create_actual_set(self, payload: ActualSetCreate) -> ActualSet:
        exercises = await self.repository.get_exercises(self.db, [payload.exercise_id])
        if payload.exercise_id not in exercises:
            raise ExerciseNotFoundException(payload.exercise_id)
        if payload.prescribed_set_id is not None:
            await self._check_prescribed_set(payload.prescribed_set_id, payload.exercise_id)

        actual_set = ActualSet(**payload.model_dump(), completed_at=self.clock())
        try:
            self.repository.add_sets(self.db, [actual_set])
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("actual_set_create_failed", exercise_id=payload.exercise_id)
            raise
        await self.db.refresh(actual_set)
        return actual_set

    async def update_actual_set(self, actual_set_id: int, payload: ActualSetUpdate) -> ActualSet:
        actual_set = await self.get_actual_set(actual_set_id)
        update_data = payload.model_dump(exclude_unset=True)
        for required in ("set_number", "video_recorded"):
            if required in update_data and update_data[required] is None:
                del update_data[required]
        if update_data.get("prescribed_set_id") is not None:
            await self._check_prescribed_set(update_data["prescribed_set_id"], actual_set.exercise_id)

        for key, value in update_data.items():
            setattr(actual_set, key, value)
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("actual_set_update_failed", actual_set_id=actual_set_id)
            raise
        await self.db.refresh(actual_set)
        return actual_set

    async def delete_actual_set(self, actual_set_id: int) -> None:
        actual_set = await self.get_actual_set(actual_set_id)
        try:
            await self.db.delete(actual_set)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.exception("actual_set_delete_failed", actual_set_id=actual_set_id)
            raise
