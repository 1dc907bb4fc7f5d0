import structlog
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..dependencies import get_db
from ..metrics import ACTUAL_SETS_LOGGED_TOTAL, WORKOUTS_DELETED_TOTAL, WORKOUTS_LOGGED_TOTAL
from ..services.workout_aggregator import WorkoutAggregator

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


def get_workout_aggregator(db: AsyncSession = Depends(get_db)) -> WorkoutAggregator:
    return WorkoutAggregator(db)


@router.post("", response_model=schemas.WorkoutResponse, status_code=status.HTTP_201_CREATED)
async def log_workout(
    payload: schemas.WorkoutLogCreate,
    aggregator: WorkoutAggregator = Depends(get_workout_aggregator),
):
    set_count = sum(len(entry.actual_sets) for entry in payload.exercises)
    logger.info(
        "workout_log_requested",
        block_id=payload.block_id,
        week_number=payload.week_number,
        day_number=payload.day_number,
        exercises=len(payload.exercises),
        sets=set_count,
    )
    workout = await aggregator.log_workout(
        payload.block_id,
        payload.week_number,
        payload.day_number,
        payload.exercises,
    )
    WORKOUTS_LOGGED_TOTAL.inc()
    ACTUAL_SETS_LOGGED_TOTAL.inc(set_count)
    logger.info("workout_log_success", block_id=payload.block_id, completed_at=str(workout.completed_at))
    return workout


@router.get("", response_model=schemas.WorkoutResponse)
async def get_workout(
    block_id: int = Query(...),
    week_number: int = Query(...),
    day_number: int = Query(...),
    aggregator: WorkoutAggregator = Depends(get_workout_aggregator),
):
    return await aggregator.get_workout(block_id, week_number, day_number)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(
    block_id: int = Query(...),
    week_number: int = Query(...),
    day_number: int = Query(...),
    aggregator: WorkoutAggregator = Depends(get_workout_aggregator),
):
    logger.info("workout_delete_requested", block_id=block_id, week_number=week_number, day_number=day_number)
    deleted = await aggregator.delete_workout(block_id, week_number, day_number)
    WORKOUTS_DELETED_TOTAL.inc()
    logger.info("workout_delete_success", block_id=block_id, deleted_sets=deleted)
