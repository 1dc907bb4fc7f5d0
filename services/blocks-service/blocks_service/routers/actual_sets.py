import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..dependencies import get_db
from ..metrics import ACTUAL_SETS_LOGGED_TOTAL
from ..services.actual_set_service import ActualSetService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/actual-sets", tags=["actual-sets"])


def get_actual_set_service(db: AsyncSession = Depends(get_db)) -> ActualSetService:
    return ActualSetService(db)


@router.get("/exercise/{exercise_id}", response_model=list[schemas.ActualSetResponse])
async def list_actual_sets_for_exercise(
    exercise_id: int,
    service: ActualSetService = Depends(get_actual_set_service),
):
    return await service.list_for_exercise(exercise_id)


@router.post("", response_model=schemas.ActualSetResponse, status_code=status.HTTP_201_CREATED)
async def create_actual_set(
    payload: schemas.ActualSetCreate,
    service: ActualSetService = Depends(get_actual_set_service),
):
    logger.info("actual_set_create_requested", exercise_id=payload.exercise_id, set_number=payload.set_number)
    actual_set = await service.create_actual_set(payload)
    ACTUAL_SETS_LOGGED_TOTAL.inc()
    logger.info("actual_set_create_success", actual_set_id=actual_set.id)
    return actual_set


@router.get("/{actual_set_id}", response_model=schemas.ActualSetResponse)
async def get_actual_set(actual_set_id: int, service: ActualSetService = Depends(get_actual_set_service)):
    return await service.get_actual_set(actual_set_id)


@router.put("/{actual_set_id}", response_model=schemas.ActualSetResponse)
async def update_actual_set(
    actual_set_id: int,
    payload: schemas.ActualSetUpdate,
    service: ActualSetService = Depends(get_actual_set_service),
):
    logger.info("actual_set_update_requested", actual_set_id=actual_set_id)
    return await service.update_actual_set(actual_set_id, payload)


@router.delete("/{actual_set_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_actual_set(actual_set_id: int, service: ActualSetService = Depends(get_actual_set_service)):
    logger.info("actual_set_delete_requested", actual_set_id=actual_set_id)
    await service.delete_actual_set(actual_set_id)
