import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..dependencies import get_db
from ..services.block_service import BlockService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(exercise_id: int, db: AsyncSession = Depends(get_db)):
    logger.info("exercise_delete_requested", exercise_id=exercise_id)
    await BlockService(db).delete_exercise(exercise_id)
    logger.info("exercise_delete_success", exercise_id=exercise_id)
