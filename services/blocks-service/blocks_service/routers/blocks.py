import structlog
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..dependencies import get_db
from ..metrics import TRAINING_BLOCKS_CREATED_TOTAL
from ..services.block_service import BlockService
from ..services.workout_aggregator import WorkoutAggregator

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/blocks", tags=["blocks"])


def get_block_service(db: AsyncSession = Depends(get_db)) -> BlockService:
    return BlockService(db)


def get_workout_aggregator(db: AsyncSession = Depends(get_db)) -> WorkoutAggregator:
    return WorkoutAggregator(db)


@router.post("", response_model=schemas.BlockResponse, status_code=status.HTTP_201_CREATED)
async def create_block(
    payload: schemas.BlockCreate,
    service: BlockService = Depends(get_block_service),
):
    logger.info(
        "block_create_requested",
        created_by_user_id=payload.created_by_user_id,
        assigned_to_user_id=payload.assigned_to_user_id,
        weeks=len(payload.weeks),
    )
    block = await service.create_block(payload)
    TRAINING_BLOCKS_CREATED_TOTAL.inc()
    logger.info("block_create_success", block_id=block.id)
    return block


@router.get("", response_model=list[schemas.BlockSummaryResponse])
async def list_blocks(
    assigned_to_user_id: int | None = Query(None),
    created_by_user_id: int | None = Query(None),
    service: BlockService = Depends(get_block_service),
):
    return await service.list_blocks(
        assigned_to_user_id=assigned_to_user_id,
        created_by_user_id=created_by_user_id,
    )


@router.get("/{block_id}", response_model=schemas.BlockResponse)
async def get_block(block_id: int, service: BlockService = Depends(get_block_service)):
    return await service.get_block(block_id)


@router.delete("/{block_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_block(block_id: int, service: BlockService = Depends(get_block_service)):
    logger.info("block_delete_requested", block_id=block_id)
    await service.delete_block(block_id)
    logger.info("block_delete_success", block_id=block_id)


@router.get("/{block_id}/progress", response_model=list[schemas.WorkoutResponse])
async def get_block_progress(
    block_id: int,
    aggregator: WorkoutAggregator = Depends(get_workout_aggregator),
):
    return await aggregator.get_block_progress(block_id)
