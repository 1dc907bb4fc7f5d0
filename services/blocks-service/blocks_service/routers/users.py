import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from .. import schemas
from ..dependencies import get_db
from ..services.user_service import UserService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(payload: schemas.UserCreate, service: UserService = Depends(get_user_service)):
    logger.info("user_create_requested", role=payload.role.value)
    user = await service.create_user(payload)
    logger.info("user_create_success", user_id=user.id)
    return user


@router.get("", response_model=list[schemas.UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()


@router.get("/{user_id}", response_model=schemas.UserResponse)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return await service.get_user(user_id)
