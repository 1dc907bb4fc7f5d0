from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import DuplicateUserEmailException, UserNotFoundException
from ..models import User
from ..repositories.user_repository import UserRepository
from ..schemas.user import UserCreate


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.repository = UserRepository()

    async def create_user(self, payload: UserCreate) -> User:
        if await self.repository.get_user_by_email(self.db, payload.email):
            raise DuplicateUserEmailException(payload.email)
        try:
            return await self.repository.create_user(self.db, payload.model_dump())
        except IntegrityError as exc:
            # lost a race with a concurrent insert of the same email
            await self.db.rollback()
            raise DuplicateUserEmailException(payload.email) from exc

    async def get_user(self, user_id: int) -> User:
        user = await self.repository.get_user(self.db, user_id)
        if user is None:
            raise UserNotFoundException(user_id)
        return user

    async def list_users(self) -> list[User]:
        return await self.repository.list_users(self.db)

    async def ensure_users_exist(self, user_ids: Iterable[int]) -> None:
        requested = list(dict.fromkeys(user_ids))
        if not requested:
            return
        found = await self.repository.existing_ids(self.db, requested)
        for user_id in requested:
            if user_id not in found:
                raise UserNotFoundException(user_id)
