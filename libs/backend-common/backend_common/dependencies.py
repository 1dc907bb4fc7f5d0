from collections.abc import AsyncGenerator, Callable

from fastapi import Request
from sentry_sdk import set_tag
from sqlalchemy.ext.asyncio import AsyncSession


def make_get_db_async(
    async_session_factory: Callable[[], AsyncSession],
    service_name: str | None = None,
) -> Callable[..., AsyncGenerator[AsyncSession, None]]:
    """Build a request-scoped session dependency.

    The session is rolled back if the request handler raises before committing,
    so a failed operation never leaves pending rows behind.
    """

    async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
        if service_name:
            set_tag("service", service_name)
        async with async_session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    return get_db
