import structlog
from backend_common.database import create_async_engine_and_session
from sqlalchemy.orm import declarative_base

from .config import get_settings

logger = structlog.get_logger(__name__)

Base = declarative_base()

settings = get_settings()

engine, AsyncSessionLocal = create_async_engine_and_session(
    settings.BLOCKS_DATABASE_URL,
    echo=settings.DEBUG,
    expire_on_commit=False,
)
logger.info("blocks_database_engine_created", driver=engine.url.drivername)
