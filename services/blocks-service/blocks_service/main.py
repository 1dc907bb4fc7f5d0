import structlog
from backend_common.fastapi_app import create_service_app

from .database import engine
from .logging_config import configure_logging
from .models import Base
from .redis_client import close_redis, init_redis
from .routers import actual_sets, blocks, exercises, users, workouts

configure_logging()
logger = structlog.get_logger(__name__)

app = create_service_app(
    title="blocks-service",
    version="0.1.0",
    description="Training blocks: program creation and workout logging",
)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.on_event("startup")
async def startup_event():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await init_redis()
    logger.info("blocks_service_started")


@app.on_event("shutdown")
async def shutdown_event():
    await close_redis()
    await engine.dispose()


app.include_router(blocks.router)
app.include_router(workouts.router)
app.include_router(exercises.router)
app.include_router(actual_sets.router)
app.include_router(users.router)
