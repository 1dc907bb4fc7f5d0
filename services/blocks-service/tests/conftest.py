import os
from datetime import date, timedelta
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

SERVICE_ROOT = Path(__file__).resolve().parents[1]

# Keep the app away from a real Redis; the cache helper treats a missing client as a miss
os.environ.setdefault("BLOCKS_REDIS_HOST", "")
os.environ.setdefault("APP_ENV", "test")

from backend_common.database import create_async_engine_and_session  # noqa: E402
from backend_common.dependencies import make_get_db_async  # noqa: E402

CATEGORIES = ["SQUAT", "BENCH", "DEADLIFT", "ACCESSORY"]
FIRST_MONDAY = date(2026, 1, 5)


def make_block_payload(
    weeks: int = 2,
    days_per_week: int = 2,
    exercises_per_day: int = 2,
    sets_per_exercise: int = 2,
    **overrides,
) -> dict:
    """JSON-ready block specification with predictable names and numbering."""
    payload = {
        "block_length": weeks,
        "progression_rate": "0.0250",
        "deload_rate": "0.1000",
        "weeks": [
            {
                "week_number": w,
                "week_type": "DELOAD" if weeks > 1 and w == weeks else "BASE",
                "start_date": (FIRST_MONDAY + timedelta(weeks=w - 1)).isoformat(),
                "days": [
                    {
                        "day_number": d,
                        "day_name": f"Week {w} Day {d}",
                        "exercises": [
                            {
                                "name": f"Lift {w}.{d}.{e}",
                                "category": CATEGORIES[(e - 1) % len(CATEGORIES)],
                                "order_in_workout": e,
                                "prescribed_sets": [
                                    {
                                        "set_number": s,
                                        "target_sets": 1,
                                        "target_reps": 5,
                                        "tempo": "CONTROLLED",
                                    }
                                    for s in range(1, sets_per_exercise + 1)
                                ],
                            }
                            for e in range(1, exercises_per_day + 1)
                        ],
                    }
                    for d in range(1, days_per_week + 1)
                ],
            }
            for w in range(1, weeks + 1)
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def block_payload():
    return make_block_payload


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    from blocks_service.models import Base

    engine, factory = create_async_engine_and_session(f"sqlite:///{tmp_path / 'blocks_test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    from blocks_service.dependencies import get_db
    from blocks_service.main import app

    app.dependency_overrides[get_db] = make_get_db_async(session_factory)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


class FakeRedis:
    """In-memory stand-in for the handful of redis.asyncio calls the service makes."""

    def __init__(self):
        self.store: dict[str, str] = {}

    async def get(self, key):
        return self.store.get(key)

    async def set(self, key, value, ex=None):
        self.store[key] = value

    async def delete(self, *keys):
        for key in keys:
            self.store.pop(key, None)


@pytest.fixture
def fake_redis(monkeypatch):
    from blocks_service import redis_client

    fake = FakeRedis()
    monkeypatch.setattr(redis_client, "redis_client", fake)
    return fake
