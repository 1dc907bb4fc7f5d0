from datetime import datetime
from decimal import Decimal

import pytest
import pytest_asyncio
from blocks_service.exceptions import (
    ActualSetNotFoundException,
    ExerciseNotFoundException,
    PrescribedSetMismatchException,
    PrescribedSetNotFoundException,
)
from blocks_service.models import Tempo
from blocks_service.schemas import ActualSetCreate, ActualSetUpdate
from blocks_service.services.actual_set_service import ActualSetService
from blocks_service.services.block_service import BlockService

from conftest import make_block_payload

LOGGED_AT = datetime(2026, 1, 7, 6, 0)


@pytest_asyncio.fixture
async def exercises(db):
    block = await BlockService(db).create_block(
        make_block_payload(weeks=1, days_per_week=1, exercises_per_day=2, sets_per_exercise=2)
    )
    return block.weeks[0].days[0].exercises


@pytest.fixture
def service(db):
    return ActualSetService(db, clock=lambda: LOGGED_AT)


@pytest.mark.asyncio
async def test_create_assigns_completion_time(service, exercises):
    squat = exercises[0]

    created = await service.create_actual_set(
        ActualSetCreate(
            exercise_id=squat.id,
            prescribed_set_id=squat.prescribed_sets[0].id,
            set_number=1,
            actual_weight=Decimal("100.00"),
            actual_reps=5,
        )
    )

    assert created.id is not None
    assert created.completed_at == LOGGED_AT
    assert created.video_recorded is False
    assert created.prescribed_set_id == squat.prescribed_sets[0].id


@pytest.mark.asyncio
async def test_create_rejects_unknown_exercise(service):
    with pytest.raises(ExerciseNotFoundException):
        await service.create_actual_set(ActualSetCreate(exercise_id=31337, set_number=1))


@pytest.mark.asyncio
async def test_create_rejects_foreign_or_unknown_prescribed_set(service, exercises):
    squat, bench = exercises

    with pytest.raises(PrescribedSetMismatchException):
        await service.create_actual_set(
            ActualSetCreate(exercise_id=squat.id, prescribed_set_id=bench.prescribed_sets[0].id, set_number=1)
        )
    with pytest.raises(PrescribedSetNotFoundException):
        await service.create_actual_set(ActualSetCreate(exercise_id=squat.id, prescribed_set_id=999, set_number=1))


@pytest.mark.asyncio
async def test_list_for_exercise_orders_by_set_number(service, exercises):
    squat, bench = exercises
    for number in (3, 1, 2):
        await service.create_actual_set(ActualSetCreate(exercise_id=squat.id, set_number=number))
    await service.create_actual_set(ActualSetCreate(exercise_id=bench.id, set_number=1))

    listed = await service.list_for_exercise(squat.id)

    assert [s.set_number for s in listed] == [1, 2, 3]
    assert all(s.exercise_id == squat.id for s in listed)


@pytest.mark.asyncio
async def test_list_for_missing_exercise_raises(service):
    with pytest.raises(ExerciseNotFoundException):
        await service.list_for_exercise(12345)


@pytest.mark.asyncio
async def test_partial_update_changes_only_supplied_fields(service, exercises):
    created = await service.create_actual_set(
        ActualSetCreate(exercise_id=exercises[0].id, set_number=1, actual_reps=5, feedback="easy")
    )

    updated = await service.update_actual_set(
        created.id,
        ActualSetUpdate.model_validate(
            {"actual_rpe": 9, "tempo_used": "EXPLOSIVE", "completed_at": "2000-01-01T00:00:00"}
        ),
    )

    assert updated.actual_rpe == 9
    assert updated.tempo_used is Tempo.EXPLOSIVE
    assert updated.actual_reps == 5
    assert updated.feedback == "easy"
    assert updated.completed_at == LOGGED_AT


@pytest.mark.asyncio
async def test_update_cannot_null_required_columns(service, exercises):
    created = await service.create_actual_set(ActualSetCreate(exercise_id=exercises[0].id, set_number=4))

    updated = await service.update_actual_set(created.id, ActualSetUpdate(set_number=None, feedback=None))

    assert updated.set_number == 4
    assert updated.feedback is None


@pytest.mark.asyncio
async def test_update_checks_prescribed_set_ownership(service, exercises):
    squat, bench = exercises
    created = await service.create_actual_set(ActualSetCreate(exercise_id=squat.id, set_number=1))

    with pytest.raises(PrescribedSetMismatchException):
        await service.update_actual_set(created.id, ActualSetUpdate(prescribed_set_id=bench.prescribed_sets[1].id))


@pytest.mark.asyncio
async def test_get_and_delete(service, exercises):
    created = await service.create_actual_set(ActualSetCreate(exercise_id=exercises[1].id, set_number=1))

    assert (await service.get_actual_set(created.id)).id == created.id
    await service.delete_actual_set(created.id)

    with pytest.raises(ActualSetNotFoundException):
        await service.get_actual_set(created.id)
    with pytest.raises(ActualSetNotFoundException):
        await service.delete_actual_set(created.id)
