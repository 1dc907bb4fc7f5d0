from datetime import date
from decimal import Decimal

import pytest
from httpx import AsyncClient

from conftest import make_block_payload


async def _create_block(client: AsyncClient, **kwargs) -> dict:
    r = await client.post("/blocks", json=make_block_payload(**kwargs))
    assert r.status_code == 201, r.text
    return r.json()


async def _create_user(client: AsyncClient, email: str, role: str = "ATHLETE") -> dict:
    r = await client.post("/users", json={"name": email.split("@")[0], "email": email, "role": role})
    assert r.status_code == 201, r.text
    return r.json()


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    r = await client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert "X-Process-Time" in r.headers


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient):
    await _create_block(client, weeks=1, days_per_week=1)

    r = await client.get("/metrics")

    assert r.status_code == 200
    assert "training_blocks_created_total" in r.text


@pytest.mark.asyncio
async def test_block_create_read_delete_flow(client: AsyncClient):
    created = await _create_block(client, weeks=2, days_per_week=2, exercises_per_day=1, sets_per_exercise=3)

    assert Decimal(created["progression_rate"]) == Decimal("0.025")
    assert created["macrocycle"] == "Default"
    assert [w["week_type"] for w in created["weeks"]] == ["BASE", "DELOAD"]
    assert created["weeks"][0]["end_date"] == "2026-01-11"
    assert created["weeks"][1]["end_date"] == "2026-01-18"
    assert len(created["weeks"][1]["days"][0]["exercises"][0]["prescribed_sets"]) == 3

    r_get = await client.get(f"/blocks/{created['id']}")
    assert r_get.status_code == 200
    assert r_get.json() == created

    r_list = await client.get("/blocks")
    assert [b["id"] for b in r_list.json()] == [created["id"]]
    assert "weeks" not in r_list.json()[0]

    r_del = await client.delete(f"/blocks/{created['id']}")
    assert r_del.status_code == 204

    assert (await client.get(f"/blocks/{created['id']}")).status_code == 404
    assert (await client.delete(f"/blocks/{created['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_invalid_block_body_is_bad_request(client: AsyncClient):
    payload = make_block_payload()
    del payload["weeks"][0]["days"][1]["exercises"][0]["prescribed_sets"][0]["target_reps"]

    r = await client.post("/blocks", json=payload)

    assert r.status_code == 400
    locations = [tuple(err["loc"]) for err in r.json()["detail"]]
    assert ("body", "weeks", 0, "days", 1, "exercises", 0, "prescribed_sets", 0, "target_reps") in locations
    assert (await client.get("/blocks")).json() == []


@pytest.mark.asyncio
async def test_block_with_unknown_owner_is_not_found(client: AsyncClient):
    coach = await _create_user(client, "coach@example.com", role="COACH")

    r = await client.post(
        "/blocks",
        json=make_block_payload(created_by_user_id=coach["id"], assigned_to_user_id=coach["id"] + 1),
    )

    assert r.status_code == 404
    assert "User" in r.json()["detail"]


@pytest.mark.asyncio
async def test_list_blocks_by_assignee(client: AsyncClient):
    athlete = await _create_user(client, "athlete@example.com")
    mine = await _create_block(client, weeks=1, days_per_week=1, assigned_to_user_id=athlete["id"])
    await _create_block(client, weeks=1, days_per_week=1)

    r = await client.get("/blocks", params={"assigned_to_user_id": athlete["id"]})

    assert r.status_code == 200
    assert [b["id"] for b in r.json()] == [mine["id"]]


@pytest.mark.asyncio
async def test_workout_logging_flow(client: AsyncClient):
    block = await _create_block(client, weeks=2, days_per_week=2, exercises_per_day=2, sets_per_exercise=1)
    squat, bench = block["weeks"][0]["days"][0]["exercises"]
    coordinate = {"block_id": block["id"], "week_number": 1, "day_number": 1}

    r_empty = await client.get("/workouts", params=coordinate)
    assert r_empty.status_code == 200
    assert r_empty.json()["completed_at"] is None
    assert r_empty.json()["exercises"] == []

    r_log = await client.post(
        "/workouts",
        json={
            **coordinate,
            "exercises": [
                {
                    "exercise_id": bench["id"],
                    "actual_sets": [{"set_number": 1, "actual_weight": "80.00", "actual_reps": 8, "actual_rpe": 7}],
                },
                {
                    "exercise_id": squat["id"],
                    "actual_sets": [
                        {
                            "set_number": 1,
                            "prescribed_set_id": squat["prescribed_sets"][0]["id"],
                            "actual_weight": "120.00",
                            "actual_reps": 5,
                            "tempo_used": "CONTROLLED",
                        },
                        {"set_number": 2, "actual_weight": "120.00", "actual_reps": 5},
                    ],
                },
            ],
        },
    )
    assert r_log.status_code == 201, r_log.text
    logged = r_log.json()
    assert [e["exercise_name"] for e in logged["exercises"]] == [squat["name"], bench["name"]]
    stamps = {s["completed_at"] for e in logged["exercises"] for s in e["actual_sets"]}
    assert stamps == {logged["completed_at"]}

    r_get = await client.get("/workouts", params=coordinate)
    assert r_get.json() == logged

    r_progress = await client.get(f"/blocks/{block['id']}/progress")
    assert r_progress.status_code == 200
    assert [(w["week_number"], w["day_number"]) for w in r_progress.json()] == [(1, 1)]

    r_sets = await client.get(f"/actual-sets/exercise/{squat['id']}")
    assert [s["set_number"] for s in r_sets.json()] == [1, 2]

    r_del = await client.delete("/workouts", params=coordinate)
    assert r_del.status_code == 204
    assert (await client.get("/workouts", params=coordinate)).json()["exercises"] == []
    assert (await client.get(f"/blocks/{block['id']}/progress")).json() == []


@pytest.mark.asyncio
async def test_logging_exercise_from_another_day_is_bad_request(client: AsyncClient):
    block = await _create_block(client, weeks=1, days_per_week=2, exercises_per_day=1)
    other_day_exercise = block["weeks"][0]["days"][1]["exercises"][0]

    r = await client.post(
        "/workouts",
        json={
            "block_id": block["id"],
            "week_number": 1,
            "day_number": 1,
            "exercises": [{"exercise_id": other_day_exercise["id"], "actual_sets": [{"set_number": 1}]}],
        },
    )

    assert r.status_code == 400
    assert "does not belong" in r.json()["detail"]
    assert (await client.get(f"/actual-sets/exercise/{other_day_exercise['id']}")).json() == []


@pytest.mark.asyncio
async def test_workout_for_missing_day_is_not_found(client: AsyncClient):
    block = await _create_block(client, weeks=1, days_per_week=1)

    r = await client.get("/workouts", params={"block_id": block["id"], "week_number": 1, "day_number": 7})
    assert r.status_code == 404

    r = await client.delete("/workouts", params={"block_id": block["id"], "week_number": 4, "day_number": 1})
    assert r.status_code == 404

    assert (await client.get("/blocks/999/progress")).status_code == 404


@pytest.mark.asyncio
async def test_actual_set_crud(client: AsyncClient):
    block = await _create_block(client, weeks=1, days_per_week=1, exercises_per_day=1)
    exercise = block["weeks"][0]["days"][0]["exercises"][0]

    r_create = await client.post(
        "/actual-sets",
        json={"exercise_id": exercise["id"], "set_number": 1, "actual_reps": 3, "completed_at": "1999-01-01T00:00:00"},
    )
    assert r_create.status_code == 201, r_create.text
    created = r_create.json()
    assert not created["completed_at"].startswith("1999")

    r_update = await client.put(f"/actual-sets/{created['id']}", json={"actual_reps": 4, "feedback": "grindy"})
    assert r_update.status_code == 200
    assert r_update.json()["actual_reps"] == 4
    assert r_update.json()["feedback"] == "grindy"
    assert r_update.json()["completed_at"] == created["completed_at"]

    assert (await client.get(f"/actual-sets/{created['id']}")).status_code == 200
    assert (await client.delete(f"/actual-sets/{created['id']}")).status_code == 204
    assert (await client.get(f"/actual-sets/{created['id']}")).status_code == 404
    assert (await client.get("/actual-sets/exercise/9999")).status_code == 404


@pytest.mark.asyncio
async def test_delete_exercise_endpoint(client: AsyncClient):
    block = await _create_block(client, weeks=1, days_per_week=1, exercises_per_day=2)
    first, second = block["weeks"][0]["days"][0]["exercises"]

    assert (await client.delete(f"/exercises/{first['id']}")).status_code == 204
    assert (await client.delete(f"/exercises/{first['id']}")).status_code == 404

    remaining = (await client.get(f"/blocks/{block['id']}")).json()["weeks"][0]["days"][0]["exercises"]
    assert [e["id"] for e in remaining] == [second["id"]]


@pytest.mark.asyncio
async def test_users(client: AsyncClient):
    r = await client.post(
        "/users",
        json={
            "name": "Ada",
            "email": "ada@example.com",
            "role": "ATHLETE",
            "start_date": "2026-01-05",
            "estimated_squat_1rm": 180,
        },
    )
    assert r.status_code == 201
    user = r.json()
    assert user["start_date"] == date(2026, 1, 5).isoformat()
    assert user["estimated_squat_1rm"] == 180

    r_dup = await client.post("/users", json={"name": "Other", "email": "ada@example.com", "role": "COACH"})
    assert r_dup.status_code == 400

    assert (await client.get(f"/users/{user['id']}")).json()["email"] == "ada@example.com"
    assert [u["id"] for u in (await client.get("/users")).json()] == [user["id"]]
    assert (await client.get("/users/4242")).status_code == 404

    r_bad = await client.post("/users", json={"name": "Nope", "email": "not-an-email", "role": "ATHLETE"})
    assert r_bad.status_code == 400
