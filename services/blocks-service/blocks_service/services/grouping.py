"""Grouping helpers for rebuilding workout views from flat actual-set rows.

Rows are keyed by a structured ``WorkoutKey`` rather than a delimited string,
so coordinates such as (1, 23, 1) and (12, 3, 1) can never collide.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import NamedTuple

from ..models import ActualSet


class WorkoutKey(NamedTuple):
    block_id: int
    week_number: int
    day_number: int


def workout_key_for(actual_set: ActualSet) -> WorkoutKey:
    """Coordinate of the workout a set belongs to.

    Needs ``exercise -> day -> week`` to be loaded on the set.
    """
    day = actual_set.exercise.day
    week = day.week
    return WorkoutKey(block_id=week.block_id, week_number=week.week_number, day_number=day.day_number)


def group_by_workout(actual_sets: Iterable[ActualSet]) -> dict[WorkoutKey, list[ActualSet]]:
    groups: dict[WorkoutKey, list[ActualSet]] = {}
    for actual_set in actual_sets:
        groups.setdefault(workout_key_for(actual_set), []).append(actual_set)
    return groups


def group_by_exercise(actual_sets: Iterable[ActualSet]) -> dict[int, list[ActualSet]]:
    groups: dict[int, list[ActualSet]] = {}
    for actual_set in actual_sets:
        groups.setdefault(actual_set.exercise_id, []).append(actual_set)
    return groups


def latest_completed_at(actual_sets: Iterable[ActualSet]) -> datetime | None:
    timestamps = [s.completed_at for s in actual_sets if s.completed_at is not None]
    return max(timestamps) if timestamps else None
