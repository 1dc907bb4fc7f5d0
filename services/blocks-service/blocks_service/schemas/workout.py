from datetime import datetime

from pydantic import BaseModel, Field

from .actual_set import ActualSetBase, ActualSetResponse


class ActualSetLog(ActualSetBase):
    pass


class WorkoutExerciseLog(BaseModel):
    exercise_id: int
    actual_sets: list[ActualSetLog]


class WorkoutLogCreate(BaseModel):
    block_id: int
    week_number: int
    day_number: int
    exercises: list[WorkoutExerciseLog]


class WorkoutExerciseResponse(BaseModel):
    exercise_id: int
    exercise_name: str
    actual_sets: list[ActualSetResponse] = Field(default_factory=list)


class WorkoutResponse(BaseModel):
    block_id: int
    week_number: int
    day_number: int
    completed_at: datetime | None = None
    exercises: list[WorkoutExerciseResponse] = Field(default_factory=list)
