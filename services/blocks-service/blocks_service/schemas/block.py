from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from ..models.enums import ExerciseCategory, Tempo, WeekType


class PrescribedSetCreate(BaseModel):
    set_number: int
    target_sets: int
    target_reps: int
    target_load_min: Decimal | None = Field(None, max_digits=6, decimal_places=2)
    target_load_max: Decimal | None = Field(None, max_digits=6, decimal_places=2)
    target_rpe: int | None = None
    tempo: Tempo
    video_required: bool | None = None


class ExerciseCreate(BaseModel):
    name: str = Field(..., max_length=255)
    category: ExerciseCategory
    order_in_workout: int
    prescribed_sets: list[PrescribedSetCreate] = Field(default_factory=list)


class WorkoutDayCreate(BaseModel):
    day_number: int
    day_name: str = Field(..., max_length=255)
    rest_day: bool | None = None
    exercises: list[ExerciseCreate] = Field(default_factory=list)


class WeekCreate(BaseModel):
    week_number: int = Field(..., ge=1)
    week_type: WeekType
    start_date: date
    days: list[WorkoutDayCreate] = Field(default_factory=list)


class BlockCreate(BaseModel):
    created_by_user_id: int | None = None
    assigned_to_user_id: int | None = None
    block_length: int = Field(..., ge=1)
    progression_rate: Decimal = Field(..., max_digits=5, decimal_places=4)
    deload_rate: Decimal = Field(..., max_digits=5, decimal_places=4)
    macrocycle: str | None = Field(None, max_length=255)
    mesocycle: str | None = Field(None, max_length=255)
    weeks: list[WeekCreate] = Field(default_factory=list)


class PrescribedSetResponse(BaseModel):
    id: int
    exercise_id: int
    set_number: int
    target_sets: int
    target_reps: int
    target_load_min: Decimal | None = None
    target_load_max: Decimal | None = None
    target_rpe: int | None = None
    tempo: Tempo
    video_required: bool

    class Config:
        from_attributes = True


class ExerciseResponse(BaseModel):
    id: int
    day_id: int
    name: str
    category: ExerciseCategory
    order_in_workout: int
    prescribed_sets: list[PrescribedSetResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class WorkoutDayResponse(BaseModel):
    id: int
    week_id: int
    day_number: int
    day_name: str
    rest_day: bool
    exercises: list[ExerciseResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class WeekResponse(BaseModel):
    id: int
    block_id: int
    week_number: int
    week_type: WeekType
    start_date: date
    end_date: date
    days: list[WorkoutDayResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class BlockResponse(BaseModel):
    id: int
    created_by_user_id: int | None = None
    assigned_to_user_id: int | None = None
    block_length: int
    progression_rate: Decimal
    deload_rate: Decimal
    macrocycle: str
    mesocycle: str
    created_at: datetime
    weeks: list[WeekResponse] = Field(default_factory=list)

    class Config:
        from_attributes = True


class BlockSummaryResponse(BaseModel):
    id: int
    created_by_user_id: int | None = None
    assigned_to_user_id: int | None = None
    block_length: int
    progression_rate: Decimal
    deload_rate: Decimal
    macrocycle: str
    mesocycle: str
    created_at: datetime

    class Config:
        from_attributes = True
