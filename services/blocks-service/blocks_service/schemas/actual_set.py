from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from ..models.enums import Tempo


class ActualSetBase(BaseModel):
    prescribed_set_id: int | None = None
    set_number: int
    actual_weight: Decimal | None = Field(None, max_digits=6, decimal_places=2)
    actual_reps: int | None = None
    actual_rpe: int | None = None
    tempo_used: Tempo | None = None
    video_recorded: bool = False
    feedback: str | None = None


class ActualSetCreate(ActualSetBase):
    exercise_id: int


class ActualSetUpdate(BaseModel):
    """Partial update; completion time is not writable and is ignored if sent."""

    prescribed_set_id: int | None = None
    set_number: int | None = None
    actual_weight: Decimal | None = Field(None, max_digits=6, decimal_places=2)
    actual_reps: int | None = None
    actual_rpe: int | None = None
    tempo_used: Tempo | None = None
    video_recorded: bool | None = None
    feedback: str | None = None


class ActualSetResponse(BaseModel):
    id: int
    exercise_id: int
    prescribed_set_id: int | None = None
    set_number: int
    actual_weight: Decimal | None = None
    actual_reps: int | None = None
    actual_rpe: int | None = None
    tempo_used: Tempo | None = None
    video_recorded: bool
    feedback: str | None = None
    completed_at: datetime

    class Config:
        from_attributes = True
