from datetime import date, datetime

from pydantic import BaseModel, Field

from ..models.enums import UserRole


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    role: UserRole
    start_date: date | None = None
    estimated_squat_1rm: int | None = None
    estimated_bench_1rm: int | None = None
    estimated_deadlift_1rm: int | None = None


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole
    start_date: date | None = None
    estimated_squat_1rm: int | None = None
    estimated_bench_1rm: int | None = None
    estimated_deadlift_1rm: int | None = None
    created_at: datetime

    class Config:
        from_attributes = True
