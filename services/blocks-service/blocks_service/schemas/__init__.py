from .actual_set import ActualSetCreate, ActualSetResponse, ActualSetUpdate
from .block import (
    BlockCreate,
    BlockResponse,
    BlockSummaryResponse,
    ExerciseCreate,
    ExerciseResponse,
    PrescribedSetCreate,
    PrescribedSetResponse,
    WeekCreate,
    WeekResponse,
    WorkoutDayCreate,
    WorkoutDayResponse,
)
from .user import UserCreate, UserResponse
from .workout import (
    ActualSetLog,
    WorkoutExerciseLog,
    WorkoutExerciseResponse,
    WorkoutLogCreate,
    WorkoutResponse,
)
