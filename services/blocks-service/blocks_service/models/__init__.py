from ..database import Base
from .blocks import ActualSet, Exercise, PrescribedSet, TrainingBlock, Week, WorkoutDay
from .enums import ExerciseCategory, Tempo, UserRole, WeekType
from .user import User

__all__ = [
    "Base",
    "ActualSet",
    "Exercise",
    "ExerciseCategory",
    "PrescribedSet",
    "Tempo",
    "TrainingBlock",
    "User",
    "UserRole",
    "Week",
    "WeekType",
    "WorkoutDay",
]
