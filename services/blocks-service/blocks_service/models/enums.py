from enum import Enum


class WeekType(str, Enum):
    BASE = "BASE"
    PROGRESSION = "PROGRESSION"
    DELOAD = "DELOAD"
    TEST = "TEST"


class ExerciseCategory(str, Enum):
    SQUAT = "SQUAT"
    BENCH = "BENCH"
    DEADLIFT = "DEADLIFT"
    ACCESSORY = "ACCESSORY"


class Tempo(str, Enum):
    CONTROLLED = "CONTROLLED"
    EXPLOSIVE = "EXPLOSIVE"
    PAUSED = "PAUSED"


class UserRole(str, Enum):
    COACH = "COACH"
    ATHLETE = "ATHLETE"
