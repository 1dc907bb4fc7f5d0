from fastapi import HTTPException, status


class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DependencyNotFoundException(HTTPException):
    """A referenced collaborator record (not the requested resource itself) is missing."""

    def __init__(self, detail: str = "Referenced resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ValidationException(HTTPException):
    def __init__(self, detail: str = "Invalid request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class BlockNotFoundException(NotFoundException):
    def __init__(self, block_id: int):
        super().__init__(detail=f"Training block with id={block_id} not found")


class WorkoutDayNotFoundException(NotFoundException):
    def __init__(self, block_id: int, week_number: int, day_number: int):
        super().__init__(
            detail=f"Workout day not found for block={block_id}, week={week_number}, day={day_number}"
        )


class ExerciseNotFoundException(NotFoundException):
    def __init__(self, exercise_id: int):
        super().__init__(detail=f"Exercise with id={exercise_id} not found")


class PrescribedSetNotFoundException(NotFoundException):
    def __init__(self, prescribed_set_id: int):
        super().__init__(detail=f"Prescribed set with id={prescribed_set_id} not found")


class ActualSetNotFoundException(NotFoundException):
    def __init__(self, actual_set_id: int):
        super().__init__(detail=f"Actual set with id={actual_set_id} not found")


class UserNotFoundException(DependencyNotFoundException):
    def __init__(self, user_id: int):
        super().__init__(detail=f"User with id={user_id} not found")


class InvalidBlockSpecificationException(ValidationException):
    def __init__(self, detail: str):
        super().__init__(detail=f"Invalid block specification: {detail}")


class ExerciseDayMismatchException(ValidationException):
    def __init__(self, exercise_id: int, day_id: int):
        super().__init__(detail=f"Exercise {exercise_id} does not belong to workout day {day_id}")


class PrescribedSetMismatchException(ValidationException):
    def __init__(self, prescribed_set_id: int, exercise_id: int):
        super().__init__(detail=f"Prescribed set {prescribed_set_id} does not belong to exercise {exercise_id}")


class MissingBlockOwnerException(ValidationException):
    def __init__(self):
        super().__init__(detail="Both created_by_user_id and assigned_to_user_id are required")


class DuplicateUserEmailException(ValidationException):
    def __init__(self, email: str):
        super().__init__(detail=f"User with email {email} already exists")
