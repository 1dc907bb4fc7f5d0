from datetime import timedelta

from ..models import Exercise, PrescribedSet, TrainingBlock, Week, WorkoutDay
from ..schemas.block import (
    BlockCreate,
    ExerciseCreate,
    PrescribedSetCreate,
    WeekCreate,
    WorkoutDayCreate,
)

WEEK_SPAN = timedelta(days=6)
DEFAULT_CYCLE_LABEL = "Default"


class ProgramBuilder:
    """Turns a nested block specification into an unsaved ORM graph.

    The graph is built top-down: every child is appended to its already built
    parent before its own children are built, so collections keep input order
    and both directions of each association are set before the session sees
    anything. Defaults for omitted flags and labels are filled here rather than
    by the models.
    """

    def build(self, spec: BlockCreate) -> TrainingBlock:
        block = TrainingBlock(
            created_by_user_id=spec.created_by_user_id,
            assigned_to_user_id=spec.assigned_to_user_id,
            block_length=spec.block_length,
            progression_rate=spec.progression_rate,
            deload_rate=spec.deload_rate,
            macrocycle=spec.macrocycle or DEFAULT_CYCLE_LABEL,
            mesocycle=spec.mesocycle or DEFAULT_CYCLE_LABEL,
            weeks=[],
        )
        for week_spec in spec.weeks:
            self._add_week(block, week_spec)
        return block

    def _add_week(self, block: TrainingBlock, spec: WeekCreate) -> Week:
        week = Week(
            week_number=spec.week_number,
            week_type=spec.week_type,
            start_date=spec.start_date,
            end_date=spec.start_date + WEEK_SPAN,
            days=[],
        )
        block.weeks.append(week)
        for day_spec in spec.days:
            self._add_day(week, day_spec)
        return week

    def _add_day(self, week: Week, spec: WorkoutDayCreate) -> WorkoutDay:
        day = WorkoutDay(
            day_number=spec.day_number,
            day_name=spec.day_name,
            rest_day=bool(spec.rest_day),
            exercises=[],
        )
        week.days.append(day)
        for exercise_spec in spec.exercises:
            self._add_exercise(day, exercise_spec)
        return day

    def _add_exercise(self, day: WorkoutDay, spec: ExerciseCreate) -> Exercise:
        exercise = Exercise(
            name=spec.name,
            category=spec.category,
            order_in_workout=spec.order_in_workout,
            prescribed_sets=[],
            actual_sets=[],
        )
        day.exercises.append(exercise)
        for set_spec in spec.prescribed_sets:
            self._add_prescribed_set(exercise, set_spec)
        return exercise

    def _add_prescribed_set(self, exercise: Exercise, spec: PrescribedSetCreate) -> PrescribedSet:
        prescribed = PrescribedSet(
            set_number=spec.set_number,
            target_sets=spec.target_sets,
            target_reps=spec.target_reps,
            target_load_min=spec.target_load_min,
            target_load_max=spec.target_load_max,
            target_rpe=spec.target_rpe,
            tempo=spec.tempo,
            video_required=bool(spec.video_required),
        )
        exercise.prescribed_sets.append(prescribed)
        return prescribed
