from datetime import datetime

from sqlalchemy import Boolean, Column, Date, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from ..database import Base
from .enums import ExerciseCategory, Tempo, WeekType

week_type_enum = Enum(WeekType, name="weektypeenum", native_enum=False, length=32)
exercise_category_enum = Enum(ExerciseCategory, name="exercisecategoryenum", native_enum=False, length=32)
tempo_enum = Enum(Tempo, name="tempoenum", native_enum=False, length=32)


class TrainingBlock(Base):
    __tablename__ = "training_blocks"

    id = Column(Integer, primary_key=True, index=True)
    created_by_user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    assigned_to_user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    block_length = Column(Integer, nullable=False)
    progression_rate = Column(Numeric(5, 4), nullable=False)
    deload_rate = Column(Numeric(5, 4), nullable=False)
    macrocycle = Column(String(255), nullable=False)
    mesocycle = Column(String(255), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    weeks = relationship(
        "Week",
        back_populates="block",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Week.id",
    )

    def __repr__(self):
        return "<TrainingBlock(id=%s, length=%s, macrocycle=%s)>" % (self.id, self.block_length, self.macrocycle)


class Week(Base):
    __tablename__ = "weeks"

    id = Column(Integer, primary_key=True, index=True)
    block_id = Column(Integer, ForeignKey("training_blocks.id", ondelete="CASCADE"), nullable=False, index=True)
    week_number = Column(Integer, nullable=False)
    week_type = Column(week_type_enum, nullable=False)
    start_date = Column(Date, nullable=False)
    # always start_date + 6 days, filled by the program builder
    end_date = Column(Date, nullable=False)

    block = relationship("TrainingBlock", back_populates="weeks")
    days = relationship(
        "WorkoutDay",
        back_populates="week",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkoutDay.id",
    )


class WorkoutDay(Base):
    __tablename__ = "workout_days"

    id = Column(Integer, primary_key=True, index=True)
    week_id = Column(Integer, ForeignKey("weeks.id", ondelete="CASCADE"), nullable=False, index=True)
    day_number = Column(Integer, nullable=False)
    day_name = Column(String(255), nullable=False)
    rest_day = Column(Boolean, nullable=False)

    week = relationship("Week", back_populates="days")
    exercises = relationship(
        "Exercise",
        back_populates="day",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Exercise.id",
    )


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)
    day_id = Column(Integer, ForeignKey("workout_days.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(exercise_category_enum, nullable=False)
    order_in_workout = Column(Integer, nullable=False)

    day = relationship("WorkoutDay", back_populates="exercises")
    prescribed_sets = relationship(
        "PrescribedSet",
        back_populates="exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PrescribedSet.id",
    )
    actual_sets = relationship(
        "ActualSet",
        back_populates="exercise",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: [ActualSet.set_number, ActualSet.id],
    )

    def __repr__(self):
        return f"<Exercise(id={self.id}, name='{self.name}', day_id={self.day_id})>"


class PrescribedSet(Base):
    __tablename__ = "prescribed_sets"

    id = Column(Integer, primary_key=True, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False, index=True)
    set_number = Column(Integer, nullable=False)
    target_sets = Column(Integer, nullable=False)
    target_reps = Column(Integer, nullable=False)
    target_load_min = Column(Numeric(6, 2), nullable=True)
    target_load_max = Column(Numeric(6, 2), nullable=True)
    target_rpe = Column(Integer, nullable=True)
    tempo = Column(tempo_enum, nullable=False)
    video_required = Column(Boolean, nullable=False)

    exercise = relationship("Exercise", back_populates="prescribed_sets")


class ActualSet(Base):
    __tablename__ = "actual_sets"

    id = Column(Integer, primary_key=True, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False, index=True)
    # Weak link: the row survives if the prescription goes away
    prescribed_set_id = Column(Integer, ForeignKey("prescribed_sets.id", ondelete="SET NULL"), nullable=True)
    set_number = Column(Integer, nullable=False)
    actual_weight = Column(Numeric(6, 2), nullable=True)
    actual_reps = Column(Integer, nullable=True)
    actual_rpe = Column(Integer, nullable=True)
    tempo_used = Column(tempo_enum, nullable=True)
    video_recorded = Column(Boolean, nullable=False, default=False)
    feedback = Column(Text, nullable=True)
    completed_at = Column(DateTime, nullable=False)

    exercise = relationship("Exercise", back_populates="actual_sets")

    def __repr__(self):
        return "<ActualSet(id=%s, exercise_id=%s, set_number=%s)>" % (
            self.id,
            self.exercise_id,
            self.set_number,
        )
