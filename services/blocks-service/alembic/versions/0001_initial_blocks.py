"""create training block, workout and user tables

Revision ID: 0001_initial_blocks
Revises:
Create Date: 2026-10-19 09:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_blocks"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _enum(name: str, *values: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, length=32)


week_type_enum = _enum("weektypeenum", "BASE", "PROGRESSION", "DELOAD", "TEST")
exercise_category_enum = _enum("exercisecategoryenum", "SQUAT", "BENCH", "DEADLIFT", "ACCESSORY")
tempo_enum = _enum("tempoenum", "CONTROLLED", "EXPLOSIVE", "PAUSED")
user_role_enum = _enum("userroleenum", "COACH", "ATHLETE")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", user_role_enum, nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("estimated_squat_1rm", sa.Integer(), nullable=True),
        sa.Column("estimated_bench_1rm", sa.Integer(), nullable=True),
        sa.Column("estimated_deadlift_1rm", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "training_blocks",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("created_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("assigned_to_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("block_length", sa.Integer(), nullable=False),
        sa.Column("progression_rate", sa.Numeric(5, 4), nullable=False),
        sa.Column("deload_rate", sa.Numeric(5, 4), nullable=False),
        sa.Column("macrocycle", sa.String(length=255), nullable=False),
        sa.Column("mesocycle", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_training_blocks_id", "training_blocks", ["id"])
    op.create_index("ix_training_blocks_created_by_user_id", "training_blocks", ["created_by_user_id"])
    op.create_index("ix_training_blocks_assigned_to_user_id", "training_blocks", ["assigned_to_user_id"])

    op.create_table(
        "weeks",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column(
            "block_id", sa.Integer(), sa.ForeignKey("training_blocks.id", ondelete="CASCADE"), nullable=False
        ),
        sa.Column("week_number", sa.Integer(), nullable=False),
        sa.Column("week_type", week_type_enum, nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_weeks_id", "weeks", ["id"])
    op.create_index("ix_weeks_block_id", "weeks", ["block_id"])

    op.create_table(
        "workout_days",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("week_id", sa.Integer(), sa.ForeignKey("weeks.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day_number", sa.Integer(), nullable=False),
        sa.Column("day_name", sa.String(length=255), nullable=False),
        sa.Column("rest_day", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_workout_days_id", "workout_days", ["id"])
    op.create_index("ix_workout_days_week_id", "workout_days", ["week_id"])

    op.create_table(
        "exercises",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("day_id", sa.Integer(), sa.ForeignKey("workout_days.id", ondelete="CASCADE"), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", exercise_category_enum, nullable=False),
        sa.Column("order_in_workout", sa.Integer(), nullable=False),
    )
    op.create_index("ix_exercises_id", "exercises", ["id"])
    op.create_index("ix_exercises_day_id", "exercises", ["day_id"])

    op.create_table(
        "prescribed_sets",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("exercise_id", sa.Integer(), sa.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("target_sets", sa.Integer(), nullable=False),
        sa.Column("target_reps", sa.Integer(), nullable=False),
        sa.Column("target_load_min", sa.Numeric(6, 2), nullable=True),
        sa.Column("target_load_max", sa.Numeric(6, 2), nullable=True),
        sa.Column("target_rpe", sa.Integer(), nullable=True),
        sa.Column("tempo", tempo_enum, nullable=False),
        sa.Column("video_required", sa.Boolean(), nullable=False),
    )
    op.create_index("ix_prescribed_sets_id", "prescribed_sets", ["id"])
    op.create_index("ix_prescribed_sets_exercise_id", "prescribed_sets", ["exercise_id"])

    op.create_table(
        "actual_sets",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("exercise_id", sa.Integer(), sa.ForeignKey("exercises.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "prescribed_set_id",
            sa.Integer(),
            sa.ForeignKey("prescribed_sets.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("actual_weight", sa.Numeric(6, 2), nullable=True),
        sa.Column("actual_reps", sa.Integer(), nullable=True),
        sa.Column("actual_rpe", sa.Integer(), nullable=True),
        sa.Column("tempo_used", tempo_enum, nullable=True),
        sa.Column("video_recorded", sa.Boolean(), nullable=False),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column("completed_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_actual_sets_id", "actual_sets", ["id"])
    op.create_index("ix_actual_sets_exercise_id", "actual_sets", ["exercise_id"])


def downgrade() -> None:
    op.drop_table("actual_sets")
    op.drop_table("prescribed_sets")
    op.drop_table("exercises")
    op.drop_table("workout_days")
    op.drop_table("weeks")
    op.drop_table("training_blocks")
    op.drop_table("users")
