"""Initial tables: progress, day_tasks.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "progress",
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("current_day", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("start_time", sa.BigInteger(), nullable=False),
        sa.Column("completed_days_json", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("day_notes_json", sa.Text(), nullable=False, server_default="{}"),
        sa.Column("last_completed_time", sa.BigInteger(), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("user_id"),
    )

    op.create_table(
        "day_tasks",
        sa.Column("day", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("tasks_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("day"),
    )


def downgrade() -> None:
    op.drop_table("day_tasks")
    op.drop_table("progress")
