"""initial schema: students and results

Revision ID: 20251019_0001
Revises:
Create Date: 2025-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "20251019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255)),
        sa.Column("dob", sa.String(length=10)),
        sa.Column("gender", sa.String(length=32)),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_students_student_id", "students", ["student_id"], unique=True)

    op.create_table(
        "results",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("student_id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255)),
        sa.Column("subjects", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index("ix_results_student_id", "results", ["student_id"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_results_student_id", table_name="results")
    op.drop_table("results")
    op.drop_index("ix_students_student_id", table_name="students")
    op.drop_table("students")
