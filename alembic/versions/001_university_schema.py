"""University schema: student, Faculty, course, teaches, attends.

Revision ID: 001_university_schema
Revises: None
Create Date: 2026-10-18

Bootstraps a development database with the tables the API reads and writes.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_university_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "student",
        sa.Column("studentNum", sa.String(20), primary_key=True),
        sa.Column("fName", sa.String(50), nullable=False),
        sa.Column("lName", sa.String(50), nullable=False),
        sa.Column("studentEmail", sa.String(100), nullable=True),
        sa.Column("studentMainPhone", sa.String(20), nullable=True),
    )

    op.create_table(
        "Faculty",
        sa.Column("facultyID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("facultyName", sa.String(100), nullable=False),
        sa.Column("facultyOffice", sa.String(50), nullable=True),
        sa.Column("facultyPhone", sa.String(20), nullable=True),
        sa.Column("facultyEmail", sa.String(100), nullable=True),
    )

    op.create_table(
        "course",
        sa.Column("courseID", sa.String(20), primary_key=True),
        sa.Column("courseName", sa.String(100), nullable=False),
        sa.Column("taName", sa.String(100), nullable=True),
        sa.Column("deptEmail", sa.String(100), nullable=True),
    )

    op.create_table(
        "teaches",
        sa.Column("professorID", sa.String(20), primary_key=True),
        sa.Column(
            "courseID", sa.String(20),
            sa.ForeignKey("course.courseID", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "attends",
        sa.Column(
            "studentNum", sa.String(20),
            sa.ForeignKey("student.studentNum", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "courseID", sa.String(20),
            sa.ForeignKey("course.courseID", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


def downgrade() -> None:
    op.drop_table("attends")
    op.drop_table("teaches")
    op.drop_table("course")
    op.drop_table("Faculty")
    op.drop_table("student")
