"""Attends ORM: student/course enrollment, used for aggregation only.

Invariants:
    - Composite primary key (studentNum, courseID): a student counts once per course
    - Deleting a student removes their enrollments (ondelete CASCADE)
"""

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from unibridge.db.base import Base


class Attends(Base):
    """Links a student to a course they attend."""
    __tablename__ = "attends"

    studentNum: Mapped[str] = mapped_column(
        String(20), ForeignKey("student.studentNum", ondelete="CASCADE"),
        primary_key=True,
    )
    courseID: Mapped[str] = mapped_column(
        String(20), ForeignKey("course.courseID", ondelete="CASCADE"),
        primary_key=True,
    )
