"""Teaches ORM: professor/course association.

Invariants:
    - Composite primary key (professorID, courseID)
    - professorID has no parent table in this schema

Design Decisions:
    - courseID cascades on course delete; the API never deletes courses, the store might
"""

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from unibridge.db.base import Base


class Teaches(Base):
    """Links a professor to a course they teach."""
    __tablename__ = "teaches"

    professorID: Mapped[str] = mapped_column(String(20), primary_key=True)
    courseID: Mapped[str] = mapped_column(
        String(20), ForeignKey("course.courseID", ondelete="CASCADE"),
        primary_key=True,
    )
