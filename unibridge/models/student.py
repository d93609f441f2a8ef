"""Student ORM: one row per enrolled student.

Invariants:
    - studentNum is the primary key; uniqueness enforced by the store
    - Contact fields are opaque strings (no format checks at this layer)

Design Decisions:
    - Attribute names mirror the existing camelCase columns so result rows
      serialize without a renaming layer
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from unibridge.db.base import Base


class Student(Base):
    """A student record."""
    __tablename__ = "student"

    studentNum: Mapped[str] = mapped_column(String(20), primary_key=True)
    fName: Mapped[str] = mapped_column(String(50), nullable=False)
    lName: Mapped[str] = mapped_column(String(50), nullable=False)
    studentEmail: Mapped[str | None] = mapped_column(String(100), nullable=True)
    studentMainPhone: Mapped[str | None] = mapped_column(String(20), nullable=True)
