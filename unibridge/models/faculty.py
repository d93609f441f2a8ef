"""Faculty ORM: faculty members; insert-and-list only.

Invariants:
    - facultyID is a surrogate key never read back after insert
    - Table name is capitalized ("Faculty") as in the existing university database
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from unibridge.db.base import Base


class Faculty(Base):
    """A faculty member."""
    __tablename__ = "Faculty"

    facultyID: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    facultyName: Mapped[str] = mapped_column(String(100), nullable=False)
    facultyOffice: Mapped[str | None] = mapped_column(String(50), nullable=True)
    facultyPhone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    facultyEmail: Mapped[str | None] = mapped_column(String(100), nullable=True)
