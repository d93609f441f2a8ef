"""Course ORM: read-only from the API surface."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from unibridge.db.base import Base


class Course(Base):
    """A course offering."""
    __tablename__ = "course"

    courseID: Mapped[str] = mapped_column(String(20), primary_key=True)
    courseName: Mapped[str] = mapped_column(String(100), nullable=False)
    taName: Mapped[str | None] = mapped_column(String(100), nullable=True)
    deptEmail: Mapped[str | None] = mapped_column(String(100), nullable=True)
