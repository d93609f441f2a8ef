"""ORM Models: SQLAlchemy declarative models for the university schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - The schema is owned by the external store; these models describe it,
      they do not define its lifecycle

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete for migrations and tests
"""

from unibridge.models.student import Student  # noqa: F401
from unibridge.models.faculty import Faculty  # noqa: F401
from unibridge.models.course import Course  # noqa: F401
from unibridge.models.teaches import Teaches  # noqa: F401
from unibridge.models.attends import Attends  # noqa: F401
