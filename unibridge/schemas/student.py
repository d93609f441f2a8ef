"""Student Schemas: request bodies and response records for /add_user, /get_users, /students.

Invariants:
    - Every field is required, stripped, and non-empty after stripping
    - JSON numbers are accepted for identifier/phone fields and stored as strings
    - No email/phone format checks: values are opaque to the bridge

Design Decisions:
    - Field names match the wire format and the store columns (camelCase) one-to-one
"""

from pydantic import BaseModel, ConfigDict, Field

_BOUNDARY = ConfigDict(
    str_strip_whitespace=True, coerce_numbers_to_str=True, extra="ignore",
)


class StudentCreate(BaseModel):
    """POST /add_user body."""
    model_config = _BOUNDARY

    studentNum: str = Field(min_length=1, max_length=20)
    fName: str = Field(min_length=1, max_length=50)
    lName: str = Field(min_length=1, max_length=50)
    studentEmail: str = Field(min_length=1, max_length=100)
    studentMainPhone: str = Field(min_length=1, max_length=20)


class StudentContactUpdate(BaseModel):
    """PUT /students/{studentNum} body: contact fields only."""
    model_config = _BOUNDARY

    studentEmail: str = Field(min_length=1, max_length=100)
    studentMainPhone: str = Field(min_length=1, max_length=20)


class StudentRecord(BaseModel):
    """One row of GET /get_users."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    studentNum: str
    fName: str | None = None
    lName: str | None = None
    studentEmail: str | None = None
    studentMainPhone: str | None = None
