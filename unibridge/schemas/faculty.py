"""Faculty Schemas: request body for /add_faculty and rows for /get_faculty.

Invariants:
    - FacultyCreate.facultyMainPhone is stored in the facultyPhone column
    - FacultyRecord keeps unknown columns: /get_faculty returns every column the table has
    - No column is assumed present or non-NULL beyond the four named ones
"""

from pydantic import BaseModel, ConfigDict, Field


class FacultyCreate(BaseModel):
    """POST /add_faculty body."""
    model_config = ConfigDict(
        str_strip_whitespace=True, coerce_numbers_to_str=True, extra="ignore",
    )

    facultyName: str = Field(min_length=1, max_length=100)
    facultyOffice: str = Field(min_length=1, max_length=50)
    facultyMainPhone: str = Field(min_length=1, max_length=20)
    facultyEmail: str = Field(min_length=1, max_length=100)


class FacultyRecord(BaseModel):
    """One row of GET /get_faculty; extra columns (facultyID, ...) pass through."""
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="allow")

    facultyName: str | None = None
    facultyOffice: str | None = None
    facultyPhone: str | None = None
    facultyEmail: str | None = None
