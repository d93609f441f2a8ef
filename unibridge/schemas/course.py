"""Course Schemas: rows for the professor course list and the enrollment report."""

from pydantic import BaseModel, ConfigDict, Field


class CourseRecord(BaseModel):
    """One row of GET /professors/{professorID}/courses."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    courseID: str
    courseName: str | None = None
    taName: str | None = None
    deptEmail: str | None = None


class CourseEnrollment(BaseModel):
    """One row of GET /reports/course-enrollment."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    courseID: str
    courseName: str | None = None
    numStudents: int = Field(ge=0)
