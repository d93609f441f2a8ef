"""Domain Types: identifier wrappers and the operation catalog names.

Invariants:
    - Identifiers are opaque strings; the store decides their real column type
    - OperationName enumerates the whole catalog; no operation exists outside it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for operation names: they go straight into structured log records
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StudentNum = NewType("StudentNum", str)
ProfessorId = NewType("ProfessorId", str)
CourseId = NewType("CourseId", str)


# ─── Operation Catalog ──────────────────────────────────────────

class OperationName(str, Enum):
    """Every request/response mapping the bridge exposes."""
    HEALTH = "health"
    ADD_STUDENT = "add_user"
    LIST_STUDENTS = "get_users"
    UPDATE_STUDENT_CONTACT = "update_student"
    DELETE_STUDENT = "delete_student"
    PROFESSOR_COURSES = "professor_courses"
    COURSE_ENROLLMENT_REPORT = "course_enrollment"
    ADD_FACULTY = "add_faculty"
    LIST_FACULTY = "get_faculty"
