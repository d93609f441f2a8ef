"""Operation Catalog: every request/response mapping the bridge serves.

Invariants:
    - Each operation sends exactly one statement to the store; no retries
    - Each operation returns an OperationResult; none raises past store_operation
    - Zero-row UPDATE/DELETE is NOT_FOUND, never SUCCESS and never FAILURE
    - Failure messages are generic; store details stay in the logs

Design Decisions:
    - store_operation decorator is the single error-translation point
      (UniBridgeError -> OperationResult); operations only express the happy path
      and raise ResourceNotFoundError for zero-row mutations
    - Rows validated through response schemas so key order and types are fixed;
      a row the schema rejects is a FAILURE like any other store fault
"""

import functools
import logging
from typing import Any, Awaitable, Callable

from pydantic import ValidationError

from unibridge.core.domain_types import OperationName, ProfessorId, StudentNum
from unibridge.core.errors import ResourceNotFoundError, UniBridgeError
from unibridge.core.outcomes import Outcome, OperationResult
from unibridge.core.repository_protocols import UniversityStore
from unibridge.schemas.common import HealthStatus, MessageResponse
from unibridge.schemas.course import CourseEnrollment, CourseRecord
from unibridge.schemas.faculty import FacultyCreate, FacultyRecord
from unibridge.schemas.student import (
    StudentContactUpdate, StudentCreate, StudentRecord,
)
from unibridge.services import statements

logger = logging.getLogger(__name__)

Operation = Callable[..., Awaitable[OperationResult]]


def store_operation(
    name: OperationName,
    failure_message: str,
    failure_payload: dict | None = None,
) -> Callable[[Operation], Operation]:
    """Translate errors raised inside an operation into an OperationResult.

    UniBridgeError maps by category. ValidationError here means a store row
    did not fit its record schema, which is a FAILURE.
    """

    def decorator(func: Operation) -> Operation:
        @functools.wraps(func)
        async def wrapper(store: UniversityStore, *args: Any) -> OperationResult:
            try:
                return await func(store, *args)
            except UniBridgeError as e:
                result = OperationResult.from_error(
                    e, failure_message, failure_payload,
                )
                extra = {"operation": name.value, "error_code": e.code}
                if result.outcome == Outcome.NOT_FOUND:
                    logger.warning(e.message, extra=extra)
                else:
                    logger.error(f"{name.value} failed: {e.message}", extra=extra)
                return result
            except ValidationError as e:
                logger.error(
                    f"{name.value} failed: store row rejected "
                    f"({e.error_count()} invalid field(s))",
                    extra={"operation": name.value, "error_code": "ROW_SHAPE_ERROR"},
                )
                return OperationResult.failure(failure_message, failure_payload)

        return wrapper

    return decorator


# ─── Health ─────────────────────────────────────────────────────

@store_operation(
    OperationName.HEALTH, "Database health check failed",
    failure_payload={"ok": False},
)
async def check_health(store: UniversityStore, db_name: str) -> OperationResult:
    count = await store.fetch_scalar(statements.count_students())
    return OperationResult.success(
        HealthStatus(db=db_name, studentCount=count),
    )


# ─── Students ───────────────────────────────────────────────────

@store_operation(OperationName.ADD_STUDENT, "Database insert error")
async def add_student(
    store: UniversityStore, body: StudentCreate,
) -> OperationResult:
    await store.execute(statements.insert_student(body))
    logger.info(
        f"Student {body.studentNum} added",
        extra={"operation": OperationName.ADD_STUDENT.value},
    )
    return OperationResult.success(
        MessageResponse(message="User added successfully!"),
    )


@store_operation(OperationName.LIST_STUDENTS, "Database fetch error")
async def list_students(store: UniversityStore) -> OperationResult:
    rows = await store.fetch_all(statements.select_students())
    return OperationResult.success(
        [StudentRecord.model_validate(row) for row in rows],
    )


@store_operation(OperationName.UPDATE_STUDENT_CONTACT, "Database update error")
async def update_student_contact(
    store: UniversityStore,
    student_num: StudentNum,
    body: StudentContactUpdate,
) -> OperationResult:
    affected = await store.execute(
        statements.update_student_contact(student_num, body),
    )
    if affected == 0:
        raise ResourceNotFoundError("Student", student_num)
    return OperationResult.success(
        MessageResponse(message="Student updated successfully"),
    )


@store_operation(OperationName.DELETE_STUDENT, "Database delete error")
async def delete_student(
    store: UniversityStore, student_num: StudentNum,
) -> OperationResult:
    affected = await store.execute(statements.delete_student(student_num))
    if affected == 0:
        raise ResourceNotFoundError("Student", student_num)
    logger.info(
        f"Student {student_num} deleted",
        extra={"operation": OperationName.DELETE_STUDENT.value},
    )
    return OperationResult.success(
        MessageResponse(message="Student deleted successfully"),
    )


# ─── Courses ────────────────────────────────────────────────────

@store_operation(
    OperationName.PROFESSOR_COURSES, "Error fetching courses for professor",
)
async def list_professor_courses(
    store: UniversityStore, professor_id: ProfessorId,
) -> OperationResult:
    rows = await store.fetch_all(
        statements.select_professor_courses(professor_id),
    )
    return OperationResult.success(
        [CourseRecord.model_validate(row) for row in rows],
    )


@store_operation(
    OperationName.COURSE_ENROLLMENT_REPORT, "Error generating enrollment report",
)
async def course_enrollment_report(store: UniversityStore) -> OperationResult:
    rows = await store.fetch_all(statements.select_course_enrollment())
    return OperationResult.success(
        [CourseEnrollment.model_validate(row) for row in rows],
    )


# ─── Faculty ────────────────────────────────────────────────────

@store_operation(OperationName.ADD_FACULTY, "Error adding faculty")
async def add_faculty(
    store: UniversityStore, body: FacultyCreate,
) -> OperationResult:
    await store.execute(statements.insert_faculty(body))
    return OperationResult.success("Faculty added!")


@store_operation(OperationName.LIST_FACULTY, "Error fetching faculty")
async def list_faculty(store: UniversityStore) -> OperationResult:
    rows = await store.fetch_all(statements.select_faculty())
    return OperationResult.success(
        [FacultyRecord.model_validate(row) for row in rows],
    )
