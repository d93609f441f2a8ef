"""Course Routes: courses taught by a professor and the enrollment report."""

from fastapi import APIRouter, Depends

from unibridge.api.dependencies import get_store
from unibridge.api.responses import render
from unibridge.core.domain_types import ProfessorId
from unibridge.core.repository_protocols import UniversityStore
from unibridge.schemas.common import ErrorMessage
from unibridge.schemas.course import CourseEnrollment, CourseRecord
from unibridge.services import operations

router = APIRouter(tags=["courses"])


@router.get(
    "/professors/{professor_id}/courses",
    response_model=list[CourseRecord],
    responses={500: {"model": ErrorMessage}},
)
async def get_professor_courses(
    professor_id: str, store: UniversityStore = Depends(get_store),
):
    """Courses linked to the professor through teaches, by courseID."""
    result = await operations.list_professor_courses(
        store, ProfessorId(professor_id),
    )
    return render(result)


@router.get(
    "/reports/course-enrollment",
    response_model=list[CourseEnrollment],
    responses={500: {"model": ErrorMessage}},
)
async def get_course_enrollment(store: UniversityStore = Depends(get_store)):
    """Every course with its attendee count, busiest first."""
    result = await operations.course_enrollment_report(store)
    return render(result)
