"""Student Routes: insert, list, update contact info, delete.

Invariants:
    - Bodies validated by StudentCreate / StudentContactUpdate before the store is touched
    - PUT/DELETE on an unknown studentNum answer 404, store errors answer 500

Design Decisions:
    - Paths kept as the existing front-end calls them (/add_user, /get_users)
"""

from fastapi import APIRouter, Depends

from unibridge.api.dependencies import get_store
from unibridge.api.responses import render
from unibridge.core.domain_types import StudentNum
from unibridge.core.repository_protocols import UniversityStore
from unibridge.schemas.common import ErrorMessage, MessageResponse
from unibridge.schemas.student import (
    StudentContactUpdate, StudentCreate, StudentRecord,
)
from unibridge.services import operations

router = APIRouter(tags=["students"])

_ERRORS = {500: {"model": ErrorMessage}}
_TARGETED_ERRORS = {404: {"model": ErrorMessage}, **_ERRORS}


@router.post("/add_user", response_model=MessageResponse, responses=_ERRORS)
async def add_user(
    body: StudentCreate, store: UniversityStore = Depends(get_store),
):
    result = await operations.add_student(store, body)
    return render(result)


@router.get("/get_users", response_model=list[StudentRecord], responses=_ERRORS)
async def get_users(store: UniversityStore = Depends(get_store)):
    """All students ordered by last name, then first name."""
    result = await operations.list_students(store)
    return render(result)


@router.put(
    "/students/{student_num}",
    response_model=MessageResponse,
    responses=_TARGETED_ERRORS,
)
async def update_student(
    student_num: str,
    body: StudentContactUpdate,
    store: UniversityStore = Depends(get_store),
):
    result = await operations.update_student_contact(
        store, StudentNum(student_num), body,
    )
    return render(result)


@router.delete(
    "/students/{student_num}",
    response_model=MessageResponse,
    responses=_TARGETED_ERRORS,
)
async def delete_student(
    student_num: str, store: UniversityStore = Depends(get_store),
):
    result = await operations.delete_student(store, StudentNum(student_num))
    return render(result)
