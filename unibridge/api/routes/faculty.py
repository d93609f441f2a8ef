"""Faculty Routes: insert and list faculty members.

Invariants:
    - POST /add_faculty answers text/plain on success and on failure
    - GET /get_faculty answers JSON rows on success, text/plain on failure
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from unibridge.api.dependencies import get_store
from unibridge.api.responses import render
from unibridge.core.repository_protocols import UniversityStore
from unibridge.schemas.faculty import FacultyCreate, FacultyRecord
from unibridge.services import operations

router = APIRouter(tags=["faculty"])

_TEXT_ERROR = {500: {"content": {"text/plain": {}}}}


@router.post(
    "/add_faculty", response_class=PlainTextResponse, responses=_TEXT_ERROR,
)
async def add_faculty(
    body: FacultyCreate, store: UniversityStore = Depends(get_store),
):
    result = await operations.add_faculty(store, body)
    return render(result, plain_text_success=True, plain_text_errors=True)


@router.get(
    "/get_faculty", response_model=list[FacultyRecord], responses=_TEXT_ERROR,
)
async def get_faculty(store: UniversityStore = Depends(get_store)):
    result = await operations.list_faculty(store)
    return render(result, plain_text_errors=True)
