"""Health Probe: reports store reachability and the student count.

Invariants:
    - GET /api/health answers 200 {ok, db, studentCount} only if the count query succeeded
    - Any store failure answers 500 {ok: false, error}

Design Decisions:
    - Counting students doubles as a readiness check: it proves the pool, the
      credentials and the schema in one statement
"""

from fastapi import APIRouter, Depends

from unibridge.api.dependencies import get_app_settings, get_store
from unibridge.api.responses import render
from unibridge.config import Settings
from unibridge.core.repository_protocols import UniversityStore
from unibridge.schemas.common import HealthFailure, HealthStatus
from unibridge.services import operations

router = APIRouter(tags=["health"])


@router.get(
    "/api/health",
    response_model=HealthStatus,
    responses={500: {"model": HealthFailure}},
)
async def health_check(
    store: UniversityStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Liveness plus database readiness in one probe."""
    result = await operations.check_health(store, settings.db_name)
    return render(result)
