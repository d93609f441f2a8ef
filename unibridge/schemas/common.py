"""Common Schemas: confirmation, health and error payloads shared by routes."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Confirmation payload of a mutating operation."""
    message: str


class ErrorMessage(BaseModel):
    """Flat error payload of a failed or not-found operation."""
    error: str


class HealthStatus(BaseModel):
    """GET /api/health success payload."""
    ok: bool = True
    db: str
    studentCount: int


class HealthFailure(BaseModel):
    """GET /api/health failure payload."""
    ok: bool = False
    error: str
