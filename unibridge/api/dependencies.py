"""Request Dependencies: hand the app-scoped store and settings to route handlers.

Invariants:
    - The store is read from app.state, never from a module global
    - A request before the store exists fails with StoreUnavailableError (503)
"""

from fastapi import Request

from unibridge.config import Settings
from unibridge.core.errors import StoreUnavailableError
from unibridge.core.repository_protocols import UniversityStore


def get_store(request: Request) -> UniversityStore:
    """FastAPI dependency for the pooled store."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise StoreUnavailableError()
    return store


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the settings the app was built with."""
    return request.app.state.settings
