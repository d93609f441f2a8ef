"""Boundary Protocols: contract between the operation catalog and the store.

Invariants:
    - Operations depend on UniversityStore only, never on a concrete engine
    - Every method runs exactly one statement and releases its connection before returning
    - Implementations raise DatabaseError (core/errors.py) for any store failure

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Statements typed as Executable: operations hand over SQLAlchemy constructs,
      never SQL strings
"""

from typing import Any, Protocol

from sqlalchemy.sql.base import Executable


class UniversityStore(Protocol):
    """Contract for the pooled store: implemented by infrastructure/database.py."""
    async def fetch_all(self, statement: Executable) -> list[dict[str, Any]]: ...
    async def fetch_scalar(self, statement: Executable) -> Any: ...
    async def execute(self, statement: Executable) -> int: ...
    async def dispose(self) -> None: ...
