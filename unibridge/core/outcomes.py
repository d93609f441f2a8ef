"""Operation Outcomes: the result type every catalog operation returns.

Invariants:
    - Exactly three outcomes: SUCCESS, NOT_FOUND, FAILURE
    - http_status is the single mapping from outcome to HTTP status code
    - FAILURE never carries store/driver details, only the operation's generic message

Design Decisions:
    - Result value over exceptions at the route boundary: routes render, they never try/except
    - from_error() is the only place a UniBridgeError becomes an outcome
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from unibridge.core.errors import ErrorCategory, UniBridgeError


class Outcome(str, Enum):
    """Classification of a finished operation."""
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


_HTTP_STATUS = {
    Outcome.SUCCESS: 200,
    Outcome.NOT_FOUND: 404,
    Outcome.FAILURE: 500,
}


@dataclass(frozen=True)
class OperationResult:
    """What an operation produced, independent of HTTP."""
    outcome: Outcome
    payload: Any = None
    message: str | None = None

    @classmethod
    def success(cls, payload: Any) -> "OperationResult":
        return cls(Outcome.SUCCESS, payload=payload)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls(Outcome.NOT_FOUND, message=message)

    @classmethod
    def failure(
        cls, message: str, payload: dict | None = None,
    ) -> "OperationResult":
        return cls(Outcome.FAILURE, payload=payload, message=message)

    @classmethod
    def from_error(
        cls,
        error: UniBridgeError,
        failure_message: str,
        failure_payload: dict | None = None,
    ) -> "OperationResult":
        """Map a domain/infrastructure error onto an outcome."""
        if error.category == ErrorCategory.RESOURCE_NOT_FOUND:
            return cls.not_found(error.message)
        return cls.failure(failure_message, failure_payload)

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.SUCCESS

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self.outcome]
