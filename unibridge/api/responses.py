"""Outcome Rendering: the one place an OperationResult becomes an HTTP response.

Invariants:
    - Status code always comes from OperationResult.http_status
    - JSON error bodies are {"error": message}, merged over any failure payload
    - Plain-text mode sends the message/payload as text/plain, nothing else

Design Decisions:
    - jsonable_encoder over response_model: routes return Response objects directly,
      so pydantic payloads are encoded here
"""

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from unibridge.core.outcomes import OperationResult


def render(
    result: OperationResult,
    *,
    plain_text_success: bool = False,
    plain_text_errors: bool = False,
) -> Response:
    """Convert an operation outcome into the route's response."""
    status_code = result.http_status
    if result.ok:
        if plain_text_success:
            return PlainTextResponse(str(result.payload), status_code=status_code)
        return JSONResponse(jsonable_encoder(result.payload), status_code=status_code)

    if plain_text_errors:
        return PlainTextResponse(result.message or "", status_code=status_code)
    body = {**(result.payload or {}), "error": result.message}
    return JSONResponse(body, status_code=status_code)
