"""Exception handlers rendering errors in the response envelope."""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from codequality.schemas.common import error_body

logger = logging.getLogger(__name__)

MISSING_ERRORS = {"missing", "string_too_short"}


def validation_message(errors: Sequence[Any]) -> str:
    """Summarize pydantic validation errors in one short sentence."""
    missing: list[str] = []
    invalid: list[str] = []
    for error in errors:
        if error.get("type") == "json_invalid":
            return "Request body is not valid JSON"
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body") or "body"
        if error.get("type") in MISSING_ERRORS:
            missing.append(field)
        else:
            invalid.append(field)

    parts = []
    if missing:
        parts.append(f"Missing required field(s): {', '.join(dict.fromkeys(missing))}")
    if invalid:
        parts.append(f"Invalid value for field(s): {', '.join(dict.fromkeys(invalid))}")
    return "; ".join(parts) or "Invalid request"


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(message))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
