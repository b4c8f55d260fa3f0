"""Exception handlers that shape error responses as ``{"error": ...}``."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger()

VALIDATION_ERROR = "Validation error"


class PayloadValidationError(Exception):
    """A request body is well-formed but refers to state that doesn't exist."""

    def __init__(self, details: str):
        self.details = details
        super().__init__(details)


def format_validation_errors(errors: list[dict]) -> str:
    """Turn pydantic error dicts into one readable sentence.

    Example: 'Field required at "name"; Input should be a valid integer at "clientId"'
    """
    parts = []
    for error in errors:
        loc = [str(p) for p in error.get("loc", ()) if p != "body"]
        message = error.get("msg", "Invalid value")
        if loc:
            parts.append(f'{message} at "{".".join(loc)}"')
        else:
            parts.append(message)
    return f"{VALIDATION_ERROR}: {'; '.join(parts)}"


def _validation_response(details: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": VALIDATION_ERROR, "details": details},
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = format_validation_errors(exc.errors())
    logger.info("request validation failed", path=request.url.path, details=details)
    return _validation_response(details)


async def payload_validation_handler(
    request: Request, exc: PayloadValidationError
) -> JSONResponse:
    logger.info("payload rejected", path=request.url.path, details=exc.details)
    return _validation_response(exc.details)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PayloadValidationError, payload_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
