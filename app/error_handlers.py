"""Global exception handlers.

- RequestValidationError -> 400 with every failing field listed
- HTTPException -> FastAPI default ({"detail": ...})
- Exception -> 500 generic message, traceback logged server-side only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _field_name(loc: tuple) -> str:
    # Drop the leading "body"/"path"/"query" marker.
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _message(error: dict) -> str:
    msg = str(error.get("msg", ""))
    # pydantic prefixes messages raised from validators.
    return msg.removeprefix("Value error, ")


def build_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    return [
        {"field": _field_name(tuple(e.get("loc", ()))), "msg": _message(e)}
        for e in exc.errors()
    ]


def _register_validation_error_handler(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = build_validation_errors(exc)
        logger.warning("Validation error on %s: %s", request.url.path, errors)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Server Error"},
        )
