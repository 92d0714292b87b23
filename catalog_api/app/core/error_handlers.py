"""
Exception handlers translating failures into JSON responses.

``register_exception_handlers`` installs three handlers on the
application:

* ``ServiceError`` subclasses are mapped by ``kind``: ``NotFound`` to
  404, ``DuplicateKey`` and ``InvalidArgument`` to 400.
* ``RequestValidationError`` (raised by FastAPI when a payload or query
  parameter fails its schema) becomes a 400 with a ``violations`` map
  of field name to message.
* Anything else becomes a 500 and is logged with its traceback.

All bodies share the shape ``{"error": <title>, "message": <text>}``.
"""

import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import ErrorKind, ServiceError

logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Not Found"),
    ErrorKind.DUPLICATE_KEY: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ErrorKind.INVALID_ARGUMENT: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
}


def _field_name(loc) -> str:
    """Return the last named element of a validation error location.

    ``("body", "name")`` becomes ``"name"``; a location that is only a
    container (``("body",)``) is returned as is.
    """
    named = [str(part) for part in loc if not isinstance(part, int)]
    if len(named) > 1:
        return named[-1]
    return named[0] if named else ""


def collect_violations(exc: RequestValidationError) -> Dict[str, str]:
    """Group validation messages by field, joining repeats with ``"; "``."""
    violations: Dict[str, str] = {}
    for error in exc.errors():
        field = _field_name(error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        if field in violations:
            violations[field] = f"{violations[field]}; {message}"
        else:
            violations[field] = message
    return violations


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code, title = _STATUS_BY_KIND.get(
        exc.kind, (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")
    )
    logger.info("%s %s failed with %s: %s", request.method, request.url.path, exc.kind.value, exc.message)
    return JSONResponse(status_code=status_code, content={"error": title, "message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation Error",
            "message": "The submitted data is not valid",
            "violations": collect_violations(exc),
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal Server Error", "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the service, validation and fallback handlers to ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
