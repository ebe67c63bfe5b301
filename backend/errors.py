import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base for errors that map straight onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"message": self.message}


class ValidationFailed(ApiError):
    status_code = 400

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = errors or []

    def to_dict(self):
        return {"message": self.message, "errors": self.errors}


class NotFound(ApiError):
    status_code = 404


class AuthError(ApiError):
    status_code = 401


def field_errors(errors):
    """Flatten pydantic error dicts into ``[{field, message}]``."""
    flattened = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        flattened.append({
            "field": ".".join(loc) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return flattened


async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": field_errors(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_error_handlers(app):
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
