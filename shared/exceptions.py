"""
Domain errors raised by repositories and their HTTP translation.

Routers turn NotFoundError into a resource-specific 404. Everything a router
does not handle is mapped here, once, for the whole application:

- RequestValidationError -> 400 ("Invalid ID" for path params, "Invalid JSON" otherwise)
- StoreError             -> 500
"""
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shared.params import INVALID_ID, has_invalid_identity

logger = structlog.get_logger(__name__)


class StoreError(Exception):
    """The backing store failed in a way that says nothing about the record."""


class NotFoundError(Exception):
    """Zero rows matched the identity for a read, update or delete."""

    def __init__(self, resource: str, record_id: int):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} {record_id} not found")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # The body is decoded before any dependency runs, so a bad identity
    # has to be detected here for it to win over a bad body
    if has_invalid_identity(request.path_params) or any(
        err.get("loc", ("",))[0] == "path" for err in exc.errors()
    ):
        detail = INVALID_ID
    else:
        detail = "Invalid JSON"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


async def store_exception_handler(request: Request, exc: StoreError):
    logger.error("store_error", path=request.url.path, method=request.method, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StoreError, store_exception_handler)
