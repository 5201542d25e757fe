"""
Error taxonomy and the single classification step that turns any exception
raised while handling a request into an HTTP status and a `{"msg": ...}` body.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

BAD_REQUEST = "bad request"
PATH_NOT_FOUND = "path not found"
INTERNAL_SERVER_ERROR = "internal server error"

# SQLSTATE classes: data exception, integrity constraint violation,
# syntax error or access rule violation.
CLIENT_SQLSTATE_CLASSES = frozenset({"22", "23", "42"})


class ApiError(Exception):
    status: int = 500
    default_msg: str = INTERNAL_SERVER_ERROR

    def __init__(self, msg: str | None = None) -> None:
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequestError(ApiError):
    status = 400
    default_msg = BAD_REQUEST


class NotFoundError(ApiError):
    status = 404
    default_msg = PATH_NOT_FOUND


def is_client_database_error(exc: BaseException) -> bool:
    if not isinstance(exc, asyncpg.PostgresError):
        return False
    sqlstate = getattr(exc, "sqlstate", None) or ""
    return sqlstate[:2] in CLIENT_SQLSTATE_CLASSES


def classify_error(exc: BaseException) -> tuple[int, str]:
    """
    Map an exception to `(status, msg)`.

    Order matters: driver errors first, then application errors, then
    request-shape validation and routing misses, and everything else is a
    logged 500.
    """
    if is_client_database_error(exc):
        return 400, BAD_REQUEST
    if isinstance(exc, ApiError):
        return exc.status, exc.msg
    if isinstance(exc, RequestValidationError):
        return 400, BAD_REQUEST
    if isinstance(exc, StarletteHTTPException):
        # Unknown path, or known path with an unsupported method.
        if exc.status_code in (404, 405):
            return 404, PATH_NOT_FOUND
        return exc.status_code, str(exc.detail)

    logger.error("unhandled_error type=%s", type(exc).__name__, exc_info=exc)
    return 500, INTERNAL_SERVER_ERROR
