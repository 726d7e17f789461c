"""Rendering of service results into HTTP responses.

Every body has ``hasError`` and ``message`` plus either ``data`` or
``error``. The status code follows the result tag one-to-one.
"""

from collections.abc import Callable
from typing import Any, assert_never

import falcon
import falcon.asgi

from sysroles.application.ports import Logger
from sysroles.application.results import (
    Conflict,
    Created,
    NotFound,
    Result,
    ResultStatus,
    ServerError,
    Success,
)

SUCCESS_MESSAGE = "SUCCESS: Requested operation successful."
FAILURE_MESSAGE = "ERROR: Requested operation failed."
NOT_FOUND_MESSAGE = "ERROR: Requested operation failed. System role not found."
CONFLICT_MESSAGE = "ERROR: Requested operation failed. System role with duplicate field(s) exists."
UNHANDLED_MESSAGE = "An unhandled exception occurred on the server."
UNAUTHORIZED_MESSAGE = "ERROR: Requested operation failed. Unauthorized."

HTTP_STATUS = {
    ResultStatus.SUCCESS: falcon.HTTP_200,
    ResultStatus.CREATED: falcon.HTTP_201,
    ResultStatus.NOT_FOUND: falcon.HTTP_404,
    ResultStatus.CONFLICT: falcon.HTTP_409,
    ResultStatus.SERVER_ERROR: falcon.HTTP_500,
}


def success_body(data: Any) -> dict[str, Any]:
    return {"hasError": False, "message": SUCCESS_MESSAGE, "data": data}


def failure_body(message: str, error: Any) -> dict[str, Any]:
    return {"hasError": True, "message": message, "error": {"error": error}}


def render_result(
    resp: falcon.asgi.Response,
    result: Result,
    logger: Logger,
    shape: Callable[[Any], dict[str, Any]],
) -> None:
    """Write result to resp; shape wraps success data into the response ``data`` object."""
    resp.status = HTTP_STATUS[result.status]
    match result:
        case Success(data=data) | Created(data=data):
            resp.media = success_body(shape(data))
        case NotFound(error=error):
            logger.warning("Requested operation failed. System role not found.")
            resp.media = failure_body(NOT_FOUND_MESSAGE, error)
        case Conflict(error=error):
            logger.warning("Requested operation failed. System role with duplicate field(s) exists.")
            resp.media = failure_body(CONFLICT_MESSAGE, error)
        case ServerError(error=error):
            logger.error("Requested operation failed. Unknown database error.")
            resp.media = failure_body(FAILURE_MESSAGE, error)
        case _:
            assert_never(result)


def render_unhandled(resp: falcon.asgi.Response) -> None:
    """Generic 500; carries no detail about the exception."""
    resp.status = falcon.HTTP_500
    resp.media = failure_body(UNHANDLED_MESSAGE, UNHANDLED_MESSAGE)


def render_unauthorized(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_401
    resp.media = failure_body(UNAUTHORIZED_MESSAGE, "Missing or invalid credentials.")
