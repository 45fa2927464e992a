"""
Request logging middleware for suggestion traffic.
"""
import time
import uuid
from typing import Any, Callable, Dict
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from string_suggestion.utils.logger import get_logger

logger = get_logger("middleware")

# Fields routes may set on request.state to tag the completion log
SUGGESTION_STATE_FIELDS = ("suggestion_outcome", "vocabulary_size", "issue_count")


def suggestion_fields(request: Request) -> Dict[str, Any]:
    """
    Collect the suggestion result fields a route left on request.state.

    Args:
        request: Request that has been handled

    Returns:
        Mapping of field name to value, only for fields that were set
    """
    return {
        field: getattr(request.state, field)
        for field in SUGGESTION_STATE_FIELDS
        if hasattr(request.state, field)
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per finished request: method, path, status, duration and,
    for suggestion and spell-check calls, the outcome the route reported
    (suggestion_outcome, vocabulary_size, issue_count).

    Each response carries an X-Request-ID header matching the log line.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable
    ) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                request_id=request_id,
                method=request.method,
                path=request.url.path,
                duration_ms=f"{(time.time() - start_time) * 1000:.2f}",
                error=str(e),
                exc_info=True
            )
            raise

        fields = suggestion_fields(request)
        message = "Suggestion request completed" if fields else "Request completed"

        logger.info(
            message,
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=f"{(time.time() - start_time) * 1000:.2f}",
            **fields
        )

        response.headers["X-Request-ID"] = request_id
        return response
