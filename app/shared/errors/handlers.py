"""
Centralized error handlers for FastAPI.

Maps localized domain errors to problem-details responses. The
message key carried by the error is resolved in the locale that
LocaleMiddleware negotiated for the request.
No stack traces or internal details are exposed to clients.
Errors not listed here fall through to FastAPI's default handling.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.users.errors import LocalizedError, ResourceNotFoundError
from app.domain.users.ports import MessageResolver
from app.shared.errors.schemas import PROBLEM_JSON, ProblemDetail

logger = logging.getLogger(__name__)

HTTP_404 = 404


class ProblemDetailMapper:
    """Turns localized domain errors into ProblemDetail envelopes.

    Args:
        messages: Resolver for the error's message key.
        error_uri: Value of the ``type`` field for every envelope.
    """

    def __init__(self, messages: MessageResolver, error_uri: str) -> None:
        self._messages = messages
        self._error_uri = error_uri

    def to_problem_detail(
        self, exc: LocalizedError, locale: Optional[str] = None
    ) -> ProblemDetail:
        """Resolve the error message and wrap it with a 404 status.

        Args:
            exc: The domain error carrying a message key and arguments.
            locale: Negotiated request locale. None means the default.

        Returns:
            The envelope to send to the client.
        """
        detail = self._messages.get_message(
            exc.message_key, *exc.message_args, locale=locale
        )
        return problem_detail(HTTP_404, detail, self._error_uri)


def problem_detail(status: int, detail: str, error_uri: str) -> ProblemDetail:
    """Build a ProblemDetail whose type is the configured error URI."""
    return ProblemDetail(status=status, detail=detail, type=error_uri)


def problem_response(problem: ProblemDetail) -> JSONResponse:
    """Serialize a ProblemDetail as an ``application/problem+json`` response."""
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(),
        media_type=PROBLEM_JSON,
    )


def register_error_handlers(app: FastAPI, mapper: ProblemDetailMapper) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        mapper: Mapper used to render localized errors.
    """

    @app.exception_handler(ResourceNotFoundError)
    async def handle_resource_not_found(
        request: Request, exc: ResourceNotFoundError
    ) -> JSONResponse:
        """Handle lookups that found no resource."""
        locale = getattr(request.state, "locale", None)
        logger.warning(
            "Resource not found: key=%s args=%s locale=%s",
            exc.message_key,
            exc.message_args,
            locale,
        )
        return problem_response(mapper.to_problem_detail(exc, locale))
