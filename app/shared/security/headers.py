"""
Secure HTTP headers middleware.

Adds restrictive security headers to every response, including the
problem-details responses built by the error handlers. Problem bodies
are localized per request and may reflect per-client rate-limit
state, so they are also marked ``Cache-Control: no-store``.
Headers already set by a route or handler are left untouched.
"""

from typing import Mapping, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.shared.errors.schemas import PROBLEM_JSON

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}

PROBLEM_HEADERS = {"Cache-Control": "no-store"}


def is_problem_response(response: Response) -> bool:
    """True for ``application/problem+json`` responses."""
    return response.headers.get("content-type", "").startswith(PROBLEM_JSON)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds security headers to every response.

    Args:
        app: The wrapped ASGI application.
        headers: Headers for every response. Defaults to SECURE_HEADERS.
        problem_headers: Extra headers for problem-details responses.
    """

    def __init__(
        self,
        app: ASGIApp,
        headers: Optional[Mapping[str, str]] = None,
        problem_headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(app)
        self._headers = dict(SECURE_HEADERS if headers is None else headers)
        self._problem_headers = dict(
            PROBLEM_HEADERS if problem_headers is None else problem_headers
        )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        extra = self._problem_headers if is_problem_response(response) else {}
        for header_name, header_value in {**self._headers, **extra}.items():
            response.headers.setdefault(header_name, header_value)
        return response
