"""
Locale negotiation middleware.

Negotiates the response locale once per request from the
``Accept-Language`` header, stores it on ``request.state.locale``
and echoes it back as ``Content-Language``.
"""

from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.shared.i18n.locale import negotiate_locale


class LocaleMiddleware(BaseHTTPMiddleware):
    """Middleware that selects a supported locale for every request."""

    def __init__(
        self, app: ASGIApp, supported_locales: Iterable[str], default_locale: str
    ) -> None:
        super().__init__(app)
        self._supported_locales = frozenset(supported_locales)
        self._default_locale = default_locale

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Negotiate the locale, then add Content-Language to the response."""
        locale = negotiate_locale(
            request.headers.get("accept-language"),
            self._supported_locales,
            self._default_locale,
        )
        request.state.locale = locale
        response = await call_next(request)
        response.headers.setdefault("Content-Language", locale)
        return response
