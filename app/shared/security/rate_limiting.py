"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every
endpoint. Each application instance gets its own limiter so that
counters are never shared between apps.
"""

import logging
from typing import Callable

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings
from app.domain.users.ports import MessageResolver
from app.shared.errors.handlers import problem_detail, problem_response

logger = logging.getLogger(__name__)

HTTP_429 = 429
RATE_LIMIT_EXCEEDED = "rate.limit.exceeded"


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed by client address.

    Args:
        settings: Source of the default limit and the enabled flag.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def make_rate_limit_exceeded_handler(
    messages: MessageResolver, error_uri: str
) -> Callable[[Request, RateLimitExceeded], JSONResponse]:
    """Build the handler that renders RateLimitExceeded as problem details.

    The handler is synchronous: SlowAPIMiddleware invokes it directly.
    """

    def rate_limit_exceeded_handler(
        request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        """Return a 429 problem-details response."""
        logger.warning("Rate limit exceeded for %s: %s", get_remote_address(request), exc.detail)
        detail = messages.get_message(
            RATE_LIMIT_EXCEEDED,
            str(exc.detail),
            locale=getattr(request.state, "locale", None),
        )
        return problem_response(problem_detail(HTTP_429, detail, error_uri))

    return rate_limit_exceeded_handler
