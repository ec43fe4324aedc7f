"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Message bundles and locale negotiation
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings as default_settings
from app.infrastructure.users.user_repository import InMemoryUserRepository
from app.interfaces.health import router as health_router
from app.interfaces.users.router import router as users_router
from app.shared.errors.handlers import ProblemDetailMapper, register_error_handlers
from app.shared.i18n import LocaleMiddleware, MessageSource
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    build_limiter,
    make_rate_limit_exceeded_handler,
)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        settings: Configuration override. Defaults to the process-wide
            settings loaded from the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Adapters ---
    message_source = MessageSource(
        settings.messages_dir,
        default_locale=settings.default_locale,
        base_locale=settings.base_locale,
    )
    app.state.message_source = message_source
    app.state.user_repository = InMemoryUserRepository()

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(
        RateLimitExceeded,
        make_rate_limit_exceeded_handler(message_source, settings.error_uri),
    )
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Locale negotiation (outermost, so every handler sees it) ---
    app.add_middleware(
        LocaleMiddleware,
        supported_locales=message_source.supported_locales,
        default_locale=message_source.default_locale,
    )

    # --- Error Handlers ---
    register_error_handlers(
        app, ProblemDetailMapper(message_source, settings.error_uri)
    )

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(users_router, prefix="/api/v1")

    return app


app = create_app()
