"""
Internationalization helpers.

Message bundles are YAML files keyed by dotted message keys. The
locale is negotiated once per request from ``Accept-Language`` by
LocaleMiddleware and stored on ``request.state.locale``.
"""

from app.shared.i18n.locale import negotiate_locale, normalize_locale, parse_accept_language
from app.shared.i18n.message_source import MessageNotFoundError, MessageSource
from app.shared.i18n.middleware import LocaleMiddleware

__all__ = [
    "LocaleMiddleware",
    "MessageNotFoundError",
    "MessageSource",
    "negotiate_locale",
    "normalize_locale",
    "parse_accept_language",
]
