"""
Domain-specific errors for the users bounded context.

Errors carry a message key and positional arguments instead of a
rendered message. The key is resolved against the message bundles
at the interface layer, in the locale the client asked for.
No framework imports allowed.
"""


class LocalizedError(Exception):
    """Base error for all errors rendered through the message bundles."""

    def __init__(self, message_key: str, *message_args: str) -> None:
        super().__init__(message_key, *message_args)
        self.message_key = message_key
        self.message_args = message_args


class ResourceNotFoundError(LocalizedError):
    """Raised when a lookup key has no matching resource."""
