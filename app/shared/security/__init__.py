"""Security middleware: response headers and rate limiting."""
