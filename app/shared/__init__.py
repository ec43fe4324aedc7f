"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Message bundles and locale negotiation
- Security middleware
- Rate limiting
- Logging configuration
"""
