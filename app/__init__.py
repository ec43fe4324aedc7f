"""
User Directory — read-only user lookup with localized error responses.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - users: Listing users and looking a user up by username.

Layers:
    - domain: Entities, ports (ABCs), localized errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, i18n, security, logging).
"""
