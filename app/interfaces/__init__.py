"""
Interfaces layer package.

Contains FastAPI routers, Pydantic response schemas and dependency
providers. No business logic belongs here.
Routes call use cases and return responses.
"""
