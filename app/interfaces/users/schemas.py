"""
Pydantic schemas for the users API.

These schemas define the API contract. No business logic belongs here.
"""

from pydantic import BaseModel


class UserResponse(BaseModel):
    """A single user as returned by the API."""

    username: str
    email: str
