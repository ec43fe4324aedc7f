"""
Problem-details response body.

A trimmed RFC 7807 envelope: only ``status``, ``detail`` and ``type``
are ever sent to clients.
"""

from pydantic import BaseModel, Field

PROBLEM_JSON = "application/problem+json"


class ProblemDetail(BaseModel):
    """Error envelope returned by all error handlers."""

    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Localized, human-readable explanation")
    type: str = Field(..., description="URI of the error documentation")
