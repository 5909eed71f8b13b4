"""
Pydantic schemas for the greeting API request/response bodies.

These schemas define the wire contract of the /hello route.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class HelloRequest(BaseModel):
    """Request body for the hello endpoint.

    Attributes:
        name: Name to greet. Missing or null is treated as empty.
    """

    name: str | None = Field(default="", description="Name to greet")


class HelloResponse(BaseModel):
    """Response body for the hello endpoint.

    ``err`` is omitted from the serialized body on success.
    """

    greeting: str = ""
    err: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response returned for transport-level failures."""

    error: str
    detail: str | None = None
