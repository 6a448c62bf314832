"""
PetDemo: Shared Response Schemas
================================

What:  Error body shared by every JSON endpoint, and the health payload.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standardized error body for all JSON errors.

    The message is human readable and never carries internal details
    (SQL, driver errors, stack traces); those are logged server-side.

    Example:
        {"error": "Name is required to perform a search"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    Health check response for monitoring and container probes.

    A process that cannot reach its database is reported as unhealthy.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
