"""
Fauna API: Shared Response Schemas
===================================

What:  Response models shared by every resource router.
How:   FastAPI uses them for serialization and for the OpenAPI documentation;
       the wire format matches the existing clients exactly
       (`{"message": ...}` on delete, `{"error": ...}` on failure).
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Returned by every delete route, whether or not a row existed."""
    message: str = Field(description="Fixed confirmation text, e.g. 'Especie eliminada correctamente'")


class ErrorResponse(BaseModel):
    """
    Error body for all failures handled by the application.

    Example:
        {"error": "Token no proporcionado"}
    """
    error: str = Field(description="Human-readable error message (Spanish)")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
