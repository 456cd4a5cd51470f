"""
Mobile Bazar Backend — Shared Response Schemas
================================================

What:  Pydantic models for write acknowledgments, errors and health checks.
Why:   Every collection reports mutations the same way, so the shapes live here.

Write acknowledgments:
    Mutations return counts and identifiers, never the mutated document.
    Field names are serialized in camelCase (`insertedId`, `matchedCount`, ...)
    which is the shape storefront clients have always read.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AckModel(BaseModel):
    """Base for acknowledgment models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = Field(default=True, description="Whether the server acknowledged the write")


class InsertAck(AckModel):
    """
    What:  Result of inserting one document.
    Who:   Returned by POST /products, /orders, /review, /users.
    """
    inserted_id: str = Field(description="Store-generated id of the new document")


class UpdateAck(AckModel):
    """
    What:  Result of updating (or upserting) one document.
    Who:   Returned by PUT /updateProduct, /users, /users/admin.
    """
    matched_count: int = Field(description="Documents matched by the filter")
    modified_count: int = Field(description="Documents actually changed")
    upserted_id: Optional[str] = Field(
        default=None,
        description="Id of the inserted document when an upsert created one",
    )
    upserted_count: int = Field(default=0, description="1 when an upsert inserted, else 0")


class DeleteAck(AckModel):
    """Result of deleting one document (DELETE /orders/{id}, /products/{id})."""
    deleted_count: int = Field(description="Documents removed")


class AdminStatus(BaseModel):
    """Answer of the admin check. Never an error, absent users are simply not admins."""
    admin: bool = Field(description="Whether the user's role is 'admin'")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
