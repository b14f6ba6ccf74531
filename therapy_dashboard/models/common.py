"""
Common response models and utilities.

Error schemas shared by every endpoint, and the UTC datetime type used
for all session timestamps on the wire.

Dependencies: pydantic
System role: Common API response structures
"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field

from therapy_dashboard.core.scheduling import as_utc

# Naive values are stored as UTC; serialised with an explicit "Z".
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class ErrorDetail(BaseModel):
    """One field-level validation failure."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    code: str = Field(description="Machine-readable error category")
    details: list[ErrorDetail] | None = Field(default=None, description="Field-level failures")
    message: str | None = Field(default=None, description="Diagnostic detail (debug mode only)")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
