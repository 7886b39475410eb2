"""API schema definitions."""

from socialid.api.schemas.base import APIBaseSchema
from socialid.api.schemas.responses import (
    HealthResponse,
    ProfileRecordsResponse,
    RecordResponse,
    UnboundedFieldResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Responses
    "HealthResponse",
    "ProfileRecordsResponse",
    "RecordResponse",
    "UnboundedFieldResponse",
]
