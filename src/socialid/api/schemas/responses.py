"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from socialid.api.schemas.base import APIBaseSchema


class RecordResponse(APIBaseSchema):
    """One resolved verifier record."""

    identity_id: str
    record: str
    value: str | None = None


class ProfileRecordsResponse(APIBaseSchema):
    """All configured records for an identity; unresolved ones are omitted."""

    identity_id: str
    records: dict[str, str] = Field(default_factory=dict)
    total_duration_ms: float = 0.0


class UnboundedFieldResponse(APIBaseSchema):
    """Unbounded text field read directly from the identity contract."""

    identity_id: str
    field: str
    value: str | None = None


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
