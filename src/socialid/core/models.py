"""Domain models for verifier records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .felt import Felt
from .types import HandlerKind


class RecordVerifier(BaseModel):
    """
    Where a social record lives on-chain and how to display it.

    The order of verifier_contracts is the probing priority: the first
    verifier holding a non-zero value wins. The field name is only packed
    into a short string when a call is encoded.
    """

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Short-string field name, e.g. 'discord'")
    handler: HandlerKind = Field(..., description="How to turn the social id into a name")
    verifier_contracts: list[Felt] = Field(
        default_factory=list,
        description="Trusted verifier contracts, highest priority first",
    )


class ProfileRecords(BaseModel):
    """Resolved records for one identity, absent ones omitted."""

    identity_id: int
    records: dict[str, str] = Field(default_factory=dict)

    def get(self, record: str) -> str | None:
        return self.records.get(record)
