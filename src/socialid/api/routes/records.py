"""Identity record endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException

from socialid.api.dependencies import Client, IdentityId
from socialid.api.schemas import (
    ProfileRecordsResponse,
    RecordResponse,
    UnboundedFieldResponse,
)
from socialid.core.exceptions import EncodingError, SocialIdError

router = APIRouter(prefix="/identities", tags=["identities"])


@router.get(
    "/{identity_id}/records",
    response_model=ProfileRecordsResponse,
    operation_id="getProfileRecords",
    summary="Resolve all social records",
    description="Resolve every configured social record of an identity concurrently.",
)
async def get_profile_records(
    identity_id: IdentityId,
    client: Client,
) -> ProfileRecordsResponse:
    """Resolve every configured record; unresolved records are omitted."""
    start_time = time.monotonic()

    try:
        profile = await client.resolve_profile(identity_id)
    except EncodingError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    return ProfileRecordsResponse(
        identity_id=str(identity_id),
        records=profile.records,
        total_duration_ms=(time.monotonic() - start_time) * 1000,
    )


@router.get(
    "/{identity_id}/records/{record}",
    response_model=RecordResponse,
    operation_id="getRecord",
    summary="Resolve one social record",
    description="Resolve a single configured record, e.g. com.discord.",
)
async def get_record(
    identity_id: IdentityId,
    record: str,
    client: Client,
) -> RecordResponse:
    """Resolve one configured record."""
    try:
        value = await client.resolve_record(identity_id, record)
    except EncodingError as e:
        raise HTTPException(status_code=400, detail=e.message) from e
    except SocialIdError as e:
        raise HTTPException(status_code=404, detail=e.message) from e

    return RecordResponse(identity_id=str(identity_id), record=record, value=value)


@router.get(
    "/{identity_id}/unbounded/{field}",
    response_model=UnboundedFieldResponse,
    operation_id="getUnboundedField",
    summary="Read an unbounded text field",
    description="Read a multi-felt text field directly from the identity contract.",
)
async def get_unbounded_field(
    identity_id: IdentityId,
    field: str,
    client: Client,
) -> UnboundedFieldResponse:
    """Read an unbounded user data field."""
    try:
        value = await client.get_unbounded_user_data(identity_id, field)
    except EncodingError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    return UnboundedFieldResponse(identity_id=str(identity_id), field=field, value=value)
