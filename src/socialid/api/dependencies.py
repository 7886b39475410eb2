"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from socialid.client import SocialIdClient
from socialid.core.felt import parse_felt


async def get_client(request: Request) -> SocialIdClient:
    """Get the shared SocialIdClient from app state."""
    return request.app.state.socialid_client


async def get_identity_id(identity_id: str) -> int:
    """Parse the identity id path parameter (decimal or 0x hex) as a felt."""
    try:
        return parse_felt(identity_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


# Type aliases for cleaner dependency injection
Client = Annotated[SocialIdClient, Depends(get_client)]
IdentityId = Annotated[int, Depends(get_identity_id)]
