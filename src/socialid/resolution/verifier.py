"""Verifier data resolution: multicall, decode, dispatch."""

from __future__ import annotations

import asyncio
import logging

from socialid.chain.calls import (
    build_unbounded_user_data_call,
    build_verifier_data_aggregate_call,
    find_social_id,
)
from socialid.chain.provider import StarknetRpcProvider
from socialid.core.exceptions import ChainCallError, HandlerError, ShortStringDecodingError
from socialid.core.felt import decode_short_string
from socialid.core.models import ProfileRecords, RecordVerifier
from socialid.resolution.registry import HandlerRegistry

logger = logging.getLogger(__name__)


class VerifierDataResolver:
    """
    Resolves verifier records and unbounded fields for identities.

    Resolution is best-effort: chain and handler failures are logged and
    surface as None. Only a field name that cannot be encoded raises.

    Usage:
        resolver = VerifierDataResolver(provider, registry, identity, multicall)
        name = await resolver.get_verifier_data(42, record)
    """

    def __init__(
        self,
        provider: StarknetRpcProvider,
        handlers: HandlerRegistry,
        identity_contract: int,
        multicall_contract: int,
    ) -> None:
        self._provider = provider
        self._handlers = handlers
        self._identity_contract = identity_contract
        self._multicall_contract = multicall_contract

    async def get_verifier_data(
        self,
        identity_id: int,
        record: RecordVerifier,
    ) -> str | None:
        """
        Resolve one verifier record to a display value.

        Args:
            identity_id: Identity token id
            record: Field, handler and ordered verifier contracts

        Returns:
            The resolved name, or None if unset or any lookup failed

        Raises:
            ShortStringEncodingError: If record.field cannot be encoded
        """
        call = build_verifier_data_aggregate_call(
            self._multicall_contract,
            self._identity_contract,
            identity_id,
            record.field,
            record.verifier_contracts,
        )

        try:
            result = await self._provider.call(call)
        except ChainCallError as e:
            logger.warning(
                f"Error while fetching verifier data for {record.field} of {identity_id}: {e}"
            )
            return None

        social_id = find_social_id(result)
        if social_id == 0:
            return None

        try:
            return await self._handlers.execute_handler(record.handler, social_id)
        except HandlerError as e:
            logger.warning(
                f"Error while executing {e.handler} handler for {record.field} "
                f"of {identity_id}: {e}"
            )
            return None

    async def get_unbounded_user_data(
        self,
        identity_id: int,
        field: str,
    ) -> str | None:
        """
        Read a multi-felt text field directly from the identity contract.

        Chunks that are not valid short strings are skipped.

        Raises:
            ShortStringEncodingError: If field cannot be encoded
        """
        call = build_unbounded_user_data_call(self._identity_contract, identity_id, field)

        try:
            result = await self._provider.call(call)
        except ChainCallError as e:
            logger.warning(f"Error while fetching {field} of {identity_id}: {e}")
            return None

        if not result or result[0] == 0:
            return None

        chunks: list[str] = []
        dropped = 0
        for felt in result[1:]:
            try:
                chunks.append(decode_short_string(felt))
            except ShortStringDecodingError:
                dropped += 1

        if dropped:
            logger.debug(f"Dropped {dropped} undecodable chunk(s) of {field} for {identity_id}")

        return "".join(chunks)

    async def resolve_profile(
        self,
        identity_id: int,
        records: dict[str, RecordVerifier],
    ) -> ProfileRecords:
        """
        Resolve several records concurrently.

        Records resolving to None are left out of the result.

        Raises:
            ShortStringEncodingError: If any record field cannot be encoded
        """
        names = list(records)
        values = await asyncio.gather(
            *(self.get_verifier_data(identity_id, records[name]) for name in names)
        )
        return ProfileRecords(
            identity_id=identity_id,
            records={name: value for name, value in zip(names, values) if value is not None},
        )
