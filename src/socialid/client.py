"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from socialid.chain.provider import StarknetRpcProvider
from socialid.config import SocialIdSettings
from socialid.core.exceptions import SocialIdError
from socialid.core.models import ProfileRecords, RecordVerifier
from socialid.resolution.registry import HandlerRegistry
from socialid.resolution.verifier import VerifierDataResolver

logger = logging.getLogger(__name__)


class SocialIdClient:
    """
    Main client for the socialid library.

    Resolves social records and unbounded profile fields for identity
    tokens without requiring the web server.

    Usage:
        async with SocialIdClient() as client:
            # Resolve one configured record
            discord = await client.resolve_record(42, "com.discord")

            # Resolve every configured record concurrently
            profile = await client.resolve_profile(42)

            # Read a long text field
            bio = await client.get_unbounded_user_data(42, "bio")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(
        self,
        settings: SocialIdSettings | None = None,
        *,
        provider: StarknetRpcProvider | None = None,
        handlers: HandlerRegistry | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            provider: Chain provider to use instead of one built from settings.
            handlers: Handler registry to use instead of one built from settings.
        """
        self._settings = settings or SocialIdSettings()
        self._provider = provider
        self._handlers = handlers
        self._resolver: VerifierDataResolver | None = None

    @property
    def settings(self) -> SocialIdSettings:
        return self._settings

    async def __aenter__(self) -> SocialIdClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        if self._provider is None:
            self._provider = StarknetRpcProvider(
                self._settings.rpc_url,
                timeout=self._settings.request_timeout,
            )
        if self._handlers is None:
            self._handlers = HandlerRegistry.from_settings(self._settings)

        self._resolver = VerifierDataResolver(
            provider=self._provider,
            handlers=self._handlers,
            identity_contract=self._settings.identity_contract,
            multicall_contract=self._settings.multicall_contract,
        )
        logger.info(
            f"Client initialized with {len(self._settings.record_verifiers)} record verifier(s)"
        )

    async def close(self) -> None:
        """Close all resources."""
        if self._handlers:
            await self._handlers.close_all()
            self._handlers = None

        if self._provider:
            await self._provider.close()
            self._provider = None

        self._resolver = None

    def _ensure_initialized(self) -> VerifierDataResolver:
        """Ensure client is initialized."""
        if self._resolver is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with SocialIdClient() as client:'"
            )
        return self._resolver

    def get_record_verifier(self, record: str) -> RecordVerifier:
        """
        Look up the verifier configuration for a record name.

        Raises:
            SocialIdError: If the record is not configured
        """
        try:
            return self._settings.record_verifiers[record]
        except KeyError:
            raise SocialIdError(
                f"Unknown record: {record}",
                details={"known": sorted(self._settings.record_verifiers)},
            ) from None

    async def resolve_record(self, identity_id: int, record: str) -> str | None:
        """
        Resolve one configured record for an identity.

        Args:
            identity_id: Identity token id
            record: Record name, e.g. "com.discord"

        Returns:
            The display value, or None if unset or unavailable
        """
        resolver = self._ensure_initialized()
        return await resolver.get_verifier_data(identity_id, self.get_record_verifier(record))

    async def resolve_profile(self, identity_id: int) -> ProfileRecords:
        """Resolve every configured record for an identity concurrently."""
        resolver = self._ensure_initialized()
        return await resolver.resolve_profile(identity_id, self._settings.record_verifiers)

    async def get_unbounded_user_data(self, identity_id: int, field: str) -> str | None:
        """Read an unbounded text field for an identity."""
        resolver = self._ensure_initialized()
        return await resolver.get_unbounded_user_data(identity_id, field)


async def resolve_record(
    identity_id: int,
    record: str,
    settings: SocialIdSettings | None = None,
) -> str | None:
    """
    Convenience function to resolve a single record.

    Creates a temporary client for one-off lookups.
    """
    async with SocialIdClient(settings) as client:
        return await client.resolve_record(identity_id, record)
