"""Shared test fixtures for all tests."""

from __future__ import annotations

import pytest

from socialid.config import SocialIdSettings
from socialid.core.models import RecordVerifier
from socialid.core.types import HandlerKind

from constants import (
    DISCORD_API_URL,
    GITHUB_API_URL,
    IDENTITY_CONTRACT,
    MULTICALL_CONTRACT,
    RPC_URL,
    TWITTER_API_URL,
    VERIFIER_1,
    VERIFIER_2,
)


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def discord_record() -> RecordVerifier:
    """Discord record probing two verifiers, VERIFIER_1 first."""
    return RecordVerifier(
        field="discord",
        handler=HandlerKind.DISCORD_NAME,
        verifier_contracts=[VERIFIER_1, VERIFIER_2],
    )


@pytest.fixture
def github_record() -> RecordVerifier:
    return RecordVerifier(
        field="github",
        handler=HandlerKind.GITHUB_NAME,
        verifier_contracts=[VERIFIER_1],
    )


@pytest.fixture
def twitter_record() -> RecordVerifier:
    return RecordVerifier(
        field="twitter",
        handler=HandlerKind.TWITTER_NAME,
        verifier_contracts=[VERIFIER_1],
    )


@pytest.fixture
def proof_of_personhood_record() -> RecordVerifier:
    return RecordVerifier(
        field="proof_of_personhood",
        handler=HandlerKind.STATIC,
        verifier_contracts=[VERIFIER_2],
    )


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings(
    discord_record: RecordVerifier,
    github_record: RecordVerifier,
    twitter_record: RecordVerifier,
) -> SocialIdSettings:
    """Create mock settings for testing."""
    return SocialIdSettings(
        rpc_url=RPC_URL,
        identity_contract=hex(IDENTITY_CONTRACT),
        multicall_contract=hex(MULTICALL_CONTRACT),
        record_verifiers={
            "com.discord": discord_record,
            "com.github": github_record,
            "com.twitter": twitter_record,
        },
        discord_api_url=DISCORD_API_URL,
        discord_token="test-discord-token",
        github_api_url=GITHUB_API_URL,
        twitter_api_url=TWITTER_API_URL,
        twitter_api_key="test-rapidapi-key",
        debug=True,
        log_level="DEBUG",
    )


@pytest.fixture
def mock_settings_minimal() -> SocialIdSettings:
    """Create minimal settings without optional credentials."""
    return SocialIdSettings(
        rpc_url=RPC_URL,
        identity_contract=IDENTITY_CONTRACT,
        multicall_contract=MULTICALL_CONTRACT,
        discord_token=None,
        twitter_api_key=None,
    )
