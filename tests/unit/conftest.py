"""Unit test fixtures: JSON-RPC mock helpers and component instances."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest
from httpx import Request, Response

from socialid.chain.provider import StarknetRpcProvider
from socialid.resolution.handlers.discord import DiscordConfig, DiscordHandler
from socialid.resolution.handlers.github import GithubConfig, GithubHandler
from socialid.resolution.handlers.static import StaticHandler
from socialid.resolution.handlers.twitter import TwitterConfig, TwitterHandler
from socialid.resolution.registry import HandlerRegistry
from socialid.resolution.verifier import VerifierDataResolver

from constants import (
    DISCORD_API_URL,
    GITHUB_API_URL,
    IDENTITY_CONTRACT,
    MULTICALL_CONTRACT,
    RPC_URL,
    TWITTER_API_URL,
)

# ============================================================================
# Mock Response Helpers
# ============================================================================


def rpc_result_response(result: list[int]) -> Response:
    """JSON-RPC success response carrying a felt array."""
    return Response(
        status_code=200,
        json={"jsonrpc": "2.0", "id": 1, "result": [hex(v) for v in result]},
    )


def rpc_error_response(code: int = 40, message: str = "Contract error") -> Response:
    """JSON-RPC error response, e.g. a contract revert."""
    return Response(
        status_code=200,
        json={"jsonrpc": "2.0", "id": 1, "error": {"code": code, "message": message}},
    )


def request_calldata(request: Request) -> list[int]:
    """Decode the calldata felts sent in a starknet_call request."""
    body = json.loads(request.content)
    return [int(v, 16) for v in body["params"]["request"]["calldata"]]


@pytest.fixture
def rpc_responses() -> dict[str, Callable[..., Any]]:
    """Provide helper functions for JSON-RPC mocks."""
    return {
        "result": rpc_result_response,
        "error": rpc_error_response,
        "calldata": request_calldata,
    }


# ============================================================================
# Component Fixtures
# ============================================================================


@pytest.fixture
async def provider():
    """RPC provider pointed at the mocked endpoint."""
    async with StarknetRpcProvider(RPC_URL, timeout=5.0) as rpc:
        yield rpc


@pytest.fixture
async def discord_handler():
    async with DiscordHandler(
        DiscordConfig(base_url=DISCORD_API_URL, token="test-discord-token")
    ) as handler:
        yield handler


@pytest.fixture
async def github_handler():
    async with GithubHandler(GithubConfig(base_url=GITHUB_API_URL)) as handler:
        yield handler


@pytest.fixture
async def twitter_handler():
    async with TwitterHandler(
        TwitterConfig(base_url=TWITTER_API_URL, api_key="test-rapidapi-key")
    ) as handler:
        yield handler


@pytest.fixture
def handler_registry(
    discord_handler: DiscordHandler,
    github_handler: GithubHandler,
    twitter_handler: TwitterHandler,
) -> HandlerRegistry:
    """Registry with every handler kind registered."""
    registry = HandlerRegistry()
    registry.register(StaticHandler())
    registry.register(discord_handler)
    registry.register(github_handler)
    registry.register(twitter_handler)
    return registry


@pytest.fixture
def resolver(
    provider: StarknetRpcProvider,
    handler_registry: HandlerRegistry,
) -> VerifierDataResolver:
    return VerifierDataResolver(
        provider=provider,
        handlers=handler_registry,
        identity_contract=IDENTITY_CONTRACT,
        multicall_contract=MULTICALL_CONTRACT,
    )
