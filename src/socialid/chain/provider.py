"""Starknet JSON-RPC provider for read-only contract calls."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from socialid.chain.calls import FunctionCall
from socialid.core.exceptions import ChainCallError
from socialid.core.felt import parse_felt, to_hex
from socialid.core.types import BlockTag

logger = logging.getLogger(__name__)


class StarknetRpcProvider:
    """
    Minimal Starknet JSON-RPC client exposing `starknet_call`.

    Holds no per-call state, so one instance can serve concurrent
    resolutions.

    Usage:
        async with StarknetRpcProvider("https://rpc.example/v0_7") as provider:
            result = await provider.call(FunctionCall(address, selector, [1, 2]))
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            rpc_url: JSON-RPC endpoint URL
            timeout: Request timeout in seconds for an owned client
            http_client: Shared httpx client (for connection pooling)
        """
        self._rpc_url = rpc_url
        self._timeout = timeout
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                headers={"Content-Type": "application/json"},
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def call(
        self,
        call: FunctionCall,
        block_id: BlockTag | str = BlockTag.LATEST,
    ) -> list[int]:
        """
        Execute a read-only call and return the flat result felts.

        Raises:
            ChainCallError: On transport failure, non-2xx status, JSON-RPC
                error (including contract reverts) or a malformed result.
        """
        payload = {
            "jsonrpc": "2.0",
            "method": "starknet_call",
            "params": {
                "request": {
                    "contract_address": to_hex(call.contract_address),
                    "entry_point_selector": to_hex(call.entry_point_selector),
                    "calldata": [to_hex(value) for value in call.calldata],
                },
                "block_id": str(block_id),
            },
            "id": 1,
        }

        logger.debug(
            f"starknet_call {to_hex(call.entry_point_selector)} "
            f"on {to_hex(call.contract_address)}"
        )
        client = self._get_client()
        try:
            response = await client.post(self._rpc_url, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as e:
            raise ChainCallError(
                message=f"RPC HTTP {e.response.status_code} from {self._rpc_url}",
            ) from e
        except httpx.HTTPError as e:
            raise ChainCallError(message=f"RPC transport error: {e}") from e
        except ValueError as e:
            raise ChainCallError(message=f"RPC returned invalid JSON: {e}") from e

        return self._parse_result(body)

    @staticmethod
    def _parse_result(body: Any) -> list[int]:
        """Extract the felt array from a JSON-RPC response body."""
        if not isinstance(body, dict):
            raise ChainCallError(message="RPC response is not a JSON object")

        if error := body.get("error"):
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message") if isinstance(error, dict) else str(error)
            raise ChainCallError(
                message=f"RPC error: {message}",
                code=code,
                details={"error": error},
            )

        result = body.get("result")
        if not isinstance(result, list):
            raise ChainCallError(message=f"RPC result is not a felt array: {result!r}")

        try:
            return [parse_felt(value) for value in result]
        except ValueError as e:
            raise ChainCallError(message=f"RPC result contains an invalid felt: {e}") from e

    async def __aenter__(self) -> StarknetRpcProvider:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
