"""Core enums and type definitions."""

from enum import StrEnum


class HandlerKind(StrEnum):
    """How a decoded social id is turned into a display value."""

    STATIC = "static"
    DISCORD_NAME = "get_discord_name"
    GITHUB_NAME = "get_github_name"
    TWITTER_NAME = "get_twitter_name"


class BlockTag(StrEnum):
    """Block tags accepted by the Starknet JSON-RPC API."""

    LATEST = "latest"
    PENDING = "pending"
