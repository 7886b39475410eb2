"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from socialid.core.felt import Felt
from socialid.core.models import RecordVerifier


class SocialIdSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="SOCIALID_",
    )

    # Chain
    rpc_url: str = Field(
        default="http://localhost:5050/rpc",
        description="Starknet JSON-RPC endpoint",
    )
    identity_contract: Felt = Field(
        default=0,
        description="Identity registry contract holding verifier data",
    )
    multicall_contract: Felt = Field(
        default=0,
        description="Multicall aggregator contract",
    )
    record_verifiers: dict[str, RecordVerifier] = Field(
        default_factory=dict,
        description="Verifier configuration per record name (JSON), e.g. 'com.discord'",
    )

    # External APIs - Discord
    discord_api_url: str = Field(
        default="https://discord.com/api/v10",
        description="Discord API base URL",
    )
    discord_token: str | None = Field(
        default=None,
        description="Discord bot token (required for Discord name lookups)",
    )

    # External APIs - GitHub
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub API base URL",
    )

    # External APIs - Twitter
    twitter_api_url: str = Field(
        default="https://twttrapi.p.rapidapi.com",
        description="Twitter-compatible RapidAPI base URL",
    )
    twitter_api_key: str | None = Field(
        default=None,
        description="RapidAPI key (required for Twitter name lookups)",
    )
    twitter_api_host: str = Field(
        default="twttrapi.p.rapidapi.com",
        description="RapidAPI host header value",
    )

    # HTTP
    request_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Timeout in seconds for outbound RPC and API requests",
    )

    # App settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> SocialIdSettings:
    """Get cached settings instance."""
    return SocialIdSettings()
