"""Resolution layer: verifier data orchestration and social handlers."""

from socialid.resolution.handlers import (
    AbstractHandler,
    AbstractHttpHandler,
    DiscordHandler,
    GithubHandler,
    HandlerConfig,
    StaticHandler,
    TwitterHandler,
)
from socialid.resolution.registry import HandlerRegistry
from socialid.resolution.verifier import VerifierDataResolver

__all__ = [
    # Handlers
    "AbstractHandler",
    "AbstractHttpHandler",
    "DiscordHandler",
    "GithubHandler",
    "HandlerConfig",
    "StaticHandler",
    "TwitterHandler",
    # Registry
    "HandlerRegistry",
    # Orchestration
    "VerifierDataResolver",
]
