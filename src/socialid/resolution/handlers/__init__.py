"""Social id handlers, one per HandlerKind."""

from socialid.resolution.handlers.base import (
    AbstractHandler,
    AbstractHttpHandler,
    HandlerConfig,
)
from socialid.resolution.handlers.discord import DiscordConfig, DiscordHandler
from socialid.resolution.handlers.github import GithubConfig, GithubHandler
from socialid.resolution.handlers.static import StaticHandler
from socialid.resolution.handlers.twitter import TwitterConfig, TwitterHandler

__all__ = [
    # Base
    "AbstractHandler",
    "AbstractHttpHandler",
    "HandlerConfig",
    # Handlers
    "DiscordConfig",
    "DiscordHandler",
    "GithubConfig",
    "GithubHandler",
    "StaticHandler",
    "TwitterConfig",
    "TwitterHandler",
]
