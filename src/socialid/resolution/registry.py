"""Handler registry: dispatches a HandlerKind to its handler."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from socialid.core.exceptions import HandlerError
from socialid.core.types import HandlerKind
from socialid.resolution.handlers.base import AbstractHandler
from socialid.resolution.handlers.static import StaticHandler

if TYPE_CHECKING:
    from socialid.config import SocialIdSettings

logger = logging.getLogger(__name__)


class HandlerRegistry:
    """
    Factory and dispatcher for handler instances.

    Registers the handlers whose credentials are configured; dispatching
    to a kind with no registered handler fails like any other lookup.
    """

    def __init__(self) -> None:
        self._handlers: dict[HandlerKind, AbstractHandler] = {}

    def register(self, handler: AbstractHandler) -> None:
        """Register a handler, replacing any previous one for its kind."""
        self._handlers[handler.kind] = handler

    def get(self, kind: HandlerKind) -> AbstractHandler | None:
        return self._handlers.get(kind)

    @property
    def kinds(self) -> frozenset[HandlerKind]:
        return frozenset(self._handlers)

    async def execute_handler(self, kind: HandlerKind, social_id: int) -> str:
        """
        Run the handler for `kind` against a non-zero social id.

        Raises:
            HandlerError: If no handler is registered or the lookup fails
        """
        handler = self._handlers.get(kind)
        if handler is None:
            raise HandlerError(
                message=f"No handler registered for {kind.value}",
                handler=kind.value,
            )
        return await handler.execute(social_id)

    @classmethod
    def from_settings(cls, settings: "SocialIdSettings") -> "HandlerRegistry":
        """
        Create a registry with handlers configured from settings.

        Discord and Twitter are only registered when their credentials are set.
        """
        from socialid.resolution.handlers.discord import DiscordConfig, DiscordHandler
        from socialid.resolution.handlers.github import GithubConfig, GithubHandler
        from socialid.resolution.handlers.twitter import TwitterConfig, TwitterHandler

        registry = cls()
        registry.register(StaticHandler())

        if settings.discord_token:
            registry.register(
                DiscordHandler(
                    DiscordConfig(
                        base_url=settings.discord_api_url,
                        timeout=settings.request_timeout,
                        token=settings.discord_token,
                    )
                )
            )
        else:
            logger.info("Discord token not configured, Discord names will not resolve")

        registry.register(
            GithubHandler(
                GithubConfig(
                    base_url=settings.github_api_url,
                    timeout=settings.request_timeout,
                )
            )
        )

        if settings.twitter_api_key:
            registry.register(
                TwitterHandler(
                    TwitterConfig(
                        base_url=settings.twitter_api_url,
                        timeout=settings.request_timeout,
                        api_key=settings.twitter_api_key,
                        api_host=settings.twitter_api_host,
                    )
                )
            )
        else:
            logger.info("Twitter API key not configured, Twitter names will not resolve")

        return registry

    async def close_all(self) -> None:
        """Close all registered handlers."""
        for handler in self._handlers.values():
            await handler.close()
