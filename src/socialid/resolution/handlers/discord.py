"""Discord user name handler."""

from __future__ import annotations

from typing import ClassVar

from socialid.core.exceptions import HandlerError
from socialid.core.types import HandlerKind
from socialid.resolution.handlers.base import AbstractHttpHandler, HandlerConfig


class DiscordConfig(HandlerConfig):
    """Discord transport settings."""

    token: str


class DiscordHandler(AbstractHttpHandler):
    """
    Looks up a Discord user by snowflake id.

    API Documentation: https://discord.com/developers/docs/resources/user#get-user

    Requires a bot token, sent as `Authorization: Bot <token>`.
    """

    KIND: ClassVar[HandlerKind] = HandlerKind.DISCORD_NAME
    BASE_URL: ClassVar[str] = "https://discord.com/api/v10"

    def __init__(self, config: DiscordConfig) -> None:
        super().__init__(config)
        if not config.token:
            raise ValueError("Discord requires a bot token")
        self._token = config.token

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Content-Type"] = "application/json"
        headers["Authorization"] = f"Bot {self._token}"
        return headers

    async def execute(self, social_id: int) -> str:
        response = await self._get(f"/users/{social_id}")

        if not response.is_success:
            raise HandlerError(
                message=f"Discord API returned non-OK status: {response.status_code}",
                handler=self.kind.value,
                status_code=response.status_code,
            )

        data = self._parse_json_object(response)
        return self._extract_string(data, "username")
