"""GitHub login handler."""

from __future__ import annotations

from typing import ClassVar

from socialid.core.types import HandlerKind
from socialid.resolution.handlers.base import AbstractHttpHandler, HandlerConfig


class GithubConfig(HandlerConfig):
    """GitHub transport settings."""

    user_agent: str = "request"


class GithubHandler(AbstractHttpHandler):
    """
    Looks up a GitHub account by numeric user id.

    API Documentation: https://docs.github.com/en/rest/users/users

    Unauthenticated; GitHub only requires a User-Agent header.
    """

    KIND: ClassVar[HandlerKind] = HandlerKind.GITHUB_NAME
    BASE_URL: ClassVar[str] = "https://api.github.com"

    def __init__(self, config: GithubConfig | None = None) -> None:
        config = config or GithubConfig()
        super().__init__(config)
        self._user_agent = config.user_agent

    def _get_default_headers(self) -> dict[str, str]:
        return {"User-Agent": self._user_agent}

    async def execute(self, social_id: int) -> str:
        response = await self._get(f"/user/{social_id}")
        self._require_status(response, 200)
        data = self._parse_json_object(response)
        return self._extract_string(data, "login")
