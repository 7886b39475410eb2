"""Twitter screen name handler."""

from __future__ import annotations

from typing import ClassVar

from socialid.core.types import HandlerKind
from socialid.resolution.handlers.base import AbstractHttpHandler, HandlerConfig

SCREEN_NAME_PATH = ("data", "user_result", "result", "legacy", "screen_name")


class TwitterConfig(HandlerConfig):
    """RapidAPI transport settings for the Twitter-compatible API."""

    api_key: str
    api_host: str = "twttrapi.p.rapidapi.com"


class TwitterHandler(AbstractHttpHandler):
    """
    Looks up a Twitter account by numeric user id via a RapidAPI provider.

    Requires an API key; the key and host travel as X-RapidAPI-* headers.
    """

    KIND: ClassVar[HandlerKind] = HandlerKind.TWITTER_NAME
    BASE_URL: ClassVar[str] = "https://twttrapi.p.rapidapi.com"

    def __init__(self, config: TwitterConfig) -> None:
        super().__init__(config)
        if not config.api_key:
            raise ValueError("Twitter requires a RapidAPI key")
        self._api_key = config.api_key
        self._api_host = config.api_host

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["X-RapidAPI-Key"] = self._api_key
        headers["X-RapidAPI-Host"] = self._api_host
        return headers

    async def execute(self, social_id: int) -> str:
        response = await self._get("/get-user-by-id", params={"user_id": str(social_id)})
        self._require_status(response, 200)
        data = self._parse_json_object(response)
        return self._extract_string(data, *SCREEN_NAME_PATH)
