"""Static handler: the social id is its own display value."""

from __future__ import annotations

from typing import ClassVar

from socialid.core.types import HandlerKind
from socialid.resolution.handlers.base import AbstractHandler


class StaticHandler(AbstractHandler):
    """Formats the id as a decimal string without any network call."""

    KIND: ClassVar[HandlerKind] = HandlerKind.STATIC

    async def execute(self, social_id: int) -> str:
        return str(social_id)
