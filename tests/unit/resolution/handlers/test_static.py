"""Tests for the static handler."""

from __future__ import annotations

from socialid.core.types import HandlerKind
from socialid.resolution.handlers.static import StaticHandler


class TestStaticHandler:
    """The static handler echoes the social id as a decimal string."""

    def test_kind(self):
        assert StaticHandler().kind == HandlerKind.STATIC

    async def test_decimal_rendering(self):
        handler = StaticHandler()
        assert await handler.execute(777) == "777"
        assert await handler.execute(0x10) == "16"

    async def test_large_value(self):
        value = 2**200 + 5
        assert await StaticHandler().execute(value) == str(value)
