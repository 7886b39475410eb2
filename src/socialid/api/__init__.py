"""HTTP API for socialid."""

from socialid.api.app import create_app

__all__ = ["create_app"]
