"""Custom exception hierarchy for socialid."""

from typing import Any


class SocialIdError(Exception):
    """Base exception for all socialid errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class EncodingError(SocialIdError):
    """A value could not be packed into its on-chain representation."""

    pass


class ShortStringEncodingError(EncodingError):
    """String is not ASCII or does not fit in a single felt."""

    def __init__(
        self,
        message: str,
        value: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.value = value


class ShortStringDecodingError(SocialIdError):
    """Felt does not hold a valid short string."""

    pass


class ChainCallError(SocialIdError):
    """Chain RPC call failed (transport error or contract revert)."""

    def __init__(
        self,
        message: str,
        code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.code = code


class HandlerError(SocialIdError):
    """External social lookup failed."""

    def __init__(
        self,
        message: str,
        handler: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.handler = handler
        self.status_code = status_code
