"""Core types, models, and utilities."""

from .exceptions import (
    ChainCallError,
    EncodingError,
    HandlerError,
    ShortStringDecodingError,
    ShortStringEncodingError,
    SocialIdError,
)
from .felt import (
    FIELD_PRIME,
    SHORT_STRING_MAX_LENGTH,
    Felt,
    decode_short_string,
    encode_short_string,
    get_selector_from_name,
    parse_felt,
    starknet_keccak,
    to_hex,
)
from .models import ProfileRecords, RecordVerifier
from .types import BlockTag, HandlerKind

__all__ = [
    # Types
    "BlockTag",
    "HandlerKind",
    # Felts
    "FIELD_PRIME",
    "SHORT_STRING_MAX_LENGTH",
    "Felt",
    "decode_short_string",
    "encode_short_string",
    "get_selector_from_name",
    "parse_felt",
    "starknet_keccak",
    "to_hex",
    # Models
    "ProfileRecords",
    "RecordVerifier",
    # Exceptions
    "ChainCallError",
    "EncodingError",
    "HandlerError",
    "ShortStringDecodingError",
    "ShortStringEncodingError",
    "SocialIdError",
]
