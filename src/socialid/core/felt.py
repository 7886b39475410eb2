"""Field element helpers: parsing, short-string packing and selectors."""

from __future__ import annotations

from typing import Annotated

from Crypto.Hash import keccak
from pydantic import BeforeValidator, PlainSerializer

from .exceptions import ShortStringDecodingError, ShortStringEncodingError

FIELD_PRIME = 2**251 + 17 * 2**192 + 1

# A short string occupies at most 31 bytes so it always fits below the prime.
SHORT_STRING_MAX_LENGTH = 31

_MASK_250 = 2**250 - 1


def parse_felt(value: int | str) -> int:
    """
    Parse a felt from an int, a 0x-prefixed hex string or a decimal string.

    Raises:
        ValueError: If the value is malformed or outside the field.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid felt: {value!r}")

    if isinstance(value, int):
        felt = value
    else:
        text = str(value).strip()
        try:
            if text.lower().startswith("0x"):
                felt = int(text, 16)
            else:
                felt = int(text, 10)
        except ValueError:
            raise ValueError(f"Invalid felt: {value!r}") from None

    if not 0 <= felt < FIELD_PRIME:
        raise ValueError(f"Felt out of range: {value!r}")
    return felt


def to_hex(felt: int) -> str:
    """Format a felt as a 0x-prefixed lowercase hex string."""
    return hex(felt)


def encode_short_string(text: str) -> int:
    """
    Pack an ASCII string of at most 31 bytes into a single felt.

    Bytes are read big-endian, so "ab" becomes 0x6162. The empty
    string packs to 0. NUL is rejected, matching decode_short_string,
    which only accepts zero bytes as leading padding.

    Raises:
        ShortStringEncodingError: If the string is not ASCII, contains NUL
            or is too long.
    """
    if not text.isascii():
        raise ShortStringEncodingError(
            message=f"Short string contains non-ASCII characters: {text!r}",
            value=text,
        )
    if "\x00" in text:
        raise ShortStringEncodingError(
            message=f"Short string contains a null byte: {text!r}",
            value=text,
        )
    if len(text) > SHORT_STRING_MAX_LENGTH:
        raise ShortStringEncodingError(
            message=(
                f"Short string is {len(text)} bytes long, "
                f"maximum is {SHORT_STRING_MAX_LENGTH}: {text!r}"
            ),
            value=text,
        )
    return int.from_bytes(text.encode("ascii"), "big")


def decode_short_string(felt: int) -> str:
    """
    Unpack a felt into one character per byte.

    Leading zero bytes are padding. Every other byte maps to the code
    point of the same value, so 0x61E9 decodes to "a\\xe9". A zero byte
    after content, or a value that needs all 32 bytes, is rejected.

    Raises:
        ShortStringDecodingError: If the felt is not a valid short string.
    """
    if not 0 <= felt < FIELD_PRIME:
        raise ShortStringDecodingError(f"Felt out of range: {felt}")
    if felt == 0:
        return ""

    raw = felt.to_bytes(32, "big")
    if raw[0] != 0:
        raise ShortStringDecodingError(f"Felt too large for a short string: {to_hex(felt)}")

    chars: list[str] = []
    for byte in raw:
        if byte != 0:
            chars.append(chr(byte))
        elif chars:
            raise ShortStringDecodingError(
                f"Unexpected null byte in short string: {to_hex(felt)}"
            )
    return "".join(chars)


def starknet_keccak(data: bytes) -> int:
    """Keccak-256 of data truncated to 250 bits."""
    digest = keccak.new(digest_bits=256, data=data).digest()
    return int.from_bytes(digest, "big") & _MASK_250


def get_selector_from_name(name: str) -> int:
    """Entry point selector for a contract function name."""
    return starknet_keccak(name.encode("ascii"))


# Pydantic field type: accepts hex/decimal strings or ints, dumps as hex.
Felt = Annotated[
    int,
    BeforeValidator(parse_felt),
    PlainSerializer(to_hex, return_type=str, when_used="json"),
]
