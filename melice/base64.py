"""Base64 encoding and decoding with a bounded decode buffer."""

from __future__ import annotations

import binascii
import logging

__all__ = ["ALPHABET", "PADDING", "BUFFER_LENGTH", "encode", "decode"]

_log = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PADDING = "="

#: Largest number of bytes that :func:`decode` accepts to produce.
BUFFER_LENGTH = 64

_TRIPLET_LENGTH = 3
_ENCODED_TRIPLET_LENGTH = 4

_VALUES = {character: value for value, character in enumerate(ALPHABET)}


def encode(data: bytes | bytearray | memoryview) -> str:
    """Return the base64 text of ``data``, padded with ``=``."""
    return binascii.b2a_base64(bytes(data), newline=False).decode("ascii")


def _char_value(character: str) -> int:
    if character == PADDING:
        return 0
    value = _VALUES.get(character)
    if value is None:
        _log.warning("Invalid base64 character: %s", character)
        return 0
    return value


def decode(text: str) -> bytes:
    """Decode base64 ``text``.

    Invalid characters are logged and read as zero. Raises ``ValueError`` when
    the length of ``text`` is not a multiple of 4 or when the decoded data
    would exceed :data:`BUFFER_LENGTH` bytes.
    """
    if len(text) % _ENCODED_TRIPLET_LENGTH != 0:
        raise ValueError("base64 input length must be a multiple of 4")
    if not text:
        return b""

    output_length = (
        len(text) // _ENCODED_TRIPLET_LENGTH * _TRIPLET_LENGTH
        - (text[-2] == PADDING)
        - (text[-1] == PADDING)
    )
    if output_length > BUFFER_LENGTH:
        raise ValueError(
            f"Data to decode is too big! Expected at most {BUFFER_LENGTH} "
            f"but was: {output_length}"
        )

    output = bytearray()
    for start in range(0, len(text), _ENCODED_TRIPLET_LENGTH):
        triplet = 0
        for character in text[start:start + _ENCODED_TRIPLET_LENGTH]:
            triplet = (triplet << 6) | _char_value(character)
        output += triplet.to_bytes(_TRIPLET_LENGTH, "big")
    return bytes(output[:output_length])