"""
base32.py — RFC 4648 base32 codec for OTP secrets.

- decode(): case-insensitive, trailing '=' stripped, leftover bits (<8) dropped.
- encode(): canonical uppercase, no padding.
"""

import base64

from .errors import InvalidCharacter

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def decode(text: str) -> bytes:
    """
    Decode base32 text into raw key bytes.

    Arguments:
        text: base32 secret (any case, padding optional)

    Returns:
        bytes: one byte per 8 accumulated bits

    Raises:
        InvalidCharacter: a character is not in the alphabet
    """
    text = text.upper().rstrip("=")
    buffer = 0
    bits = 0
    out = bytearray()
    for position, char in enumerate(text):
        value = _INDEX.get(char)
        if value is None:
            raise InvalidCharacter(char, position)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            out.append((buffer >> bits) & 0xFF)
        # keep only the bits not yet emitted
        buffer &= (1 << bits) - 1
    return bytes(out)


def encode(data: bytes) -> str:
    """Encode raw bytes as uppercase base32 without '=' padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=")
