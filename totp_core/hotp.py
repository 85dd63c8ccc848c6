"""
hotp.py — HOTP (RFC 4226) with selectable HMAC algorithm.

Steps:
1. Message = 8-byte big-endian counter
2. HMAC(key=secret, msg) with SHA1 / SHA256 / SHA512
3. Dynamic truncate -> 31-bit integer
4. otp = dbc % 10^digits, zero-padded to "digits" characters

Pure functions only: no I/O, no shared state, safe from any thread.
"""

import enum
import hashlib
import hmac
import struct


class Algorithm(enum.Enum):
    """Closed set of HMAC algorithms accepted by authenticator apps."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digestmod(self):
        return _DIGESTS[self]

    @classmethod
    def parse(cls, value) -> "Algorithm":
        """Accept an Algorithm or a name such as 'sha1' / 'SHA-256'."""
        if isinstance(value, cls):
            return value
        name = str(value).upper().replace("-", "")
        return cls(name)


_DIGESTS = {
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}


def int_to_bytes(i: int) -> bytes:
    """
    Counter -> 8-byte big-endian, as RFC 4226 requires.

    Example: int_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'

    Raises:
        struct.error: if i is negative or does not fit in 64 bits
    """
    return struct.pack(">Q", i)


def dynamic_truncate(hmac_digest: bytes) -> int:
    """
    RFC 4226 dynamic truncation.

    - offset = last_byte & 0x0F
    - 4 bytes from offset, MSB of the first byte cleared (0x7F)
    - returns a 31-bit unsigned integer
    """
    offset = hmac_digest[-1] & 0x0F
    return (
        ((hmac_digest[offset] & 0x7F) << 24)
        | ((hmac_digest[offset + 1] & 0xFF) << 16)
        | ((hmac_digest[offset + 2] & 0xFF) << 8)
        | (hmac_digest[offset + 3] & 0xFF)
    )


def compute(secret: bytes, counter: int, algorithm: Algorithm = Algorithm.SHA1, digits: int = 6) -> str:
    """
    Compute one HOTP code.

    Arguments:
        secret: raw key bytes (already base32-decoded)
        counter: unsigned 64-bit counter
        algorithm: HMAC hash
        digits: code length

    Returns:
        str: zero-padded decimal code of exactly ``digits`` characters
    """
    digest = hmac.new(secret, int_to_bytes(counter), algorithm.digestmod).digest()
    otp = dynamic_truncate(digest) % (10 ** digits)
    return str(otp).zfill(digits)
