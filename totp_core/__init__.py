"""
totp_core package
=================

TOTP / HOTP code generation and verification per RFC 4226 & RFC 6238,
plus otpauth:// provisioning URIs and QR rendering.

──────────────────────────────────────────────
Core algorithm
──────────────────────────────────────────────
- HOTP (HMAC-based One-Time Password):
  code = Truncate(HMAC-<alg>(key=secret, msg=counter)) mod 10^digits

- TOTP (Time-based One-Time Password):
  HOTP with counter = floor(timestamp / period)
  → defaults: SHA1, 6 digits, 30 s period, +/- 1 step verification window.

- Dynamic Truncation:
  4 bytes from the HMAC at offset (last byte & 0x0F), sign bit cleared.

──────────────────────────────────────────────
Quick example
──────────────────────────────────────────────
>>> from totp_core import TOTPEngine, TimeStepCache, generate_secret
>>> engine = TOTPEngine.from_mapping({"secret": generate_secret(), "issuer": "Demo"})
>>> code = engine.generate()
>>> engine.verify(code)
True
>>> cache = TimeStepCache(engine)   # for UI refresh loops / endpoints
>>> cache.current_code() == code
True
"""

from .base32 import decode as b32decode, encode as b32encode
from .cache import CacheEntry, TimeStepCache
from .engine import (
    DEFAULT_ALGORITHM,
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    DEFAULT_WINDOW,
    TOTPConfig,
    TOTPEngine,
    time_step,
)
from .errors import ErrorKind, InvalidCharacter, InvalidConfiguration, OTPError
from .hotp import Algorithm
from .secret import generate_secret
from .uri import build_uri

__all__ = [
    "Algorithm",
    "CacheEntry",
    "DEFAULT_ALGORITHM",
    "DEFAULT_DIGITS",
    "DEFAULT_PERIOD",
    "DEFAULT_WINDOW",
    "ErrorKind",
    "InvalidCharacter",
    "InvalidConfiguration",
    "OTPError",
    "TOTPConfig",
    "TOTPEngine",
    "TimeStepCache",
    "b32decode",
    "b32encode",
    "build_uri",
    "generate_secret",
    "time_step",
]
