"""
engine.py — TOTP (RFC 6238) engine on top of the HOTP core.

TOTP = HOTP(counter = floor(timestamp / period)).

- TOTPConfig: immutable parameters (algorithm, digits, period, window, labels).
- TOTPEngine: one secret + one config; generate / verify / remaining_seconds.

The engine holds no mutable state, so a single instance can be shared across
threads. Rotating a secret means building a new engine.
"""

import hmac
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from . import base32, hotp
from .errors import InvalidConfiguration
from .hotp import Algorithm
from .secret import generate_secret
from .uri import build_uri

logger = logging.getLogger(__name__)

# --- Config / constants ----------------------------------------------------
DEFAULT_ALGORITHM = Algorithm.SHA1
DEFAULT_DIGITS = 6          # RFC 6238 recommends 6
DEFAULT_PERIOD = 30         # seconds
DEFAULT_WINDOW = 1          # +/- one period for clock skew
DEFAULT_ISSUER = "MyApp"
DEFAULT_ACCOUNT = "user@example.com"
MIN_DIGITS = 6
MAX_DIGITS = 10


def time_step(timestamp: float, period: int) -> int:
    """floor(timestamp / period), the HOTP counter for a moment in time."""
    return int(timestamp // period)


def _as_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidConfiguration(name, f"expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(name, f"expected an integer, got {value!r}") from None


@dataclass(frozen=True)
class TOTPConfig:
    """
    Engine parameters, validated on creation.

    Raises:
        InvalidConfiguration: algorithm unknown, digits outside [6, 10],
            period <= 0 or window < 0
    """

    secret: str = field(repr=False)
    issuer: str = DEFAULT_ISSUER
    account_name: str = DEFAULT_ACCOUNT
    algorithm: Algorithm = DEFAULT_ALGORITHM
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD
    window: int = DEFAULT_WINDOW

    def __post_init__(self):
        try:
            object.__setattr__(self, "algorithm", Algorithm.parse(self.algorithm))
        except ValueError:
            raise InvalidConfiguration("algorithm", f"unsupported algorithm {self.algorithm!r}") from None
        for name in ("digits", "period", "window"):
            object.__setattr__(self, name, _as_int(name, getattr(self, name)))

        if not MIN_DIGITS <= self.digits <= MAX_DIGITS:
            raise InvalidConfiguration("digits", f"must be between {MIN_DIGITS} and {MAX_DIGITS}")
        if self.period <= 0:
            raise InvalidConfiguration("period", "must be a positive number of seconds")
        if self.window < 0:
            raise InvalidConfiguration("window", "must not be negative")
        if not isinstance(self.secret, str) or not self.secret:
            raise InvalidConfiguration("secret", "must be a non-empty base32 string")

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]] = None) -> "TOTPConfig":
        """
        Build a config from loosely-typed input (CLI args, JSON body, env).

        Keys: secret, issuer, accountName (or account_name), algorithm,
        digits, period, window. Absent or None values fall back to defaults;
        a missing secret is generated.
        """
        mapping = {k: v for k, v in (mapping or {}).items() if v is not None}
        account = mapping.get("accountName", mapping.get("account_name", DEFAULT_ACCOUNT))
        return cls(
            secret=mapping.get("secret") or generate_secret(),
            issuer=mapping.get("issuer", DEFAULT_ISSUER),
            account_name=account,
            algorithm=mapping.get("algorithm", DEFAULT_ALGORITHM),
            digits=mapping.get("digits", DEFAULT_DIGITS),
            period=mapping.get("period", DEFAULT_PERIOD),
            window=mapping.get("window", DEFAULT_WINDOW),
        )


class TOTPEngine:
    """
    Time-based code generation and window-tolerant verification for one secret.

    Arguments:
        config: TOTPConfig (its base32 secret is decoded once, here)

    Raises:
        InvalidCharacter: secret is not valid base32
        InvalidConfiguration: secret decodes to zero bytes
    """

    def __init__(self, config: TOTPConfig):
        key = base32.decode(config.secret)
        if not key:
            raise InvalidConfiguration("secret", "decodes to an empty key")
        self._key = key
        self.config = config

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]] = None) -> "TOTPEngine":
        return cls(TOTPConfig.from_mapping(mapping))

    def __repr__(self):
        c = self.config
        return (
            f"TOTPEngine(issuer={c.issuer!r}, account_name={c.account_name!r}, "
            f"algorithm={c.algorithm.value}, digits={c.digits}, period={c.period}, "
            f"window={c.window}, secret=***)"
        )

    @property
    def period(self) -> int:
        return self.config.period

    @property
    def digits(self) -> int:
        return self.config.digits

    @property
    def window(self) -> int:
        return self.config.window

    @property
    def algorithm(self) -> Algorithm:
        return self.config.algorithm

    def time_step(self, timestamp: Optional[float] = None) -> int:
        if timestamp is None:
            timestamp = time.time()
        return time_step(timestamp, self.period)

    def at_step(self, step: int) -> str:
        """HOTP code for an explicit time step."""
        return hotp.compute(self._key, step, self.algorithm, self.digits)

    def generate(self, timestamp: Optional[float] = None) -> str:
        """
        Code valid at ``timestamp`` (epoch seconds, default: now).

        Deterministic: every timestamp inside one period yields the same code.
        """
        step = self.time_step(timestamp)
        logger.debug("TOTP: computing code for time step %d", step)
        return self.at_step(step)

    def verify(self, candidate: str, timestamp: Optional[float] = None) -> bool:
        """
        Check ``candidate`` against the steps [-window, +window] around ``timestamp``.

        Every offset is computed and compared with compare_digest, whichever
        one matches, so timing does not reveal the matching offset.
        Time steps below zero are skipped.

        Returns:
            bool: True when any step in the window produces ``candidate``
        """
        current = self.time_step(timestamp)
        given = str(candidate).strip().encode("utf-8")
        matched = False
        for offset in range(-self.window, self.window + 1):
            step = current + offset
            if step < 0:
                continue
            if hmac.compare_digest(self.at_step(step).encode("ascii"), given):
                matched = True
        logger.debug("TOTP verify: step=%d window=%d valid=%s", current, self.window, matched)
        return matched

    def remaining_seconds(self, timestamp: Optional[float] = None) -> int:
        """Seconds until the current code expires, always in [1, period]."""
        if timestamp is None:
            timestamp = time.time()
        return (time_step(timestamp, self.period) + 1) * self.period - math.floor(timestamp)

    def provisioning_uri(self) -> str:
        c = self.config
        return build_uri(c, c.secret, c.issuer, c.account_name)
