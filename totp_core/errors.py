"""
errors.py — Error taxonomy for the TOTP core.

Every failure the core can signal is an ``OTPError`` carrying an ``ErrorKind``,
so callers can branch on ``exc.kind`` instead of on exception classes.
A failed verification is *not* an error: ``verify`` simply returns False.
"""

import enum


class ErrorKind(enum.Enum):
    INVALID_CHARACTER = "invalid_character"
    INVALID_CONFIGURATION = "invalid_configuration"


class OTPError(Exception):
    """Base class for classified core errors."""

    kind: ErrorKind


class InvalidCharacter(OTPError, ValueError):
    """Base32 text contains a character outside the RFC 4648 alphabet."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Invalid base32 character {character!r} at position {position}")


class InvalidConfiguration(OTPError, ValueError):
    """Engine parameters are out of range (raised at construction time)."""

    kind = ErrorKind.INVALID_CONFIGURATION

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")
