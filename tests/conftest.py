"""Shared pytest fixtures for the TOTP tests."""

import pytest

from totp_core import TOTPEngine, b32encode

# RFC 6238 Appendix B seeds (ASCII), one per algorithm
RFC_SEEDS = {
    "SHA1": b"12345678901234567890",
    "SHA256": b"12345678901234567890123456789012",
    "SHA512": b"1234567890" * 6 + b"1234",
}

DEMO_SECRET = "JBSWY3DPEHPK3PXP"


@pytest.fixture
def rfc_secret() -> str:
    """Base32 form of the RFC 4226 / RFC 6238 SHA1 seed."""
    return b32encode(RFC_SEEDS["SHA1"])


@pytest.fixture
def engine() -> TOTPEngine:
    return TOTPEngine.from_mapping({"secret": DEMO_SECRET, "issuer": "Demo App",
                                    "accountName": "test@example.com"})
