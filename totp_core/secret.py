"""
secret.py — random base32 secrets for new enrolments.

Characters come from ``secrets`` (CSPRNG); never use ``random`` here.
"""

import secrets

from . import base32

DEFAULT_SECRET_LENGTH = 32  # 32 chars * 5 bits = 160-bit key


def generate_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """
    Generate a random base32 secret.

    Arguments:
        length: number of base32 characters (must be positive)

    Returns:
        str: uppercase base32 text without padding
    """
    if length <= 0:
        raise ValueError("Secret length must be positive")
    return "".join(secrets.choice(base32.ALPHABET) for _ in range(length))
