"""
Backend package: Flask API serving TOTP codes for one configured secret.

Integrates with totp_core (engine + time-step cache + QR encoder).
"""

from .app import config_from_env, create_app

__all__ = ["config_from_env", "create_app"]
