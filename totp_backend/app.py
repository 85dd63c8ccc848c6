"""
FLASK APP ENTRY POINT - TOTP BACKEND SERVER
===========================================

Builds the Flask app, enables CORS and registers the OTP blueprint.

Configuration comes from a mapping passed to create_app() or, when none is
given, from TOTP_* environment variables:

    TOTP_SECRET, TOTP_ISSUER, TOTP_ACCOUNT_NAME, TOTP_ALGORITHM,
    TOTP_DIGITS, TOTP_PERIOD, TOTP_WINDOW

Run:
    flask --app totp_backend.app run
"""

import logging
import os
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from totp_core import TimeStepCache, TOTPEngine

logger = logging.getLogger(__name__)

_ENV_KEYS = {
    "secret": "TOTP_SECRET",
    "issuer": "TOTP_ISSUER",
    "accountName": "TOTP_ACCOUNT_NAME",
    "algorithm": "TOTP_ALGORITHM",
    "digits": "TOTP_DIGITS",
    "period": "TOTP_PERIOD",
    "window": "TOTP_WINDOW",
}


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Collect the TOTP_* variables that are set into a config mapping."""
    environ = os.environ if environ is None else environ
    return {key: environ[var] for key, var in _ENV_KEYS.items() if environ.get(var)}


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    App factory.

    One engine and one TimeStepCache are created here and shared by every
    request; the cache lock makes that safe under a threaded server.

    Raises:
        OTPError: the configuration is invalid (fail fast at startup)
    """
    if config is None:
        config = config_from_env()
    engine = TOTPEngine.from_mapping(config)
    if not config.get("secret"):
        logger.warning("No TOTP secret configured, generated a random one for this process")

    app = Flask(__name__)
    # frontends on another origin call this API
    CORS(app)

    app.extensions["totp_engine"] = engine
    app.extensions["totp_cache"] = TimeStepCache(engine)

    from totp_backend.routes import otp_bp
    app.register_blueprint(otp_bp)

    logger.info("TOTP backend ready: %r", engine)
    return app


if __name__ == "__main__":
    create_app().run(debug=True, host="0.0.0.0", port=5000)
