"""
TOTP BACKEND API ROUTES - FLASK BLUEPRINT

Endpoints for the single configured secret:

    curl http://localhost:5000/totp
    curl -X POST http://localhost:5000/verify_totp -H "Content-Type: application/json" -d '{"code": "123456"}'
    curl http://localhost:5000/otpauth_uri
    curl http://localhost:5000/qr_code
"""

import time

from flask import Blueprint, current_app, jsonify, request

from totp_core import qr

otp_bp = Blueprint("otp", __name__)


def _engine():
    return current_app.extensions["totp_engine"]


def _cache():
    return current_app.extensions["totp_cache"]


@otp_bp.route("/totp", methods=["GET"])
def get_totp():
    """
    CURRENT TOTP CODE

    Served from the time-step cache: the HMAC runs once per period no matter
    how often clients poll.

    Output:
      {"code": "123456", "remaining": 17, "period": 30, "expires_at": 1700000010}
    """
    now = time.time()
    current = _cache().current(now)
    current["expires_at"] = int(now) + current["remaining"]
    return jsonify(current)


@otp_bp.route("/verify_totp", methods=["POST"])
def verify_totp_route():
    """
    VERIFY A TOTP CODE

    Input (JSON body):
      {"code": "123456"}

    Output:
      {"valid": true}  or  {"valid": false}
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "code" not in data:
        return jsonify({"error": "Code is required"}), 400

    valid = _engine().verify(str(data["code"]))
    return jsonify({"valid": valid})


@otp_bp.route("/otpauth_uri", methods=["GET"])
def get_otpauth_uri():
    """PROVISIONING URI for authenticator apps."""
    return jsonify({"uri": _engine().provisioning_uri()})


@otp_bp.route("/qr_code", methods=["GET"])
def get_qr_code():
    """
    QR CODE IMAGE of the provisioning URI, as a PNG data URI.

    Output:
      {"qr_code": "data:image/png;base64,..."}
    """
    uri = _engine().provisioning_uri()
    try:
        return jsonify({"qr_code": qr.render_data_uri(uri)})
    except (OSError, ValueError) as e:
        current_app.logger.error("[ERROR] Failed to generate QR code: %s", e)
        return jsonify({"error": f"Error generating QR code: {e}"}), 500
