"""
uri.py — otpauth:// provisioning URIs for authenticator apps.

Format:
    otpauth://totp/{issuer}:{account}?secret=...&issuer=...&algorithm=...&digits=...&period=...

Labels and the issuer parameter are percent-encoded like JavaScript's
encodeURIComponent; the secret is emitted in its original base32 form.
"""

from urllib.parse import quote

# encodeURIComponent leaves these unescaped in addition to A-Z a-z 0-9 - _ . ~
_COMPONENT_SAFE = "!~*'()"


def encode_component(value: str) -> str:
    return quote(str(value), safe=_COMPONENT_SAFE)


def build_uri(config, secret: str, issuer: str, account_name: str) -> str:
    """
    Build the TOTP provisioning URI.

    Arguments:
        config: object with ``algorithm`` (Algorithm), ``digits`` and ``period``
        secret: base32 secret, never decoded here
        issuer: service label (e.g. 'MyService')
        account_name: account label (e.g. 'alice@example.com')

    Returns:
        str: otpauth URI, ready for a QR encoder
    """
    algorithm = getattr(config.algorithm, "value", config.algorithm)
    label = f"{encode_component(issuer)}:{encode_component(account_name)}"
    return (
        f"otpauth://totp/{label}?secret={secret}&issuer={encode_component(issuer)}"
        f"&algorithm={algorithm}&digits={config.digits}&period={config.period}"
    )
