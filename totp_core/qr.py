"""
qr.py — render a provisioning URI as a QR code image.

The core hands over a finished URI string; file paths are the caller's
business (see the CLI ``qr`` command and the ``/qr_code`` route).
"""

import base64
import io

import qrcode


def render_png(uri: str, box_size: int = 10, border: int = 5) -> bytes:
    """
    Encode ``uri`` as a black-on-white PNG.

    Returns:
        bytes: PNG file contents
    """
    qr = qrcode.QRCode(version=1, box_size=box_size, border=border)
    qr.add_data(uri)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def render_data_uri(uri: str) -> str:
    """PNG as a ``data:`` URI, embeddable in an <img> tag."""
    img_str = base64.b64encode(render_png(uri)).decode()
    return f"data:image/png;base64,{img_str}"
