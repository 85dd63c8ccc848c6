import base64

from totp_core import qr

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
URI = "otpauth://totp/Demo:alice?secret=JBSWY3DPEHPK3PXP&issuer=Demo&algorithm=SHA1&digits=6&period=30"


def test_render_png():
    assert qr.render_png(URI).startswith(PNG_SIGNATURE)


def test_box_size_changes_image():
    assert len(qr.render_png(URI, box_size=2)) < len(qr.render_png(URI, box_size=20))


def test_render_data_uri():
    data_uri = qr.render_data_uri(URI)
    prefix = "data:image/png;base64,"
    assert data_uri.startswith(prefix)
    assert base64.b64decode(data_uri[len(prefix):]).startswith(PNG_SIGNATURE)
