import pytest

from totp_backend import config_from_env, create_app
from totp_core import InvalidCharacter, InvalidConfiguration
from conftest import DEMO_SECRET


@pytest.fixture
def app():
    app = create_app({"secret": DEMO_SECRET, "issuer": "Demo App", "accountName": "alice"})
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def test_totp_endpoint(app, client):
    resp = client.get("/totp")
    assert resp.status_code == 200
    data = resp.get_json()
    assert set(data) == {"code", "remaining", "period", "expires_at"}
    assert data["period"] == 30
    assert 1 <= data["remaining"] <= 30
    assert app.extensions["totp_engine"].verify(data["code"])


def test_totp_endpoint_uses_cache(app, client):
    client.get("/totp")
    assert app.extensions["totp_cache"].entry is not None


def test_verify_endpoint(app, client):
    code = app.extensions["totp_engine"].generate()
    resp = client.post("/verify_totp", json={"code": code})
    assert resp.status_code == 200
    assert resp.get_json() == {"valid": True}


def test_verify_endpoint_wrong_code(client):
    resp = client.post("/verify_totp", json={"code": "not-a-code"})
    assert resp.get_json() == {"valid": False}


@pytest.mark.parametrize("body", [{}, {"other": 1}])
def test_verify_endpoint_requires_code(client, body):
    resp = client.post("/verify_totp", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Code is required"}


def test_verify_endpoint_without_json(client):
    resp = client.post("/verify_totp", data="code=123456")
    assert resp.status_code == 400


def test_otpauth_uri_endpoint(client):
    resp = client.get("/otpauth_uri")
    assert resp.get_json() == {
        "uri": "otpauth://totp/Demo%20App:alice?secret=JBSWY3DPEHPK3PXP"
               "&issuer=Demo%20App&algorithm=SHA1&digits=6&period=30"
    }


def test_qr_code_endpoint(client):
    resp = client.get("/qr_code")
    assert resp.status_code == 200
    assert resp.get_json()["qr_code"].startswith("data:image/png;base64,")


def test_cors_headers(client):
    resp = client.get("/totp", headers={"Origin": "http://example.com"})
    assert resp.headers.get("Access-Control-Allow-Origin") in ("*", "http://example.com")


def test_create_app_fails_fast_on_bad_config():
    with pytest.raises(InvalidCharacter):
        create_app({"secret": "1"})
    with pytest.raises(InvalidConfiguration):
        create_app({"secret": DEMO_SECRET, "period": 0})


def test_config_from_env():
    env = {"TOTP_SECRET": DEMO_SECRET, "TOTP_DIGITS": "8", "TOTP_PERIOD": "60",
           "TOTP_ISSUER": "", "UNRELATED": "x"}
    assert config_from_env(env) == {"secret": DEMO_SECRET, "digits": "8", "period": "60"}


def test_create_app_reads_environment(monkeypatch):
    monkeypatch.setenv("TOTP_SECRET", DEMO_SECRET)
    monkeypatch.setenv("TOTP_DIGITS", "8")
    app = create_app()
    assert app.extensions["totp_engine"].digits == 8


@pytest.mark.parametrize("body", [["code"], "code", 123456])
def test_verify_endpoint_rejects_non_object_json(client, body):
    resp = client.post("/verify_totp", json=body)
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Code is required"}
