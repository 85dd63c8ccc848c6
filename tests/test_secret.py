import pytest

from totp_core.base32 import ALPHABET, decode
from totp_core.secret import DEFAULT_SECRET_LENGTH, generate_secret


def test_default_length_gives_160_bit_key():
    secret = generate_secret()
    assert len(secret) == DEFAULT_SECRET_LENGTH
    assert len(decode(secret)) == 20


@pytest.mark.parametrize("length", [1, 7, 16, 33])
def test_characters_come_from_alphabet(length):
    secret = generate_secret(length)
    assert len(secret) == length
    assert set(secret) <= set(ALPHABET)


def test_secrets_are_not_repeated():
    assert len({generate_secret() for _ in range(50)}) == 50


def test_uses_cryptographic_source(monkeypatch):
    import totp_core.secret as secret_module

    calls = []
    monkeypatch.setattr(secret_module.secrets, "choice", lambda seq: calls.append(seq) or "A")
    assert generate_secret(8) == "AAAAAAAA"
    assert len(calls) == 8


@pytest.mark.parametrize("length", [0, -5])
def test_rejects_non_positive_length(length):
    with pytest.raises(ValueError):
        generate_secret(length)


@pytest.mark.parametrize("length", [8, 16, 26, 32])
def test_generated_secret_builds_an_engine(length):
    from totp_core import TOTPEngine

    engine = TOTPEngine.from_mapping({"secret": generate_secret(length)})
    assert engine.verify(engine.generate(1_700_000_000), 1_700_000_000)
