import time

from blogapp.core import security
from blogapp.core.security import (
    SessionCodec,
    create_session_token,
    hash_password,
    verify_password,
    verify_session_token,
)


def test_password_hash_verifies_only_the_original():
    hashed = hash_password("secret")
    assert hashed != "secret"
    assert verify_password("secret", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("", hashed)


def test_codec_decrypts_its_own_tokens(codec):
    token = codec.encrypt(b"42:1700000000")
    assert "1700000000" not in token
    assert codec.decrypt(token) == b"42:1700000000"


def test_codec_rejects_foreign_and_malformed_tokens(codec):
    token = SessionCodec("another-secret").encrypt(b"1:1")
    assert codec.decrypt(token) is None
    assert codec.decrypt("not-a-token") is None
    assert codec.decrypt("") is None


def test_codec_rejects_tampered_token(codec):
    token = codec.encrypt(b"7:1700000000")
    head, key, iv, ciphertext, tag = token.split(".")
    flipped = ("A" if tag[0] != "A" else "B") + tag[1:]
    assert codec.decrypt(".".join([head, key, iv, ciphertext, flipped])) is None


def test_session_token_carries_user_id(codec):
    token = create_session_token(codec, 5)
    assert verify_session_token(codec, token) == 5
    assert verify_session_token(codec, token, max_age=60) == 5


def test_session_token_expires(codec, monkeypatch):
    token = create_session_token(codec, 5)
    later = time.time() + 3600
    monkeypatch.setattr(security.time, "time", lambda: later)
    assert verify_session_token(codec, token, max_age=60) is None
    assert verify_session_token(codec, token) == 5


def test_session_token_with_bad_payload(codec):
    assert verify_session_token(codec, codec.encrypt(b"abc")) is None
    assert verify_session_token(codec, codec.encrypt(b"3")) is None
