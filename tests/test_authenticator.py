import hashlib

import pytest

from appattest.authenticator import Aaguid, AuthenticatorData, parse_aaguid
from appattest.errors import (
    AppAttestError,
    InvalidAAGUID,
    InvalidAppID,
    InvalidCounter,
    InvalidCredentialID,
)


def _extended(aaguid_field, credential, declared_length=None):
    length = len(credential) if declared_length is None else declared_length
    return (
        bytes(32)
        + bytes([0x40])
        + (0).to_bytes(4, "big")
        + aaguid_field
        + length.to_bytes(2, "big")
        + credential
    )


def test_auth_data_new_valid():
    data = bytearray(37)
    data[32] = 0b00000001
    data[33:37] = (1).to_bytes(4, "big")
    auth = AuthenticatorData.from_bytes(bytes(data))
    assert auth.counter == 1
    assert auth.flags == 1
    assert auth.aaguid is None
    assert auth.credential_id is None


def test_auth_data_new_too_short():
    with pytest.raises(AppAttestError, match="Authenticator data is too short"):
        AuthenticatorData.from_bytes(bytes(36))


def test_aaguid_new_valid():
    assert parse_aaguid(b"appattest") is Aaguid.PRODUCTION
    assert parse_aaguid(b"appattest" + bytes(7)) is Aaguid.PRODUCTION
    assert parse_aaguid(b"appattestdevelop") is Aaguid.DEVELOPMENT


def test_aaguid_new_invalid():
    with pytest.raises(InvalidAAGUID):
        parse_aaguid(bytes(16))


def test_extended_data_parses_aaguid_and_credential():
    credential = bytes([1, 2, 3, 4])
    auth = AuthenticatorData.from_bytes(
        _extended(b"appattest" + bytes(7), credential)
    )
    assert auth.aaguid is Aaguid.PRODUCTION
    assert auth.credential_id == credential
    assert auth.is_valid_aaguid()


def test_extended_data_with_unknown_aaguid():
    with pytest.raises(InvalidAAGUID):
        AuthenticatorData.from_bytes(_extended(b"x" * 16, b"\x01"))


def test_extended_data_with_truncated_credential():
    with pytest.raises(AppAttestError):
        AuthenticatorData.from_bytes(
            _extended(b"appattest" + bytes(7), b"\x01\x02", declared_length=10)
        )


def test_is_valid_aaguid_development():
    auth = AuthenticatorData.from_bytes(_extended(b"appattestdevelop", b"\x09"))
    assert auth.is_valid_aaguid() is False
    assert auth.is_valid_aaguid(allow_development=True) is True


def test_is_valid_aaguid_missing():
    auth = AuthenticatorData.from_bytes(bytes(37))
    assert auth.is_valid_aaguid(allow_development=True) is False


def test_verify_counter():
    AuthenticatorData.from_bytes(bytes(37)).verify_counter()
    data = bytes(33) + (3).to_bytes(4, "big")
    with pytest.raises(InvalidCounter):
        AuthenticatorData.from_bytes(data).verify_counter()


def test_verify_app_id():
    app_id = "app.apple.connect"
    auth = AuthenticatorData(
        raw=b"",
        rp_id_hash=hashlib.sha256(app_id.encode()).digest(),
        flags=0,
        counter=0,
    )
    auth.verify_app_id("app.apple.connect")
    with pytest.raises(InvalidAppID):
        auth.verify_app_id("invalid.apple.connect")


def test_verify_key_id():
    key_id = bytes([1, 2, 3, 4])
    auth = AuthenticatorData(
        raw=b"", rp_id_hash=b"", flags=0, counter=0, credential_id=key_id
    )
    auth.verify_key_id(key_id)
    with pytest.raises(InvalidCredentialID):
        auth.verify_key_id(bytes([4, 3, 2, 1]))


def test_verify_key_id_without_credential():
    auth = AuthenticatorData(raw=b"", rp_id_hash=b"", flags=0, counter=0)
    with pytest.raises(InvalidCredentialID):
        auth.verify_key_id(b"\x01")