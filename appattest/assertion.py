"""Decoding and verification of App Attest assertions."""

from __future__ import annotations

import base64
import binascii
import hashlib
import json
from dataclasses import dataclass

import cbor2
from cryptography.exceptions import InvalidSignature as _CryptoInvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature

from appattest.authenticator import AuthenticatorData
from appattest.errors import (
    AppAttestError,
    InvalidClientData,
    InvalidCounter,
    InvalidSignature,
)


@dataclass(frozen=True)
class ClientData:
    """Client data sent alongside an assertion."""

    challenge: str

    @classmethod
    def from_json(cls, data: bytes | str) -> ClientData:
        """Parse client data from its JSON form."""
        try:
            parsed = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidClientData() from exc
        if not isinstance(parsed, dict) or not isinstance(parsed.get("challenge"), str):
            raise InvalidClientData()
        return cls(challenge=parsed["challenge"])


@dataclass(frozen=True)
class Assertion:
    """An assertion: authenticator data and a signature over it."""

    authenticator_data: bytes
    signature: bytes

    @classmethod
    def from_base64(cls, data: str | bytes) -> Assertion:
        """Decode an assertion from Base64-encoded CBOR."""
        try:
            decoded = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise AppAttestError(f"Failed to decode Base64: {exc}") from exc
        return cls.from_cbor(decoded)

    @classmethod
    def from_cbor(cls, data: bytes) -> Assertion:
        """Decode an assertion from CBOR."""
        try:
            obj = cbor2.loads(bytes(data))
        except (cbor2.CBORError, ValueError, EOFError) as exc:
            raise AppAttestError("unable to parse assertion") from exc
        if not isinstance(obj, dict):
            raise AppAttestError("unable to parse assertion")
        auth = obj.get("authenticatorData")
        signature = obj.get("signature")
        if not isinstance(auth, bytes) or not isinstance(signature, bytes):
            raise AppAttestError("unable to parse assertion")
        return cls(authenticator_data=auth, signature=signature)

    def verify(
        self,
        client_data_hash: bytes,
        challenge: str,
        app_id: str,
        public_key: bytes,
        previous_counter: int,
        stored_challenge: str,
    ) -> AuthenticatorData:
        """Check the assertion and return its decoded authenticator data."""
        auth_data = AuthenticatorData.from_bytes(self.authenticator_data)

        try:
            key = ec.EllipticCurvePublicKey.from_encoded_point(
                ec.SECP256R1(), bytes(public_key)
            )
        except (ValueError, TypeError) as exc:
            raise AppAttestError("failed to parse the public key") from exc

        nonce = hashlib.sha256(auth_data.raw + bytes(client_data_hash)).digest()

        try:
            decode_dss_signature(self.signature)
        except ValueError as exc:
            raise AppAttestError("invalid signature format") from exc

        try:
            key.verify(self.signature, nonce, ec.ECDSA(hashes.SHA256()))
        except _CryptoInvalidSignature as exc:
            raise InvalidSignature() from exc

        auth_data.verify_app_id(app_id)

        if auth_data.counter <= previous_counter:
            raise InvalidCounter()

        if stored_challenge != challenge:
            raise AppAttestError("challenge mismatch")

        return auth_data