"""Parsing and checks of the authenticator data found in attestations and assertions."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum

from appattest.errors import (
    AppAttestError,
    InvalidAAGUID,
    InvalidAppID,
    InvalidCounter,
    InvalidCredentialID,
)

_MIN_LENGTH = 37
_AAGUID_END = 53
_CREDENTIAL_START = 55


class Aaguid(Enum):
    """The App Attest environments an AAGUID can name."""

    PRODUCTION = "appattest"
    DEVELOPMENT = "appattestdevelop"


def parse_aaguid(data: bytes) -> Aaguid:
    """Identify an AAGUID field, ignoring trailing zero padding."""
    trimmed = bytes(data).rstrip(b"\x00")
    for aaguid in Aaguid:
        if trimmed == aaguid.value.encode():
            return aaguid
    raise InvalidAAGUID()


@dataclass(frozen=True)
class AuthenticatorData:
    """Decoded authenticator data."""

    raw: bytes
    rp_id_hash: bytes
    flags: int
    counter: int
    aaguid: Aaguid | None = None
    credential_id: bytes | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> AuthenticatorData:
        """Decode authenticator data, including the attested credential part when present."""
        data = bytes(data)
        if len(data) < _MIN_LENGTH:
            raise AppAttestError("Authenticator data is too short")

        aaguid = None
        credential_id = None
        if len(data) >= _CREDENTIAL_START:
            length = int.from_bytes(data[_AAGUID_END:_CREDENTIAL_START], "big")
            end = _CREDENTIAL_START + length
            if end > len(data):
                raise AppAttestError(
                    "credential ID extends past the end of authenticator data"
                )
            credential_id = data[_CREDENTIAL_START:end]
            aaguid = parse_aaguid(data[_MIN_LENGTH:_AAGUID_END])

        return cls(
            raw=data,
            rp_id_hash=data[:32],
            flags=data[32],
            counter=int.from_bytes(data[33:37], "big"),
            aaguid=aaguid,
            credential_id=credential_id,
        )

    def is_valid_aaguid(self, allow_development: bool = False) -> bool:
        """Whether the AAGUID names production, or development when that is allowed."""
        if self.aaguid is Aaguid.PRODUCTION:
            return True
        return allow_development and self.aaguid is Aaguid.DEVELOPMENT

    def verify_counter(self) -> None:
        """Require a zero counter, as in a fresh attestation."""
        if self.counter != 0:
            raise InvalidCounter()

    def verify_app_id(self, app_id: str) -> None:
        """Require the RP ID hash to be the SHA-256 of the App ID."""
        if self.rp_id_hash != hashlib.sha256(app_id.encode()).digest():
            raise InvalidAppID()

    def verify_key_id(self, key_id: bytes) -> None:
        """Require the credential ID to equal the given key identifier."""
        if self.credential_id is None or self.credential_id != bytes(key_id):
            raise InvalidCredentialID()