"""Exceptions raised while validating App Attest attestations and assertions."""

from __future__ import annotations


class AppAttestError(Exception):
    """Base class for every validation failure; also used for free-form messages."""

    default_message = "app attest error"

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class InvalidNonce(AppAttestError):
    default_message = "invalid nonce"


class InvalidAppIDHash(AppAttestError):
    default_message = "invalid App ID hash"


class InvalidPublicKey(AppAttestError):
    default_message = "invalid public key"


class InvalidCounter(AppAttestError):
    default_message = "invalid counter"


class InvalidCredentialID(AppAttestError):
    default_message = "invalid credential ID"


class InvalidAAGUID(AppAttestError):
    default_message = "invalid AAGUID"


class InvalidSignature(AppAttestError):
    default_message = "invalid signature"


class InvalidAppID(AppAttestError):
    default_message = "invalid App ID"


class InvalidClientData(AppAttestError):
    default_message = "invalid client data"


class ExpectedASN1Node(AppAttestError):
    default_message = "expected ASN1 node"


class FailedToExtractValueFromASN1Node(AppAttestError):
    default_message = "failed to extract value from ASN1 node"


class ExpectedOctetStringInsideASN1Node(AppAttestError):
    default_message = "expected octet string inside ASN1 node"