# appattest

Server-side validation of App Attest assertions produced by iOS devices.

An assertion is a CBOR map holding `authenticatorData` and `signature`
byte strings. This package decodes it and runs the checks a server makes
before trusting a request:

1. the ECDSA P-256 signature is valid over
   `SHA256(authenticatorData || clientDataHash)` for the public key stored
   when the key was attested;
2. the RP ID hash in the authenticator data equals `SHA256(app_id)`;
3. the signature counter is greater than the previously stored counter;
4. the challenge embedded in the client data equals the one the server issued.

## Installation

```
pip install appattest
```

## Usage

```python
import hashlib

from appattest.assertion import Assertion, ClientData
from appattest.errors import AppAttestError


def check_request(assertion_base64, client_data_json, stored_public_key,
                  previous_counter, stored_challenge):
    client_data = ClientData.from_json(client_data_json)
    client_data_hash = hashlib.sha256(client_data_json).digest()

    assertion = Assertion.from_base64(assertion_base64)
    try:
        auth_data = assertion.verify(
            client_data_hash,
            client_data.challenge,
            "TEAMID1234.com.example.app",
            stored_public_key,   # uncompressed SEC1 point, 65 bytes
            previous_counter,
            stored_challenge,
        )
    except AppAttestError as exc:
        print(f"verification failed: {exc}")
        return None
    # Store auth_data.counter as the new previous counter.
    return auth_data.counter
```

- `ClientData.from_json` accepts JSON as `bytes` or `str` and requires a
  string `challenge` field.
- `Assertion.from_base64` accepts standard Base64 as `str` or `bytes`;
  `Assertion.from_cbor` accepts the raw CBOR bytes.
- `Assertion.verify` returns the decoded `AuthenticatorData` on success.

## Errors

Every failure raises `appattest.errors.AppAttestError` or one of its
subclasses:

| Situation | Exception |
| --- | --- |
| signature does not verify | `InvalidSignature` |
| RP ID hash does not match the App ID | `InvalidAppID` |
| counter not greater than the previous one | `InvalidCounter` |
| credential ID does not match a key ID | `InvalidCredentialID` |
| AAGUID is not a known App Attest value | `InvalidAAGUID` |
| client data JSON is malformed | `InvalidClientData` |

Malformed Base64 or CBOR, an unparsable public key, a badly formed DER
signature, authenticator data that is too short and a challenge mismatch
raise `AppAttestError` itself with a message describing the problem. The
message is also available as the exception's `message` attribute.

## Authenticator data

`appattest.authenticator.AuthenticatorData.from_bytes` parses binary
authenticator data into `raw`, `rp_id_hash`, `flags`, `counter` and, when the
data is at least 55 bytes long, `aaguid` and `credential_id`. Its checks are:

- `verify_app_id(app_id)` – RP ID hash equals `SHA256(app_id)`;
- `verify_counter()` – counter is zero;
- `verify_key_id(key_id)` – credential ID equals `key_id`;
- `is_valid_aaguid(allow_development=False)` – the AAGUID names production,
  or development when allowed.

`parse_aaguid` maps a 16-byte AAGUID field, ignoring trailing zero padding,
to `Aaguid.PRODUCTION` or `Aaguid.DEVELOPMENT`.

## What this package does not do

It validates assertions only. It does not validate attestation objects: there
is no certificate-chain check against Apple's root, no nonce extraction from
the credential certificate and no derivation of the public key from an
attestation. Storing public keys, counters and challenges between requests is
left to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```