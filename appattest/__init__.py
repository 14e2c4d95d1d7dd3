"""Validation of Apple App Attest assertions and their authenticator data."""

__version__ = "0.1.0"
__all__ = ["assertion", "authenticator", "errors"]