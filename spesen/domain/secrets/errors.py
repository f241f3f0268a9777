"""Error taxonomy for the secret codec.

Callers should catch ``SecretCodecError`` and map every subclass to one
generic failure towards end users; the concrete class is for internal logs.
"""


class SecretCodecError(Exception):
    """Base class for all codec failures."""


class ConfigurationError(SecretCodecError):
    """Key material is missing, not base64, or shorter than 32 bytes."""


class MalformedEnvelopeError(SecretCodecError):
    """Envelope is not valid base64 or too short to hold nonce, tag and data."""


class AuthenticationError(SecretCodecError):
    """AEAD tag verification failed (wrong key, corruption or tampering)."""
