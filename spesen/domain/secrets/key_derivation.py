"""Encryption key derivation from the operator-supplied secret.

The secret is a base64 string (``openssl rand -base64 32``). Two derivation
modes exist:

* ``truncate`` (default): the first 32 decoded bytes are the AES-256 key.
  Every envelope already in the database was written with this mode.
* ``hkdf-sha256``: HKDF-SHA256 over the full decoded secret. Switching an
  existing deployment to it requires re-encrypting all stored envelopes.
"""
import base64
import binascii

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .errors import ConfigurationError
from .models import KEY_LENGTH

DERIVATION_TRUNCATE = "truncate"
DERIVATION_HKDF_SHA256 = "hkdf-sha256"
SUPPORTED_DERIVATIONS = (DERIVATION_TRUNCATE, DERIVATION_HKDF_SHA256)

HKDF_INFO = b"spesen.banking-details.v1"


def decode_key_material(secret: str) -> bytes:
    """Decode the configured secret. Accepts standard and URL-safe base64."""
    value = secret.strip()
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        pass
    try:
        return base64.urlsafe_b64decode(value)
    except (binascii.Error, ValueError) as e:
        raise ConfigurationError("SECRET_ENCRYPTION_KEY is not valid base64") from e


def derive_key(secret: str, method: str = DERIVATION_TRUNCATE) -> bytes:
    """Derive the 32-byte AES key. Same secret and method, same key."""
    if method not in SUPPORTED_DERIVATIONS:
        raise ConfigurationError(f"Unsupported key derivation: {method}")

    material = decode_key_material(secret)
    if len(material) < KEY_LENGTH:
        raise ConfigurationError(
            "SECRET_ENCRYPTION_KEY key material too short: it must be a base64 string "
            f"representing at least {KEY_LENGTH} bytes (got {len(material)})"
        )

    if method == DERIVATION_HKDF_SHA256:
        return HKDF(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH,
            salt=None,
            info=HKDF_INFO,
        ).derive(material)

    return material[:KEY_LENGTH]
