"""AES-256-GCM Secret Codec Adapter."""
import base64
import binascii
import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from spesen.domain.secrets.errors import (
    AuthenticationError,
    ConfigurationError,
    MalformedEnvelopeError,
)
from spesen.domain.secrets.key_derivation import DERIVATION_TRUNCATE, derive_key
from spesen.domain.secrets.models import (
    HEADER_LENGTH,
    KEY_LENGTH,
    MIN_ENVELOPE_LENGTH,
    NONCE_LENGTH,
    TAG_LENGTH,
)
from spesen.domain.secrets.ports import SecretCodec

logger = logging.getLogger(__name__)


class AesGcmSecretCodec(SecretCodec):
    """Encrypts strings into ``base64(nonce || tag || ciphertext)`` envelopes.

    The instance is immutable after construction and safe to share between
    threads; it keeps no plaintexts.
    """

    def __init__(self, key: bytes):
        if len(key) != KEY_LENGTH:
            raise ConfigurationError(f"Encryption key must be {KEY_LENGTH} bytes (AES-256). Got {len(key)}")
        self._aesgcm = AESGCM(key)

    @classmethod
    def from_secret(cls, secret: str, derivation: str = DERIVATION_TRUNCATE) -> "AesGcmSecretCodec":
        return cls(derive_key(secret, derivation))

    def encrypt(self, plaintext: str) -> str:
        nonce = os.urandom(NONCE_LENGTH)
        ct_and_tag = self._aesgcm.encrypt(nonce, plaintext.encode("utf-8"), None)

        ciphertext = ct_and_tag[:-TAG_LENGTH]
        tag = ct_and_tag[-TAG_LENGTH:]

        return base64.b64encode(nonce + tag + ciphertext).decode("ascii")

    def decrypt(self, envelope: str) -> str:
        try:
            combined = base64.b64decode(envelope, validate=True)
        except (binascii.Error, ValueError) as e:
            raise MalformedEnvelopeError("Invalid encrypted data: not base64") from e

        # Deliberately looser than the 29-byte minimum: a bare 28-byte header
        # with a valid tag is the encryption of "". Anything shorter cannot be
        # an envelope at all.
        if len(combined) < HEADER_LENGTH:
            raise MalformedEnvelopeError("Invalid encrypted data: too short")

        nonce = combined[:NONCE_LENGTH]
        tag = combined[NONCE_LENGTH:HEADER_LENGTH]
        ciphertext = combined[HEADER_LENGTH:]

        try:
            plaintext = self._aesgcm.decrypt(nonce, ciphertext + tag, None)
        except InvalidTag:
            if len(combined) < MIN_ENVELOPE_LENGTH:
                raise MalformedEnvelopeError("Invalid encrypted data: too short") from None
            logger.debug("Envelope authentication failed")
            raise AuthenticationError("Authentication tag mismatch or key mismatch") from None

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError:
            raise AuthenticationError("Decrypted payload is not valid UTF-8") from None
