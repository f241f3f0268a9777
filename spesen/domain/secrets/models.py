"""Secrets Domain Models."""
from typing import Dict, Mapping

KEY_LENGTH = 32    # AES-256
NONCE_LENGTH = 12  # 96-bit GCM nonce (NIST SP 800-38D)
TAG_LENGTH = 16

# Envelope layout: [12 bytes nonce][16 bytes tag][n bytes ciphertext]
HEADER_LENGTH = NONCE_LENGTH + TAG_LENGTH
MIN_ENVELOPE_LENGTH = HEADER_LENGTH + 1

# Field name -> plaintext (or envelope, depending on direction).
SensitiveRecord = Mapping[str, str]
EncryptedRecord = Dict[str, str]
