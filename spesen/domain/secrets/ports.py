"""Secrets Domain Ports (Interfaces)."""
from abc import ABC, abstractmethod
from typing import Dict

from .models import EncryptedRecord, SensitiveRecord


class SecretCodec(ABC):
    """Abstract Port for field-level encryption of sensitive strings."""

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext into a self-contained base64 envelope."""
        ...

    @abstractmethod
    def decrypt(self, envelope: str) -> str:
        """Decrypt a base64 envelope back to its plaintext."""
        ...

    def encrypt_fields(self, record: SensitiveRecord) -> EncryptedRecord:
        """Encrypt every field independently (one nonce per field)."""
        return {name: self.encrypt(value) for name, value in record.items()}

    def decrypt_fields(self, record: SensitiveRecord) -> Dict[str, str]:
        """Decrypt every field. The first failure aborts the whole record."""
        decrypted: Dict[str, str] = {}
        for name, envelope in record.items():
            decrypted[name] = self.decrypt(envelope)
        return decrypted
