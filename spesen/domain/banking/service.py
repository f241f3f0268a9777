"""Banking Details Service.

Owns the authorization contract around the secret codec: sensitive fields are
encrypted on every write and decrypted only for the record's owner. Codec
failures are logged with their concrete kind and surfaced as one generic
``BankingDetailsUnavailable`` error.
"""
import logging
from typing import List

from spesen.domain.secrets.errors import SecretCodecError
from spesen.domain.secrets.ports import SecretCodec

from .models import (
    SENSITIVE_FIELDS,
    BankingDetails,
    BankingDetailsForbidden,
    BankingDetailsNotFound,
    BankingDetailsRecord,
    BankingDetailsSummary,
    BankingDetailsUnavailable,
)
from .ports import BankingDetailsStore

logger = logging.getLogger(__name__)


class BankingDetailsService:
    """Banking details operations on behalf of one authenticated user."""

    def __init__(self, store: BankingDetailsStore, codec: SecretCodec, user_id: str):
        self._store = store
        self._codec = codec
        self._user_id = user_id

    def create(self, title: str, iban: str, full_name: str) -> BankingDetailsSummary:
        encrypted = self._codec.encrypt_fields({"iban": iban, "full_name": full_name})
        record = self._store.create(self._user_id, title, encrypted)
        logger.info(f"Created banking details {record.id} for user {self._user_id}")
        return BankingDetailsSummary(id=record.id, title=record.title, created_at=record.created_at)

    def list(self) -> List[BankingDetailsSummary]:
        """Titles only. IBAN and name must be fetched one record at a time."""
        return self._store.list_for_user(self._user_id)

    def get(self, details_id: str) -> BankingDetails:
        record = self._store.get(details_id)
        if record is None:
            raise BankingDetailsNotFound("Banking details not found")
        self._check_owner(details_id, record.user_id)

        decrypted = self._decrypt(record)
        return BankingDetails(
            id=record.id,
            user_id=record.user_id,
            title=record.title,
            iban=decrypted["iban"],
            full_name=decrypted["full_name"],
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def update(self, details_id: str, title: str, iban: str, full_name: str) -> BankingDetailsSummary:
        self._require_owned(details_id)
        encrypted = self._codec.encrypt_fields({"iban": iban, "full_name": full_name})
        record = self._store.update(details_id, title, encrypted)
        logger.info(f"Updated banking details {details_id}")
        return BankingDetailsSummary(id=record.id, title=record.title, created_at=record.created_at)

    def delete(self, details_id: str) -> None:
        self._require_owned(details_id)
        self._store.delete(details_id)
        logger.info(f"Deleted banking details {details_id}")

    def _require_owned(self, details_id: str) -> None:
        owner = self._store.get_owner(details_id)
        if owner is None:
            raise BankingDetailsNotFound("Banking details not found")
        self._check_owner(details_id, owner)

    def _check_owner(self, details_id: str, owner: str) -> None:
        if owner != self._user_id:
            logger.warning(f"User {self._user_id} denied access to banking details {details_id}")
            raise BankingDetailsForbidden("You don't have access to these banking details")

    def _decrypt(self, record: BankingDetailsRecord) -> dict:
        envelopes = {name: getattr(record, name) for name in SENSITIVE_FIELDS}
        try:
            return self._codec.decrypt_fields(envelopes)
        except SecretCodecError as e:
            logger.warning(f"Decryption of banking details {record.id} failed: {type(e).__name__}")
            raise BankingDetailsUnavailable("Unable to read banking details") from e
