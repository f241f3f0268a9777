"""SqlBankingDetailsStore - Database-backed banking details storage."""
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session

from spesen.adapters.sql.models import BankingDetails
from spesen.domain.banking.models import BankingDetailsRecord, BankingDetailsSummary
from spesen.domain.banking.ports import BankingDetailsStore
from spesen.domain.secrets.models import EncryptedRecord
from spesen.utils.id import uuid7


class SqlBankingDetailsStore(BankingDetailsStore):
    """Stores envelopes as they come from the codec; never decrypts."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user_id: str, title: str, encrypted: EncryptedRecord) -> BankingDetailsRecord:
        now = datetime.now(timezone.utc)
        row = BankingDetails(
            id=uuid7(),
            user_id=user_id,
            title=title,
            iban=encrypted["iban"],
            full_name=encrypted["full_name"],
            created_at=now,
            updated_at=now,
        )
        self._db.add(row)
        self._db.commit()
        self._db.refresh(row)
        return self._to_record(row)

    def get(self, details_id: str) -> Optional[BankingDetailsRecord]:
        row = self._db.query(BankingDetails).filter(BankingDetails.id == details_id).first()
        if not row:
            return None
        return self._to_record(row)

    def get_owner(self, details_id: str) -> Optional[str]:
        result = self._db.query(BankingDetails.user_id).filter(BankingDetails.id == details_id).first()
        return result[0] if result else None

    def list_for_user(self, user_id: str) -> List[BankingDetailsSummary]:
        rows = (
            self._db.query(BankingDetails.id, BankingDetails.title, BankingDetails.created_at)
            .filter(BankingDetails.user_id == user_id)
            .order_by(BankingDetails.created_at)
            .all()
        )
        return [BankingDetailsSummary(id=r.id, title=r.title, created_at=r.created_at) for r in rows]

    def update(self, details_id: str, title: str, encrypted: EncryptedRecord) -> BankingDetailsRecord:
        row = self._db.query(BankingDetails).filter(BankingDetails.id == details_id).first()
        if not row:
            raise KeyError(details_id)

        row.title = title
        row.iban = encrypted["iban"]
        row.full_name = encrypted["full_name"]
        row.updated_at = datetime.now(timezone.utc)
        self._db.commit()
        self._db.refresh(row)
        return self._to_record(row)

    def delete(self, details_id: str) -> bool:
        row = self._db.query(BankingDetails).filter(BankingDetails.id == details_id).first()
        if not row:
            return False
        self._db.delete(row)
        self._db.commit()
        return True

    @staticmethod
    def _to_record(row: BankingDetails) -> BankingDetailsRecord:
        return BankingDetailsRecord(
            id=row.id,
            user_id=row.user_id,
            title=row.title,
            iban=row.iban,
            full_name=row.full_name,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
