"""Banking Details Persistence Port."""
from abc import ABC, abstractmethod
from typing import List, Optional

from spesen.domain.secrets.models import EncryptedRecord

from .models import BankingDetailsRecord, BankingDetailsSummary


class BankingDetailsStore(ABC):
    """Persists banking details. Envelope columns are opaque text."""

    @abstractmethod
    def create(self, user_id: str, title: str, encrypted: EncryptedRecord) -> BankingDetailsRecord: pass

    @abstractmethod
    def get(self, details_id: str) -> Optional[BankingDetailsRecord]: pass

    @abstractmethod
    def get_owner(self, details_id: str) -> Optional[str]:
        """Return the owning user id without loading envelopes."""
        pass

    @abstractmethod
    def list_for_user(self, user_id: str) -> List[BankingDetailsSummary]: pass

    @abstractmethod
    def update(self, details_id: str, title: str, encrypted: EncryptedRecord) -> BankingDetailsRecord: pass

    @abstractmethod
    def delete(self, details_id: str) -> bool: pass
