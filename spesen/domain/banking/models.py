"""Banking Details Domain Models."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Fields encrypted at rest, in storage order.
SENSITIVE_FIELDS = ("iban", "full_name")


@dataclass
class BankingDetailsRecord:
    """Stored row. ``iban`` and ``full_name`` hold envelopes, never plaintext."""
    id: str
    user_id: str
    title: str
    iban: str
    full_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class BankingDetailsSummary:
    """List entry. Carries no sensitive data, encrypted or not."""
    id: str
    title: str
    created_at: Optional[datetime] = None


@dataclass
class BankingDetails:
    """Decrypted view, only ever built for the owner."""
    id: str
    user_id: str
    title: str
    iban: str
    full_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class BankingDetailsError(Exception):
    """Base class for banking details service errors."""


class BankingDetailsNotFound(BankingDetailsError):
    pass


class BankingDetailsForbidden(BankingDetailsError):
    pass


class BankingDetailsUnavailable(BankingDetailsError):
    """Stored data could not be decrypted. Deliberately carries no detail."""
