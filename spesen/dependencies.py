"""Dependency Injection Module."""
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from spesen.adapters.secrets.provider import get_process_codec
from spesen.adapters.sql.banking_store import SqlBankingDetailsStore
from spesen.adapters.sql.session import get_db
from spesen.domain.banking.ports import BankingDetailsStore
from spesen.domain.banking.service import BankingDetailsService
from spesen.domain.secrets.ports import SecretCodec
from spesen.errors import raise_spesen_error


def get_secret_codec(request: Request) -> SecretCodec:
    """Codec built at startup; falls back to the lazily built process codec."""
    codec = getattr(request.app.state, "secret_codec", None)
    if codec is None:
        codec = get_process_codec()
    return codec


def get_current_user_id(x_spesen_user_id: Optional[str] = Header(None)) -> str:
    """Identity of the caller as established by the upstream auth layer."""
    if not x_spesen_user_id:
        raise_spesen_error("AUTH_REQUIRED", 401, "Not authenticated")
    return x_spesen_user_id


def get_banking_store(db: Session = Depends(get_db)) -> BankingDetailsStore:
    return SqlBankingDetailsStore(db)


def get_banking_service(
    store: BankingDetailsStore = Depends(get_banking_store),
    codec: SecretCodec = Depends(get_secret_codec),
    user_id: str = Depends(get_current_user_id),
) -> BankingDetailsService:
    return BankingDetailsService(store, codec, user_id)
