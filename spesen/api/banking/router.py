"""Banking Details API Router.

All routes act on behalf of the authenticated user. Decrypted IBAN and name
are only returned by ``GET /{id}`` and only to the record's owner; the list
route returns titles.
"""
from datetime import datetime
from typing import List, NoReturn, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from spesen.dependencies import get_banking_service
from spesen.domain.banking.models import (
    BankingDetailsError,
    BankingDetailsForbidden,
    BankingDetailsNotFound,
    BankingDetailsSummary,
)
from spesen.domain.banking.service import BankingDetailsService
from spesen.errors import raise_spesen_error

router = APIRouter()


# ============ Pydantic Models ============

class BankingDetailsWrite(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    iban: str = Field(..., min_length=1, max_length=64)
    full_name: str = Field(..., min_length=1, max_length=255)


class BankingDetailsSummaryOut(BaseModel):
    id: str
    title: str
    created_at: Optional[datetime] = None


class BankingDetailsListOut(BaseModel):
    banking_details: List[BankingDetailsSummaryOut]


class BankingDetailsOut(BaseModel):
    id: str
    title: str
    iban: str
    full_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _summary_out(summary: BankingDetailsSummary) -> BankingDetailsSummaryOut:
    return BankingDetailsSummaryOut(id=summary.id, title=summary.title, created_at=summary.created_at)


def _raise_for(exc: BankingDetailsError) -> NoReturn:
    if isinstance(exc, BankingDetailsNotFound):
        raise_spesen_error("NOT_FOUND", 404, "Banking details not found")
    if isinstance(exc, BankingDetailsForbidden):
        raise_spesen_error("FORBIDDEN", 403, "You don't have access to these banking details")
    # Decryption failures: one generic message whatever the cause.
    raise_spesen_error("BANKING_DETAILS_UNAVAILABLE", 500, "Unable to read banking details")


# ============ Routes ============

@router.post("", status_code=201, response_model=BankingDetailsSummaryOut)
def create_banking_details(
    body: BankingDetailsWrite,
    service: BankingDetailsService = Depends(get_banking_service),
):
    """Create banking details for the current user."""
    return _summary_out(service.create(body.title, body.iban, body.full_name))


@router.get("", response_model=BankingDetailsListOut)
def list_banking_details(service: BankingDetailsService = Depends(get_banking_service)):
    """List the current user's banking details (titles only)."""
    return BankingDetailsListOut(banking_details=[_summary_out(s) for s in service.list()])


@router.get("/{details_id}", response_model=BankingDetailsOut)
def get_banking_details(
    details_id: str,
    service: BankingDetailsService = Depends(get_banking_service),
):
    """Return the decrypted banking details. Owner only."""
    try:
        details = service.get(details_id)
    except BankingDetailsError as e:
        _raise_for(e)

    return BankingDetailsOut(
        id=details.id,
        title=details.title,
        iban=details.iban,
        full_name=details.full_name,
        created_at=details.created_at,
        updated_at=details.updated_at,
    )


@router.put("/{details_id}", response_model=BankingDetailsSummaryOut)
def update_banking_details(
    details_id: str,
    body: BankingDetailsWrite,
    service: BankingDetailsService = Depends(get_banking_service),
):
    """Replace title, IBAN and name. Owner only."""
    try:
        summary = service.update(details_id, body.title, body.iban, body.full_name)
    except BankingDetailsError as e:
        _raise_for(e)
    return _summary_out(summary)


@router.delete("/{details_id}", status_code=204)
def delete_banking_details(
    details_id: str,
    service: BankingDetailsService = Depends(get_banking_service),
):
    """Delete banking details. Owner only."""
    try:
        service.delete(details_id)
    except BankingDetailsError as e:
        _raise_for(e)
    return Response(status_code=204)
