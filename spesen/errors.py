"""HTTP error responses.

Every API error leaves the service as ``{"detail": {"error": {...}}}`` so
clients can branch on ``code`` without parsing messages. Messages stay
generic; nothing decrypted or key-related is ever placed in them.
"""
from typing import Any, Dict, NoReturn, Optional

from fastapi import HTTPException


def error_body(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"code": code, "message": message}
    if details:
        body["details"] = details
    return {"error": body}


def raise_spesen_error(
    code: str,
    status_code: int,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> NoReturn:
    """Abort the request with ``status_code`` and a coded error body."""
    raise HTTPException(status_code=status_code, detail=error_body(code, message, details))
