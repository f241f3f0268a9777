from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy import text
from spesen.adapters.sql.session import get_db
from spesen.dependencies import get_secret_codec
from spesen.domain.secrets.ports import SecretCodec
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

_PROBE = "spesen-health-probe"


@router.get("/health/live")
async def liveness():
    """Liveness probe: Service is running."""
    return {"status": "ok", "checks": {"api": "ok"}}


@router.get("/health/ready")
def readiness(
    db: Session = Depends(get_db),
    codec: SecretCodec = Depends(get_secret_codec),
):
    """Readiness probe: database reachable and codec round-trips."""
    health = {"status": "ok", "checks": {}}

    # 1. Check DB
    try:
        db.execute(text("SELECT 1"))
        health["checks"]["database"] = "ok"
    except Exception as e:
        logger.error(f"Health check failed (database): {e}")
        health["checks"]["database"] = "failed"
        health["status"] = "failed"

    # 2. Check codec
    try:
        if codec.decrypt(codec.encrypt(_PROBE)) != _PROBE:
            raise ValueError("round trip mismatch")
        health["checks"]["encryption"] = "ok"
    except Exception as e:
        logger.error(f"Health check failed (encryption): {type(e).__name__}")
        health["checks"]["encryption"] = "failed"
        health["status"] = "failed"

    if health["status"] == "failed":
        raise HTTPException(status_code=503, detail=health)

    return health
