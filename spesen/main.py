"""Spesen-Tool Banking Details Service - Main Application."""
import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from spesen.adapters.secrets.provider import build_secret_codec_from_settings
from spesen.adapters.sql.models import Base
from spesen.adapters.sql.session import engine
from spesen.api.banking import router as banking_router
from spesen.core.config import settings
from spesen.domain.secrets.errors import ConfigurationError
from spesen.logging_hardening import setup_logging
from spesen.routers import health

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def run_migrations() -> None:
    from alembic import command
    from alembic.config import Config

    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    alembic_cfg.attributes["configure_logger"] = False
    command.upgrade(alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.LOG_LEVEL)

    # No codec, no service: bad key material aborts startup.
    try:
        app.state.secret_codec = build_secret_codec_from_settings(settings)
    except ConfigurationError as e:
        logger.critical(f"CRITICAL STARTUP ERROR: {e}")
        raise

    if settings.RUN_MIGRATIONS:
        logger.info("Running DB Migrations...")
        await asyncio.to_thread(run_migrations)
        logger.info("Migrations complete.")
    elif settings.MODE == "dev":
        Base.metadata.create_all(bind=engine)

    yield
    # Shutdown
    app.state.secret_codec = None
    logger.info("Shutdown complete.")


app = FastAPI(
    title="Spesen-Tool Banking Details",
    description="Owner-only banking details with AES-256-GCM encryption at rest",
    version="0.1.0",
    lifespan=lifespan
)

app.include_router(health.router, tags=["health"])
app.include_router(banking_router.router, prefix="/v1/banking-details", tags=["banking"])
