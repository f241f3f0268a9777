"""Secret codec construction.

The web app builds its codec once in the lifespan handler and keeps it on
``app.state``. When no lifespan has run, ``get_process_codec``
supplies a codec that is initialized exactly once per process.
"""
import logging
import threading
from typing import Optional

from spesen.adapters.secrets.aesgcm_codec import AesGcmSecretCodec
from spesen.core.config import Settings, settings
from spesen.domain.secrets.errors import ConfigurationError
from spesen.domain.secrets.key_derivation import DERIVATION_TRUNCATE
from spesen.domain.secrets.ports import SecretCodec

logger = logging.getLogger(__name__)

_PROCESS_CODEC: Optional[SecretCodec] = None
_PROCESS_CODEC_LOCK = threading.Lock()


def build_secret_codec(secret: Optional[str], derivation: str = DERIVATION_TRUNCATE) -> SecretCodec:
    """Build a codec from the configured secret, failing fast on bad key material."""
    if not secret:
        raise ConfigurationError("SECRET_ENCRYPTION_KEY must be set")
    codec = AesGcmSecretCodec.from_secret(secret, derivation)
    logger.info(f"Secret codec ready (derivation={derivation})")
    return codec


def build_secret_codec_from_settings(config: Settings = settings) -> SecretCodec:
    return build_secret_codec(config.SECRET_ENCRYPTION_KEY, config.KEY_DERIVATION)


def get_process_codec() -> SecretCodec:
    """Process-wide codec, derived on first use."""
    global _PROCESS_CODEC
    codec = _PROCESS_CODEC
    if codec is not None:
        return codec
    with _PROCESS_CODEC_LOCK:
        if _PROCESS_CODEC is None:
            _PROCESS_CODEC = build_secret_codec_from_settings(settings)
        return _PROCESS_CODEC


def reset_process_codec() -> None:
    """Drop the cached codec (tests and key reconfiguration)."""
    global _PROCESS_CODEC
    with _PROCESS_CODEC_LOCK:
        _PROCESS_CODEC = None
