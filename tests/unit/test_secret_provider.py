import base64
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from spesen.adapters.secrets import provider
from spesen.adapters.secrets.provider import (
    build_secret_codec,
    build_secret_codec_from_settings,
    get_process_codec,
    reset_process_codec,
)
from spesen.core.config import settings
from spesen.domain.secrets.errors import AuthenticationError, ConfigurationError


@pytest.fixture(autouse=True)
def fresh_process_codec():
    reset_process_codec()
    yield
    reset_process_codec()


def test_build_requires_secret():
    with pytest.raises(ConfigurationError, match="must be set"):
        build_secret_codec(None)
    with pytest.raises(ConfigurationError, match="must be set"):
        build_secret_codec("")


def test_build_rejects_short_secret():
    with pytest.raises(ConfigurationError, match="too short"):
        build_secret_codec(base64.b64encode(b"\x01" * 16).decode("ascii"))


def test_build_from_settings_uses_configured_derivation(monkeypatch):
    monkeypatch.setattr(settings, "KEY_DERIVATION", "hkdf-sha256")
    hkdf_codec = build_secret_codec_from_settings(settings)
    monkeypatch.setattr(settings, "KEY_DERIVATION", "truncate")
    truncate_codec = build_secret_codec_from_settings(settings)

    envelope = hkdf_codec.encrypt("data")
    assert hkdf_codec.decrypt(envelope) == "data"
    with pytest.raises(AuthenticationError):
        truncate_codec.decrypt(envelope)


def test_process_codec_is_cached():
    assert get_process_codec() is get_process_codec()


def test_process_codec_fails_without_key(monkeypatch):
    monkeypatch.setattr(settings, "SECRET_ENCRYPTION_KEY", None)
    with pytest.raises(ConfigurationError):
        get_process_codec()


def test_process_codec_initialized_once_under_concurrency():
    calls = []
    lock = threading.Lock()
    real_build = provider.build_secret_codec_from_settings

    def slow_build(config):
        with lock:
            calls.append(1)
        time.sleep(0.05)
        return real_build(config)

    with patch.object(provider, "build_secret_codec_from_settings", side_effect=slow_build):
        with ThreadPoolExecutor(max_workers=16) as pool:
            codecs = list(pool.map(lambda _: get_process_codec(), range(32)))

    assert len(calls) == 1
    assert all(c is codecs[0] for c in codecs)
