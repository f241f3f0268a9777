import base64
import os

import pytest

# Deterministic test key material: bytes 0x00..0x1f
KEY_SEED = bytes(range(32))
TEST_SECRET = base64.b64encode(KEY_SEED).decode("ascii")

# Must be set before spesen.core.config is imported
os.environ["SECRET_ENCRYPTION_KEY"] = TEST_SECRET
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["MODE"] = "dev"
os.environ["RUN_MIGRATIONS"] = "false"


@pytest.fixture
def codec():
    from spesen.adapters.secrets.aesgcm_codec import AesGcmSecretCodec
    return AesGcmSecretCodec.from_secret(TEST_SECRET)


@pytest.fixture
def other_codec():
    from spesen.adapters.secrets.aesgcm_codec import AesGcmSecretCodec
    return AesGcmSecretCodec(b"\xaa" * 32)
