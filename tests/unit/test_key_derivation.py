import base64

import pytest

from spesen.domain.secrets.errors import ConfigurationError
from spesen.domain.secrets.key_derivation import (
    DERIVATION_HKDF_SHA256,
    DERIVATION_TRUNCATE,
    decode_key_material,
    derive_key,
)


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def test_truncate_exact_32_bytes():
    seed = bytes(range(32))
    assert derive_key(b64(seed)) == seed


def test_truncate_uses_first_32_bytes_of_longer_secret():
    seed = bytes(range(48))
    assert derive_key(b64(seed), DERIVATION_TRUNCATE) == seed[:32]


def test_derivation_is_deterministic():
    secret = b64(b"k" * 40)
    assert derive_key(secret) == derive_key(secret)
    assert derive_key(secret, DERIVATION_HKDF_SHA256) == derive_key(secret, DERIVATION_HKDF_SHA256)


@pytest.mark.parametrize("length", [0, 16, 31])
def test_short_key_material_fails(length):
    with pytest.raises(ConfigurationError, match="too short"):
        derive_key(b64(b"\x07" * length))


def test_short_key_material_fails_for_hkdf_too():
    with pytest.raises(ConfigurationError, match="too short"):
        derive_key(b64(b"\x07" * 31), DERIVATION_HKDF_SHA256)


def test_hkdf_differs_from_truncation():
    secret = b64(bytes(range(32)))
    hkdf_key = derive_key(secret, DERIVATION_HKDF_SHA256)

    assert len(hkdf_key) == 32
    assert hkdf_key != derive_key(secret, DERIVATION_TRUNCATE)


def test_unknown_derivation_rejected():
    with pytest.raises(ConfigurationError, match="Unsupported key derivation"):
        derive_key(b64(bytes(32)), "sha1")


def test_urlsafe_and_whitespace_tolerated():
    seed = bytes([0xfb, 0xff] * 16)
    urlsafe = base64.urlsafe_b64encode(seed).decode("ascii")

    assert "-" in urlsafe or "_" in urlsafe
    assert decode_key_material(f"  {urlsafe}\n") == seed


def test_invalid_base64_rejected():
    with pytest.raises(ConfigurationError):
        derive_key("abc")
