import base64

from click.testing import CliRunner

from spesen.cli import cli


def test_generate_key_default_length():
    result = CliRunner().invoke(cli, ["keys", "generate"])

    assert result.exit_code == 0
    assert len(base64.b64decode(result.output.strip(), validate=True)) == 32


def test_generate_key_custom_length():
    result = CliRunner().invoke(cli, ["keys", "generate", "--bytes", "64"])

    assert result.exit_code == 0
    assert len(base64.b64decode(result.output.strip())) == 64


def test_generate_key_rejects_short_length():
    result = CliRunner().invoke(cli, ["keys", "generate", "--bytes", "16"])
    assert result.exit_code != 0


def test_generated_key_passes_check():
    key = CliRunner().invoke(cli, ["keys", "generate"]).output.strip()
    result = CliRunner().invoke(cli, ["keys", "check", "--key", key])

    assert result.exit_code == 0
    assert "Encryption key OK" in result.output


def test_check_hkdf_derivation():
    key = base64.b64encode(bytes(range(40))).decode("ascii")
    result = CliRunner().invoke(cli, ["keys", "check", "--key", key, "--derivation", "hkdf-sha256"])

    assert result.exit_code == 0
    assert "derivation=hkdf-sha256" in result.output


def test_check_short_key_fails():
    short = base64.b64encode(b"\x00" * 31).decode("ascii")
    result = CliRunner().invoke(cli, ["keys", "check", "--key", short])

    assert result.exit_code == 1
    assert "too short" in result.output


def test_check_uses_configured_key_by_default():
    # tests/conftest.py configures SECRET_ENCRYPTION_KEY
    result = CliRunner().invoke(cli, ["keys", "check"])
    assert result.exit_code == 0
