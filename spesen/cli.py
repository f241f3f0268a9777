"""CLI for Spesen-Tool encryption key management."""
import base64
import secrets

import click

from spesen.adapters.secrets.provider import build_secret_codec
from spesen.core.config import settings
from spesen.domain.secrets.errors import ConfigurationError
from spesen.domain.secrets.key_derivation import SUPPORTED_DERIVATIONS
from spesen.domain.secrets.models import KEY_LENGTH

_PROBE = "DE89370400440532013000"


@click.group()
def cli():
    """Spesen-Tool CLI."""
    pass


@cli.group()
def keys():
    """Manage the banking details encryption key."""
    pass


@keys.command("generate")
@click.option("--bytes", "num_bytes", default=KEY_LENGTH, show_default=True,
              help="Random bytes of key material (at least 32)")
def generate_key(num_bytes: int):
    """Print a new base64 value for SECRET_ENCRYPTION_KEY."""
    if num_bytes < KEY_LENGTH:
        raise click.BadParameter(f"must be at least {KEY_LENGTH}", param_hint="--bytes")
    click.echo(base64.b64encode(secrets.token_bytes(num_bytes)).decode("ascii"))


@keys.command("check")
@click.option("--key", "secret", default=None, envvar="SECRET_ENCRYPTION_KEY",
              help="Key to check (defaults to the configured SECRET_ENCRYPTION_KEY)")
@click.option("--derivation", type=click.Choice(SUPPORTED_DERIVATIONS), default=None,
              help="Key derivation (defaults to the configured KEY_DERIVATION)")
def check_key(secret: str, derivation: str):
    """Validate the key and run an encrypt/decrypt round trip."""
    secret = secret or settings.SECRET_ENCRYPTION_KEY
    derivation = derivation or settings.KEY_DERIVATION
    try:
        codec = build_secret_codec(secret, derivation)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if codec.decrypt(codec.encrypt(_PROBE)) != _PROBE:
        click.echo("Error: round trip mismatch", err=True)
        raise SystemExit(1)
    click.echo(f"✓ Encryption key OK (derivation={derivation})")


if __name__ == "__main__":
    cli()
