"""
Command-line interface for the Secrets Manager credentials provider.
"""

import click
import yaml
from typing import Optional

from . import __version__
from .client import ClientConfiguration, check_connection
from .config import PluginConfiguration, load_configuration
from .errors import SecretsManagerCredentialsError
from .loggingx import setup_logging
from .provider import CredentialsProvider


@click.group()
@click.version_option(version=__version__)
@click.option('-c', '--config', 'config_file', type=click.Path(exists=True),
              envvar='SECRETSMANAGER_CONFIG', help='Plugin configuration YAML file')
@click.option('--log-level', default='WARNING', help='Logging level')
@click.option('-v', '--verbose', is_flag=True, help='Human readable log output')
@click.pass_context
def cli(ctx, config_file: Optional[str], log_level: str, verbose: bool):
    """Jenkins credentials from AWS Secrets Manager."""
    setup_logging(level=log_level, verbose=verbose)

    try:
        if config_file:
            PluginConfiguration.set_instance(load_configuration(config_file))
    except SecretsManagerCredentialsError as e:
        click.echo(f"❌ Invalid configuration: {e}", err=True)
        raise click.Abort()

    ctx.ensure_object(dict)
    ctx.obj['provider'] = CredentialsProvider()


@cli.command(name='list')
@click.pass_context
def list_credentials(ctx):
    """List credentials (ids, types and descriptions only)."""
    provider = ctx.obj['provider']

    try:
        credentials = provider.get_credentials()
    except SecretsManagerCredentialsError as e:
        click.echo(f"❌ Failed to list credentials: {e}", err=True)
        raise click.Abort()
    except Exception as e:
        click.echo(f"❌ Unexpected error: {e}", err=True)
        raise click.Abort()

    if not credentials:
        click.echo("No credentials found")
        return

    for credential in sorted(credentials, key=lambda c: c.id):
        line = f"  {credential.id} [{credential.credential_type}]"
        if credential.description:
            line += f": {credential.description}"
        click.echo(line)


@cli.command()
@click.argument('credential_id')
@click.pass_context
def show(ctx, credential_id: str):
    """Show one credential's attributes, with secret values masked."""
    provider = ctx.obj['provider']

    try:
        credential = provider.get_credential(credential_id)
    except Exception as e:
        click.echo(f"❌ Failed to look up credential: {e}", err=True)
        raise click.Abort()

    if credential is None:
        click.echo(f"❌ Credential not found: {credential_id}", err=True)
        raise click.Abort()

    click.echo(yaml.safe_dump(credential.to_dict(mask=True), sort_keys=False).rstrip())


@cli.command()
def check():
    """Test the connection to AWS Secrets Manager."""
    config = PluginConfiguration.get_instance()
    result = check_connection(config.client or ClientConfiguration())

    if result.is_ok:
        click.echo(f"✅ {result.message}")
    else:
        click.echo(f"❌ {result.message}", err=True)
        raise click.Abort()


if __name__ == '__main__':
    cli()
