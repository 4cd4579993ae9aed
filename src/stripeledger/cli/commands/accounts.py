"""Account listing command."""

import click

from stripeledger.cli.account_resolution import require_credentials
from stripeledger.domain.credentials import is_secret_reference


@click.command("accounts")
@click.pass_context
def list_accounts(ctx):
    """List accounts discovered from STRIPE_TOKEN_* variables."""
    credentials = require_credentials(ctx)

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for name in credentials.accounts():
        source = "1Password reference" if is_secret_reference(credentials[name]) else "secret key"
        click.echo(f"{name:30s} | {source}")


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
