"""Main CLI entry point."""

import os

import click

from stripeledger.config import load_config
from stripeledger.domain.credentials import discover_credentials
from stripeledger.ledger.factories import create_stripe_ledger
from stripeledger.utils.logger import configure_logging

# Import and register all commands at module level
from stripeledger.cli.commands import (
    accounts,
    documents,
    report,
)
from stripeledger.cli.commands.interactive import run_interactive


@click.group(invoke_without_command=True)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    help="Directory for generated documents (overrides STRIPE_LEDGER_OUTPUT_DIR environment variable)",
    envvar="STRIPE_LEDGER_OUTPUT_DIR",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Verbose logging, including outbound Stripe requests (or set STRIPE_LEDGER_DEBUG)",
    envvar="STRIPE_LEDGER_DEBUG",
)
@click.pass_context
def cli(ctx, output_dir: str | None, debug: bool):
    """Stripe ledger - reports, receipts and invoices for Stripe accounts.

    Accounts are discovered from STRIPE_TOKEN_[name] environment variables.
    Values may be secret keys or 1Password references (op://...).

    Run without a command to pick the account, month and action interactively.
    """
    ctx.ensure_object(dict)

    # Credentials and config are resolved once from an environment snapshot
    # and passed down; tests inject their own through ctx.obj
    environ = ctx.obj.setdefault("environ", dict(os.environ))
    ctx.obj.setdefault("credentials", discover_credentials(environ))
    config = ctx.obj.setdefault("config", load_config(environ, output_dir=output_dir, debug=debug))
    ctx.obj.setdefault("ledger_factory", create_stripe_ledger)

    configure_logging(config.debug)

    if ctx.invoked_subcommand is None:
        run_interactive(ctx)


# Register all commands
accounts.register_commands(cli)
documents.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
