"""Ledger report command."""

import click

from stripeledger.cli.account_resolution import connect_or_exit, resolve_account_or_exit
from stripeledger.cli.error_handling import handle_domain_error
from stripeledger.cli.period_selection import resolve_period_or_exit
from stripeledger.cli.progress import transaction_progress
from stripeledger.cli.render import render_report
from stripeledger.domain.errors import DomainError
from stripeledger.domain.report import ReportService
from stripeledger.utils.periods import format_period


@click.command("report")
@click.option("--account", help="Account name (the NAME in STRIPE_TOKEN_NAME)")
@click.option("--period", help="Month to report on (e.g. '2024-03', 'last month')")
@click.pass_context
def report(ctx, account: str | None, period: str | None):
    """Classify the period's balance transactions and print totals.

    Examples:
        stripe-ledger report
        stripe-ledger report --account acme --period 2024-03
    """
    account_name = resolve_account_or_exit(ctx, account)
    selected = resolve_period_or_exit(ctx, period)

    click.echo(f"Okay we'll fetch from {account_name} for {format_period(selected)}\n")
    ledger = connect_or_exit(ctx, account_name)

    try:
        result = ReportService(ledger).build_report(selected, progress=transaction_progress)
    except DomainError as e:
        handle_domain_error(ctx, e)

    for line in render_report(result, account=account_name, period=selected):
        click.echo(line)
    click.echo("\nok")


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
