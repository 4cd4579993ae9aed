"""Receipt and invoice commands."""

import click

from stripeledger.cli.account_resolution import connect_or_exit, resolve_account_or_exit
from stripeledger.cli.error_handling import handle_domain_error
from stripeledger.cli.period_selection import resolve_period_or_exit
from stripeledger.cli.progress import transaction_progress
from stripeledger.cli.prompts import Choice
from stripeledger.domain.documents import DocumentService
from stripeledger.domain.entities import Period
from stripeledger.domain.errors import DomainError
from stripeledger.ledger.base import LedgerClient
from stripeledger.utils.periods import format_period


def _report_written(paths, noun: str) -> None:
    if not paths:
        click.echo(f"No {noun}s to save.")
        return
    click.echo(f"\nSaved {len(paths)} {noun}{'s' if len(paths) != 1 else ''}:")
    for path in paths:
        click.echo(f"  {path}")


def create_and_save_receipts(ctx, ledger: LedgerClient, account: str, period: Period) -> None:
    """Create a PDF receipt for each charge of the period."""
    service = DocumentService(ledger, ctx.obj["config"])
    try:
        paths = service.create_and_save_receipts(account, period, progress=transaction_progress)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _report_written(paths, "receipt")


def download_invoices(ctx, ledger: LedgerClient, account: str, period: Period) -> None:
    """Download the invoices Stripe generated during the period."""
    service = DocumentService(ledger, ctx.obj["config"])
    try:
        paths = service.download_invoices(account, period)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _report_written(paths, "invoice")


def save_payout_receipts(ctx, ledger: LedgerClient, account: str, period: Period) -> None:
    """Create a PDF receipt for each payout and the transactions it settled."""
    service = DocumentService(ledger, ctx.obj["config"])
    try:
        paths = service.save_payout_receipts(account, period, progress=transaction_progress)
    except DomainError as e:
        handle_domain_error(ctx, e)
    _report_written(paths, "payout receipt")


ACTIONS = {
    "create_and_save_receipts": create_and_save_receipts,
    "download_invoices": download_invoices,
    "save_payout_receipts": save_payout_receipts,
}

ACTION_CHOICES = [
    Choice(
        title="Create & Save Receipts",
        value="create_and_save_receipts",
        description="Creates a PDF receipt for each charge on the Stripe account",
    ),
    Choice(
        title="Download Invoices",
        value="download_invoices",
        description="Downloads invoices generated by Stripe",
    ),
    Choice(
        title="Save Payout Receipts",
        value="save_payout_receipts",
        description=(
            "Retrieves each payout for the given period and generates a PDF receipt "
            "for the payout and the transactions involved"
        ),
    ),
]


def run_action(ctx, action: str, account_name: str, selected: Period) -> None:
    """Connect to the account's ledger and run a document action."""
    handler = ACTIONS.get(action)
    if handler is None:
        raise click.UsageError(f"Unhandled command: {action}")

    click.echo(f"Okay processing {account_name} for {format_period(selected)}\n")
    ledger = connect_or_exit(ctx, account_name)
    handler(ctx, ledger, account_name, selected)
    click.echo("\nok")


def _document_command(name: str, action: str, help_text: str) -> click.Command:
    @click.command(name, help=help_text)
    @click.option("--account", help="Account name (the NAME in STRIPE_TOKEN_NAME)")
    @click.option("--period", help="Month to process (e.g. '2024-03', 'last month')")
    @click.pass_context
    def command(ctx, account: str | None, period: str | None):
        account_name = resolve_account_or_exit(ctx, account)
        selected = resolve_period_or_exit(ctx, period)
        run_action(ctx, action, account_name, selected)

    return command


receipts = _document_command(
    "receipts", "create_and_save_receipts", "Create & save a PDF receipt for each charge."
)
invoices = _document_command(
    "invoices", "download_invoices", "Download invoices generated by Stripe."
)
payout_receipts = _document_command(
    "payout-receipts", "save_payout_receipts", "Save a PDF receipt for each payout."
)


def register_commands(cli):
    """Register document commands with main CLI."""
    cli.add_command(receipts)
    cli.add_command(invoices)
    cli.add_command(payout_receipts)
