"""CLI helpers for account selection and ledger connection."""

from __future__ import annotations

import click

from stripeledger.cli.error_handling import handle_domain_error
from stripeledger.cli.prompts import Choice, prompt_choice
from stripeledger.domain.credentials import Credentials
from stripeledger.domain.errors import DomainError
from stripeledger.ledger.base import LedgerClient


def require_credentials(ctx: click.Context) -> Credentials:
    """Return discovered credentials, or exit with an error when there are none."""
    credentials: Credentials = ctx.obj["credentials"]
    try:
        credentials.require_any()
    except DomainError as exc:
        handle_domain_error(ctx, exc)
    return credentials


def resolve_account_or_exit(ctx: click.Context, account: str | None) -> str:
    """Resolve the account name from an option or by prompting.

    This keeps error messaging and exit behavior consistent across commands.
    """
    credentials = require_credentials(ctx)

    if account is None:
        return prompt_choice(
            ctx,
            "Please select which Stripe account to use:",
            [Choice(title=name, value=name) for name in credentials.accounts()],
        )

    try:
        credentials.get_account(account)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
    return account.strip().lower()


def connect_or_exit(ctx: click.Context, account: str) -> LedgerClient:
    """Create the ledger client for an account, or exit with an error."""
    factory = ctx.obj["ledger_factory"]
    config = ctx.obj["config"]
    try:
        return factory(ctx.obj["credentials"], account, debug=config.debug)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
