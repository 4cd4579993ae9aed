"""Interactive action menu, the default when no command is given."""

import click

from stripeledger.cli.account_resolution import resolve_account_or_exit
from stripeledger.cli.commands.documents import ACTION_CHOICES, run_action
from stripeledger.cli.period_selection import resolve_period_or_exit
from stripeledger.cli.prompts import prompt_choice


def run_interactive(ctx: click.Context) -> None:
    """Prompt for account, period and action, then run the action."""
    account = resolve_account_or_exit(ctx, None)
    period = resolve_period_or_exit(ctx, None)
    action = prompt_choice(ctx, "What would you like to do?", ACTION_CHOICES)
    run_action(ctx, action, account, period)
