"""CLI helpers for reporting period resolution."""

import click

from stripeledger.cli.error_handling import handle_domain_error
from stripeledger.cli.prompts import Choice, prompt_choice
from stripeledger.domain.entities import Period
from stripeledger.utils.periods import month_choices, parse_month


def resolve_period_or_exit(ctx: click.Context, period: str | None) -> Period:
    """Resolve the period from a ``--period`` value or by prompting."""
    if period is None:
        return prompt_choice(
            ctx,
            "Select the period to create query for?",
            [Choice(title=choice.title, value=choice.period) for choice in month_choices()],
        )

    try:
        return parse_month(period)
    except ValueError as e:
        handle_domain_error(ctx, ValueError(f"Invalid period: {e}"))
