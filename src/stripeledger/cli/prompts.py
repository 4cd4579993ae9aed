"""Interactive selection prompts."""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

import click


@dataclass(frozen=True)
class Choice:
    """One entry of a selection menu."""

    title: str
    value: Any
    description: Optional[str] = None


def cancel(ctx: click.Context) -> None:
    """Leave after the operator interrupted a prompt.

    Cancelling is a normal way out, so the exit status is 0.
    """
    click.echo("\nBye!")
    ctx.exit(0)


def prompt_choice(ctx: click.Context, message: str, choices: Sequence[Choice]) -> Any:
    """Show a numbered menu and return the value of the selected entry.

    Ctrl-C or end of input at the prompt cancels the whole run.
    """
    if not choices:
        raise ValueError(f"No choices available for: {message}")

    click.echo(message)
    for number, choice in enumerate(choices, start=1):
        line = f"  {number}) {choice.title}"
        if choice.description:
            line = f"{line} - {choice.description}"
        click.echo(line)

    try:
        selected = click.prompt("Select", type=click.IntRange(1, len(choices)), default=1)
    except click.Abort:
        cancel(ctx)
    click.echo()
    return choices[selected - 1].value
