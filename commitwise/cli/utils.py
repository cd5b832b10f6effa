"""Shared helpers for the CLI commands."""

from typing import Optional

import typer

from commitwise.formatters import validate_commit_message
from commitwise.models import SuggestionResult

CUSTOM_CHOICE = "c"
QUIT_CHOICE = "q"


def mask_api_key(api_key: str) -> str:
    """Mask an API key for display."""
    return api_key[:8] + "..." + api_key[-4:] if len(api_key) > 12 else "***"


def display_result(result: SuggestionResult) -> None:
    """Print change stats and the numbered suggestions."""
    stats = result.stats
    typer.echo(
        f"{stats.files} file(s) changed, +{stats.additions} -{stats.deletions}",
        err=True,
    )
    if result.provider:
        typer.echo(f"Suggestions from {result.provider} ({result.model})", err=True)
    else:
        typer.echo("Suggestions from rule-based analysis", err=True)

    typer.echo("")
    for i, suggestion in enumerate(result.suggestions, 1):
        typer.echo(f"  {i}. {suggestion.message}  [{suggestion.source.value}]")
        if suggestion.explanation:
            typer.echo(f"     {suggestion.explanation}")
    typer.echo("")


def choose_message(result: SuggestionResult) -> Optional[str]:
    """Ask the user to pick a suggestion or type a custom message.

    Returns:
        The chosen message, or None if the user quit.

    Raises:
        ValidationError: If a custom message is empty.
    """
    count = len(result.suggestions)
    while True:
        choice = typer.prompt(
            f"Select a message (1-{count}), '{CUSTOM_CHOICE}' for custom, "
            f"'{QUIT_CHOICE}' to quit",
            default="1",
        ).strip().lower()

        if choice == QUIT_CHOICE:
            return None
        if choice == CUSTOM_CHOICE:
            custom = typer.prompt("Commit message", default="", show_default=False)
            return validate_commit_message(custom)
        if choice.isdigit() and 1 <= int(choice) <= count:
            return result.suggestions[int(choice) - 1].message

        typer.echo(f"Invalid choice: {choice}", err=True)
