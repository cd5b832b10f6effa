"""CLI entry point for commitwise.

This module provides the main CLI application that combines the default
suggestion command with the configuration subcommands.
"""

import typer

from commitwise.cli.config import config_app
from commitwise.cli.main import main_command

# Main application
app = typer.Typer(
    name="commitwise",
    help="commitwise: AI-assisted conventional commit suggestions",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]


if __name__ == "__main__":
    app()
