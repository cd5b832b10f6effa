"""Main CLI command for suggesting and committing a message."""

import typer

from commitwise.config import load_config
from commitwise.engine import SuggestionEngine
from commitwise.formatters import ValidationError
from commitwise.git import (
    GitError,
    GitRepository,
    NoChangesFoundError,
    commit,
    stage_all,
)
from commitwise.global_config import GlobalConfigError
from commitwise.llm import LLMError, NoCredentialConfiguredError
from commitwise.logging_config import configure_logging
from commitwise.cli.utils import choose_message, display_result


def main_command(
    ctx: typer.Context,
    all_changes: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Describe all tracked changes instead of only staged ones (stages them on commit)",
    ),
    no_fallback: bool = typer.Option(
        False,
        "--no-fallback",
        help="Require AI suggestions; fail instead of using rule-based suggestions",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Commit with the first suggestion without prompting",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Show debug logging on stderr",
    ),
) -> None:
    """Suggest conventional commit messages for your changes and commit one."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    configure_logging("DEBUG" if debug else None)

    try:
        load_config()

        repo = GitRepository(staged_only=not all_changes)
        engine = SuggestionEngine(repo, rules_fallback=not no_fallback)
        result = engine.generate_suggestions()

        display_result(result)

        if yes:
            message = result.suggestions[0].message
        else:
            message = choose_message(result)
            if message is None:
                typer.echo("Commit cancelled.", err=True)
                raise typer.Exit(0)

        if all_changes:
            stage_all(cwd=repo.root)

        typer.echo("Committing...", err=True)
        output = commit(message, cwd=repo.root)
        typer.echo("Commit successful!", err=True)
        if output:
            typer.echo(output)

    except NoChangesFoundError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except NoCredentialConfiguredError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)
    except GlobalConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
