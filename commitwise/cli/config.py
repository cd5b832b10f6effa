"""CLI commands for global configuration management."""

import typer

import commitwise.config as _config
from commitwise import global_config
from commitwise.config import API_KEY_ENV_VARS, MODEL_CANDIDATES, PROVIDER_PRIORITY, LLMProvider
from commitwise.cli.utils import mask_api_key
from commitwise.llm.credentials import get_api_key

VALID_PROVIDERS = ", ".join(p.value for p in PROVIDER_PRIORITY)

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitwise configuration in ~/.commitwise/",
    add_completion=False,
)


def _parse_provider(provider: str) -> LLMProvider:
    try:
        return LLMProvider(provider.lower())
    except ValueError:
        typer.echo(f"Invalid provider: {provider}", err=True)
        typer.echo(f"Valid providers: {VALID_PROVIDERS}")
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current global configuration and which API keys are available."""
    try:
        config = global_config.load_global_config()

        typer.echo("Current commitwise configuration (~/.commitwise/config.yaml):")
        typer.echo()
        typer.echo(f"  Provider: {config.get('provider', 'not set (first available key wins)')}")
        typer.echo(f"  Model: {config.get('model', 'not set (provider default)')}")
        typer.echo(f"  Max Tokens: {config.get('max_tokens', _config.DEFAULT_MAX_TOKENS)}")
        typer.echo(f"  Temperature: {config.get('temperature', _config.DEFAULT_TEMPERATURE)}")

        diff_section = config.get("diff") or {}
        if diff_section:
            typer.echo()
            typer.echo("  Diff Limits:")
            for key, value in diff_section.items():
                typer.echo(f"    {key}: {value}")

        typer.echo()
        typer.echo("  API Keys:")
        for provider in PROVIDER_PRIORITY:
            env_var = API_KEY_ENV_VARS[provider]
            api_key = get_api_key(provider)
            shown = mask_api_key(api_key) if api_key else "not set"
            typer.echo(f"    {env_var}: {shown}")

    except global_config.GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(..., help=f"Provider name ({VALID_PROVIDERS})"),
) -> None:
    """Set or update an API key for a provider."""
    llm_provider = _parse_provider(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    typer.echo(f"Setting API key for {llm_provider.value}")
    api_key = typer.prompt(f"Enter your {llm_provider.value} API key", hide_input=True)

    try:
        global_config.save_credential(env_var, api_key.strip())
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ API key saved for {llm_provider.value}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help=f"Provider name ({VALID_PROVIDERS})"),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (optional, defaults to the provider's first candidate)",
    ),
) -> None:
    """Set the preferred LLM provider and model."""
    llm_provider = _parse_provider(provider)

    if model and model not in MODEL_CANDIDATES[llm_provider]:
        typer.echo(f"Warning: {model} is not in the list of known models for {llm_provider.value}")

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Provider set to: {llm_provider.value}")
    typer.echo(f"✓ Model set to: {model or MODEL_CANDIDATES[llm_provider][0]}")


@config_app.command("list-providers")
def config_list_providers() -> None:
    """List supported LLM providers in lookup order."""
    typer.echo("Available LLM providers (checked in this order):")
    typer.echo()
    for provider in PROVIDER_PRIORITY:
        typer.echo(f"  • {provider.value} ({API_KEY_ENV_VARS[provider]})")
    typer.echo()
    typer.echo("Use 'commitwise config list-models <provider>' to see candidate models.")


@config_app.command("list-models")
def config_list_models(
    provider: str = typer.Argument(None, help="Provider name (optional, shows all if not provided)"),
) -> None:
    """List candidate models, in fallback order, for a provider (or all providers)."""
    providers = [_parse_provider(provider)] if provider else PROVIDER_PRIORITY
    for llm_provider in providers:
        typer.echo(f"{llm_provider.value}:")
        for model in MODEL_CANDIDATES[llm_provider]:
            typer.echo(f"  • {model}")
        typer.echo()
