"""CLI application for twitter-sessions."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from twitter_sessions.core.config import Config
from twitter_sessions.credentials.models import REQUIRED_FIELDS, CredentialField
from twitter_sessions.credentials.resolver import CredentialResolver
from twitter_sessions.models.runtime import LocalRuntime
from twitter_sessions.sessions.session import SPACES_ENABLE_SETTING, spaces_enabled
from twitter_sessions.utils.logging_setup import configure_logging

app = typer.Typer(
    name="twitter-sessions",
    help="twitter-sessions - Per-agent Twitter session lifecycle tools",
    no_args_is_help=True,
)

console = Console()


def parse_settings(pairs: list[str]) -> dict[str, object]:
    """Parse KEY=VALUE runtime overrides.

    ``true``/``false`` become booleans so the Spaces flag can be exercised
    from the command line.

    Raises:
        typer.BadParameter: If a pair has no ``=``
    """
    settings: dict[str, object] = {}
    for pair in pairs:
        if "=" not in pair:
            raise typer.BadParameter(f"Expected KEY=VALUE, got '{pair}'")
        key, value = pair.split("=", 1)
        lowered = value.lower()
        if lowered in ("true", "false"):
            settings[key.strip()] = lowered == "true"
        else:
            settings[key.strip()] = value
    return settings


def load_config() -> Config:
    """Load and validate configuration from the environment or exit with an error."""
    try:
        config = Config.from_env()
        config.validate()
        return config
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {e}")
        raise typer.Exit(2)


def load_runtime(path: Path, settings: dict[str, object], use_env: bool) -> LocalRuntime:
    """Load a LocalRuntime from a character file or exit with an error."""
    try:
        runtime = LocalRuntime.from_character_file(path, use_environment=use_env)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error:[/red] Could not load character file: {e}")
        raise typer.Exit(2)
    runtime.settings.update(settings)
    return runtime


@app.command("check")
def check_credentials(
    character_file: Path = typer.Argument(..., help="Character JSON file"),
    setting: Optional[List[str]] = typer.Option(
        None,
        "--setting",
        "-s",
        help="Runtime setting override as KEY=VALUE (repeatable)",
    ),
    no_env: bool = typer.Option(False, "--no-env", help="Ignore environment variables"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Resolve a character's Twitter credentials and report whether a session can start."""
    config = load_config()
    configure_logging(config.log_level)

    runtime = load_runtime(character_file, parse_settings(setting or []), use_env=not no_env)
    credentials = CredentialResolver().resolve(runtime)
    space = spaces_enabled(runtime)
    shown = credentials.to_dict(redact=config.redact_sensitive)

    if json_output:
        typer.echo(json.dumps({
            "agent_id": runtime.agent_id,
            "credentials": shown,
            "sufficient": credentials.is_sufficient,
            "missing": [f.value for f in credentials.missing],
            "spaces_enabled": space,
        }, indent=2))
    else:
        table = Table(title=f"Twitter credentials for {runtime.character.name or runtime.agent_id}")
        table.add_column("Setting", style="cyan")
        table.add_column("Required", style="white")
        table.add_column("Value", style="green")

        for f in CredentialField:
            table.add_row(
                f.value,
                "yes" if f in REQUIRED_FIELDS else "no",
                shown.get(f.value, "[red]missing[/red]"),
            )
        console.print(table)

        if credentials.is_sufficient:
            console.print(Panel("Default session can be created", border_style="green"))
        else:
            missing = ", ".join(f.value for f in credentials.missing)
            console.print(Panel(f"Insufficient credentials, missing: {missing}", border_style="red"))
        console.print(f"{SPACES_ENABLE_SETTING}: {'enabled' if space else 'disabled'}")

    if not credentials.is_sufficient:
        raise typer.Exit(1)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from twitter_sessions import __version__
    console.print(f"twitter-sessions v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
