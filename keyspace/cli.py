"""
Keyspace CLI
=============

Click-based command-line interface for the Keyspace guessability
estimator.

Usage::

    python -m keyspace estimate "Tr0ub4dour&3"
    python -m keyspace estimate "alice1987" -u alice -u 1987
    python -m keyspace -o json estimate "correcthorsebatterystaple"
    python -m keyspace -c keyspace.toml estimate "qwerty123"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
import sys
from typing import Optional

import click

from keyspace import __version__
from keyspace.core.engine import KeyspaceEngine
from keyspace.output.console import KeyspaceConsoleOutput
from shared.config import KeyspaceConfig
from shared.console import KeyspaceConsole


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Keyspace configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (overrides the configuration).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the title line.",
)
@click.version_option(__version__, prog_name="keyspace")
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], output: Optional[str], quiet: bool) -> None:
    """Keyspace -- estimate how many guesses a password would take."""
    ctx.ensure_object(dict)
    try:
        keyspace_config = KeyspaceConfig.load(config) if config else KeyspaceConfig()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    ctx.obj["config"] = keyspace_config
    ctx.obj["output_format"] = output or keyspace_config.global_settings.output_format
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = KeyspaceConsole()


@cli.command()
@click.argument("password")
@click.option(
    "--user-input", "-u",
    "user_inputs",
    multiple=True,
    help="Word tied to the user (name, e-mail, birth year). Repeatable.",
)
@click.pass_context
def estimate(ctx: click.Context, password: str, user_inputs: tuple[str, ...]) -> None:
    """Estimate guesses, crack times and score for PASSWORD."""
    console: KeyspaceConsole = ctx.obj["console"]
    try:
        engine = KeyspaceEngine(ctx.obj["config"])
        result = engine.estimate(password, user_inputs=list(user_inputs))
    except (FileNotFoundError, ValueError, TypeError) as exc:
        console.error(str(exc))
        sys.exit(1)

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False))
        return

    if not ctx.obj["quiet"]:
        console.title(f"Keyspace {__version__}")
    KeyspaceConsoleOutput(console).display_estimate(result)


def main() -> None:
    """Entry point for ``keyspace`` and ``python -m keyspace``."""
    cli(obj={})


if __name__ == "__main__":
    main()
