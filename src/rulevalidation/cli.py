"""CLI interface for rulevalidation using Typer framework."""

import json as jsonlib
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rulevalidation import __description__, __version__
from rulevalidation.config import LogLevel, OutputFormat, load_config
from rulevalidation.exceptions import RuleSetLoadError
from rulevalidation.loader import load_rule_set
from rulevalidation.result_set import ResultSet
from rulevalidation.rule_set import RuleSet

app = typer.Typer(
    name="rulevalidation",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

# Exit code when the rule set, data file or config cannot be used
USAGE_ERROR = 2


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"rulevalidation version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """rulevalidation - validate data maps against named rule sets."""


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else _LOG_LEVELS.get(level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _has_custom_missing_values(rule_set: RuleSet) -> bool:
    overridden = (
        type(rule_set).create_missing_value_result_for_key
        is not RuleSet.create_missing_value_result_for_key
    )
    return overridden or rule_set.missing_value_result_factory is not None


def _load_data(data_path: Path) -> dict[str, Any]:
    with open(data_path, encoding="utf-8") as f:
        data = jsonlib.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{data_path} must contain a JSON object, got {type(data).__name__}")
    return data


def _format_value(value: Any) -> str:
    if value is None:
        return "[dim]null[/dim]"
    return escape(jsonlib.dumps(value, default=str))


def _print_table(result_set: ResultSet) -> None:
    status_color = "green" if result_set.is_valid() else "red"
    status = "VALID" if result_set.is_valid() else "INVALID"
    console.print(f"[{status_color}]Validation Status: {status}[/{status_color}]")
    console.print(f"Exit Code: {result_set.exit_code}")

    if not len(result_set):
        console.print("\n[dim]No rules registered[/dim]")
        return

    table = Table()
    table.add_column("Key", style="cyan")
    table.add_column("Status", style="white")
    table.add_column("Value", style="white")
    table.add_column("Message", style="dim")

    for result in result_set:
        marker = "[green]OK[/green]" if result.valid else "[red]FAIL[/red]"
        table.add_row(
            escape(result.key),
            marker,
            _format_value(result.value),
            escape(result.message or ""),
        )

    console.print(table)


def _print_markdown(result_set: ResultSet) -> None:
    typer.echo("# Validation Report")
    typer.echo(f"**Status:** {'valid' if result_set.is_valid() else 'invalid'}")
    typer.echo(f"**Exit Code:** {result_set.exit_code}")
    typer.echo("")

    messages = result_set.get_messages()
    if messages:
        typer.echo("## Messages")
        for key, message in messages.items():
            typer.echo(f"- **{key}**: {message}")


@app.command()
def check(
    ruleset: Annotated[
        str,
        typer.Argument(help="Rule set reference as 'package.module:attribute'")
    ],
    data: Annotated[
        Path,
        typer.Argument(help="JSON file containing the object to validate")
    ],
    format: Annotated[
        Optional[OutputFormat],
        typer.Option("--format", "-f", help="Output format: table, json, markdown (default: from config)")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .rulevalidation.json)")
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging")
    ] = False,
) -> None:
    """Validate a JSON data file against a rule set."""
    try:
        rv_config = load_config(config)
        _configure_logging(rv_config.logging.level, verbose)

        rule_set = load_rule_set(ruleset)
        if not _has_custom_missing_values(rule_set):
            # Copy so the loaded (possibly shared) rule set is left untouched
            rule_set = RuleSet(
                *rule_set,
                missing_value_result_factory=rv_config.missing_value_result_factory(),
            )

        payload = _load_data(data)
    except (RuleSetLoadError, ValueError, OSError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(USAGE_ERROR)

    result_set = rule_set.validate(payload)

    output_format = OutputFormat(format or rv_config.output.format)
    if output_format == OutputFormat.JSON:
        typer.echo(jsonlib.dumps(result_set.to_dict(), indent=2, default=str))
    elif output_format == OutputFormat.MARKDOWN:
        _print_markdown(result_set)
    else:
        _print_table(result_set)

    raise typer.Exit(result_set.exit_code)


@app.command()
def rules(
    ruleset: Annotated[
        str,
        typer.Argument(help="Rule set reference as 'package.module:attribute'")
    ],
) -> None:
    """List the rules registered in a rule set."""
    try:
        rule_set = load_rule_set(ruleset)
    except RuleSetLoadError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(USAGE_ERROR)

    if not len(rule_set):
        console.print("[dim]No rules registered[/dim]")
        return

    table = Table(title=f"Rules ({len(rule_set)})")
    table.add_column("Key", style="cyan")
    table.add_column("Required", style="white")
    table.add_column("Default", style="white")
    table.add_column("Type", style="dim")

    for rule in rule_set:
        table.add_row(
            escape(rule.key),
            "yes" if rule.required else "no",
            _format_value(rule.default),
            type(rule).__name__,
        )

    console.print(table)


if __name__ == "__main__":
    app()
