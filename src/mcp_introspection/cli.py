import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mcp_introspection.json_schema import CONFIG_SCHEMAS, schema_for
from mcp_introspection.logging import configure_logging
from mcp_introspection.models.introspection_config import TOOL_NAMES, resolve_execute_hints
from mcp_introspection.utils import config_dir_for, load_config

DEFAULT_CONFIG = "mcp_introspection_config.json"

app = typer.Typer()
console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, help="Logging level (defaults to $MCP_INTROSPECTION_LOG_LEVEL or WARNING)"
    ),
) -> None:
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command()
def status(config: Path = typer.Option(Path(DEFAULT_CONFIG), help="Config file")) -> None:
    """
    Show which introspection tools are enabled
    """
    introspection = load_config(config).introspection
    enabled = set(introspection.enabled_tools())
    table = Table("Tool", "Enabled")

    for name in TOOL_NAMES:
        table.add_row(name, "[green]yes[/green]" if name in enabled else "no")

    console.print(table)

    if introspection.any_enabled():
        console.print("Introspection tools will be registered")
    else:
        console.print("[yellow]No introspection tools enabled; group not registered[/yellow]")


@app.command()
def hints(config: Path = typer.Option(Path(DEFAULT_CONFIG), help="Config file")) -> None:
    """
    Print the resolved hints for the execute tool
    """
    introspection = load_config(config).introspection

    if not introspection.execute.enabled:
        console.print("[yellow]Execute tool is disabled[/yellow]")
        return

    try:
        text = resolve_execute_hints(introspection, config_dir_for(config))
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Could not read hints file: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if text is None:
        console.print("[yellow]No hints configured[/yellow]")
        return

    console.print(text, markup=False, highlight=False)


@app.command()
def schema(
    name: str = typer.Argument("config", help="Config type to describe"),
    indent: int = typer.Option(2, help="JSON indentation"),
) -> None:
    """
    Print the JSON schema (draft-07) for a config type
    """
    if name not in CONFIG_SCHEMAS:
        console.print(
            f"[red]Unknown config type '{name}'. "
            f"Available: {', '.join(sorted(CONFIG_SCHEMAS))}[/red]"
        )
        raise typer.Exit(code=1)

    typer.echo(json.dumps(schema_for(name), indent=indent))


if __name__ == "__main__":
    app()
