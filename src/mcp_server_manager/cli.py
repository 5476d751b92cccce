"""CLI interface for mcp-server-manager."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from mcp_server_manager.models import Language, OperationResult, PythonLauncher
from mcp_server_manager.operations import build_server, create_server, install_server
from mcp_server_manager.user_config import (
    KNOWN_KEYS,
    get_config_path,
    load_user_config,
    save_user_config,
)

app = typer.Typer(
    name="mcp-server-manager",
    help="Scaffold, build and register MCP servers written in TypeScript, Python or Java.",
    no_args_is_help=True,
)

config_app = typer.Typer(
    name="config",
    help="Manage user-level default preferences.",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

console = Console()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _set_verbose(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def _report(result: OperationResult, title: str) -> None:
    """Print an operation result; exit 1 on failure."""
    if not result.success:
        kind = result.error.kind if result.error else "Error"
        rprint(f"[red]{kind}: {escape(result.message)}[/red]")
        raise typer.Exit(1)

    lines = [f"[green]✓ {escape(result.message)}[/green]"]
    if result.path:
        lines.append(f"\nLocation: [cyan]{result.path}[/cyan]")
    if result.config_path:
        lines.append(f"Config: [cyan]{result.config_path}[/cyan]")
    rprint(Panel.fit("\n".join(lines), title=title))


@app.command("create")
def create_cmd(
    name: Annotated[str, typer.Argument(help="Name of the MCP server to create")],
    language: Annotated[
        Language, typer.Option("--language", "-l", help="Programming language to use")
    ] = Language.TYPESCRIPT,
    directory: Annotated[
        Path, typer.Option("--output", "-o", help="Directory where the server should be created")
    ] = Path("."),
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
) -> None:
    """Create a new MCP server project with proper scaffolding."""
    _set_verbose(verbose)
    rprint(f"[blue]Creating {language.value} server '{name}'...[/blue]")
    _report(create_server(name, language, directory), "Created")


@app.command("build")
def build_cmd(
    directory: Annotated[
        Path, typer.Argument(help="Directory of the MCP server to build")
    ] = Path("."),
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
) -> None:
    """Build an existing MCP server from source code."""
    _set_verbose(verbose)
    _report(build_server(directory), "Built")


@app.command("install")
def install_cmd(
    directory: Annotated[
        Path, typer.Argument(help="Directory of the built MCP server")
    ] = Path("."),
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to the desktop client config file"),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Registry name (defaults to the directory name)"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose output")] = False,
) -> None:
    """Register a built MCP server in the desktop client config."""
    _set_verbose(verbose)
    _report(install_server(directory, config_path=config_path, name=name), "Installed")


@app.command("serve")
def serve_cmd() -> None:
    """Run mcp-server-manager itself as an MCP server over stdio."""
    from mcp_server_manager.mcp_server import main as mcp_main

    mcp_main()


@config_app.command("show")
def config_show(
    as_json: Annotated[bool, typer.Option("--json", help="Print raw JSON")] = False,
) -> None:
    """Show the current user configuration."""
    values = load_user_config()

    if as_json:
        typer.echo(json.dumps({"config_path": str(get_config_path()), "values": values}))
        return

    if not values:
        rprint(f"[yellow]No user configuration at {get_config_path()}[/yellow]")
        return

    table = Table(title=f"User config ({get_config_path()})")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for key, value in values.items():
        table.add_row(key, str(value))
    console.print(table)


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help=f"Config key ({', '.join(KNOWN_KEYS)})")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Set a single user configuration value."""
    parsed: str | int
    match key:
        case "config_path":
            parsed = value
        case "python_launcher":
            try:
                parsed = PythonLauncher(value).value
            except ValueError:
                valid = ", ".join(p.value for p in PythonLauncher)
                rprint(f"[red]Error: invalid python_launcher '{value}'. Valid: {valid}[/red]")
                raise typer.Exit(1) from None
        case "build_timeout":
            if not value.isdigit() or int(value) <= 0:
                rprint("[red]Error: build_timeout must be a positive integer[/red]")
                raise typer.Exit(1)
            parsed = int(value)
        case _:
            rprint(f"[red]Error: unknown key '{key}'. Valid: {', '.join(KNOWN_KEYS)}[/red]")
            raise typer.Exit(1)

    current = load_user_config()
    current[key] = parsed
    path = save_user_config(current)
    rprint(f"[green]Set {key} = {parsed} in {path}[/green]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
