"""Config command for convert-headers."""

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from convert_headers.cli.helpers import dim, error, get_config_path_from_context
from convert_headers.config.settings import (
    Settings,
    find_toml_config_file,
    get_settings,
)
from convert_headers.core.errors import ConfigurationError
from convert_headers.core.logging import setup_logging


app = typer.Typer(
    name="config",
    help="Configuration management commands",
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _settings_table(title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="green")
    table.add_column("Description", style="dim")
    return table


def _describe(settings: Settings, section: str) -> Table:
    model = getattr(settings, section)
    table = _settings_table(f"{section.capitalize()} Configuration")
    for name, info in type(model).model_fields.items():
        value = getattr(model, name)
        if isinstance(value, list):
            display = ", ".join(value) if value else dim("None")
        else:
            display = str(value)
        table.add_row(name, display, info.description or "")
    return table


@app.command(name="show")
def config_show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    # Keep log records on stderr, away from the tables.
    setup_logging()
    console = Console()
    config_path = get_config_path_from_context(ctx)
    try:
        settings = get_settings(config_path=config_path)
    except ConfigurationError as e:
        console.print(error(f"Error loading configuration: {escape(str(e))}"))
        raise typer.Exit(1) from e

    source = config_path or find_toml_config_file()
    console.print(f"Config file: {source if source else dim('none (defaults)')}")
    console.print(_describe(settings, "translator"))
    console.print(_describe(settings, "logging"))
