"""Main entry point for the convert-headers CLI."""

from pathlib import Path

import typer

from convert_headers._version import __version__
from convert_headers.cli.options.core_options import config_option

from .commands.config import app as config_app
from .commands.convert import convert


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"convert-headers {__version__}")
        raise typer.Exit()


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=True,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)


@app.callback()
def app_main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Path | None = config_option(),
) -> None:
    """Turn copied HTTP request headers into httpRequest.AddHeader statements."""
    # Store config path for commands to use
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


app.add_typer(config_app)

app.command(name="convert")(convert)


def main() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
