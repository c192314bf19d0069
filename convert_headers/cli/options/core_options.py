"""Core CLI options for configuration and global settings."""

from typing import Any

import typer


def config_option() -> Any:
    """Configuration file parameter."""
    return typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        rich_help_panel="Configuration",
    )


def log_level_option() -> Any:
    return typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        rich_help_panel="Logging",
    )


def json_logs_option() -> Any:
    return typer.Option(
        False,
        "--json-logs",
        help="Write log records to stderr as JSON lines",
        rich_help_panel="Logging",
    )
