"""CLI helper utilities for convert-headers."""

from pathlib import Path

import typer


def get_config_path_from_context(ctx: typer.Context) -> Path | None:
    """Config path stored by the top-level ``--config`` option, if any."""
    config_path = (ctx.obj or {}).get("config_path")
    return None if config_path is None else Path(config_path)


def bold(text: str) -> str:
    return f"[bold]{text}[/bold]"


def dim(text: str) -> str:
    return f"[dim]{text}[/dim]"


def error(text: str) -> str:
    return f"[red]{text}[/red]"
