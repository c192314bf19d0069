"""Convert command: header text in, AddHeader statements out."""

from pathlib import Path

import typer

from convert_headers.cli.helpers import get_config_path_from_context
from convert_headers.cli.options.core_options import (
    json_logs_option,
    log_level_option,
)
from convert_headers.cli.options.translator_options import (
    crlf_option,
    exclude_option,
    header_enum_option,
    known_option,
    report_option,
    request_var_option,
)
from convert_headers.config.settings import get_settings
from convert_headers.core.errors import ConfigurationError, InputReadError
from convert_headers.core.logging import get_logger, setup_logging
from convert_headers.core.translator import HeaderLineTranslator, render_block
from convert_headers.utils.input import read_input


logger = get_logger(__name__)


def convert(
    ctx: typer.Context,
    files: list[Path] | None = typer.Argument(
        None,
        help="Files containing header lines. Reads stdin when omitted or given as '-'",
        show_default=False,
    ),
    crlf: bool | None = crlf_option(),
    exclude: list[str] | None = exclude_option(),
    known: list[str] | None = known_option(),
    request_var: str | None = request_var_option(),
    header_enum: str | None = header_enum_option(),
    report: bool = report_option(),
    log_level: str | None = log_level_option(),
    json_logs: bool = json_logs_option(),
) -> None:
    """
    Convert HTTP header lines into httpRequest.AddHeader statements.

    Every line shaped as [bold]Name: Value[/bold] becomes one statement, in input
    order. Lines that do not contain exactly one colon are skipped, as are
    Cookie, Content-Length and Host.

    Examples:
        pbpaste | convert-headers convert
        convert-headers convert request.txt --crlf
    """
    # Logs go to stderr; configure early so nothing reaches stdout.
    setup_logging(json_logs=json_logs, log_level_name=log_level or "WARNING")

    translator_overrides = {
        "request_variable": request_var,
        "header_enum": header_enum,
        "line_ending": None if crlf is None else ("crlf" if crlf else "lf"),
    }
    try:
        settings = get_settings(
            config_path=get_config_path_from_context(ctx),
            translator=translator_overrides,
            logging={"level": log_level},
        )
    except ConfigurationError as e:
        typer.echo(f"Error loading configuration: {e}", err=True)
        raise typer.Exit(1) from e

    setup_logging(
        json_logs=json_logs,
        log_level_name=settings.logging.level,
        log_format=settings.logging.format,
    )

    translator = HeaderLineTranslator.from_settings(
        settings.translator,
        extra_known=known or (),
        extra_excluded=exclude or (),
    )

    try:
        raw_text = read_input(files)
    except InputReadError as e:
        logger.error("input_read_failed", source=e.source, error=e.message)
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(1) from e

    result = translator.translate_with_report(raw_text)
    logger.debug(
        "headers_translated",
        lines=result.total_lines,
        statements=len(result.statements),
        malformed=result.malformed,
        excluded=result.excluded,
    )
    typer.echo(
        render_block(result.statements, newline=settings.translator.newline),
        nl=False,
    )

    if report:
        typer.echo(
            f"lines={result.total_lines} statements={len(result.statements)} "
            f"malformed={result.malformed} excluded={result.excluded}",
            err=True,
        )
