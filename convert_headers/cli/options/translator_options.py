"""CLI options controlling header translation."""

from typing import Any

import typer


def crlf_option() -> Any:
    return typer.Option(
        None,
        "--crlf/--lf",
        help="Terminate generated lines with CRLF instead of LF",
        rich_help_panel="Output",
    )


def exclude_option() -> Any:
    return typer.Option(
        None,
        "--exclude",
        "-x",
        help="Additional header name to drop (exact match, repeatable)",
        rich_help_panel="Header Tables",
    )


def known_option() -> Any:
    return typer.Option(
        None,
        "--known",
        "-k",
        help="Additional header identifier rendered through the header enum (repeatable)",
        rich_help_panel="Header Tables",
    )


def request_var_option() -> Any:
    return typer.Option(
        None,
        "--request-var",
        help="Name of the request object [default: httpRequest]",
        rich_help_panel="Output",
    )


def header_enum_option() -> Any:
    return typer.Option(
        None,
        "--header-enum",
        help="Name of the header enum [default: HttpHeader]",
        rich_help_panel="Output",
    )


def report_option() -> Any:
    return typer.Option(
        False,
        "--report",
        help="Print counts of translated and discarded lines to stderr",
        rich_help_panel="Output",
    )
