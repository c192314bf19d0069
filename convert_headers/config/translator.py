"""Translator configuration: header tables and rendered identifiers."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from convert_headers.core.tables import (
    DEFAULT_HEADER_ENUM,
    DEFAULT_REQUEST_VARIABLE,
    EXCLUDED_HEADERS,
    KNOWN_HEADERS,
)


LINE_ENDINGS = {"lf": "\n", "crlf": "\r\n"}


class TranslatorSettings(BaseModel):
    """Settings controlling which headers are emitted and how."""

    model_config = ConfigDict(validate_assignment=True)

    known_headers: list[str] = Field(
        default_factory=lambda: list(KNOWN_HEADERS),
        description="Header identifiers rendered through the header enum (matched without hyphens)",
    )

    excluded_headers: list[str] = Field(
        default_factory=lambda: list(EXCLUDED_HEADERS),
        description="Raw header names that are always dropped",
    )

    request_variable: str = Field(
        default=DEFAULT_REQUEST_VARIABLE,
        description="Name of the request object receiving AddHeader calls",
    )

    header_enum: str = Field(
        default=DEFAULT_HEADER_ENUM,
        description="Name of the enum holding known header identifiers",
    )

    line_ending: str = Field(
        default="lf",
        description="Line ending for generated output: 'lf' or 'crlf'",
    )

    @field_validator("request_variable", "header_enum")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        if not v.replace(".", "_").isidentifier():
            raise ValueError(f"Not a valid identifier: {v!r}")
        return v

    @field_validator("line_ending")
    @classmethod
    def validate_line_ending(cls, v: str) -> str:
        lower_v = v.lower()
        if lower_v not in LINE_ENDINGS:
            raise ValueError(
                f"Invalid line ending: {v}. Must be one of {sorted(LINE_ENDINGS)}"
            )
        return lower_v

    @property
    def newline(self) -> str:
        return LINE_ENDINGS[self.line_ending]
