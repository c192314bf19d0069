"""Translate raw HTTP header lines into ``AddHeader`` statements.

A header line is ``Name: Value``. Each qualifying line becomes one statement
for an xNet-style request object::

    Content-Type: text/html  ->  httpRequest.AddHeader(HttpHeader.ContentType,"text/html");
    X-Custom: foo            ->  httpRequest.AddHeader("X-Custom","foo");

Lines without exactly one ``:`` and lines naming an excluded header are dropped
silently; a malformed line never stops the rest of the input from translating.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from convert_headers.core.tables import (
    DEFAULT_HEADER_ENUM,
    DEFAULT_REQUEST_VARIABLE,
    EXCLUDED_HEADERS,
    KNOWN_HEADERS,
)


if TYPE_CHECKING:
    from convert_headers.config.translator import TranslatorSettings


_LINE_SPLIT = re.compile(r"\r\n|\n")


def split_lines(raw_text: str) -> list[str]:
    """Split on CRLF or LF, dropping empty segments."""
    return [line for line in _LINE_SPLIT.split(raw_text) if line]


@dataclass(frozen=True)
class HeaderLine:
    """A single ``Name: Value`` pair taken from the input."""

    name: str
    value: str

    @classmethod
    def parse(cls, line: str) -> "HeaderLine | None":
        """Parse a raw line, returning None unless it has exactly one colon.

        Only leading spaces are trimmed from the value; tabs and trailing
        whitespace are kept as they are.
        """
        if line.count(":") != 1:
            return None
        name, value = line.split(":")
        return cls(name=name, value=value.lstrip(" "))

    @property
    def stripped_name(self) -> str:
        return self.name.replace("-", "")


@dataclass
class TranslationReport:
    """Statements produced by one translation plus discard counters."""

    statements: list[str] = field(default_factory=list)
    total_lines: int = 0
    malformed: int = 0
    excluded: int = 0

    @property
    def discarded(self) -> int:
        return self.malformed + self.excluded


class HeaderLineTranslator:
    """Stateless translator from header text to code statements.

    The known and excluded tables are frozen at construction, so one instance
    can be shared freely between calls and threads.
    """

    def __init__(
        self,
        known_headers: Iterable[str] = KNOWN_HEADERS,
        excluded_headers: Iterable[str] = EXCLUDED_HEADERS,
        request_variable: str = DEFAULT_REQUEST_VARIABLE,
        header_enum: str = DEFAULT_HEADER_ENUM,
    ) -> None:
        self.known_headers = frozenset(known_headers)
        self.excluded_headers = frozenset(excluded_headers)
        self.request_variable = request_variable
        self.header_enum = header_enum

    @classmethod
    def from_settings(
        cls,
        settings: "TranslatorSettings",
        extra_known: Iterable[str] = (),
        extra_excluded: Iterable[str] = (),
    ) -> "HeaderLineTranslator":
        """Build a translator from configuration plus ad-hoc additions."""
        return cls(
            known_headers=[*settings.known_headers, *extra_known],
            excluded_headers=[*settings.excluded_headers, *extra_excluded],
            request_variable=settings.request_variable,
            header_enum=settings.header_enum,
        )

    def is_known(self, header: HeaderLine) -> bool:
        return header.stripped_name in self.known_headers

    def is_excluded(self, header: HeaderLine) -> bool:
        # Raw name on purpose: "Content-Length" is excluded, "ContentLength" is not.
        return header.name in self.excluded_headers

    def render(self, header: HeaderLine) -> str:
        """Render one header as an ``AddHeader`` statement."""
        if self.is_known(header):
            target = f"{self.header_enum}.{header.stripped_name}"
        else:
            target = f'"{header.name}"'
        return f'{self.request_variable}.AddHeader({target},"{header.value}");'

    def parse(self, raw_text: str) -> list[HeaderLine]:
        """Return the header lines of ``raw_text`` that survive both filters."""
        return [header for header, _ in self._classify(raw_text) if header]

    def translate(self, raw_text: str) -> list[str]:
        """Translate header text into statements, preserving input order."""
        return self.translate_with_report(raw_text).statements

    def translate_with_report(self, raw_text: str) -> TranslationReport:
        report = TranslationReport()
        for header, reason in self._classify(raw_text):
            report.total_lines += 1
            if header is None:
                if reason == "malformed":
                    report.malformed += 1
                else:
                    report.excluded += 1
                continue
            report.statements.append(self.render(header))
        return report

    def _classify(self, raw_text: str) -> Iterable[tuple[HeaderLine | None, str]]:
        for line in split_lines(raw_text):
            header = HeaderLine.parse(line)
            if header is None:
                yield None, "malformed"
            elif self.is_excluded(header):
                yield None, "excluded"
            else:
                yield header, "ok"


def render_block(
    statements: Iterable[str], newline: str = "\n", trailing: bool = True
) -> str:
    """Join statements into one block of text.

    With ``newline="\\r\\n"`` this matches what the editor command used to
    insert: CRLF-joined statements followed by a final CRLF.
    """
    lines = list(statements)
    if not lines:
        return ""
    block = newline.join(lines)
    return block + newline if trailing else block


_default_translator = HeaderLineTranslator()


def translate(raw_text: str) -> list[str]:
    """Translate ``raw_text`` with the default tables."""
    return _default_translator.translate(raw_text)
