"""Shared test fixtures and configuration for convert-headers tests."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from convert_headers.core.logging import setup_logging
from convert_headers.core.translator import HeaderLineTranslator


def pytest_configure(config: pytest.Config) -> None:
    """Route structlog through the application pipeline at DEBUG."""
    setup_logging(json_logs=False, log_level_name="DEBUG", log_format="plain")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Keep user config files and environment out of every test.

    Runs each test from an empty directory with XDG_CONFIG_HOME pointing at it,
    so config discovery finds nothing unless a test writes a file.
    """
    for key in list(os.environ):
        if key.upper().startswith(("TRANSLATOR__", "LOGGING__")) or key == "CONFIG_FILE":
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def translator() -> HeaderLineTranslator:
    return HeaderLineTranslator()


@pytest.fixture
def sample_headers() -> str:
    return (
        "GET /index.html HTTP/1.1\r\n"
        "Host: example.com\r\n"
        "User-Agent: Mozilla/5.0\r\n"
        "Accept: text/html\r\n"
        "Cookie: session=abc\r\n"
        "X-Requested-With: XMLHttpRequest\r\n"
    )
