"""Custom exceptions for convert-headers."""

from typing import Any


class ConvertHeadersError(Exception):
    """Base exception for convert-headers errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InputReadError(ConvertHeadersError):
    """Header text could not be read from a file or stdin."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(
            message=f"Cannot read input {source}: {reason}",
            details={"source": source, "reason": reason},
        )
        self.source = source


class ConfigurationError(ConvertHeadersError):
    """Raised when configuration loading or validation fails."""

    pass
