"""Configuration module for convert-headers."""

from .logging import LoggingSettings
from .settings import Settings, get_settings
from .translator import TranslatorSettings


__all__ = ["LoggingSettings", "Settings", "TranslatorSettings", "get_settings"]
