"""Command modules for the convert-headers CLI."""

from .config import app as config_app
from .convert import convert


__all__ = ["config_app", "convert"]
