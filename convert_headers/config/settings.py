import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from convert_headers.core.errors import ConfigurationError
from convert_headers.core.logging import get_logger

from .logging import LoggingSettings
from .translator import TranslatorSettings


__all__ = [
    "ConfigurationError",
    "Settings",
    "find_toml_config_file",
    "get_settings",
]

logger = get_logger(__name__)

_NESTED_SECTIONS = ("translator", "logging")

APP_NAME = "convert-headers"


def get_config_dir() -> Path:
    """Per-user config directory, honoring XDG_CONFIG_HOME when it is set."""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / APP_NAME


def find_git_root(start: Path | None = None) -> Path | None:
    """Closest directory at or above ``start`` (default: cwd) holding ``.git``."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def config_file_candidates() -> list[Path]:
    """Config file locations in lookup order: cwd, git root, user config dir."""
    candidates = [Path.cwd() / f".{APP_NAME}.toml"]
    git_root = find_git_root()
    if git_root is not None:
        candidates.append(git_root / f"{APP_NAME}.toml")
    candidates.append(get_config_dir() / "config.toml")
    return candidates


def find_toml_config_file() -> Path | None:
    return next((path for path in config_file_candidates() if path.exists()), None)


class Settings(BaseSettings):
    """
    Configuration settings for convert-headers.

    Nothing needs to be configured; every value has a default. Values are
    resolved in this order, highest first:
    1. Explicit overrides (command-line options)
    2. Environment variables such as TRANSLATOR__HEADER_ENUM or LOGGING__LEVEL
    3. TOML configuration file
    4. Defaults

    TOML configuration files are looked up in the following order:
    1. Path given with --config or the CONFIG_FILE environment variable
    2. .convert-headers.toml in current directory
    3. convert-headers.toml in git repository root
    4. config.toml in XDG_CONFIG_HOME/convert-headers/
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    translator: TranslatorSettings = Field(
        default_factory=TranslatorSettings,
        description="Header tables and rendering options",
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration",
    )

    @classmethod
    def load_toml_config(cls, toml_path: Path) -> dict[str, Any]:
        """Load configuration from a TOML file."""
        try:
            with toml_path.open("rb") as f:
                return tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read TOML config file {toml_path}: {e}"
            ) from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML syntax in {toml_path}: {e}") from e

    @classmethod
    def load_config_file(cls, config_path: Path) -> dict[str, Any]:
        """Load configuration from a file based on its extension."""
        suffix = config_path.suffix.lower()

        if suffix == ".toml":
            return cls.load_toml_config(config_path)
        raise ConfigurationError(
            f"Unsupported config file format: {suffix}. "
            "Only TOML (.toml) files are supported."
        )

    @classmethod
    def from_config(
        cls,
        config_path: Path | str | None = None,
        **kwargs: Any,
    ) -> "Settings":
        """Create Settings from a configuration file, environment and overrides.

        Args:
            config_path: Explicit TOML file; discovered automatically when None
            **kwargs: Per-section overrides, e.g. ``translator={"header_enum": "H"}``

        Raises:
            ConfigurationError: If the file cannot be parsed or a value is invalid
        """
        if config_path is None:
            config_path_env = os.environ.get("CONFIG_FILE")
            if config_path_env:
                config_path = Path(config_path_env)

        if isinstance(config_path, str):
            config_path = Path(config_path)

        if config_path is None:
            config_path = find_toml_config_file()

        config_data: dict[str, Any] = {}
        if config_path is not None:
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            config_data = cls.load_config_file(config_path)
            logger.info("config_file_loaded", path=str(config_path), category="config")

        try:
            settings = cls()
            cls._apply_file_config(settings, config_data)
            if kwargs:
                _apply_overrides(settings, kwargs)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        return settings

    @classmethod
    def _apply_file_config(
        cls, settings: "Settings", config_data: dict[str, Any]
    ) -> None:
        # File values only fill in what the environment did not set.
        env_keys = {name.upper() for name in os.environ}
        for key, value in config_data.items():
            if key not in _NESTED_SECTIONS:
                logger.warning("config_key_ignored", key=key, category="config")
                continue
            if not isinstance(value, dict):
                raise ConfigurationError(
                    f"Config section [{key}] must be a table, got {type(value).__name__}"
                )
            nested_obj = getattr(settings, key)
            for nested_key, nested_value in value.items():
                if nested_key not in type(nested_obj).model_fields:
                    logger.warning(
                        "config_key_ignored",
                        key=f"{key}.{nested_key}",
                        category="config",
                    )
                    continue
                env_key = f"{key}__{nested_key}".upper()
                if env_key not in env_keys:
                    setattr(nested_obj, nested_key, nested_value)


def _apply_overrides(target: Any, overrides: dict[str, Any]) -> None:
    for k, v in overrides.items():
        if v is None:
            continue
        if isinstance(v, dict) and isinstance(getattr(target, k, None), BaseModel):
            _apply_overrides(getattr(target, k), v)
        else:
            setattr(target, k, v)


def get_settings(config_path: Path | str | None = None, **overrides: Any) -> Settings:
    """Load settings, see :meth:`Settings.from_config`."""
    return Settings.from_config(config_path=config_path, **overrides)
