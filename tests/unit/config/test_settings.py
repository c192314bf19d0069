import pytest

from convert_headers.config.settings import ConfigurationError, Settings, get_settings
from convert_headers.core.tables import EXCLUDED_HEADERS, KNOWN_HEADERS


@pytest.mark.unit
def test_defaults_without_config_file():
    settings = Settings.from_config()

    assert settings.translator.known_headers == list(KNOWN_HEADERS)
    assert settings.translator.excluded_headers == list(EXCLUDED_HEADERS)
    assert settings.translator.request_variable == "httpRequest"
    assert settings.translator.header_enum == "HttpHeader"
    assert settings.translator.newline == "\n"
    assert settings.logging.level == "WARNING"


@pytest.mark.unit
def test_toml_values_applied(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        """
    [translator]
    request_variable = "request"
    excluded_headers = ["Cookie", "Authorization"]
    line_ending = "CRLF"

    [logging]
    level = "debug"
    """,
        encoding="utf-8",
    )

    settings = Settings.from_config(config_path=cfg)
    assert settings.translator.request_variable == "request"
    assert settings.translator.excluded_headers == ["Cookie", "Authorization"]
    assert settings.translator.newline == "\r\n"
    assert settings.logging.level == "DEBUG"


@pytest.mark.unit
def test_env_overrides_toml(tmp_path, monkeypatch):
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        """
    [translator]
    header_enum = "FromToml"
    request_variable = "req"
    """,
        encoding="utf-8",
    )

    monkeypatch.setenv("TRANSLATOR__HEADER_ENUM", "FromEnv")

    settings = Settings.from_config(config_path=cfg)
    assert settings.translator.header_enum == "FromEnv"  # env > toml
    assert settings.translator.request_variable == "req"


@pytest.mark.unit
def test_cli_overrides_env(monkeypatch):
    monkeypatch.setenv("LOGGING__LEVEL", "INFO")

    settings = Settings.from_config(config_path=None, logging={"level": "DEBUG"})
    assert settings.logging.level == "DEBUG"  # cli > env


@pytest.mark.unit
def test_none_overrides_ignored(monkeypatch):
    monkeypatch.setenv("LOGGING__LEVEL", "ERROR")

    settings = get_settings(logging={"level": None}, translator={"header_enum": None})
    assert settings.logging.level == "ERROR"
    assert settings.translator.header_enum == "HttpHeader"


@pytest.mark.unit
def test_config_file_env_var(tmp_path, monkeypatch):
    cfg = tmp_path / "custom.toml"
    cfg.write_text('[translator]\nheader_enum = "Hdr"\n', encoding="utf-8")
    monkeypatch.setenv("CONFIG_FILE", str(cfg))

    assert Settings.from_config().translator.header_enum == "Hdr"


@pytest.mark.unit
def test_discovers_config_in_current_directory(tmp_path):
    (tmp_path / ".convert-headers.toml").write_text(
        '[translator]\nrequest_variable = "local"\n', encoding="utf-8"
    )

    assert Settings.from_config().translator.request_variable == "local"


@pytest.mark.unit
def test_invalid_toml_raises(tmp_path):
    cfg = tmp_path / "broken.toml"
    cfg.write_text("[translator\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid TOML syntax"):
        Settings.from_config(config_path=cfg)


@pytest.mark.unit
def test_unsupported_suffix_raises(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("translator: {}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Unsupported config file format"):
        Settings.from_config(config_path=cfg)


@pytest.mark.unit
def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        Settings.from_config(config_path=tmp_path / "nope.toml")


@pytest.mark.unit
def test_invalid_log_level_in_file(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid log level"):
        Settings.from_config(config_path=cfg)


@pytest.mark.unit
def test_invalid_line_ending_override():
    with pytest.raises(ConfigurationError, match="Invalid line ending"):
        Settings.from_config(translator={"line_ending": "cr"})


@pytest.mark.unit
def test_invalid_identifier_override():
    with pytest.raises(ConfigurationError, match="Not a valid identifier"):
        Settings.from_config(translator={"request_variable": "not valid"})


@pytest.mark.unit
def test_section_must_be_table(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text('translator = "oops"\n', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must be a table"):
        Settings.from_config(config_path=cfg)


@pytest.mark.unit
def test_unknown_keys_ignored(tmp_path):
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        '[server]\nport = 1\n[translator]\nunknown = 1\nheader_enum = "H"\n',
        encoding="utf-8",
    )

    settings = Settings.from_config(config_path=cfg)
    assert settings.translator.header_enum == "H"
    assert not hasattr(settings.translator, "unknown")


@pytest.mark.unit
def test_lowercase_env_overrides_toml(tmp_path, monkeypatch):
    cfg = tmp_path / "config.toml"
    cfg.write_text('[translator]\nheader_enum = "FromToml"\n', encoding="utf-8")

    monkeypatch.setenv("translator__header_enum", "FromEnv")

    settings = Settings.from_config(config_path=cfg)
    assert settings.translator.header_enum == "FromEnv"
