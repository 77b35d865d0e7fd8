"""Tests for configuration loading."""

import pytest

from eventmanager.config import (
    DEFAULT_CONFIG_FILENAME,
    MAX_CONFIG_SIZE_BYTES,
    Config,
    find_config_file,
    get_default_config,
)
from eventmanager.exceptions import ConfigError

pytestmark = pytest.mark.unit


@pytest.fixture
def write_config(temp_dir):
    """Write YAML text to <temp_dir>/eventmanager.yaml and return its path."""

    def _write(text, name=DEFAULT_CONFIG_FILENAME):
        path = temp_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


class TestDefaults:
    """Tests for the built-in defaults."""

    def test_defaults_without_file(self):
        config = Config()

        assert config.config_path is None
        assert config.logging.level == "warning"
        assert config.ui.prompt == "> "
        assert config.ui.colors is None
        assert config.get("ui.banner") is True

    def test_default_config_is_a_copy(self):
        get_default_config()["logging"]["level"] = "debug"
        assert get_default_config()["logging"]["level"] == "warning"


class TestConfigFile:
    """Tests for YAML file loading."""

    def test_file_merges_over_defaults(self, write_config):
        path = write_config("logging:\n  level: debug\n")
        config = Config(path)

        assert config.config_path == path.resolve()
        assert config.logging.level == "debug"
        assert config.logging.colors is True
        assert config.ui.prompt == "> "

    def test_extra_sections_are_kept(self, write_config):
        config = Config(write_config("custom:\n  key: value\n"))
        assert config.get("custom.key") == "value"

    def test_empty_file(self, write_config):
        assert Config(write_config("")).logging.level == "warning"

    def test_variable_substitution(self, write_config):
        config = Config(write_config('ui:\n  prompt: "${logging.level}> "\n'))
        assert config.ui.prompt == "warning> "

    def test_undefined_variable(self, write_config):
        with pytest.raises(ConfigError, match="Undefined config variable"):
            Config(write_config('ui:\n  prompt: "${nope.key}"\n'))

    def test_invalid_yaml(self, write_config):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            Config(write_config("logging: [unclosed\n"))

    def test_non_mapping(self, write_config):
        with pytest.raises(ConfigError, match="must contain a mapping"):
            Config(write_config("- a\n- b\n"))

    def test_too_large(self, write_config):
        path = write_config("#" * (MAX_CONFIG_SIZE_BYTES + 1))
        with pytest.raises(ConfigError, match="too large") as exc_info:
            Config(path)
        assert exc_info.value.context["limit"] == MAX_CONFIG_SIZE_BYTES

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigError, match="Cannot read config file"):
            Config(temp_dir / "missing.yaml")

    def test_undecodable_file(self, temp_dir):
        path = temp_dir / "eventmanager.yaml"
        path.write_bytes(b'ui:\n  prompt: "\xff\xfe"\n')

        with pytest.raises(ConfigError, match="Cannot read config file") as exc_info:
            Config(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_reserved_key_in_file(self, write_config):
        with pytest.raises(ConfigError, match="Reserved config key") as exc_info:
            Config(write_config("ui:\n  set: 1\n"))
        assert exc_info.value.context == {"key": "set"}


class TestEnvOverrides:
    """Tests for EVENTMGR_* environment overrides."""

    def test_override(self, monkeypatch, write_config):
        monkeypatch.setenv("EVENTMGR_LOGGING_LEVEL", "debug")
        monkeypatch.setenv("EVENTMGR_UI_BANNER", "false")

        config = Config(write_config("logging:\n  level: error\n"))

        assert config.logging.level == "debug"
        assert config.ui.banner is False

    @pytest.mark.parametrize("name,key", [("EVENTMGR_GET", "get"), ("EVENTMGR_UI_HAS", "has")])
    def test_reserved_key(self, monkeypatch, name, key):
        monkeypatch.setenv(name, "1")

        with pytest.raises(ConfigError) as exc_info:
            Config()
        assert exc_info.value.context == {"key": key}

    def test_disabled(self, monkeypatch):
        monkeypatch.setenv("EVENTMGR_LOGGING_LEVEL", "debug")

        config = Config(enable_env_overrides=False)

        assert config.logging.level == "warning"
        assert config.get_env_overrides() == {}

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("MYAPP_UI_PROMPT", "$ ")
        assert Config(env_prefix="MYAPP_").ui.prompt == "$ "

    def test_get_env_overrides(self, monkeypatch):
        monkeypatch.setenv("EVENTMGR_LOGGING_MICROS", "true")
        assert Config().get_env_overrides() == {"logging.micros": True}

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("null", None),
            ("", None),
            ("TRUE", True),
            ("false", False),
            ("42", 42),
            ("1.5", 1.5),
            ("a, b", ["a", "b"]),
            ("debug", "debug"),
        ],
    )
    def test_convert_env_value(self, raw, expected):
        assert Config(enable_env_overrides=False)._convert_env_value(raw) == expected


class TestOverridesAndValidation:
    """Tests for apply_overrides() and validate()."""

    def test_apply_overrides_skips_none(self):
        config = Config().apply_overrides({"logging.level": "error", "ui.prompt": None})

        assert config.logging.level == "error"
        assert config.ui.prompt == "> "

    def test_apply_overrides_creates_sections(self):
        config = Config().apply_overrides({"extra.deep.key": 1})
        assert config.get("extra.deep.key") == 1

    def test_validate_returns_model(self):
        model = Config().validate()

        assert model.logging.level == "warning"
        assert model.ui.banner is True

    def test_validate_rejects_bad_level(self):
        config = Config().apply_overrides({"logging.level": "loud"})
        with pytest.raises(ConfigError, match="Invalid configuration"):
            config.validate()

    def test_validate_rejects_bad_type(self):
        config = Config().apply_overrides({"ui.banner": "sometimes"})
        with pytest.raises(ConfigError):
            config.validate()


class TestFindConfigFile:
    """Tests for find_config_file()."""

    def test_explicit_dir(self, write_config, temp_dir):
        path = write_config("")
        assert find_config_file(temp_dir) == path

    def test_explicit_dir_without_file(self, temp_dir):
        with pytest.raises(ConfigError, match="Config file not found"):
            find_config_file(temp_dir)

    def test_custom_file_name(self, write_config, temp_dir):
        path = write_config("", name="other.yaml")
        assert find_config_file(str(temp_dir), "other.yaml") == path

    def test_searches_cwd_etc(self, monkeypatch, temp_dir):
        etc = temp_dir / "etc"
        etc.mkdir()
        (etc / DEFAULT_CONFIG_FILENAME).write_text("", encoding="utf-8")
        monkeypatch.chdir(temp_dir)

        assert find_config_file().resolve() == (etc / DEFAULT_CONFIG_FILENAME).resolve()

    def test_nothing_found(self, monkeypatch, temp_dir):
        monkeypatch.chdir(temp_dir)
        monkeypatch.setattr("eventmanager.config.config.PROJECT_ROOT", temp_dir)

        assert find_config_file() is None
