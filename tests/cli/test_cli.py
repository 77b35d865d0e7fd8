"""Tests for the command-line entry point."""

import pytest

from eventmanager.cli import create_arg_parser, load_config, main
from eventmanager.cli.cli import CONFIG_ERROR_RETURN_CODE, create_console
from eventmanager.config import Config
from eventmanager.exceptions import ConfigError

pytestmark = pytest.mark.unit


@pytest.fixture
def etc_dir(temp_dir):
    """Configuration directory holding a minimal eventmanager.yaml."""
    (temp_dir / "eventmanager.yaml").write_text(
        "logging:\n  level: error\nui:\n  prompt: '$ '\n", encoding="utf-8"
    )
    return temp_dir


class TestArgParser:
    """Tests for create_arg_parser()."""

    def test_defaults(self):
        args = create_arg_parser().parse_args([])

        assert args.etc_dir is None
        assert args.config_file == "eventmanager.yaml"
        assert args.log_level is None
        assert args.log_location is None
        assert args.quiet is False
        assert args.no_color is False

    def test_help_shows_only_real_defaults(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "200")
        text = create_arg_parser().format_help()

        assert "(default: eventmanager.yaml)" in text
        assert "(default: None)" not in text
        assert "(default: False)" not in text

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_arg_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("eventmanager ")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_loads_file(self, etc_dir):
        args = create_arg_parser().parse_args(["--etc-dir", str(etc_dir)])
        config = load_config(args)

        assert config.logging.level == "error"
        assert config.ui.prompt == "$ "

    def test_command_line_overrides(self, etc_dir):
        args = create_arg_parser().parse_args(
            [
                "--etc-dir",
                str(etc_dir),
                "-l",
                "debug",
                "--log-location",
                "--no-color",
                "--no-banner",
            ]
        )
        config = load_config(args)

        assert config.logging.level == "debug"
        assert config.logging.location is True
        assert config.logging.colors is False
        assert config.ui.colors is False
        assert config.ui.banner is False

    def test_quiet_disables_logging(self, etc_dir):
        args = create_arg_parser().parse_args(["--etc-dir", str(etc_dir), "-q", "-l", "info"])
        assert load_config(args).logging.level is False

    def test_missing_file(self, temp_dir):
        args = create_arg_parser().parse_args(["--etc-dir", str(temp_dir)])
        with pytest.raises(ConfigError):
            load_config(args)

    def test_invalid_level(self, etc_dir):
        args = create_arg_parser().parse_args(["--etc-dir", str(etc_dir), "-l", "loud"])
        with pytest.raises(ConfigError, match="Invalid log level"):
            load_config(args)


class TestCreateConsole:
    """Tests for create_console()."""

    def test_colors_disabled(self):
        config = Config().apply_overrides({"ui.colors": False})
        assert create_console(config).no_color is True

    def test_colors_forced(self):
        config = Config().apply_overrides({"ui.colors": True})
        assert create_console(config).no_color is False


class TestMain:
    """Tests for main() error handling."""

    def test_config_error_returns_2(self, temp_dir, capsys):
        assert main(["--etc-dir", str(temp_dir)]) == CONFIG_ERROR_RETURN_CODE
        assert "Error: Config file not found" in capsys.readouterr().err

    def test_invalid_level_returns_2(self, etc_dir, capsys):
        assert main(["--etc-dir", str(etc_dir), "-l", "loud"]) == CONFIG_ERROR_RETURN_CODE
        assert "Invalid configuration" in capsys.readouterr().err

    def test_undecodable_file_returns_2(self, temp_dir, capsys):
        (temp_dir / "eventmanager.yaml").write_bytes(b'ui:\n  prompt: "\xff\xfe"\n')

        assert main(["--etc-dir", str(temp_dir), "-q", "--no-banner"]) == CONFIG_ERROR_RETURN_CODE
        assert "Error: Cannot read config file" in capsys.readouterr().err

    def test_reserved_env_key_returns_2(self, etc_dir, monkeypatch, capsys):
        monkeypatch.setenv("EVENTMGR_GET", "1")

        assert main(["--etc-dir", str(etc_dir)]) == CONFIG_ERROR_RETURN_CODE
        assert "Error: Reserved config key (key=get)" in capsys.readouterr().err
