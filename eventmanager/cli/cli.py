#!/usr/bin/env python3
"""
EventManager CLI entry point.

Usage:
    eventmanager
    eventmanager --etc-dir ./etc -l debug
    eventmanager --help
"""

import argparse
import sys

import eventmanager
from eventmanager.app import DefaultsHelpFormatter, EventManagerApp
from eventmanager.config import DEFAULT_CONFIG_FILENAME, Config, find_config_file
from eventmanager.exceptions import ConfigError
from eventmanager.log import LogConfig, LoggerFactory, derive_lg
from eventmanager.ui import Console

# Exit code for unusable configuration, as for argparse usage errors
CONFIG_ERROR_RETURN_CODE = 2


def create_arg_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="eventmanager",
        description="Manage events and their participants from the command line",
        formatter_class=DefaultsHelpFormatter,
    )
    parser.add_argument(
        "--etc-dir",
        type=str,
        default=None,
        metavar="DIR",
        help="configuration directory (default: auto-detect ./etc/ or project etc/)",
    )
    parser.add_argument(
        "--config-file",
        default=DEFAULT_CONFIG_FILENAME,
        metavar="NAME",
        help="configuration file name inside the configuration directory",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="log level (default: from config or 'warning')",
    )
    parser.add_argument(
        "--log-location",
        action="store_true",
        default=None,
        help="show file locations in logs",
    )
    parser.add_argument(
        "--log-micros",
        action="store_true",
        default=None,
        help="show microseconds timestamps",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="disable logging")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument(
        "--no-banner", action="store_true", help="do not show the welcome banner"
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"eventmanager {eventmanager.__version__}",
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """
    Load configuration and apply command-line overrides.

    Raises:
        ConfigError: If the file cannot be loaded or the result is invalid
    """
    config = Config(find_config_file(args.etc_dir, args.config_file))
    config.apply_overrides(
        {
            "logging.level": False if args.quiet else args.log_level,
            "logging.location": args.log_location,
            "logging.micros": args.log_micros,
            "logging.colors": False if args.no_color else None,
            "ui.colors": False if args.no_color else None,
            "ui.banner": False if args.no_banner else None,
        }
    )
    config.validate()
    return config


def create_console(config: Config) -> Console:
    """Create the console, honouring ui.colors when it is set."""
    colors = config.get("ui.colors")
    return Console(no_color=None if colors is None else not colors)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the event manager CLI."""
    args = create_arg_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ConfigError as e:
        errors = Console(no_color=True if args.no_color else None, file=sys.stderr)
        errors.print_error(str(e))
        return CONFIG_ERROR_RETURN_CODE

    lg = LoggerFactory.create_root(LogConfig.from_config(config.to_dict()))
    lg.debug(
        "config loaded",
        extra={"file": config.config_path or "defaults", "overrides": config.get_env_overrides()},
    )

    app = EventManagerApp(config, derive_lg(lg, "app"), create_console(config))
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
