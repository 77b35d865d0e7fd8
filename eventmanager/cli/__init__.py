"""
Command-line interface for the event manager.
"""

from eventmanager.cli.cli import create_arg_parser, load_config, main

__all__ = ["main", "create_arg_parser", "load_config"]
