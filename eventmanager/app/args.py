"""
Argument parsing utilities.
"""

import argparse


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter that appends default values to help text.

    Defaults of None or False are left out since they only mean "not set".
    """

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        if action.default is argparse.SUPPRESS or action.default in (None, False):
            return help_text
        return help_text + f" (default: {action.default})"
