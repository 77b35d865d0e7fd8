"""Interactive application and argument parsing helpers."""

from .app import INTERRUPTED_RETURN_CODE, EventManagerApp
from .args import DefaultsHelpFormatter

__all__ = ["EventManagerApp", "DefaultsHelpFormatter", "INTERRUPTED_RETURN_CODE"]
