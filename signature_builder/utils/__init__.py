"""
Utility modules for the signature builder.

Contains logging, path handling, and constants.
"""

from .log import setup_logger, get_logger
from .paths import ensure_dir, ensure_parent_dir, get_icon_path
from .constants import (
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    DEFAULT_ICON_SIZE,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "ensure_dir",
    "ensure_parent_dir",
    "get_icon_path",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_ICON_SIZE",
]
