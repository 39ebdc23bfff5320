"""
Exceptions raised while localizing icons.

Errors deriving from IconError affect a single icon and never abort a build.
"""


class IconError(Exception):
    """Base class for failures that affect a single icon."""


class IconFetchError(IconError):
    """Raised when an icon cannot be downloaded."""


class IconEncodeError(IconError):
    """Raised when icon bytes cannot be decoded, resized or encoded."""
