"""
Icon URL rewriter for pointing a signature at self-hosted icons.

Substitution is done on the raw text so the rest of the document is kept
byte for byte.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ..config import BuildConfig
from ..utils.log import get_logger, print_status
from .extractor import IconReference


@dataclass
class RewriteResult:
    """Rewritten HTML and the number of substitutions made."""

    html: str
    replacements: int = 0


class IconRewriter:
    """
    Replaces hosted icon URLs with their self-hosted counterparts.

    Every occurrence is replaced, whether or not the icon was converted.
    """

    def __init__(self, config: BuildConfig):
        """
        Initialize the icon rewriter.

        Args:
            config: Build configuration holding the publishing identity
        """
        self.config = config
        self.logger = get_logger("rewriter")

    def rewrite(self, html: str, icons: List[IconReference]) -> RewriteResult:
        """
        Rewrite every icon URL in HTML content.

        Args:
            html: HTML content to rewrite
            icons: Icon references found in the content

        Returns:
            RewriteResult with the new HTML
        """
        total = 0

        # Longest first, so a URL that prefixes another cannot split it
        for icon in sorted(icons, key=lambda icon: len(icon.source_url), reverse=True):
            destination = self.config.destination_url(icon.name)
            pattern = re.compile(re.escape(icon.source_url))

            # Callable replacement keeps the URL literal
            html, count = pattern.subn(lambda _match: destination, html)
            total += count

            print_status(
                f"✓ Replaced {icon.name}: {self.config.icon_host} → "
                f"{self.config.raw_host}",
                "green"
            )
            self.logger.debug(f"{icon.source_url} -> {destination} ({count}x)")

        return RewriteResult(html=html, replacements=total)


def parse_icon_name(url: str, config: BuildConfig) -> Optional[str]:
    """
    Recover the icon name from a self-hosted icon URL.

    Args:
        url: URL produced by BuildConfig.destination_url
        config: Build configuration the URL was produced with

    Returns:
        Icon name, or None if the URL was not produced with this configuration
    """
    prefix = config.destination_prefix
    if not url.startswith(prefix) or not url.endswith(".png"):
        return None

    name = url[len(prefix):-len(".png")]
    if not name or "/" in name:
        return None
    return name
