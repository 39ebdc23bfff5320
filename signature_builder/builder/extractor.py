"""
Icon extractor for finding hosted icon URLs in a signature.

The document is scanned as plain text; no DOM is built.
"""

from dataclasses import dataclass
from typing import Dict, List, Set

from ..config import BuildConfig
from ..utils.log import get_logger


@dataclass(frozen=True)
class IconReference:
    """One hosted icon referenced by the signature."""

    name: str
    source_url: str


def read_document(path: str) -> str:
    """
    Read an HTML document as UTF-8 text.

    Args:
        path: File path of the document

    Returns:
        Document text

    Raises:
        FileNotFoundError: If the document does not exist
    """
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


class IconExtractor:
    """
    Extracts icon references from HTML content.

    References are deduplicated on the (name, URL) pair and returned in the
    order they first appear.
    """

    def __init__(self, config: BuildConfig):
        """
        Initialize the icon extractor.

        Args:
            config: Build configuration holding the icon host and family
        """
        self.config = config
        self.pattern = config.icon_pattern
        self.logger = get_logger("extractor")

    def extract(self, html: str) -> List[IconReference]:
        """
        Extract all icon references from HTML content.

        Args:
            html: HTML content to scan

        Returns:
            Unique icon references in first-seen order
        """
        icons: List[IconReference] = []
        seen: Set[IconReference] = set()
        urls_by_name: Dict[str, str] = {}

        for match in self.pattern.finditer(html):
            icon = IconReference(name=match.group(1), source_url=match.group(0))
            if icon in seen:
                continue

            previous_url = urls_by_name.get(icon.name)
            if previous_url is not None:
                self.logger.warning(
                    f"Icon '{icon.name}' is referenced by more than one URL "
                    f"({previous_url}, {icon.source_url}); "
                    f"{self.config.asset_path(icon.name)} will hold the last one converted"
                )
            else:
                urls_by_name[icon.name] = icon.source_url

            seen.add(icon)
            icons.append(icon)

        self.logger.debug(f"Extracted {len(icons)} icon reference(s)")
        return icons
