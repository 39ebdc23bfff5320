"""
Build configuration for the signature builder.

Collects every input path, output path, icon dimension and publishing identity
into a single object that is handed to the pipeline.
"""

import os
import re
from dataclasses import dataclass
from typing import Pattern

from .utils.constants import (
    DEFAULT_ASSETS_DIR,
    DEFAULT_GITHUB_BRANCH,
    DEFAULT_GITHUB_REPO,
    DEFAULT_GITHUB_USER,
    DEFAULT_ICON_FAMILY,
    DEFAULT_ICON_HOST,
    DEFAULT_ICON_SIZE,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_RAW_HOST,
    DEFAULT_REMOTE_ASSETS_PATH,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from .utils.paths import get_icon_path


@dataclass
class BuildConfig:
    """Settings for one signature build."""

    input_file: str = DEFAULT_INPUT_FILE
    output_dir: str = DEFAULT_OUTPUT_DIR
    output_filename: str = DEFAULT_OUTPUT_FILENAME
    assets_dir: str = DEFAULT_ASSETS_DIR
    icon_size: int = DEFAULT_ICON_SIZE

    # Publishing identity for the rewritten icon URLs
    github_user: str = DEFAULT_GITHUB_USER
    github_repo: str = DEFAULT_GITHUB_REPO
    github_branch: str = DEFAULT_GITHUB_BRANCH
    raw_host: str = DEFAULT_RAW_HOST
    remote_assets_path: str = DEFAULT_REMOTE_ASSETS_PATH

    # Source icons
    icon_host: str = DEFAULT_ICON_HOST
    icon_family: str = DEFAULT_ICON_FAMILY

    # HTTP
    timeout: int = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        if self.icon_size <= 0:
            raise ValueError(f"Icon size must be positive, got {self.icon_size}")

    @property
    def output_path(self) -> str:
        """Path of the rewritten signature."""
        return os.path.join(self.output_dir, self.output_filename)

    @property
    def icon_pattern(self) -> Pattern:
        """
        Pattern matching hosted icon URLs.

        Group 1 captures the icon name. The trailing path stops at quotes,
        whitespace, tag brackets and a closing parenthesis.
        """
        return re.compile(
            r"https://" + re.escape(self.icon_host)
            + r"/s/i/" + re.escape(self.icon_family)
            + r"/([^/\"'\s<>)]+)/[^\"'\s<>)]+"
        )

    @property
    def destination_prefix(self) -> str:
        """Common prefix of every rewritten icon URL."""
        return (
            f"https://{self.raw_host}/{self.github_user}/{self.github_repo}/"
            f"{self.github_branch}/{self.remote_assets_path}/"
        )

    def destination_url(self, name: str) -> str:
        """
        Build the self-hosted URL for an icon.

        Args:
            name: Icon name

        Returns:
            URL of the published PNG
        """
        return f"{self.destination_prefix}{name}.png"

    def asset_path(self, name: str) -> str:
        """Local path of the rasterized icon."""
        return get_icon_path(name, self.assets_dir)
