"""
Icon converter for downloading and rasterizing hosted icons.

Uses aiohttp for downloads. Icons are processed one at a time and a failure
only affects the icon it happened on.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

import aiohttp
from aiohttp import ClientTimeout, ClientError

from ..config import BuildConfig
from ..utils.log import get_logger, print_info, print_status, print_warning
from ..utils.paths import ensure_dir, ensure_parent_dir
from .encoder import IconEncoder
from .errors import IconError, IconFetchError
from .extractor import IconReference


@dataclass
class IconResult:
    """Outcome of converting a single icon."""

    icon: IconReference
    asset_path: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class HttpIconFetcher:
    """
    Downloads icon bytes over HTTP.

    Must be entered as an async context manager before fetching.
    """

    def __init__(self, timeout: int, user_agent: str):
        """
        Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds
            user_agent: User agent string for requests
        """
        self.timeout = ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "HttpIconFetcher":
        self._session = aiohttp.ClientSession(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent}
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def fetch(self, url: str) -> bytes:
        """
        Download a single icon.

        Args:
            url: Icon URL

        Returns:
            Response body

        Raises:
            IconFetchError: On a non-success status, client error or timeout
        """
        if self._session is None:
            raise RuntimeError("HttpIconFetcher used outside 'async with'")

        try:
            async with self._session.get(url, allow_redirects=True) as response:
                if not 200 <= response.status < 300:
                    raise IconFetchError(f"HTTP {response.status}")
                return await response.read()
        except ClientError as e:
            raise IconFetchError(f"Client error: {e}") from e
        except asyncio.TimeoutError as e:
            raise IconFetchError("Timed out") from e


class IconConverter:
    """
    Downloads icons and writes them as square PNG files.

    Every icon gets an IconResult; errors are recorded, never raised.
    """

    def __init__(self, config: BuildConfig, fetcher, encoder: IconEncoder):
        """
        Initialize the icon converter.

        Args:
            config: Build configuration (assets directory and icon size)
            fetcher: Async context manager exposing fetch(url) -> bytes
            encoder: Encoder exposing resize_and_encode(data, size) -> bytes
        """
        self.config = config
        self.fetcher = fetcher
        self.encoder = encoder
        self.logger = get_logger("converter")

    async def convert_all(self, icons: List[IconReference]) -> List[IconResult]:
        """
        Convert every icon in order.

        Args:
            icons: Icon references to convert

        Returns:
            One result per icon, in the same order
        """
        if not icons:
            print_warning("No hosted icons found in HTML")
            return []

        ensure_dir(self.config.assets_dir)
        print_info(f"Converting {len(icons)} icon(s)...")

        results: List[IconResult] = []
        async with self.fetcher:
            for icon in icons:
                results.append(await self._convert_icon(icon))

        failed = sum(1 for result in results if not result.ok)
        self.logger.info(
            f"Converted {len(results) - failed} icon(s), {failed} failed"
        )
        return results

    async def _convert_icon(self, icon: IconReference) -> IconResult:
        """
        Download, rasterize and save a single icon.

        Args:
            icon: Icon reference

        Returns:
            IconResult with the asset path or the error message
        """
        print_status(f"Processing {icon.name}...", "blue")
        try:
            data = await self.fetcher.fetch(icon.source_url)
            png = self.encoder.resize_and_encode(data, self.config.icon_size)

            asset_path = self.config.asset_path(icon.name)
            ensure_parent_dir(asset_path)
            with open(asset_path, 'wb') as f:
                f.write(png)

        except (IconError, OSError) as e:
            self.logger.error(f"Failed to process {icon.name}: {e}")
            return IconResult(icon=icon, error=str(e))

        print_status(f"✓ {icon.name}.png created", "green")
        return IconResult(icon=icon, asset_path=asset_path)
