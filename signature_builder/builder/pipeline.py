"""
Main signature build module.

Orchestrates icon extraction, conversion, URL rewriting and saving.
"""

import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import BuildConfig
from ..utils.log import get_logger, print_info, print_status
from .converter import HttpIconFetcher, IconConverter, IconResult
from .encoder import IconEncoder, RasterIconEncoder
from .extractor import IconExtractor, IconReference, read_document
from .rewrite import IconRewriter
from .writer import save_output


@dataclass
class BuildResult:
    """Results of a signature build."""

    icons: List[IconReference] = field(default_factory=list)
    results: List[IconResult] = field(default_factory=list)
    replacements: int = 0
    output_path: Optional[str] = None
    duration_seconds: float = 0.0

    @property
    def converted(self) -> List[IconResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> List[IconResult]:
        return [result for result in self.results if not result.ok]


class SignatureBuilder:
    """
    Main signature build class.

    Runs extract, convert, rewrite and save in that order. Icon failures are
    reported in the result; any other error propagates to the caller.
    """

    def __init__(
        self,
        config: BuildConfig,
        fetcher=None,
        encoder: Optional[IconEncoder] = None
    ):
        """
        Initialize the signature builder.

        Args:
            config: Build configuration
            fetcher: Icon fetcher (defaults to an aiohttp-backed HttpIconFetcher)
            encoder: Icon encoder (defaults to RasterIconEncoder)
        """
        self.config = config
        self.logger = get_logger("pipeline")

        if fetcher is None:
            fetcher = HttpIconFetcher(
                timeout=config.timeout,
                user_agent=config.user_agent
            )
        if encoder is None:
            encoder = RasterIconEncoder()

        self.extractor = IconExtractor(config)
        self.converter = IconConverter(config, fetcher, encoder)
        self.rewriter = IconRewriter(config)

    async def build(self) -> BuildResult:
        """
        Run the full build.

        Returns:
            BuildResult with per-icon outcomes and the output location
        """
        start_time = time.time()

        # Step 1: extract icons
        print_info(f"Reading {self.config.input_file}")
        html = read_document(self.config.input_file)
        icons = self.extractor.extract(html)

        if icons:
            print_status("Found icons:", "bold")
            for icon in icons:
                print_status(f"  • {icon.name}", "default")

        # Step 2: download and convert icons
        results = await self.converter.convert_all(icons)

        # Step 3: replace URLs
        if icons:
            print_info("Updating icon URLs in HTML...")
        rewritten = self.rewriter.rewrite(html, icons)

        # Step 4: save output
        output_path = save_output(rewritten.html, self.config)
        print_info(f"Updated signature saved to: {output_path}")

        result = BuildResult(
            icons=icons,
            results=results,
            replacements=rewritten.replacements,
            output_path=output_path,
            duration_seconds=time.time() - start_time
        )

        self.logger.debug(
            f"Build finished: {len(result.converted)} converted, "
            f"{len(result.failed)} failed, {result.replacements} replacements"
        )
        return result
