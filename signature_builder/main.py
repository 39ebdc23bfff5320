#!/usr/bin/env python3
"""
Signature Builder - localizes the icons of an HTML email signature.

This tool reads the signature, downloads every hosted Material icon it
references, rasterizes the icons to PNG, and rewrites the HTML to load them
from the repository's raw-content URL.

Usage:
    python -m signature_builder
    python -m signature_builder --input src/signature.html --output-dir output

Steps:
    1. Extract hosted icon URLs from the signature
    2. Download and convert each icon to a small PNG
    3. Replace the hosted URLs with self-hosted ones
    4. Save the updated signature
"""

import argparse
import asyncio
import logging
import sys
from typing import Callable, List, Optional

from .builder import SignatureBuilder
from .config import BuildConfig
from .utils import constants
from .utils.log import (
    setup_logger,
    get_logger,
    print_status,
    print_success,
    print_error,
    print_info,
    print_warning
)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='signature_builder',
        description='Convert hosted signature icons to self-hosted PNG files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s
    %(prog)s --input src/signature.html --output-dir output
    %(prog)s --size 32 --branch gh-pages -v
        """
    )

    parser.add_argument(
        '--input', '-i',
        type=str,
        default=constants.DEFAULT_INPUT_FILE,
        help=f'Signature HTML to read (default: {constants.DEFAULT_INPUT_FILE})'
    )

    parser.add_argument(
        '--output-dir', '-o',
        type=str,
        default=constants.DEFAULT_OUTPUT_DIR,
        help=f'Directory for the updated signature (default: {constants.DEFAULT_OUTPUT_DIR})'
    )

    parser.add_argument(
        '--assets-dir', '-a',
        type=str,
        default=constants.DEFAULT_ASSETS_DIR,
        help=f'Directory for converted icons (default: {constants.DEFAULT_ASSETS_DIR})'
    )

    parser.add_argument(
        '--size', '-s',
        type=int,
        default=constants.DEFAULT_ICON_SIZE,
        help=f'Icon width and height in pixels (default: {constants.DEFAULT_ICON_SIZE})'
    )

    parser.add_argument(
        '--user',
        type=str,
        default=constants.DEFAULT_GITHUB_USER,
        help=f'GitHub user hosting the icons (default: {constants.DEFAULT_GITHUB_USER})'
    )

    parser.add_argument(
        '--repo',
        type=str,
        default=constants.DEFAULT_GITHUB_REPO,
        help=f'GitHub repository hosting the icons (default: {constants.DEFAULT_GITHUB_REPO})'
    )

    parser.add_argument(
        '--branch',
        type=str,
        default=constants.DEFAULT_GITHUB_BRANCH,
        help=f'Branch the icons are pushed to (default: {constants.DEFAULT_GITHUB_BRANCH})'
    )

    parser.add_argument(
        '--timeout',
        type=int,
        default=constants.DEFAULT_TIMEOUT,
        help=f'Icon download timeout in seconds (default: {constants.DEFAULT_TIMEOUT})'
    )

    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Also write log records to this file'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress output except errors'
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> BuildConfig:
    """
    Create the build configuration from parsed arguments.

    Args:
        args: Parsed arguments namespace

    Returns:
        BuildConfig instance

    Raises:
        ValueError: If an argument is out of range
    """
    return BuildConfig(
        input_file=args.input,
        output_dir=args.output_dir,
        assets_dir=args.assets_dir,
        icon_size=args.size,
        github_user=args.user,
        github_repo=args.repo,
        github_branch=args.branch,
        timeout=args.timeout
    )


def print_banner() -> None:
    """Print the application banner."""
    print_status("🚀 Email Signature Build Process", "bold cyan")
    print_status("═" * 39, "cyan")


def print_summary(result) -> None:
    """
    Print the build summary.

    Args:
        result: BuildResult object
    """
    print("\n" + "═" * 39)
    print_success("Build complete!")
    print(f"  Icons found:     {len(result.icons)}")
    print(f"  Icons converted: {len(result.converted)}")
    print(f"  Icons failed:    {len(result.failed)}")
    print(f"  URLs replaced:   {result.replacements}")
    print(f"  Duration:        {result.duration_seconds:.1f} seconds")

    for failure in result.failed:
        print_warning(f"{failure.icon.name}: {failure.error}")

    print("")
    print("Next steps:")
    print(f"  1. Review {result.output_path}")
    print("  2. Commit and push assets/icons/*.png to GitHub")
    print("  3. Test the signature in Gmail")


async def main(
    argv: Optional[List[str]] = None,
    builder_factory: Callable[[BuildConfig], SignatureBuilder] = SignatureBuilder
) -> int:
    """
    Main entry point for the signature builder.

    Args:
        argv: Argument list (defaults to sys.argv[1:])
        builder_factory: Creates the builder for a configuration

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logger(level=log_level, log_file=args.log_file)

    if not args.quiet:
        print_banner()

    try:
        config = build_config(args)

        if not args.quiet:
            print_info(f"Assets: {config.assets_dir}, Size: {config.icon_size}px")

        builder = builder_factory(config)
        result = await builder.build()

        if not args.quiet:
            print_summary(result)

        return 0

    except KeyboardInterrupt:
        print_error("Build interrupted by user")
        return 1
    except Exception as e:
        get_logger("main").error(f"Build failed: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
