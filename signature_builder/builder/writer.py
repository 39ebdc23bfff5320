"""
Output writer for the rewritten signature.
"""

from ..config import BuildConfig
from ..utils.log import get_logger
from ..utils.paths import ensure_dir


def save_output(html: str, config: BuildConfig) -> str:
    """
    Save the rewritten signature, replacing any previous output.

    Args:
        html: HTML content to save
        config: Build configuration holding the output location

    Returns:
        Path the signature was written to
    """
    ensure_dir(config.output_dir)

    output_path = config.output_path
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(html)

    get_logger("writer").debug(f"Saved {len(html)} characters to {output_path}")
    return output_path
