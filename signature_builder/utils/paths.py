"""
Path utilities for the signature builder.

Provides directory management and icon asset path generation.
"""

import os
from pathlib import Path


def ensure_dir(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.
    
    Args:
        path: Directory path
    """
    Path(path).mkdir(parents=True, exist_ok=True)


def ensure_parent_dir(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.
    
    Args:
        file_path: File path
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_dir(parent)


def get_icon_path(name: str, assets_dir: str) -> str:
    """
    Get the local file path for a rasterized icon.
    
    Args:
        name: Icon name captured from the source URL
        assets_dir: Directory holding the icon bitmaps
        
    Returns:
        Path of the form <assets_dir>/<name>.png
    """
    return os.path.join(assets_dir, f"{name}.png")
