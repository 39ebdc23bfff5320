"""
Signature Builder - localizes the icons of an HTML email signature.

This package finds externally-hosted Material icons referenced by a signature,
rasterizes them to small PNG files, and rewrites the HTML to point at a
self-hosted copy of each icon.
"""

__version__ = "1.0.0"
__author__ = "Dylan Howard"
