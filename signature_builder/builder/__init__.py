"""
Build pipeline for the signature builder.

Contains components for extracting, converting, rewriting, and saving.
"""

from .pipeline import SignatureBuilder, BuildResult
from .extractor import IconExtractor, IconReference, read_document
from .converter import IconConverter, HttpIconFetcher, IconResult
from .encoder import IconEncoder, RasterIconEncoder
from .rewrite import IconRewriter, RewriteResult, parse_icon_name
from .writer import save_output
from .errors import IconError, IconFetchError, IconEncodeError

__all__ = [
    "SignatureBuilder",
    "BuildResult",
    "IconExtractor",
    "IconReference",
    "read_document",
    "IconConverter",
    "HttpIconFetcher",
    "IconResult",
    "IconEncoder",
    "RasterIconEncoder",
    "IconRewriter",
    "RewriteResult",
    "parse_icon_name",
    "save_output",
    "IconError",
    "IconFetchError",
    "IconEncodeError",
]
