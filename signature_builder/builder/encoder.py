"""
Icon encoders for rasterizing downloaded icons.

SVG sources are rendered with cairosvg, bitmap sources are resized with Pillow.
Both produce square PNG bytes.
"""

import io
from typing import Protocol

from PIL import Image, UnidentifiedImageError

from .errors import IconEncodeError


class IconEncoder(Protocol):
    """Turns source image bytes into a square bitmap."""

    def resize_and_encode(self, data: bytes, size: int) -> bytes:
        ...


def is_svg(data: bytes) -> bool:
    """Check whether image bytes look like an SVG document."""
    head = data[:1024].lstrip(b"\xef\xbb\xbf \t\r\n").lower()
    return head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head)


class RasterIconEncoder:
    """
    Rasterizes icons to PNG.

    Vector input is rendered at the target size; bitmap input is decoded,
    converted to RGBA and resampled.
    """

    def resize_and_encode(self, data: bytes, size: int) -> bytes:
        """
        Resize icon bytes to a size x size PNG.

        Args:
            data: Source image bytes (SVG or any format Pillow reads)
            size: Width and height of the output in pixels

        Returns:
            PNG bytes

        Raises:
            IconEncodeError: If the source cannot be decoded or rendered
        """
        if not data:
            raise IconEncodeError("Empty image data")

        if is_svg(data):
            return self._render_svg(data, size)
        return self._resize_bitmap(data, size)

    def _render_svg(self, data: bytes, size: int) -> bytes:
        # Imported here so the cairo system library is only needed for SVG input
        import cairosvg

        try:
            return cairosvg.svg2png(
                bytestring=data,
                output_width=size,
                output_height=size
            )
        except Exception as e:
            raise IconEncodeError(f"Could not render SVG: {e}") from e

    def _resize_bitmap(self, data: bytes, size: int) -> bytes:
        try:
            with Image.open(io.BytesIO(data)) as image:
                resized = image.convert("RGBA").resize((size, size), Image.LANCZOS)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise IconEncodeError(f"Could not decode image: {e}") from e

        buffer = io.BytesIO()
        resized.save(buffer, format="PNG")
        return buffer.getvalue()
