import asyncio
import io
import os
import shutil
import struct
import tempfile
import unittest
import zlib

from PIL import Image

from signature_builder.builder.converter import IconConverter
from signature_builder.builder.encoder import RasterIconEncoder, is_svg
from signature_builder.builder.errors import IconEncodeError
from signature_builder.builder.extractor import IconReference
from signature_builder.config import BuildConfig

from tests.fakes import EMAIL_URL, PHONE_URL, SVG_BYTES, FakeFetcher


def make_png(size):
    buffer = io.BytesIO()
    Image.new("RGB", (size, size), (255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()


def png_chunk(kind, data):
    body = kind + data
    return struct.pack(">I", len(data)) + body + struct.pack(">I", zlib.crc32(body) & 0xFFFFFFFF)


def make_oversized_png(width=20000, height=20000):
    """PNG header announcing far more pixels than Pillow agrees to open."""
    header = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + png_chunk(b"IHDR", header)
        + png_chunk(b"IDAT", zlib.compress(b""))
        + png_chunk(b"IEND", b"")
    )


class TestRasterIconEncoder(unittest.TestCase):
    def setUp(self):
        self.encoder = RasterIconEncoder()

    def test_bitmap_is_resized_to_square_png(self):
        output = self.encoder.resize_and_encode(make_png(96), 24)

        with Image.open(io.BytesIO(output)) as image:
            self.assertEqual(image.format, "PNG")
            self.assertEqual(image.size, (24, 24))
            self.assertEqual(image.mode, "RGBA")

    def test_undecodable_bytes_raise(self):
        with self.assertRaises(IconEncodeError):
            self.encoder.resize_and_encode(b"not an image", 24)

    def test_empty_bytes_raise(self):
        with self.assertRaises(IconEncodeError):
            self.encoder.resize_and_encode(b"", 24)

    def test_oversized_bitmap_raises(self):
        with self.assertRaises(IconEncodeError):
            self.encoder.resize_and_encode(make_oversized_png(), 24)


class TestOversizedIconInBuild(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.config = BuildConfig(assets_dir=os.path.join(self.test_dir, "icons"))

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_only_the_oversized_icon_fails(self):
        fetcher = FakeFetcher({EMAIL_URL: make_oversized_png(), PHONE_URL: make_png(48)})
        converter = IconConverter(self.config, fetcher, RasterIconEncoder())
        icons = [
            IconReference(name="email", source_url=EMAIL_URL),
            IconReference(name="phone", source_url=PHONE_URL),
        ]

        with self.assertLogs("signature_builder.converter", level="ERROR") as logs:
            results = asyncio.run(converter.convert_all(icons))

        self.assertEqual([result.ok for result in results], [False, True])
        self.assertIn("email", logs.output[0])
        self.assertTrue(os.path.exists(self.config.asset_path("phone")))


class TestIsSvg(unittest.TestCase):
    def test_detects_svg(self):
        self.assertTrue(is_svg(SVG_BYTES))
        self.assertTrue(is_svg(b'<?xml version="1.0"?>\n<svg xmlns="http://www.w3.org/2000/svg"/>'))
        self.assertTrue(is_svg(b"\n  <SVG/>"))

    def test_rejects_bitmaps(self):
        self.assertFalse(is_svg(make_png(4)))
        self.assertFalse(is_svg(b'<?xml version="1.0"?><feed/>'))


if __name__ == "__main__":
    unittest.main()
