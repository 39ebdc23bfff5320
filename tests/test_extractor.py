import os
import shutil
import tempfile
import unittest

from signature_builder.builder.extractor import IconExtractor, IconReference, read_document
from signature_builder.config import BuildConfig

from tests.fakes import EMAIL_URL, PHONE_URL


class TestIconExtractor(unittest.TestCase):
    def setUp(self):
        self.extractor = IconExtractor(BuildConfig())

    def test_duplicate_urls_yield_one_reference(self):
        html = (
            f'<img src="{EMAIL_URL}"><a href="https://example.com/about">About</a>'
            f"<img src='{EMAIL_URL}'>"
        )
        self.assertEqual(
            self.extractor.extract(html),
            [IconReference(name="email", source_url=EMAIL_URL)]
        )

    def test_no_icons_is_empty(self):
        html = '<p>Jane Doe</p><img src="https://example.com/logo.png">'
        self.assertEqual(self.extractor.extract(html), [])

    def test_first_seen_order(self):
        html = f'<img src="{PHONE_URL}"><img src="{EMAIL_URL}"><img src="{PHONE_URL}">'
        self.assertEqual([icon.name for icon in self.extractor.extract(html)], ["phone", "email"])

    def test_css_url_stops_at_parenthesis(self):
        html = f'<td style="background:url({EMAIL_URL}) no-repeat">'
        self.assertEqual(self.extractor.extract(html)[0].source_url, EMAIL_URL)

    def test_same_name_different_urls_are_kept_and_warned(self):
        other = "https://fonts.gstatic.com/s/i/materialiconsoutlined/email/v2/24px.svg"
        html = f'<img src="{EMAIL_URL}"><img src="{other}">'

        with self.assertLogs("signature_builder.extractor", level="WARNING") as logs:
            icons = self.extractor.extract(html)

        self.assertEqual([icon.source_url for icon in icons], [EMAIL_URL, other])
        self.assertIn("email", logs.output[0])

    def test_other_icon_family_is_ignored(self):
        html = '<img src="https://fonts.gstatic.com/s/i/materialicons/email/v1/24px.svg">'
        self.assertEqual(self.extractor.extract(html), [])


class TestReadDocument(unittest.TestCase):
    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_reads_utf8(self):
        path = os.path.join(self.test_dir, "signature.html")
        with open(path, "w", encoding="utf-8") as f:
            f.write("<p>Zoë · Café</p>")
        self.assertEqual(read_document(path), "<p>Zoë · Café</p>")

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_document(os.path.join(self.test_dir, "missing.html"))


if __name__ == "__main__":
    unittest.main()
