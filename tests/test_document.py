import sys
import unittest
from pathlib import Path

BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from document import parse_markup  # noqa: E402


class ParsedDocumentTests(unittest.TestCase):
    def test_first_paragraph_and_subheadings(self):
        doc = parse_markup(
            "<h1>Top</h1>\n<h2>Alpha</h2>\n<p>First <b>para</b></p>\n<p>Second</p>\n"
            "<h3>Beta</h3>\n<h4>Gamma</h4>\n<h5>Ignored</h5>"
        )
        self.assertEqual(doc.first_paragraph_text(), "First para")
        self.assertEqual(doc.heading_texts(), ["Alpha", "Beta", "Gamma"])

    def test_missing_paragraph(self):
        doc = parse_markup("<h2>Only a heading</h2>")
        self.assertIsNone(doc.first_paragraph_text())

    def test_link_targets_keep_absent_href_as_none(self):
        doc = parse_markup('<a href="https://example.com">x</a><a>no target</a><a href="/about">a</a>')
        self.assertEqual(doc.link_targets(), ["https://example.com", None, "/about"])

    def test_image_alts(self):
        doc = parse_markup('<img src="a.png"><img src="b.png" alt=""><img src="c.png" alt="A cat">')
        self.assertEqual(doc.image_alts(), [None, "", "A cat"])

    def test_text_excludes_scripts_and_styles(self):
        doc = parse_markup("<p>hello</p><script>var tracking = 1;</script><style>p { color: red; }</style>")
        self.assertEqual(doc.text, "hello")

    def test_head_content_is_not_body_text(self):
        doc = parse_markup(
            "<html><head><title>Head Title</title><meta name=\"description\" content=\"d\"></head>"
            "<body><p>x</p></body></html>"
        )
        self.assertEqual(doc.text, "x")
        self.assertEqual(doc.first_paragraph_text(), "x")

    def test_stray_title_is_not_body_text(self):
        doc = parse_markup("<title>Pasted Title</title>\n<p>Body words</p>")
        self.assertEqual(doc.text.strip(), "Body words")

    def test_malformed_markup_is_tolerated(self):
        doc = parse_markup("<p>unclosed <b>bold <i>text")
        self.assertIn("unclosed", doc.text)
        self.assertIn("bold", doc.text)
        self.assertIsNotNone(doc.first_paragraph_text())

    def test_empty_markup(self):
        doc = parse_markup(None)
        self.assertEqual(doc.text, "")
        self.assertEqual(doc.heading_texts(), [])
        self.assertEqual(doc.link_targets(), [])
        self.assertEqual(doc.image_alts(), [])


if __name__ == "__main__":
    unittest.main()
