"""Parsed view of the body markup pasted into the editor.

Wraps BeautifulSoup and exposes only the queries the content checks need:
plain text, first paragraph, subheadings, link targets and image alt text.
Malformed markup never raises; html.parser recovers best-effort.
"""

from bs4 import BeautifulSoup

SUBHEADING_TAGS = ["h2", "h3", "h4"]
_NON_VISIBLE_TAGS = ["head", "title", "script", "style"]


class ParsedDocument:
    """Query object over a single parsed markup string."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @property
    def text(self) -> str:
        # Text nodes are joined without separators, like DOM textContent.
        return self._soup.get_text()

    def first_paragraph_text(self) -> str | None:
        paragraph = self._soup.find("p")
        if paragraph is None:
            return None
        return paragraph.get_text()

    def heading_texts(self) -> list[str]:
        return [h.get_text() for h in self._soup.find_all(SUBHEADING_TAGS)]

    def link_targets(self) -> list[str | None]:
        """`href` of every anchor in document order; None when the attribute is absent."""
        return [a.get("href") for a in self._soup.find_all("a")]

    def image_alts(self) -> list[str | None]:
        """`alt` of every image in document order; None when the attribute is absent."""
        return [img.get("alt") for img in self._soup.find_all("img")]


def parse_markup(markup: str | None) -> ParsedDocument:
    soup = BeautifulSoup(markup or "", "html.parser")

    # Keep only body content, like the browser's body.textContent.
    # One lookup per tag name so children of removed tags are not revisited.
    for name in _NON_VISIBLE_TAGS:
        for tag in soup.find_all(name):
            tag.decompose()

    return ParsedDocument(soup)
