"""On-page content checklist.

Runs eight independent checks over the editor fields and the parsed body
markup and emits recommendations in a fixed order:

  title -> meta description -> word count -> keyword density
  -> keyword in first paragraph -> subheadings -> links -> image alt text

Every check is pure; empty fields degrade to a "bad" recommendation instead
of raising.
"""

import logging

from document import ParsedDocument, parse_markup
from keyword_metrics import (
    any_contains_keyword,
    contains_keyword,
    count_keyword,
    count_words,
    keyword_density,
    normalize_keyword,
)
from models import AnalysisInput, Recommendation, ResultSink
from recommendations import add_recommendation

logger = logging.getLogger(__name__)

TITLE_MIN_CHARS = 30
TITLE_MAX_CHARS = 60
META_MIN_CHARS = 50
META_MAX_CHARS = 160
MIN_WORD_COUNT = 300
DENSITY_MAX_PERCENT = 2.5
DENSITY_MIN_PERCENT = 0.5

EXTERNAL_LINK_PREFIXES = ("http://", "https://")
INTERNAL_LINK_PREFIXES = ("/", "#")


def check_title(sink: ResultSink, title: str, keyword: str) -> None:
    if not title:
        add_recommendation(
            sink,
            "Page Title: You are missing a page title (H1). This is a critical SEO element.",
            "bad",
        )
        return

    length = len(title)
    if length < TITLE_MIN_CHARS or length > TITLE_MAX_CHARS:
        add_recommendation(
            sink,
            f"Page Title: Your title is {length} characters. "
            f"Aim for {TITLE_MIN_CHARS}-{TITLE_MAX_CHARS} characters.",
            "bad",
        )
    else:
        add_recommendation(sink, "Page Title: Your title length is good.", "good")

    if not keyword:
        return
    if contains_keyword(title, keyword):
        add_recommendation(sink, "Page Title: Your focus keyword is in the title. Great!", "good")
    else:
        add_recommendation(
            sink,
            "Page Title: Your focus keyword was not found in the title. "
            "Try to add it near the beginning.",
            "bad",
        )


def check_meta_description(sink: ResultSink, meta: str, keyword: str) -> None:
    if not meta:
        add_recommendation(sink, "Meta Description: You are missing a meta description.", "bad")
        return

    length = len(meta)
    if length < META_MIN_CHARS or length > META_MAX_CHARS:
        add_recommendation(
            sink,
            f"Meta Description: Length is {length} characters. "
            f"Aim for {META_MIN_CHARS}-{META_MAX_CHARS}.",
            "bad",
        )
    else:
        add_recommendation(sink, "Meta Description: Length is perfect.", "good")

    if not keyword:
        return
    if contains_keyword(meta, keyword):
        add_recommendation(
            sink, "Meta Description: Your focus keyword is in the meta description.", "good"
        )
    else:
        add_recommendation(
            sink, "Meta Description: Your focus keyword is not in your meta description.", "bad"
        )


def check_word_count(sink: ResultSink, word_count: int) -> None:
    if word_count < MIN_WORD_COUNT:
        add_recommendation(
            sink,
            f"Word Count: {word_count} words. This is short. Aim for {MIN_WORD_COUNT}+ words.",
            "bad",
        )
    else:
        add_recommendation(sink, f"Word Count: {word_count} words. Good length!", "good")


def check_keyword_density(sink: ResultSink, text: str, keyword: str, word_count: int) -> None:
    if not keyword:
        add_recommendation(sink, "Focus Keyword: You have not set a focus keyword.", "info")
        return

    density = keyword_density(count_keyword(text, keyword), word_count)
    if density is None:
        add_recommendation(
            sink,
            "Keyword Density: No content to measure. "
            "Add body text that uses your focus keyword.",
            "info",
        )
        return

    if density > DENSITY_MAX_PERCENT:
        add_recommendation(
            sink,
            f"Keyword Density: {density:.2f}%. This is too high (keyword stuffing). "
            "Try to reduce it.",
            "bad",
        )
    elif density < DENSITY_MIN_PERCENT:
        add_recommendation(
            sink,
            f"Keyword Density: {density:.2f}%. This is low. "
            "Try to include the keyword a few more times naturally.",
            "info",
        )
    else:
        add_recommendation(
            sink, f"Keyword Density: {density:.2f}%. This is a good density.", "good"
        )


def check_keyword_in_first_paragraph(sink: ResultSink, doc: ParsedDocument, keyword: str) -> None:
    if not keyword:
        return
    first_paragraph = doc.first_paragraph_text()
    if first_paragraph is not None and contains_keyword(first_paragraph, keyword):
        add_recommendation(
            sink, "Content: Your focus keyword appears in the first paragraph. Excellent!", "good"
        )
    else:
        add_recommendation(
            sink,
            "Content: Your focus keyword was not found in the first paragraph. Try to add it.",
            "bad",
        )


def check_headings(sink: ResultSink, doc: ParsedDocument, keyword: str) -> None:
    headings = doc.heading_texts()
    if not headings:
        add_recommendation(
            sink,
            "Headings: Your content has no subheadings (H2, H3, etc.). "
            "Use them to structure your content.",
            "bad",
        )
        return

    add_recommendation(
        sink,
        f"Headings: You have {len(headings)} subheadings. This is great for structure.",
        "good",
    )
    if not keyword:
        return
    if any_contains_keyword(headings, keyword):
        add_recommendation(
            sink, "Headings: Your focus keyword is in at least one subheading. Perfect!", "good"
        )
    else:
        # Advisory, not a failure.
        add_recommendation(
            sink,
            "Headings: Your focus keyword was not found in any subheadings. "
            "Consider adding it to one.",
            "info",
        )


def check_links(sink: ResultSink, doc: ParsedDocument) -> None:
    external_links = 0
    internal_links = 0
    for href in doc.link_targets():
        if not href:
            continue
        if href.startswith(EXTERNAL_LINK_PREFIXES):
            external_links += 1
        elif href.startswith(INTERNAL_LINK_PREFIXES):
            internal_links += 1

    if external_links == 0:
        add_recommendation(
            sink,
            "Outbound Links: You have no outbound links. "
            "Try linking to other high-authority websites.",
            "info",
        )
    else:
        add_recommendation(
            sink, f"Outbound Links: You have {external_links} outbound link(s).", "good"
        )

    if internal_links == 0:
        add_recommendation(
            sink,
            "Internal Links: You have no internal links. Link to other pages on your own site.",
            "bad",
        )
    else:
        add_recommendation(
            sink, f"Internal Links: You have {internal_links} internal link(s).", "good"
        )


def check_images(sink: ResultSink, doc: ParsedDocument) -> None:
    alts = doc.image_alts()
    if not alts:
        add_recommendation(
            sink,
            "Images: Your content doesn't seem to have any images. Consider adding some.",
            "info",
        )
        return

    missing_alt = sum(1 for alt in alts if alt is None or alt.strip() == "")
    if missing_alt > 0:
        add_recommendation(
            sink,
            f"Image SEO: You have {missing_alt} image(s) missing an 'alt' tag. "
            "Add descriptive alt tags to all images.",
            "bad",
        )
    else:
        add_recommendation(
            sink, f"Image SEO: All {len(alts)} image(s) have alt tags. Well done!", "good"
        )


def analyze_content(
    data: AnalysisInput, doc: ParsedDocument, sink: ResultSink | None = None
) -> list[Recommendation]:
    """
    Run the full on-page checklist.

    `doc` must be the parsed form of ``data["body_markup"]``. Results are
    appended to `sink` (a new list when omitted), which is returned.
    """
    out = [] if sink is None else sink
    keyword = normalize_keyword(data.get("focus_keyword"))
    title = data.get("title") or ""
    meta = data.get("meta_description") or ""

    text = doc.text
    word_count = count_words(text)

    check_title(out, title, keyword)
    check_meta_description(out, meta, keyword)
    check_word_count(out, word_count)
    check_keyword_density(out, text, keyword, word_count)
    check_keyword_in_first_paragraph(out, doc, keyword)
    check_headings(out, doc, keyword)
    check_links(out, doc)
    check_images(out, doc)

    logger.debug(
        "Content analysis finished: words=%d keyword=%r recommendations=%d",
        word_count,
        keyword,
        len(out),
    )
    return out


def meta_counter(meta: str | None) -> dict:
    """Live character counter shown under the meta description field."""
    length = len(meta or "")
    return {
        "length": length,
        "text": f"{length} / {META_MAX_CHARS}",
        "over_limit": length > META_MAX_CHARS,
    }


def content_counter(markup: str | None) -> dict:
    """Live word counter shown under the body content field."""
    word_count = count_words(parse_markup(markup).text)
    return {"word_count": word_count, "text": f"{word_count} words"}
