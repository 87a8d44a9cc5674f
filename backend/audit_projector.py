"""Project a PageSpeed Insights payload into recommendations and score cards.

The payload is weakly structured, so every nested access goes through a
presence check. Missing data never raises: Performance and SEO report a
dedicated "missing" recommendation, Accessibility and the individual SEO
audits are silently omitted.

Presence is decided by the key alone. A category or audit that exists with a
null or non-numeric `score` is still reported: a category scores 0, an audit
is measured against its own threshold with the score treated as 0 for the
"below 1" checks and as non-zero for the "equals 0" checks.
"""

import logging
from typing import Any

from formatting import to_fixed
from models import ResultItem, ResultSink, ScoreBand
from recommendations import add_recommendation, add_score_card

logger = logging.getLogger(__name__)

LCP_GOOD_MS = 2500
LCP_POOR_MS = 4000
CLS_GOOD = 0.1
CLS_POOR = 0.25
TBT_GOOD_MS = 200
ACCESSIBILITY_MIN_SCORE = 90

SCORE_BAND_MID = 50
SCORE_BAND_HIGH = 90


def score_band(score: float) -> ScoreBand:
    """Colour band for a 0-100 score card: low (<50), mid (50-89), high (>=90)."""
    if score >= SCORE_BAND_HIGH:
        return "high"
    if score >= SCORE_BAND_MID:
        return "mid"
    return "low"


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _category_score(categories: dict, category_id: str) -> float | None:
    """0-100 score of a category, or None when the category is absent."""
    category = categories.get(category_id)
    if not isinstance(category, dict):
        return None
    score = _number(category.get("score"))
    if score is None:
        logger.info("PageSpeed category %s has no numeric score; reporting 0.", category_id)
        return 0.0
    return score * 100


def _audit(audits: dict, audit_id: str) -> dict | None:
    audit = audits.get(audit_id)
    return audit if isinstance(audit, dict) else None


def _is_zero(audit: dict) -> bool:
    return _number(audit.get("score")) == 0


def _below_full_marks(audit: dict) -> bool:
    score = _number(audit.get("score"))
    return score is None or score < 1


def _first_metrics_item(audits: dict) -> dict | None:
    details = _mapping(_mapping(audits.get("metrics")).get("details"))
    items = details.get("items")
    if not isinstance(items, list) or not items:
        return None
    first = items[0]
    return first if isinstance(first, dict) else None


def _lighthouse_result(payload: dict) -> dict:
    # The API nests everything under lighthouseResult; a bare result is accepted too.
    lighthouse = payload.get("lighthouseResult")
    if isinstance(lighthouse, dict):
        return lighthouse
    return payload


def add_core_web_vitals(sink: ResultSink, metrics: dict) -> None:
    lcp = _number(metrics.get("largestContentfulPaint"))
    if lcp is not None:
        if lcp <= LCP_GOOD_MS:
            rating, severity = "Good", "good"
        elif lcp <= LCP_POOR_MS:
            rating, severity = "Needs Improvement", "info"
        else:
            rating, severity = "Poor", "bad"
        add_recommendation(
            sink, f"LCP: {rating} ({to_fixed(lcp / 1000, 2)}s). Aim for < 2.5s.", severity
        )

    cls = _number(metrics.get("cumulativeLayoutShift"))
    if cls is not None:
        if cls <= CLS_GOOD:
            rating, severity = "Good", "good"
        elif cls <= CLS_POOR:
            rating, severity = "Needs Improvement", "info"
        else:
            rating, severity = "Poor", "bad"
        add_recommendation(sink, f"CLS: {rating} ({to_fixed(cls, 3)}). Aim for < 0.1.", severity)

    tbt = _number(metrics.get("totalBlockingTime"))
    if tbt is not None:
        if tbt <= TBT_GOOD_MS:
            rating, severity = "Good (Low Blocking Time)", "good"
        else:
            rating, severity = "Poor (High Blocking Time)", "bad"
        add_recommendation(
            sink,
            f"TBT (Proxy for INP): {rating} ({to_fixed(tbt, 0)}ms). Aim for < 200ms.",
            severity,
        )


def add_performance(sink: ResultSink, categories: dict, audits: dict) -> None:
    score = _category_score(categories, "performance")
    if score is None:
        logger.info("PageSpeed payload has no performance category.")
        add_recommendation(
            sink,
            "Performance Data Missing: Could not retrieve Core Web Vitals data for this URL.",
            "bad",
        )
        return

    add_score_card(sink, "Performance Score", score)
    add_recommendation(sink, "Core Web Vitals Check", "good")

    metrics = _first_metrics_item(audits)
    if metrics is None:
        logger.debug("PageSpeed payload has no metrics audit items.")
        return
    add_core_web_vitals(sink, metrics)


def add_accessibility(sink: ResultSink, categories: dict) -> None:
    score = _category_score(categories, "accessibility")
    if score is None:
        return

    add_score_card(sink, "Accessibility Score", score)
    if score < ACCESSIBILITY_MIN_SCORE:
        add_recommendation(
            sink,
            "Accessibility: Low score! Check for issues like color contrast or form labels.",
            "bad",
        )
    else:
        add_recommendation(sink, "Accessibility: Excellent score!", "good")


def add_seo(sink: ResultSink, categories: dict, audits: dict) -> None:
    score = _category_score(categories, "seo")
    if score is None:
        logger.info("PageSpeed payload has no seo category.")
        add_recommendation(
            sink, "SEO Audit Missing: Could not retrieve full SEO audit for this URL.", "bad"
        )
        return

    add_score_card(sink, "Google SEO Score", score)

    meta_description = _audit(audits, "meta-description")
    if meta_description is not None:
        if _is_zero(meta_description):
            add_recommendation(
                sink, "Meta Description: Page is missing one, or it is too short.", "bad"
            )
        else:
            add_recommendation(
                sink, "Meta Description: Page has a suitable meta description.", "good"
            )

    image_alt = _audit(audits, "image-alt")
    if image_alt is not None:
        if _below_full_marks(image_alt):
            add_recommendation(sink, "Image SEO: Some images are missing an `alt` tag.", "bad")
        else:
            add_recommendation(sink, "Image SEO: All images have alt tags.", "good")

    is_crawlable = _audit(audits, "is-crawlable")
    if is_crawlable is not None:
        if _below_full_marks(is_crawlable):
            add_recommendation(
                sink,
                "Indexing: The page may be blocked from indexing. Fix this immediately.",
                "bad",
            )
        else:
            add_recommendation(sink, "Indexing: The page is not blocked from indexing.", "good")

    viewport = _audit(audits, "viewport")
    if viewport is not None:
        if _is_zero(viewport):
            add_recommendation(
                sink,
                'Mobile Viewport: Missing `<meta name="viewport">` tag. '
                "The page is not mobile-friendly.",
                "bad",
            )
        else:
            add_recommendation(
                sink, "Mobile Viewport: Page uses a mobile-friendly viewport.", "good"
            )


def project_audit(payload: Any, sink: ResultSink | None = None) -> list[ResultItem]:
    """
    Convert a PageSpeed Insights response into ordered result records.

    Order: payload error (terminal) -> performance -> accessibility -> seo.
    """
    out = [] if sink is None else sink
    data = _mapping(payload)

    error = data.get("error")
    if error is not None:
        if isinstance(error, dict):
            message = error.get("message") or "Unknown PageSpeed error."
        else:
            message = str(error)
        logger.warning("PageSpeed returned an error payload: %s", message)
        add_recommendation(out, f"Error: {message}", "bad")
        return out

    lighthouse = _lighthouse_result(data)
    categories = _mapping(lighthouse.get("categories"))
    audits = _mapping(lighthouse.get("audits"))

    add_performance(out, categories, audits)
    add_accessibility(out, categories)
    add_seo(out, categories, audits)
    return out
