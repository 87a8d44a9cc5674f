"""SEO Content Analyzer API – FastAPI app exposing the checklist and PageSpeed audit."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from audit_projector import score_band
from content_analyzer import analyze_content, content_counter, meta_counter
from document import parse_markup
from formatting import to_fixed
from models import ResultItem
from schemas import (
    AnalyzeContentRequest,
    AnalyzeContentResponse,
    AnalyzeUrlRequest,
    AnalyzeUrlResponse,
    CountersRequest,
    CountersResponse,
    RecommendationItem,
    ScoreCardItem,
)
from url_audit import run_url_audit

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
CORS_ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",") if origin.strip()
] or ["*"]

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SEO Content Analyzer API",
    description="On-page SEO checklist and PageSpeed Insights summary",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _to_schema_item(item: ResultItem) -> RecommendationItem | ScoreCardItem:
    if item["type"] == "score_card":
        score = item["score"]
        return ScoreCardItem(
            title=item["title"],
            score=score,
            display_score=int(to_fixed(score, 0)),
            band=score_band(score),
        )
    return RecommendationItem(message=item["message"], severity=item["severity"])


@app.post("/analyze/content", response_model=AnalyzeContentResponse)
def analyze_content_endpoint(body: AnalyzeContentRequest) -> AnalyzeContentResponse:
    """
    Pipeline: parse body markup -> run the eight on-page checks -> return ordered results.
    """
    doc = parse_markup(body.content)
    recommendations = analyze_content(
        {
            "title": body.title,
            "focus_keyword": body.focus_keyword,
            "meta_description": body.meta_description,
            "body_markup": body.content,
        },
        doc,
    )
    return AnalyzeContentResponse(
        recommendations=[_to_schema_item(item) for item in recommendations]
    )


@app.post("/analyze/url", response_model=AnalyzeUrlResponse)
def analyze_url_endpoint(body: AnalyzeUrlRequest) -> AnalyzeUrlResponse:
    """
    Pipeline: PageSpeed Insights request -> project scores, vitals and audits.
    """
    if not body.url:
        raise HTTPException(status_code=400, detail="Please enter a URL to analyze.")

    logger.info("Running PageSpeed audit for %s", body.url)
    results = run_url_audit(body.url, strategy=body.strategy)
    return AnalyzeUrlResponse(url=body.url, results=[_to_schema_item(item) for item in results])


@app.post("/counters", response_model=CountersResponse)
def counters(body: CountersRequest) -> CountersResponse:
    """Live character and word counters for the editor fields."""
    return CountersResponse(
        meta=meta_counter(body.meta_description),
        content=content_counter(body.content),
    )


@app.get("/health")
def health() -> dict:
    """Health check for deployment."""
    return {"status": "ok"}
