"""Pydantic schemas for API request/response."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator

from pagespeed_client import STRATEGIES


class AnalyzeContentRequest(BaseModel):
    """Request body for POST /analyze/content."""

    title: str = ""
    focus_keyword: str = ""
    meta_description: str = ""
    content: str = ""

    @field_validator("title", "focus_keyword", "meta_description", "content", mode="before")
    @classmethod
    def coerce_text_fields(cls, value: object) -> str:
        # Lengths are measured on the raw text, so nothing is stripped here.
        return "" if value is None else str(value)


class AnalyzeUrlRequest(BaseModel):
    """Request body for POST /analyze/url."""

    url: str
    strategy: str | None = None

    @field_validator("url", mode="before")
    @classmethod
    def normalize_url(cls, value: object) -> str:
        return str(value or "").strip()

    @field_validator("strategy", mode="before")
    @classmethod
    def validate_strategy(cls, value: object) -> str | None:
        if value is None or str(value).strip() == "":
            return None
        normalized = str(value).strip().upper()
        if normalized not in STRATEGIES:
            raise ValueError(f"Strategy must be one of: {', '.join(STRATEGIES)}")
        return normalized


class CountersRequest(BaseModel):
    """Request body for POST /counters."""

    meta_description: str = ""
    content: str = ""


class RecommendationItem(BaseModel):
    """Single classified recommendation."""

    type: Literal["recommendation"] = "recommendation"
    message: str
    severity: Literal["good", "bad", "info"]


class ScoreCardItem(BaseModel):
    """Headline category score with its colour band."""

    type: Literal["score_card"] = "score_card"
    title: str
    score: float
    display_score: int
    band: Literal["low", "mid", "high"]


ResultItem = Annotated[Union[RecommendationItem, ScoreCardItem], Field(discriminator="type")]


class AnalyzeContentResponse(BaseModel):
    """Ordered recommendations from the on-page checklist."""

    recommendations: list[RecommendationItem]


class AnalyzeUrlResponse(BaseModel):
    """Ordered recommendations and score cards from the PageSpeed audit."""

    url: str
    results: list[ResultItem]


class MetaCounter(BaseModel):
    length: int
    text: str
    over_limit: bool


class ContentCounter(BaseModel):
    word_count: int
    text: str


class CountersResponse(BaseModel):
    """Live counters shown under the editor fields."""

    meta: MetaCounter
    content: ContentCounter
