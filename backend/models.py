"""Data models and types used across the backend.

Request/response validation lives in schemas.py.
Records emitted by the analyzers live here.
"""

from typing import Literal, Protocol, TypedDict, Union

Severity = Literal["good", "bad", "info"]
ScoreBand = Literal["low", "mid", "high"]


class Recommendation(TypedDict):
    """One classified piece of advice produced by a check."""

    type: Literal["recommendation"]
    message: str
    severity: Severity


class ScoreCard(TypedDict):
    """Headline 0-100 score for a PageSpeed category."""

    type: Literal["score_card"]
    title: str
    score: float


class AnalysisInput(TypedDict):
    """Raw editor fields for the content analyzer."""

    title: str
    focus_keyword: str
    meta_description: str
    body_markup: str


ResultItem = Union[Recommendation, ScoreCard]


class ResultSink(Protocol):
    """Ordered destination for result records; a plain list qualifies."""

    def append(self, item: ResultItem, /) -> None: ...
