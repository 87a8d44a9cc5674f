"""Helpers that append result records to a sink.

A sink is anything with an ``append`` method; the analyzers default to a list.
"""

from models import Recommendation, ResultSink, ScoreCard, Severity


def add_recommendation(sink: ResultSink, message: str, severity: Severity) -> Recommendation:
    item: Recommendation = {"type": "recommendation", "message": message, "severity": severity}
    sink.append(item)
    return item


def add_score_card(sink: ResultSink, title: str, score: float) -> ScoreCard:
    item: ScoreCard = {"type": "score_card", "title": title, "score": score}
    sink.append(item)
    return item
