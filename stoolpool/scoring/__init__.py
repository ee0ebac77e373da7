"""Scoring, classification and statistics for stool observations."""

from stoolpool.scoring.aggregator import StatsSummary, TrendPoint, aggregate
from stoolpool.scoring.classifier import Classification, classify, get_tier
from stoolpool.scoring.scorer import StoolScoreResult, calculate_score, score_stool

__all__ = [
    "score_stool",
    "calculate_score",
    "StoolScoreResult",
    "classify",
    "get_tier",
    "Classification",
    "aggregate",
    "StatsSummary",
    "TrendPoint",
]
