"""Recommendation engine — rule-based equipment financing suggestions."""

from advisor.models.enums import ProductType
from advisor.recommendations.engine import evaluate, get_recommendations
from advisor.schemas.recommendation import (
    AnswerSet,
    Recommendation,
    RecommendationResult,
    RuleMatch,
)

__all__ = [
    "evaluate",
    "get_recommendations",
    "ProductType",
    "AnswerSet",
    "Recommendation",
    "RecommendationResult",
    "RuleMatch",
]
