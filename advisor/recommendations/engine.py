"""Recommendation engine — evaluates every rule against an AnswerSet.

Pure Python, no I/O. Callers build the AnswerSet and decide what to do
with the result.
"""

from __future__ import annotations

import logging
from typing import Any

from advisor.recommendations.products import default_cards, product_card
from advisor.recommendations.rules import RULE_CHECKS
from advisor.schemas.recommendation import (
    AnswerSet,
    Recommendation,
    RecommendationResult,
    RuleMatch,
)

logger = logging.getLogger(__name__)


def _evaluate_rules(answers: AnswerSet) -> list[RuleMatch]:
    """Run every rule in order and collect the ones that fired."""
    matched: list[RuleMatch] = []
    for product, check_fn in RULE_CHECKS.items():
        match = check_fn(answers)
        logger.debug("Rule %s: %s", product.value, "matched" if match else "no match")
        if match is not None:
            matched.append(match)
    return matched


def _build_answers_summary(answers: AnswerSet) -> dict[str, Any]:
    """Build a summary dict for logging/display."""
    return {
        "pain_points": sorted(p.value for p in answers.selected_pain_points),
        "equipment_type": answers.equipment_type.value if answers.equipment_type else None,
        "financial_goals": sorted(g.value for g in answers.selected_financial_goals),
        "company_size": answers.company_size.value if answers.company_size else None,
        "timeframe": answers.timeframe.value if answers.timeframe else None,
    }


def evaluate(answers: AnswerSet) -> RecommendationResult:
    """Evaluate all rules and return recommendations with the rule trace.

    Recommendations follow rule order with no deduplication or ranking.
    When no rule fires the two default cards are returned instead.
    """
    matched = _evaluate_rules(answers)

    recommendations: list[Recommendation] = [product_card(m.product) for m in matched]
    used_defaults = not recommendations
    if used_defaults:
        recommendations = default_cards()

    logger.info(
        "Evaluated answers: matched=%s defaults=%s",
        [m.rule for m in matched],
        used_defaults,
    )

    return RecommendationResult(
        recommendations=recommendations,
        matched_rules=matched,
        used_defaults=used_defaults,
        answers_summary=_build_answers_summary(answers),
    )


def get_recommendations(answers: AnswerSet) -> list[Recommendation]:
    """Return the ordered recommendation cards for an AnswerSet."""
    return evaluate(answers).recommendations
