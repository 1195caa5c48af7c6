"""Pydantic schemas for the recommendation evaluator.

Pure data classes — no I/O. Field aliases match the camelCase keys a
browser client sends, snake_case names are accepted too.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from advisor.models.enums import (
    CompanySize,
    EquipmentType,
    FinancialGoal,
    PainPoint,
    ProductType,
    Timeframe,
)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class AnswerSet(BaseModel):
    """The user's accumulated selections across the questionnaire.

    Frozen once built: the evaluator only ever reads it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    selected_pain_points: frozenset[PainPoint] = Field(
        default_factory=frozenset, alias="selectedPainPoints",
    )
    equipment_type: EquipmentType | None = Field(default=None, alias="equipmentType")
    selected_financial_goals: frozenset[FinancialGoal] = Field(
        default_factory=frozenset, alias="selectedFinancialGoals",
    )
    company_size: CompanySize | None = Field(default=None, alias="companySize")
    timeframe: Timeframe | None = None


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class Recommendation(BaseModel):
    """A single financing product card."""

    model_config = ConfigDict(populate_by_name=True)

    product_type: str = Field(alias="productType")
    description: str
    benefits: list[str] = Field(default_factory=list)
    best_for: str = Field(alias="bestFor")


class RuleMatch(BaseModel):
    """Trace of one rule that fired and the answers that triggered it."""

    rule: str
    product: ProductType
    reasons: list[str] = Field(default_factory=list)


class RecommendationResult(BaseModel):
    """Full evaluation output: cards plus the rule trace."""

    model_config = ConfigDict(populate_by_name=True)

    recommendations: list[Recommendation]
    matched_rules: list[RuleMatch] = Field(default_factory=list, alias="matchedRules")
    used_defaults: bool = Field(default=False, alias="usedDefaults")
    answers_summary: dict[str, Any] = Field(default_factory=dict, alias="answersSummary")
