"""Plain-text formatting for evaluation results.

Used for the "email these results" summary. No markup, just lines.
"""

from __future__ import annotations

from advisor.config import BrandingSettings
from advisor.models.enums import QuestionStep
from advisor.questionnaire.catalog import option_label
from advisor.schemas.recommendation import AnswerSet, Recommendation, RecommendationResult


def format_list(values: list[str] | None) -> str:
    """Join values with commas: ["a", "b"] -> "a, b"."""
    if not values:
        return "-"
    return ", ".join(values)


def format_answers(answers: AnswerSet) -> list[str]:
    """One "Question: answer" line per step, using option labels."""
    pain = sorted(
        option_label(QuestionStep.PAIN_POINTS, p.value) for p in answers.selected_pain_points
    )
    goals = sorted(
        option_label(QuestionStep.FINANCIAL_GOALS, g.value) for g in answers.selected_financial_goals
    )
    return [
        f"Challenges: {format_list(pain)}",
        f"Equipment: {answers.equipment_type.value if answers.equipment_type else '-'}",
        f"Priorities: {format_list(goals)}",
        f"Company size: {answers.company_size.value if answers.company_size else '-'}",
        f"Timeframe: {answers.timeframe.value if answers.timeframe else '-'}",
    ]


def format_recommendation(rec: Recommendation, index: int) -> list[str]:
    """Format one card as a numbered block."""
    lines = [f"{index}. {rec.product_type}", f"   {rec.description}"]
    lines.extend(f"   ✓ {benefit}" for benefit in rec.benefits)
    lines.append(f"   Best for: {rec.best_for}")
    return lines


def format_contact(branding: BrandingSettings) -> list[str]:
    """Closing block inviting the user to get in touch."""
    lines = [
        "Ready to discuss your options?",
        f"As a {branding.advisor_credential}, I can help you structure "
        "the right financing solution for your specific situation.",
    ]
    if branding.contact_phone:
        lines.append(f"Phone: {branding.contact_phone}")
    if branding.contact_email:
        lines.append(f"Email: {branding.contact_email}")
    return lines


def format_results_text(
    answers: AnswerSet,
    result: RecommendationResult,
    branding: BrandingSettings,
) -> str:
    """Full plain-text summary: header, answers, cards, contact block."""
    lines = [
        f"{branding.advisor_name} — Your Personalized Recommendations",
        "",
        *format_answers(answers),
        "",
    ]
    for i, rec in enumerate(result.recommendations, start=1):
        lines.extend(format_recommendation(rec, i))
        lines.append("")
    lines.extend(format_contact(branding))
    return "\n".join(lines) + "\n"
