"""Questionnaire catalog — the fixed screens, their options and step order.

Static data only. Rendering and walking the steps belong to the client;
this module just tells it what to show and in which order.
"""

from __future__ import annotations

from advisor.models.enums import (
    CompanySize,
    EquipmentType,
    FinancialGoal,
    PainPoint,
    QuestionStep,
    Timeframe,
)
from advisor.schemas.questionnaire import AnswerOption, Question
from advisor.schemas.recommendation import AnswerSet

PAIN_POINT_LABELS: dict[PainPoint, str] = {
    PainPoint.CASHFLOW: "Cash Flow Strain During Capex Cycles",
    PainPoint.CREDITLINE: "Eroding Line of Credit Capacity",
    PainPoint.BALANCESHEET: "Balance Sheet Heaviness",
    PainPoint.OBSOLESCENCE: "Equipment Obsolescence Risk",
    PainPoint.BUDGET: "Budget Variability & Unpredictable Cash Demands",
    PainPoint.GROWTH: "Missed Growth Opportunities Due to Delayed Capex",
    PainPoint.VENDOR: "Vendor Power in Pricing and Payment Terms",
    PainPoint.COORDINATION: "Difficulty Coordinating Multi-Vendor Projects",
    PainPoint.MAINTENANCE: "Pressure to Maintain Obsolete Equipment",
    PainPoint.REGULATORY: "Regulatory or Safety Upgrade Pressure",
    PainPoint.UNCERTAINTY: "Inflexible Capex Planning During Economic Uncertainty",
    PainPoint.CAPACITY: "Inability to Flex Capacity Without Overcommitting",
    PainPoint.VALUATION: "Negative Impact on Enterprise Value from High Capex",
}

FINANCIAL_GOAL_LABELS: dict[FinancialGoal, str] = {
    FinancialGoal.PRESERVE_CASH: "Preserve Working Capital",
    FinancialGoal.IMPROVE_RATIOS: "Improve Financial Ratios",
    FinancialGoal.TAX_BENEFITS: "Maximize Tax Benefits",
    FinancialGoal.PREDICTABLE_PAYMENTS: "Predictable Monthly Payments",
    FinancialGoal.FLEXIBLE_TERMS: "Flexible Terms & Early Buyout Options",
    FinancialGoal.PRESERVE_CREDIT: "Preserve Bank Credit Lines",
    FinancialGoal.MATCH_REVENUE: "Match Payments to Revenue Cycles",
}

# Step order — index 0 is the first screen after the intro.
STEP_ORDER: list[QuestionStep] = [
    QuestionStep.PAIN_POINTS,
    QuestionStep.EQUIPMENT_TYPE,
    QuestionStep.FINANCIAL_GOALS,
    QuestionStep.COMPANY_SIZE,
    QuestionStep.TIMEFRAME,
]


def _options(labels: dict) -> list[AnswerOption]:
    return [AnswerOption(id=key.value, label=label) for key, label in labels.items()]


def _labelled_by_value(enum_cls) -> list[AnswerOption]:
    """Options whose id is their display label."""
    return [AnswerOption(id=member.value, label=member.value) for member in enum_cls]


QUESTIONS: list[Question] = [
    Question(
        step=QuestionStep.PAIN_POINTS,
        title="What challenges are you facing?",
        subtitle="Select all that apply to your situation",
        multi_select=True,
        options=_options(PAIN_POINT_LABELS),
    ),
    Question(
        step=QuestionStep.EQUIPMENT_TYPE,
        title="What type of equipment do you need?",
        subtitle="Select the category that best fits your needs",
        multi_select=False,
        options=_labelled_by_value(EquipmentType),
    ),
    Question(
        step=QuestionStep.FINANCIAL_GOALS,
        title="What are your financial priorities?",
        subtitle="Select all that are important to you",
        multi_select=True,
        options=_options(FINANCIAL_GOAL_LABELS),
    ),
    Question(
        step=QuestionStep.COMPANY_SIZE,
        title="What's your company size?",
        subtitle="Select your annual revenue range",
        multi_select=False,
        options=_labelled_by_value(CompanySize),
    ),
    Question(
        step=QuestionStep.TIMEFRAME,
        title="When do you need the equipment?",
        subtitle="Select your timeline",
        multi_select=False,
        options=_labelled_by_value(Timeframe),
    ),
]

_QUESTIONS_BY_STEP: dict[QuestionStep, Question] = {q.step: q for q in QUESTIONS}


def get_question(step: QuestionStep | str) -> Question:
    """Return the question for a step.

    Raises:
        KeyError: If the step is not part of the questionnaire.
    """
    try:
        return _QUESTIONS_BY_STEP[QuestionStep(step)]
    except ValueError:
        raise KeyError(step) from None


def option_label(step: QuestionStep | str, option_id: str) -> str:
    """Look up the display label of an option.

    Raises:
        KeyError: If the step or option id is unknown.
    """
    for option in get_question(step).options:
        if option.id == option_id:
            return option.label
    raise KeyError(option_id)


def is_step_answered(answers: AnswerSet, step: QuestionStep | str) -> bool:
    """Whether the answer set holds a value for a step.

    Multi-select steps need at least one selection; single-select steps
    need a value. Clients use this to enable their "Continue" control.
    """
    step = QuestionStep(step)
    if step == QuestionStep.PAIN_POINTS:
        return bool(answers.selected_pain_points)
    if step == QuestionStep.EQUIPMENT_TYPE:
        return answers.equipment_type is not None
    if step == QuestionStep.FINANCIAL_GOALS:
        return bool(answers.selected_financial_goals)
    if step == QuestionStep.COMPANY_SIZE:
        return answers.company_size is not None
    return answers.timeframe is not None
