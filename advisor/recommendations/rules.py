"""Per-product recommendation rules.

Each check reads only the AnswerSet and returns a RuleMatch naming the
answers that triggered it, or None when the rule does not fire. Absent
fields simply fail every condition that references them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

from advisor.models.enums import EquipmentType, FinancialGoal, PainPoint, ProductType
from advisor.schemas.recommendation import AnswerSet, RuleMatch


def _hits(selected: frozenset, triggers: Iterable[Enum], prefix: str) -> list[str]:
    """Triggers present in a selection, as "prefix:value" reasons, in trigger order."""
    return [f"{prefix}:{t.value}" for t in triggers if t in selected]


def _pain(answers: AnswerSet, *triggers: PainPoint) -> list[str]:
    return _hits(answers.selected_pain_points, triggers, "pain_point")


def _goal(answers: AnswerSet, *triggers: FinancialGoal) -> list[str]:
    return _hits(answers.selected_financial_goals, triggers, "financial_goal")


def _match(rule: str, product: ProductType, reasons: list[str]) -> RuleMatch | None:
    if not reasons:
        return None
    return RuleMatch(rule=rule, product=product, reasons=reasons)


# ── Operating Lease ────────────────────────────────────────────────────────


def check_operating_lease(answers: AnswerSet) -> RuleMatch | None:
    """Obsolescence, capacity or planning-uncertainty pressure."""
    reasons = _pain(
        answers,
        PainPoint.OBSOLESCENCE,
        PainPoint.CAPACITY,
        PainPoint.UNCERTAINTY,
    )
    return _match("operating_lease", ProductType.OPERATING_LEASE, reasons)


# ── Capital Lease ──────────────────────────────────────────────────────────


def check_capital_lease(answers: AnswerSet) -> RuleMatch | None:
    """Cash-flow or credit-line strain, or a tax-benefit goal."""
    reasons = _pain(answers, PainPoint.CASHFLOW, PainPoint.CREDITLINE)
    reasons += _goal(answers, FinancialGoal.TAX_BENEFITS)
    return _match("capital_lease", ProductType.CAPITAL_LEASE, reasons)


# ── TRAC Lease ─────────────────────────────────────────────────────────────


def check_trac_lease(answers: AnswerSet) -> RuleMatch | None:
    """Fleet vehicles only, whatever else was answered."""
    reasons: list[str] = []
    if answers.equipment_type == EquipmentType.TRANSPORTATION:
        reasons.append(f"equipment_type:{answers.equipment_type.value}")
    return _match("trac_lease", ProductType.TRAC_LEASE, reasons)


# ── Equipment Term Loan ────────────────────────────────────────────────────


def check_equipment_term_loan(answers: AnswerSet) -> RuleMatch | None:
    """Vendor pricing power, or a goal of preserving bank credit lines."""
    reasons = _pain(answers, PainPoint.VENDOR)
    reasons += _goal(answers, FinancialGoal.PRESERVE_CREDIT)
    return _match("equipment_term_loan", ProductType.EQUIPMENT_TERM_LOAN, reasons)


# ── Sale-Leaseback ─────────────────────────────────────────────────────────


def check_sale_leaseback(answers: AnswerSet) -> RuleMatch | None:
    """Heavy balance sheet or cash-flow strain, or a working-capital goal."""
    reasons = _pain(answers, PainPoint.BALANCESHEET, PainPoint.CASHFLOW)
    reasons += _goal(answers, FinancialGoal.PRESERVE_CASH)
    return _match("sale_leaseback", ProductType.SALE_LEASEBACK, reasons)


# Evaluation order is output order.
RULE_CHECKS: dict[ProductType, Callable[[AnswerSet], RuleMatch | None]] = {
    ProductType.OPERATING_LEASE: check_operating_lease,
    ProductType.CAPITAL_LEASE: check_capital_lease,
    ProductType.TRAC_LEASE: check_trac_lease,
    ProductType.EQUIPMENT_TERM_LOAN: check_equipment_term_loan,
    ProductType.SALE_LEASEBACK: check_sale_leaseback,
}
