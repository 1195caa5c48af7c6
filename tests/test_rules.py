"""Tests for individual recommendation rules and the AnswerSet schema."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from advisor.models.enums import EquipmentType, FinancialGoal, PainPoint, ProductType
from advisor.recommendations.rules import (
    RULE_CHECKS,
    check_capital_lease,
    check_equipment_term_loan,
    check_operating_lease,
    check_sale_leaseback,
    check_trac_lease,
)
from advisor.schemas.recommendation import AnswerSet


class TestRuleOrder:
    def test_order(self):
        assert list(RULE_CHECKS) == [
            ProductType.OPERATING_LEASE,
            ProductType.CAPITAL_LEASE,
            ProductType.TRAC_LEASE,
            ProductType.EQUIPMENT_TERM_LOAN,
            ProductType.SALE_LEASEBACK,
        ]

    @pytest.mark.parametrize("check_fn", list(RULE_CHECKS.values()))
    def test_empty_answers_match_nothing(self, check_fn):
        assert check_fn(AnswerSet()) is None


class TestOperatingLease:
    @pytest.mark.parametrize(
        "pain", [PainPoint.OBSOLESCENCE, PainPoint.CAPACITY, PainPoint.UNCERTAINTY],
    )
    def test_triggers(self, pain):
        match = check_operating_lease(AnswerSet(selected_pain_points={pain}))
        assert match is not None
        assert match.product == ProductType.OPERATING_LEASE
        assert match.reasons == [f"pain_point:{pain.value}"]

    def test_reasons_in_trigger_order(self):
        match = check_operating_lease(AnswerSet(
            selected_pain_points={PainPoint.UNCERTAINTY, PainPoint.OBSOLESCENCE},
        ))
        assert match.reasons == ["pain_point:obsolescence", "pain_point:uncertainty"]

    def test_goal_does_not_trigger(self):
        answers = AnswerSet(selected_financial_goals={FinancialGoal.FLEXIBLE_TERMS})
        assert check_operating_lease(answers) is None


class TestCapitalLease:
    def test_pain_and_goal_reasons(self):
        match = check_capital_lease(AnswerSet(
            selected_pain_points={PainPoint.CREDITLINE},
            selected_financial_goals={FinancialGoal.TAX_BENEFITS},
        ))
        assert match.reasons == ["pain_point:creditline", "financial_goal:tax_benefits"]

    def test_unrelated_pain(self):
        assert check_capital_lease(AnswerSet(selected_pain_points={PainPoint.GROWTH})) is None


class TestTracLease:
    def test_fleet(self):
        match = check_trac_lease(AnswerSet(equipment_type=EquipmentType.TRANSPORTATION))
        assert match.reasons == ["equipment_type:Transportation & Fleet Vehicles"]

    @pytest.mark.parametrize(
        "equipment", [e for e in EquipmentType if e != EquipmentType.TRANSPORTATION],
    )
    def test_other_equipment(self, equipment):
        assert check_trac_lease(AnswerSet(equipment_type=equipment)) is None


class TestEquipmentTermLoan:
    def test_vendor(self):
        match = check_equipment_term_loan(AnswerSet(selected_pain_points={PainPoint.VENDOR}))
        assert match.product == ProductType.EQUIPMENT_TERM_LOAN

    def test_preserve_credit(self):
        match = check_equipment_term_loan(
            AnswerSet(selected_financial_goals={FinancialGoal.PRESERVE_CREDIT}),
        )
        assert match.reasons == ["financial_goal:preserve_credit"]


class TestSaleLeaseback:
    def test_balancesheet(self):
        match = check_sale_leaseback(AnswerSet(selected_pain_points={PainPoint.BALANCESHEET}))
        assert match.rule == "sale_leaseback"

    def test_preserve_cash(self):
        match = check_sale_leaseback(
            AnswerSet(selected_financial_goals={FinancialGoal.PRESERVE_CASH}),
        )
        assert match.reasons == ["financial_goal:preserve_cash"]


class TestAnswerSetSchema:
    def test_camel_case_aliases(self):
        answers = AnswerSet.model_validate({
            "selectedPainPoints": ["cashflow", "vendor"],
            "equipmentType": "Transportation & Fleet Vehicles",
            "selectedFinancialGoals": ["tax_benefits"],
            "companySize": "$25-50M Revenue",
            "timeframe": "Near-term (3-6 months)",
        })
        assert answers.selected_pain_points == {PainPoint.CASHFLOW, PainPoint.VENDOR}
        assert answers.equipment_type == EquipmentType.TRANSPORTATION
        assert answers.company_size.value == "$25-50M Revenue"

    def test_duplicate_selections_collapse(self):
        answers = AnswerSet.model_validate({"selectedPainPoints": ["cashflow", "cashflow"]})
        assert len(answers.selected_pain_points) == 1

    def test_unknown_pain_point_rejected(self):
        with pytest.raises(ValidationError):
            AnswerSet.model_validate({"selectedPainPoints": ["boredom"]})

    def test_unknown_equipment_rejected(self):
        with pytest.raises(ValidationError):
            AnswerSet.model_validate({"equipmentType": "Spaceships"})

    def test_frozen(self):
        answers = AnswerSet()
        with pytest.raises(ValidationError):
            answers.equipment_type = EquipmentType.OFFICE
