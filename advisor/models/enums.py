"""Domain enums for questionnaire answers.

All enums use str mixin so values serialize to JSON as-is. Equipment type,
company size and timeframe use their display label as the value.
"""

from __future__ import annotations

from enum import Enum


class QuestionStep(str, Enum):
    """Questionnaire steps, in the order they are asked."""

    PAIN_POINTS = "painPoints"
    EQUIPMENT_TYPE = "equipmentType"
    FINANCIAL_GOALS = "financialGoals"
    COMPANY_SIZE = "companySize"
    TIMEFRAME = "timeframe"


class PainPoint(str, Enum):
    """Business challenges the user can select (multi-select)."""

    CASHFLOW = "cashflow"
    CREDITLINE = "creditline"
    BALANCESHEET = "balancesheet"
    OBSOLESCENCE = "obsolescence"
    BUDGET = "budget"
    GROWTH = "growth"
    VENDOR = "vendor"
    COORDINATION = "coordination"
    MAINTENANCE = "maintenance"
    REGULATORY = "regulatory"
    UNCERTAINTY = "uncertainty"
    CAPACITY = "capacity"
    VALUATION = "valuation"


class EquipmentType(str, Enum):
    """Equipment category being financed (single select)."""

    MANUFACTURING = "Manufacturing Equipment & Machinery"
    MEDICAL = "Medical & Healthcare Equipment"
    TRANSPORTATION = "Transportation & Fleet Vehicles"
    CONSTRUCTION = "Construction Equipment"
    TECHNOLOGY = "Technology & IT Infrastructure"
    AGRICULTURAL = "Agricultural Equipment"
    FOOD_SERVICE = "Food Service & Restaurant Equipment"
    OFFICE = "Office Equipment & Furniture"


class FinancialGoal(str, Enum):
    """Financial priorities the user can select (multi-select)."""

    PRESERVE_CASH = "preserve_cash"
    IMPROVE_RATIOS = "improve_ratios"
    TAX_BENEFITS = "tax_benefits"
    PREDICTABLE_PAYMENTS = "predictable_payments"
    FLEXIBLE_TERMS = "flexible_terms"
    PRESERVE_CREDIT = "preserve_credit"
    MATCH_REVENUE = "match_revenue"


class CompanySize(str, Enum):
    """Annual revenue band."""

    REVENUE_10_25M = "$10-25M Revenue"
    REVENUE_25_50M = "$25-50M Revenue"
    REVENUE_50_100M = "$50-100M Revenue"
    REVENUE_100M_PLUS = "$100M+ Revenue"


class Timeframe(str, Enum):
    """When the equipment is needed."""

    IMMEDIATE = "Immediate (0-3 months)"
    NEAR_TERM = "Near-term (3-6 months)"
    MID_TERM = "Mid-term (6-12 months)"
    LONG_TERM = "Long-term (12+ months)"


class ProductType(str, Enum):
    """Financing structures the recommendation rules can propose."""

    OPERATING_LEASE = "operating_lease"
    CAPITAL_LEASE = "capital_lease"
    TRAC_LEASE = "trac_lease"
    EQUIPMENT_TERM_LOAN = "equipment_term_loan"
    SALE_LEASEBACK = "sale_leaseback"
