"""Domain enums shared by schemas, catalog and rules."""

from advisor.models.enums import (
    CompanySize,
    EquipmentType,
    FinancialGoal,
    PainPoint,
    ProductType,
    QuestionStep,
    Timeframe,
)

__all__ = [
    "CompanySize",
    "EquipmentType",
    "FinancialGoal",
    "PainPoint",
    "ProductType",
    "QuestionStep",
    "Timeframe",
]
