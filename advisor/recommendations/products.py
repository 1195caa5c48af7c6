"""Canned recommendation cards for each financing structure."""

from __future__ import annotations

from advisor.models.enums import ProductType
from advisor.schemas.recommendation import Recommendation

PRODUCT_DISPLAY_NAMES: dict[ProductType, str] = {
    ProductType.OPERATING_LEASE: "Operating Lease",
    ProductType.CAPITAL_LEASE: "Capital Lease (Finance Lease)",
    ProductType.TRAC_LEASE: "TRAC Lease (Terminal Rental Adjustment)",
    ProductType.EQUIPMENT_TERM_LOAN: "Equipment Term Loan",
    ProductType.SALE_LEASEBACK: "Sale-Leaseback",
}

# Cards emitted when the matching rule fires
PRODUCT_CARDS: dict[ProductType, Recommendation] = {
    ProductType.OPERATING_LEASE: Recommendation(
        product_type=PRODUCT_DISPLAY_NAMES[ProductType.OPERATING_LEASE],
        description="Keep equipment off balance sheet with flexible terms",
        benefits=[
            "No ownership risk - return equipment when done",
            "Predictable monthly payments",
            "Technology refresh options",
            "Preserve credit capacity",
        ],
        best_for="Technology, medical equipment, vehicles with high obsolescence risk",
    ),
    ProductType.CAPITAL_LEASE: Recommendation(
        product_type=PRODUCT_DISPLAY_NAMES[ProductType.CAPITAL_LEASE],
        description="Own the equipment while preserving cash flow",
        benefits=[
            "Preserve working capital",
            "Potential tax advantages",
            "Build equity in equipment",
            "Fixed monthly payments",
        ],
        best_for="Manufacturing equipment, essential business assets",
    ),
    ProductType.TRAC_LEASE: Recommendation(
        product_type=PRODUCT_DISPLAY_NAMES[ProductType.TRAC_LEASE],
        description="Fleet-specific lease with residual value adjustments",
        benefits=[
            "Lower monthly payments vs. capital lease",
            "Shared residual risk with lessor",
            "Fleet management flexibility",
            "Potential tax benefits",
        ],
        best_for="Commercial vehicles, truck fleets, specialized transportation",
    ),
    ProductType.EQUIPMENT_TERM_LOAN: Recommendation(
        product_type=PRODUCT_DISPLAY_NAMES[ProductType.EQUIPMENT_TERM_LOAN],
        description="Traditional financing with equipment as collateral",
        benefits=[
            "Immediate ownership",
            "Competitive interest rates",
            "Preserve bank credit lines",
            "Strengthen vendor negotiations",
        ],
        best_for="Essential equipment, high-value machinery, proven technology",
    ),
    ProductType.SALE_LEASEBACK: Recommendation(
        product_type=PRODUCT_DISPLAY_NAMES[ProductType.SALE_LEASEBACK],
        description="Convert owned equipment to cash while retaining use",
        benefits=[
            "Immediate cash infusion",
            "Continue using equipment",
            "Improve balance sheet ratios",
            "Free up capital for growth",
        ],
        best_for="Existing equipment you own, real estate, large machinery",
    ),
}

# Fallback pair when no rule fires. Wording differs from the rule cards.
DEFAULT_RECOMMENDATIONS: list[Recommendation] = [
    Recommendation(
        product_type="Operating Lease",
        description="Keep equipment off balance sheet with flexible terms",
        benefits=[
            "Preserve working capital",
            "Predictable payments",
            "Technology refresh options",
            "Lower monthly payments",
        ],
        best_for="Most equipment types, especially technology",
    ),
    Recommendation(
        product_type="Capital Lease",
        description="Own the equipment while preserving cash flow",
        benefits=[
            "Build equity in equipment",
            "Potential tax advantages",
            "Fixed monthly payments",
            "Preserve cash for operations",
        ],
        best_for="Essential business equipment, manufacturing assets",
    ),
]


def product_card(product: ProductType) -> Recommendation:
    """Return a fresh copy of the card for a product."""
    return PRODUCT_CARDS[product].model_copy(deep=True)


def default_cards() -> list[Recommendation]:
    """Return fresh copies of the fallback pair, in order."""
    return [card.model_copy(deep=True) for card in DEFAULT_RECOMMENDATIONS]
