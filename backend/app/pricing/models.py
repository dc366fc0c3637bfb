"""Domain models for pricing.

These are plain immutable values. The ORM model lives in app/db/models/pricing_rule.py
and the API contracts in app/schemas/pricing.py.
"""
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PricingRule:
    """Per-destination base price and adjustment factors."""

    destination: str
    base_price: Decimal
    seasonality_factor: Decimal = Decimal("1")
    demand_multiplier: Decimal = Decimal("1")
    early_bird_discount: Decimal = Decimal("0")
    last_minute_discount: Decimal = Decimal("0")


@dataclass(frozen=True)
class PricingResult:
    """Outcome of a single price calculation, rounded to cents."""

    original_price: Decimal
    discount_applied: Decimal
    final_price: Decimal
    days_ahead: float
    tier: str

    @property
    def discounted(self) -> bool:
        return self.discount_applied > 0
