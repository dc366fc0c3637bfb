"""Pydantic schemas for pricing rules and price quotes.

Wire names are camelCase (basePrice, bookingDate, ...); Python attributes are
snake_case. Amounts are Decimal end to end.
"""
from dataclasses import asdict
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from app.pricing.models import PricingResult, PricingRule

# Matches the Numeric(18, 6) columns of pricing_rules
MAX_DIGITS = 18
DECIMAL_PLACES = 6

Amount = Annotated[Decimal, Field(ge=0, max_digits=MAX_DIGITS, decimal_places=DECIMAL_PLACES)]


class CamelModel(BaseModel):
    """Base schema accepting both camelCase and snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PricingRuleCreate(CamelModel):
    """Schema for creating a new pricing rule."""

    destination: str = Field(min_length=1, description="Destination identifier")
    base_price: Amount = Field(description="Price before any adjustment")
    seasonality_factor: Amount = Field(default=Decimal("1"), description="Peak/off-peak multiplier")
    demand_multiplier: Amount = Field(default=Decimal("1"), description="Demand multiplier")
    early_bird_discount: Amount = Field(default=Decimal("0"), description="Discount when booked 60+ days ahead")
    last_minute_discount: Amount = Field(default=Decimal("0"), description="Discount when booked under a day ahead")

    def to_rule(self) -> PricingRule:
        return PricingRule(
            destination=self.destination.strip(),
            base_price=self.base_price,
            seasonality_factor=self.seasonality_factor,
            demand_multiplier=self.demand_multiplier,
            early_bird_discount=self.early_bird_discount,
            last_minute_discount=self.last_minute_discount,
        )


class PricingRuleUpdate(CamelModel):
    """Schema for updating an existing pricing rule.

    Only the fields present in the request are replaced.
    """

    destination: str = Field(min_length=1)
    base_price: Optional[Amount] = None
    seasonality_factor: Optional[Amount] = None
    demand_multiplier: Optional[Amount] = None
    early_bird_discount: Optional[Amount] = None
    last_minute_discount: Optional[Amount] = None

    def changes(self) -> dict[str, Decimal]:
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"destination"})


class PricingRuleOut(CamelModel):
    """Schema for pricing rule output (read operations)."""

    destination: str
    base_price: Decimal
    seasonality_factor: Decimal
    demand_multiplier: Decimal
    early_bird_discount: Decimal
    last_minute_discount: Decimal

    @classmethod
    def from_rule(cls, rule: PricingRule) -> "PricingRuleOut":
        return cls(**asdict(rule))

    @field_serializer(
        "base_price",
        "seasonality_factor",
        "demand_multiplier",
        "early_bird_discount",
        "last_minute_discount",
    )
    def serialize_amount(self, v: Decimal) -> float:
        return float(v)


class PricingRuleCreated(BaseModel):
    message: str = "Pricing rule created successfully"
    data: PricingRuleOut


class PricingRuleList(BaseModel):
    success: bool = True
    length: int
    data: PricingRuleOut | list[PricingRuleOut]


class PricingRuleUpdated(BaseModel):
    success: bool = True
    message: str = "Pricing updated successfully."
    data: PricingRuleOut


class QuoteRequest(CamelModel):
    """Booking window for a destination."""

    destination: str = Field(min_length=1)
    booking_date: datetime = Field(description="When the booking is made (ISO 8601)")
    travel_date: datetime = Field(description="When travel starts (ISO 8601)")


class QuoteOut(CamelModel):
    """Price breakdown for a booking window, amounts as 2-decimal strings."""

    success: bool = True
    destination: str
    original_price: Decimal
    discount_applied: Decimal
    final_price: Decimal
    message: str

    @classmethod
    def from_result(cls, destination: str, result: PricingResult, no_discount_message: str) -> "QuoteOut":
        return cls(
            destination=destination,
            original_price=result.original_price,
            discount_applied=result.discount_applied,
            final_price=result.final_price,
            message="Discount applied successfully." if result.discounted else no_discount_message,
        )
