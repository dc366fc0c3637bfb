"""Price calculation for a destination booking.

The final price is the base price scaled by the seasonality and demand
multipliers, minus at most one time-based discount:

- booked 60 or more days ahead: early-bird discount
- booked less than one day ahead: last-minute discount
- anything in between is the standard window and gets no discount

Everything here is pure; callers own lookup, logging and error mapping.
"""
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from app.core.errors import InvalidWindowError
from app.pricing.models import PricingResult, PricingRule

EARLY_BIRD_DAYS = 60
LAST_MINUTE_DAYS = 1

TIER_EARLY_BIRD = "early_bird"
TIER_LAST_MINUTE = "last_minute"
TIER_STANDARD = "standard"

CENTS = Decimal("0.01")
SECONDS_PER_DAY = 24 * 60 * 60


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_between(booking_date: datetime, travel_date: datetime) -> float:
    """Fractional days from booking to travel. Negative when travel comes first."""
    delta = _as_utc(travel_date) - _as_utc(booking_date)
    return delta.total_seconds() / SECONDS_PER_DAY


def select_discount(rule: PricingRule, days_ahead: float) -> tuple[Decimal, str]:
    """Pick the single discount tier that applies to ``days_ahead``."""
    if days_ahead >= EARLY_BIRD_DAYS:
        return rule.early_bird_discount, TIER_EARLY_BIRD
    if days_ahead < LAST_MINUTE_DAYS:
        return rule.last_minute_discount, TIER_LAST_MINUTE
    return Decimal("0"), TIER_STANDARD


def adjusted_price(rule: PricingRule) -> Decimal:
    return rule.base_price * rule.seasonality_factor * rule.demand_multiplier


def round_money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def compute_price(
    rule: PricingRule,
    booking_date: datetime,
    travel_date: datetime,
) -> PricingResult:
    """Compute original price, discount and final price for a booking window.

    Raises:
        InvalidWindowError: If ``travel_date`` is before ``booking_date``.
    """
    days_ahead = days_between(booking_date, travel_date)
    if days_ahead < 0:
        raise InvalidWindowError(days_ahead)

    original = adjusted_price(rule)
    discount, tier = select_discount(rule, days_ahead)

    return PricingResult(
        original_price=round_money(original),
        discount_applied=round_money(discount),
        # Not floored at zero: a discount above the adjusted price goes negative
        final_price=round_money(original - discount),
        days_ahead=days_ahead,
        tier=tier,
    )
