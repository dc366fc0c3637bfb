"""Pricing service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal

from app.core.errors import InvalidWindowError, PricingRuleNotFoundError, ValidationError
from app.core.logging import get_logger
from app.pricing.calculator import compute_price, days_between
from app.pricing.models import PricingResult, PricingRule
from app.stores.interfaces import PricingRuleStore

logger = get_logger(__name__)


class PricingService:
    """Service for pricing rule management and price quotes."""

    def __init__(self, store: PricingRuleStore) -> None:
        self._store = store

    def create_rule(self, rule: PricingRule) -> PricingRule:
        """Store a new rule.

        Raises:
            DuplicateDestinationError: If the destination already has a rule.
        """
        created = self._store.create(rule)
        logger.info("pricing rule created destination=%s", created.destination)
        return created

    def list_rules(self) -> list[PricingRule]:
        return self._store.find_all()

    def get_rule(self, destination: str) -> PricingRule:
        """Return the rule for a destination.

        Raises:
            ValidationError: If destination is blank or a change is not updatable.
            PricingRuleNotFoundError: If no rule exists.
        """
        destination = _require_destination(destination)
        rule = self._store.find_one(destination)
        if rule is None:
            raise PricingRuleNotFoundError(destination)
        return rule

    def update_rule(self, destination: str, changes: Mapping[str, Decimal]) -> PricingRule:
        """Replace the supplied mutable fields of an existing rule.

        Raises:
            ValidationError: If destination is blank or a change is not updatable.
            PricingRuleNotFoundError: If no rule exists.
        """
        destination = _require_destination(destination)
        updated = self._store.update(destination, changes)
        if updated is None:
            raise PricingRuleNotFoundError(destination)
        logger.info(
            "pricing rule updated destination=%s fields=%s",
            destination,
            ",".join(sorted(changes)) or "-",
        )
        return updated

    def quote(self, destination: str, booking_date: datetime, travel_date: datetime) -> PricingResult:
        """Price a booking window for a destination.

        The window is checked before the rule lookup, so a backwards window
        fails even for an unknown destination.

        Raises:
            ValidationError: If destination is blank or a change is not updatable.
            InvalidWindowError: If travel_date is before booking_date.
            PricingRuleNotFoundError: If no rule exists.
        """
        destination = _require_destination(destination)
        days_ahead = days_between(booking_date, travel_date)
        if days_ahead < 0:
            raise InvalidWindowError(days_ahead)

        rule = self.get_rule(destination)
        result = compute_price(rule, booking_date, travel_date)

        logger.info(
            "quote destination=%s days_ahead=%.2f tier=%s original=%s discount=%s final=%s",
            destination,
            result.days_ahead,
            result.tier,
            result.original_price,
            result.discount_applied,
            result.final_price,
        )
        if result.final_price < 0:
            logger.warning(
                "negative final price destination=%s final=%s",
                destination,
                result.final_price,
            )
        return result


def _require_destination(destination: str) -> str:
    destination = (destination or "").strip()
    if not destination:
        raise ValidationError("Destination is required.")
    return destination
