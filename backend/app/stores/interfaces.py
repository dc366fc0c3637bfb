"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""
from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import Decimal

from app.core.errors import ValidationError
from app.pricing.models import PricingRule

# Fields an update may replace; destination is the key and never changes
MUTABLE_FIELDS = (
    "base_price",
    "seasonality_factor",
    "demand_multiplier",
    "early_bird_discount",
    "last_minute_discount",
)


class PricingRuleStore(ABC):
    """Interface for pricing rule persistence operations."""

    @abstractmethod
    def find_one(self, destination: str) -> PricingRule | None:
        """Return the rule for a destination, or None if not found."""
        ...

    @abstractmethod
    def find_all(self) -> list[PricingRule]:
        """Return all rules ordered by destination."""
        ...

    @abstractmethod
    def create(self, rule: PricingRule) -> PricingRule:
        """Store a new rule.

        Raises:
            DuplicateDestinationError: If a rule for the destination exists.
        """
        ...

    @abstractmethod
    def update(self, destination: str, changes: Mapping[str, Decimal]) -> PricingRule | None:
        """Replace the given mutable fields, or return None if not found.

        Raises:
            ValidationError: If changes name a field that is not mutable.
        """
        ...


def check_changes(changes: Mapping[str, Decimal]) -> None:
    unknown = set(changes) - set(MUTABLE_FIELDS)
    if unknown:
        raise ValidationError(f"Not updatable: {', '.join(sorted(unknown))}")
