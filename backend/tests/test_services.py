"""Unit tests for PricingService.

These test orchestration order and domain error mapping.
Run with: pytest tests/test_services.py -v
"""
import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from app.core.errors import (
    DuplicateDestinationError,
    InvalidWindowError,
    PricingRuleNotFoundError,
    ValidationError,
)
from app.pricing.models import PricingRule
from app.services.pricing_service import PricingService
from app.stores.memory_store import InMemoryPricingRuleStore

BOOKED = datetime(2025, 3, 1, tzinfo=timezone.utc)


@pytest.fixture
def service(store: InMemoryPricingRuleStore) -> PricingService:
    return PricingService(store)


class TestQuote:
    """Tests for PricingService.quote."""

    def test_quote_uses_stored_rule(self, service):
        result = service.quote("Paris", BOOKED, BOOKED + timedelta(days=90))
        assert result.final_price == Decimal("1270.00")

    def test_unknown_destination_raises_not_found(self, service):
        with pytest.raises(PricingRuleNotFoundError) as exc_info:
            service.quote("Atlantis", BOOKED, BOOKED + timedelta(days=5))
        assert exc_info.value.destination == "Atlantis"

    def test_backwards_window_checked_before_lookup(self, service):
        """An invalid window fails even when the destination is unknown."""
        with pytest.raises(InvalidWindowError):
            service.quote("Atlantis", BOOKED, BOOKED - timedelta(days=2))

    def test_blank_destination_raises_validation_error(self, service):
        with pytest.raises(ValidationError):
            service.quote("  ", BOOKED, BOOKED)

    def test_negative_final_price_is_logged(self, caplog):
        service = PricingService(
            InMemoryPricingRuleStore(
                [PricingRule(destination="Lima", base_price=Decimal("5"), last_minute_discount=Decimal("8"))]
            )
        )
        with caplog.at_level(logging.WARNING, logger="app.services.pricing_service"):
            result = service.quote("Lima", BOOKED, BOOKED)
        assert result.final_price == Decimal("-3.00")
        assert "negative final price" in caplog.text


class TestRuleManagement:
    """Tests for create/get/update."""

    def test_create_duplicate_raises_error(self, service, rule):
        with pytest.raises(DuplicateDestinationError):
            service.create_rule(rule)

    def test_get_rule_not_found(self, service):
        with pytest.raises(PricingRuleNotFoundError):
            service.get_rule("Nowhere")

    def test_update_replaces_only_given_fields(self, service):
        updated = service.update_rule("Paris", {"demand_multiplier": Decimal("1.5")})
        assert updated.demand_multiplier == Decimal("1.5")
        assert updated.base_price == Decimal("1000")
        assert service.get_rule("Paris") == updated

    def test_update_missing_destination_raises_not_found(self, service):
        with pytest.raises(PricingRuleNotFoundError):
            service.update_rule("Nowhere", {"base_price": Decimal("1")})

    def test_update_blank_destination_raises_validation_error(self, service):
        with pytest.raises(ValidationError):
            service.update_rule("", {})

    def test_update_unknown_field_raises_validation_error(self, service):
        with pytest.raises(ValidationError):
            service.update_rule("Paris", {"destination": "Rome"})
        assert service.get_rule("Paris").base_price == Decimal("1000")

    def test_list_rules_ordered_by_destination(self, service):
        service.create_rule(PricingRule(destination="Athens", base_price=Decimal("300")))
        assert [r.destination for r in service.list_rules()] == ["Athens", "Paris"]
