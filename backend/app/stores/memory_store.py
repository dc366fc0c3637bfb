"""In-memory PricingRuleStore, used by tests and local runs without a database."""
import threading
from collections.abc import Mapping
from dataclasses import replace
from decimal import Decimal

from app.core.errors import DuplicateDestinationError
from app.pricing.models import PricingRule
from app.stores.interfaces import PricingRuleStore, check_changes


class InMemoryPricingRuleStore(PricingRuleStore):
    """Dict-backed store keyed by destination."""

    def __init__(self, rules: list[PricingRule] | None = None) -> None:
        self._rules: dict[str, PricingRule] = {}
        self._lock = threading.Lock()
        for rule in rules or []:
            self.create(rule)

    def find_one(self, destination: str) -> PricingRule | None:
        return self._rules.get(destination)

    def find_all(self) -> list[PricingRule]:
        return [self._rules[key] for key in sorted(self._rules)]

    def create(self, rule: PricingRule) -> PricingRule:
        with self._lock:
            if rule.destination in self._rules:
                raise DuplicateDestinationError(rule.destination)
            self._rules[rule.destination] = rule
        return rule

    def update(self, destination: str, changes: Mapping[str, Decimal]) -> PricingRule | None:
        check_changes(changes)
        with self._lock:
            current = self._rules.get(destination)
            if current is None:
                return None
            updated = replace(current, **changes)
            self._rules[destination] = updated
        return updated
