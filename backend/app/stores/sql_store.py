"""SQLAlchemy implementation of the PricingRuleStore."""
from collections.abc import Mapping
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateDestinationError
from app.core.logging import get_logger
from app.db.models.pricing_rule import PricingRule as PricingRuleRow
from app.pricing.models import PricingRule
from app.stores.interfaces import MUTABLE_FIELDS, PricingRuleStore, check_changes

logger = get_logger(__name__)


def _row_to_rule(row: PricingRuleRow) -> PricingRule:
    """Convert ORM row to domain model."""
    return PricingRule(
        destination=row.destination,
        base_price=Decimal(row.base_price),
        seasonality_factor=Decimal(row.seasonality_factor),
        demand_multiplier=Decimal(row.demand_multiplier),
        early_bird_discount=Decimal(row.early_bird_discount),
        last_minute_discount=Decimal(row.last_minute_discount),
    )


class SqlPricingRuleStore(PricingRuleStore):
    """Relational store backed by the pricing_rules table."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def _get_row(self, destination: str) -> PricingRuleRow | None:
        return self._db.execute(
            select(PricingRuleRow).where(PricingRuleRow.destination == destination)
        ).scalar_one_or_none()

    def find_one(self, destination: str) -> PricingRule | None:
        row = self._get_row(destination)
        return _row_to_rule(row) if row else None

    def find_all(self) -> list[PricingRule]:
        rows = self._db.execute(
            select(PricingRuleRow).order_by(PricingRuleRow.destination)
        ).scalars().all()
        return [_row_to_rule(row) for row in rows]

    def create(self, rule: PricingRule) -> PricingRule:
        if self._get_row(rule.destination) is not None:
            raise DuplicateDestinationError(rule.destination)

        row = PricingRuleRow(
            destination=rule.destination,
            **{field: getattr(rule, field) for field in MUTABLE_FIELDS},
        )
        self._db.add(row)
        try:
            self._db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent create for the same destination
            self._db.rollback()
            logger.warning("unique violation creating pricing rule destination=%s", rule.destination)
            raise DuplicateDestinationError(rule.destination) from e

        self._db.refresh(row)
        return _row_to_rule(row)

    def update(self, destination: str, changes: Mapping[str, Decimal]) -> PricingRule | None:
        check_changes(changes)
        row = self._get_row(destination)
        if row is None:
            return None

        for field, value in changes.items():
            setattr(row, field, value)

        self._db.commit()
        self._db.refresh(row)
        return _row_to_rule(row)
