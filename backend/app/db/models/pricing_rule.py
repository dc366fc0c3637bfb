"""Pricing rule database model."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import TIMESTAMP, Integer, Numeric, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base

# Six places keeps multipliers such as 1.23456 exact; schemas enforce the same bounds
PRICE_DIGITS = 18
PRICE_PLACES = 6
PRICE = Numeric(PRICE_DIGITS, PRICE_PLACES)


class PricingRule(Base):
    """One pricing rule per destination."""

    __tablename__ = "pricing_rules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    destination: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)

    base_price: Mapped[Decimal] = mapped_column(PRICE, nullable=False)
    seasonality_factor: Mapped[Decimal] = mapped_column(
        PRICE, nullable=False, default=Decimal("1"), server_default=text("1")
    )
    demand_multiplier: Mapped[Decimal] = mapped_column(
        PRICE, nullable=False, default=Decimal("1"), server_default=text("1")
    )
    early_bird_discount: Mapped[Decimal] = mapped_column(
        PRICE, nullable=False, default=Decimal("0"), server_default=text("0")
    )
    last_minute_discount: Mapped[Decimal] = mapped_column(
        PRICE, nullable=False, default=Decimal("0"), server_default=text("0")
    )

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        """String representation of PricingRule."""
        return (
            f"<PricingRule(id={self.id}, destination={self.destination}, "
            f"base_price={self.base_price})>"
        )
