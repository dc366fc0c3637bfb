"""Pytest configuration and shared fixtures."""
import os
from collections.abc import Iterator
from decimal import Decimal

# Settings are read at import time; keep the app off Postgres in tests
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_store
from app.db.base import Base
from app.main import app
from app.pricing.models import PricingRule
from app.stores.memory_store import InMemoryPricingRuleStore


@pytest.fixture
def rule() -> PricingRule:
    """Rule used by the worked examples: 1000 x 1.2 x 1.1 = 1320."""
    return PricingRule(
        destination="Paris",
        base_price=Decimal("1000"),
        seasonality_factor=Decimal("1.2"),
        demand_multiplier=Decimal("1.1"),
        early_bird_discount=Decimal("50"),
        last_minute_discount=Decimal("20"),
    )


@pytest.fixture
def store(rule: PricingRule) -> InMemoryPricingRuleStore:
    return InMemoryPricingRuleStore([rule])


@pytest.fixture
def api_client(store: InMemoryPricingRuleStore) -> Iterator[TestClient]:
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def db_session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
