"""
API dependencies (shared DI).

Routes depend on the PricingService; the service depends on a store built
from the request-scoped database session. Tests override get_store.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.services.pricing_service import PricingService
from app.stores.interfaces import PricingRuleStore
from app.stores.sql_store import SqlPricingRuleStore


def get_store(db: Session = Depends(get_db)) -> PricingRuleStore:
    return SqlPricingRuleStore(db)


def get_pricing_service(store: PricingRuleStore = Depends(get_store)) -> PricingService:
    return PricingService(store)
