"""Pricing rule and price quote endpoints."""
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_pricing_service
from app.core.errors import (
    DomainError,
    DuplicateDestinationError,
    InvalidWindowError,
    PricingRuleNotFoundError,
    ValidationError,
)
from app.schemas.pricing import (
    PricingRuleCreate,
    PricingRuleCreated,
    PricingRuleList,
    PricingRuleOut,
    PricingRuleUpdate,
    PricingRuleUpdated,
    QuoteOut,
    QuoteRequest,
)
from app.services.pricing_service import PricingService

router = APIRouter(prefix="/pricing", tags=["pricing"])

_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidWindowError: status.HTTP_400_BAD_REQUEST,
    DuplicateDestinationError: status.HTTP_400_BAD_REQUEST,
    PricingRuleNotFoundError: status.HTTP_404_NOT_FOUND,
}


def _to_http(error: DomainError) -> HTTPException:
    """Map a domain error to its HTTP response; only the user-safe message leaves."""
    return HTTPException(
        status_code=_STATUS_BY_ERROR.get(type(error), status.HTTP_400_BAD_REQUEST),
        detail=error.message,
    )


@router.post("/create-pricing", response_model=PricingRuleCreated, status_code=status.HTTP_201_CREATED)
def create_pricing(
    payload: PricingRuleCreate,
    service: PricingService = Depends(get_pricing_service),
) -> PricingRuleCreated:
    """Create a pricing rule for a destination."""
    try:
        rule = service.create_rule(payload.to_rule())
    except DomainError as e:
        raise _to_http(e) from e
    return PricingRuleCreated(data=PricingRuleOut.from_rule(rule))


@router.get("", response_model=PricingRuleList)
def get_pricing(
    destination: str | None = Query(default=None),
    service: PricingService = Depends(get_pricing_service),
) -> PricingRuleList:
    """Get one destination's rule, or every rule when no destination is given."""
    # An empty ?destination= lists everything, like no filter at all
    if not destination:
        rules = service.list_rules()
        return PricingRuleList(length=len(rules), data=[PricingRuleOut.from_rule(r) for r in rules])

    try:
        rule = service.get_rule(destination)
    except DomainError as e:
        raise _to_http(e) from e
    return PricingRuleList(length=1, data=PricingRuleOut.from_rule(rule))


@router.put("/update-pricing", response_model=PricingRuleUpdated)
def update_pricing(
    payload: PricingRuleUpdate,
    service: PricingService = Depends(get_pricing_service),
) -> PricingRuleUpdated:
    """Replace the supplied fields of an existing rule."""
    try:
        rule = service.update_rule(payload.destination, payload.changes())
    except DomainError as e:
        raise _to_http(e) from e
    return PricingRuleUpdated(data=PricingRuleOut.from_rule(rule))


@router.post("/apply-discount", response_model=QuoteOut)
def apply_discount(
    payload: QuoteRequest,
    service: PricingService = Depends(get_pricing_service),
) -> QuoteOut:
    """Price a booking window, applying the discount tier it falls in."""
    try:
        result = service.quote(payload.destination, payload.booking_date, payload.travel_date)
    except DomainError as e:
        raise _to_http(e) from e
    return QuoteOut.from_result(payload.destination, result, "No discount available.")


@router.get("/final-price", response_model=QuoteOut)
def final_price(
    destination: str = Query(min_length=1),
    booking_date: datetime = Query(alias="bookingDate"),
    travel_date: datetime = Query(alias="travelDate"),
    service: PricingService = Depends(get_pricing_service),
) -> QuoteOut:
    """Same calculation as apply-discount, as a read-only query."""
    try:
        result = service.quote(destination, booking_date, travel_date)
    except DomainError as e:
        raise _to_http(e) from e
    return QuoteOut.from_result(destination, result, "No discount applied.")
