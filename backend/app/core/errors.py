"""Domain error codes for the pricing service."""
from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    PRICING_NOT_FOUND = "PRICING_NOT_FOUND"
    INVALID_WINDOW = "INVALID_WINDOW"
    DUPLICATE_DESTINATION = "DUPLICATE_DESTINATION"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when required input is missing or out of bounds."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)


class PricingRuleNotFoundError(DomainError):
    """Raised when no pricing rule exists for a destination."""

    def __init__(self, destination: str) -> None:
        super().__init__(
            code=ErrorCode.PRICING_NOT_FOUND,
            message="Pricing not found for the given destination.",
        )
        self.destination = destination


class InvalidWindowError(DomainError):
    """Raised when the travel date precedes the booking date."""

    def __init__(self, days_ahead: float) -> None:
        super().__init__(
            code=ErrorCode.INVALID_WINDOW,
            message="Travel date must be after booking date.",
        )
        self.days_ahead = days_ahead


class DuplicateDestinationError(DomainError):
    """Raised when a pricing rule already exists for a destination."""

    def __init__(self, destination: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_DESTINATION,
            message="Pricing for this destination already exists.",
        )
        self.destination = destination
